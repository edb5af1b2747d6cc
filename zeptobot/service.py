"""Long-lived agent instance and the commands the host application exposes."""

from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import BaseModel

from zeptobot.agent.loop import AgentLoop
from zeptobot.agent.messages import Role
from zeptobot.agent.session import ConversationSession
from zeptobot.agent.tools.automation import all_automation_tools
from zeptobot.agent.tools.base import Tool
from zeptobot.agent.tools.registry import ToolRegistry
from zeptobot.automation.backend import DesktopBackend, PyAutoGUIBackend
from zeptobot.automation.service import AutomationService
from zeptobot.config.schema import Config
from zeptobot.providers.base import LLMProvider
from zeptobot.providers.litellm_provider import LiteLLMProvider


class ConfigurationError(RuntimeError):
    """The agent cannot be built from the current configuration."""


class ChatMessage(BaseModel):
    """A single chat message, as rendered by a UI."""

    role: str
    content: str


class BotStatus(BaseModel):
    """Status of the bot subsystems."""

    listening: bool = False
    agent_ready: bool
    automation_available: bool


def has_api_key(config: Config) -> bool:
    """True when a provider key is configured or present in the environment."""
    return config.get_provider() is not None


def build_provider(config: Config) -> LLMProvider:
    """
    Build the LLM provider from configuration.

    Anthropic is checked first, then OpenAI.

    Raises:
        ConfigurationError: If no API key is available.
    """
    selected = config.get_provider()
    if selected is None:
        raise ConfigurationError("No API key found. Set ANTHROPIC_API_KEY or OPENAI_API_KEY")
    name, settings = selected
    logger.info(f"Using {name} provider")
    return LiteLLMProvider(
        api_key=settings.api_key,
        api_base=settings.api_base,
        default_model=config.get_model() or settings.model,
    )


class AgentService:
    """
    Process-scoped handle on the single agent and its conversation.

    Create it once with ``create()``, pass the instance to whoever needs it,
    and call ``dispose()`` on shutdown.
    """

    def __init__(
        self,
        loop: AgentLoop,
        automation: AutomationService | None = None,
    ) -> None:
        self._loop: AgentLoop | None = loop
        self._automation = automation

    @classmethod
    def create(
        cls,
        config: Config,
        backend: DesktopBackend | None = None,
        provider: LLMProvider | None = None,
    ) -> AgentService:
        """
        Build the agent from configuration.

        Args:
            config: Application configuration.
            backend: Desktop backend; defaults to pyautogui.
            provider: Provider override; by default selected from credentials.

        Raises:
            ConfigurationError: If no provider is given and no API key is set.
        """
        provider = provider or build_provider(config)
        defaults = config.agents.defaults

        automation = None
        tools: list[Tool] = []
        if config.automation.enabled:
            backend = backend or PyAutoGUIBackend()
            automation = AutomationService(backend)
            tools = all_automation_tools(backend)

        loop = AgentLoop(
            provider=provider,
            tools=ToolRegistry(tools),
            session=ConversationSession(defaults.system_prompt),
            max_iterations=defaults.max_tool_iterations,
            fallback_response=defaults.fallback_response,
            model=defaults.model,
            max_tokens=defaults.max_tokens,
            temperature=defaults.temperature,
        )
        logger.info(f"Agent ready with tools: {', '.join(loop.tools.names) or '(none)'}")
        return cls(loop, automation)

    @property
    def loop(self) -> AgentLoop:
        if self._loop is None:
            raise RuntimeError("Agent service has been disposed")
        return self._loop

    async def send_message(self, message: str) -> str:
        """Send a user message and receive the assistant's answer."""
        return await self.loop.chat(message)

    async def clear_history(self) -> None:
        """Reset the conversation to the system preamble."""
        await self.loop.reset()

    def get_history(self) -> list[ChatMessage]:
        """User and assistant turns with text, for display."""
        return [
            ChatMessage(role=m.role.value, content=m.content)
            for m in self.loop.history
            if m.role in (Role.USER, Role.ASSISTANT) and m.content
        ]

    def get_status(self) -> BotStatus:
        """Subsystem status. Raises RuntimeError once disposed, like every other call."""
        return BotStatus(
            listening=False,
            agent_ready=not self.loop.is_busy,
            automation_available=self._automation is not None,
        )

    async def execute_automation(self, action: str, params: dict[str, Any] | None = None) -> str:
        """
        Run a named automation action directly, bypassing the model.

        Raises:
            AutomationError: If the action fails.
            RuntimeError: If automation is disabled or the service is disposed.
        """
        if self._loop is None:
            raise RuntimeError("Agent service has been disposed")
        if self._automation is None:
            raise RuntimeError("Desktop automation is disabled")
        return await self._automation.run(action, params)

    def dispose(self) -> None:
        """Release the agent. Further calls raise RuntimeError."""
        if self._loop is not None:
            logger.info("Agent service disposed")
        self._loop = None
        self._automation = None
