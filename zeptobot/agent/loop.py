"""Agent loop: drives provider round-trips and tool executions to a final answer."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from loguru import logger

from zeptobot.agent.executor import ToolExecutor
from zeptobot.agent.messages import Message
from zeptobot.agent.session import ConversationSession
from zeptobot.agent.tools.registry import ToolRegistry
from zeptobot.providers.errors import ProviderError

if TYPE_CHECKING:
    from zeptobot.providers.base import LLMProvider

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_FALLBACK_RESPONSE = "I've completed the requested actions."


class AgentLoop:
    """
    Turns one user message into one final answer.

    Each ``chat`` call:
    1. Appends the user message to the session
    2. Calls the provider with the full history and tool catalog
    3. Returns the text if the model requested no tools
    4. Otherwise records the tool calls, executes them in order and
       appends one tool message per call, then goes back to 2

    After ``max_iterations`` round-trips without a final answer the loop stops
    and returns ``fallback_response``. Provider failures propagate to the
    caller; tool failures never do.

    Only one ``chat`` call may touch the session at a time. Concurrent callers
    wait on an internal lock.
    """

    def __init__(
        self,
        provider: LLMProvider,
        tools: ToolRegistry,
        session: ConversationSession,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        fallback_response: str = DEFAULT_FALLBACK_RESPONSE,
        model: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> None:
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
        self.provider = provider
        self.tools = tools
        self.session = session
        self.executor = ToolExecutor(tools)
        self.max_iterations = max_iterations
        self.fallback_response = fallback_response
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

        self._lock = asyncio.Lock()

    @property
    def is_busy(self) -> bool:
        """True while a chat call holds the session."""
        return self._lock.locked()

    @property
    def history(self) -> tuple[Message, ...]:
        return self.session.messages

    async def chat(self, user_message: str) -> str:
        """
        Process a user message.

        Args:
            user_message: The user's text.

        Returns:
            The model's final answer, or the fallback response when the
            iteration cap is reached.

        Raises:
            ProviderError: If the provider call fails. Messages appended
                before the failure stay in the session.
        """
        async with self._lock:
            return await self._run(user_message)

    async def reset(self) -> None:
        """Clear the conversation back to the system preamble."""
        async with self._lock:
            self.session.reset()
        logger.info("Conversation history cleared")

    async def _run(self, user_message: str) -> str:
        self.session.append(Message.user(user_message))
        tool_schemas = self.tools.schemas() or None

        for iteration in range(1, self.max_iterations + 1):
            logger.debug(f"Round-trip {iteration}/{self.max_iterations}, history={len(self.session)}")
            try:
                response = await self.provider.chat(
                    messages=list(self.session.messages),
                    tools=tool_schemas,
                    model=self.model,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except Exception as e:
                logger.error(f"Provider call failed on round-trip {iteration}: {e}")
                raise

            if not response.has_tool_calls:
                content = response.content or ""
                self.session.append(Message.assistant(content))
                return content

            # Every tool message must correlate to a call id; reject before touching the session
            missing = [call.name for call in response.tool_calls if not call.id]
            if missing:
                raise ProviderError(f"Malformed provider response: tool calls without id: {', '.join(missing)}")

            self.session.append(Message.assistant(response.content, response.tool_calls))

            for call in response.tool_calls:
                result = await self.executor.execute(call)
                self.session.append(Message.tool(call.id, result))

        logger.warning(f"Reached the maximum of {self.max_iterations} round-trips without a final answer")
        return self.fallback_response
