"""Configuration schema using Pydantic."""

import os

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are ZeptoBot, a helpful AI assistant that can control the user's Mac computer. "
    "You have tools to move the mouse, click, type text, press keyboard keys, and get "
    "screen information. When the user asks you to perform an action on their computer, "
    "use the appropriate tools. Be concise in your responses. Describe what you did after "
    "performing actions.\n\n"
    "User environment:\n"
    "- macOS with Raycast (Cmd+Space) instead of Spotlight. To launch apps, press Cmd+Space "
    "to open Raycast, then type the app name and press Return.\n"
    "- When asked to open an app, use key_press with cmd+space, then type_text the app name, "
    "then key_press Return."
)


class AgentDefaults(BaseModel):
    """Default agent configuration."""

    model: str | None = None
    max_tokens: int = 4096
    temperature: float = 0.7
    max_tool_iterations: int = Field(default=10, ge=1)
    fallback_response: str = "I've completed the requested actions."
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


class AgentsConfig(BaseModel):
    """Agent configuration."""

    defaults: AgentDefaults = Field(default_factory=AgentDefaults)


class ProviderConfig(BaseModel):
    """LLM provider configuration."""

    api_key: str = ""
    api_base: str | None = None
    model: str = ""


class ProvidersConfig(BaseModel):
    """Configuration for LLM providers, in selection priority order."""

    anthropic: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(model="anthropic/claude-sonnet-4-20250514")
    )
    openai: ProviderConfig = Field(default_factory=lambda: ProviderConfig(model="openai/gpt-4o"))


class AutomationConfig(BaseModel):
    """Desktop automation configuration."""

    enabled: bool = True


class Config(BaseSettings):
    """Root configuration for zeptobot."""

    model_config = SettingsConfigDict(
        env_prefix="ZEPTOBOT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    agents: AgentsConfig = Field(default_factory=AgentsConfig)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    automation: AutomationConfig = Field(default_factory=AutomationConfig)

    def get_provider(self) -> tuple[str, ProviderConfig] | None:
        """
        Pick the provider to use.

        Anthropic wins over OpenAI. A key set in the config takes precedence
        over ANTHROPIC_API_KEY / OPENAI_API_KEY from the environment.

        Returns:
            (provider name, settings with the resolved key), or None if no
            key is available.
        """
        candidates = (
            ("anthropic", self.providers.anthropic, "ANTHROPIC_API_KEY"),
            ("openai", self.providers.openai, "OPENAI_API_KEY"),
        )
        for name, provider, env_var in candidates:
            key = provider.api_key or os.environ.get(env_var, "")
            if key:
                return name, provider.model_copy(update={"api_key": key})
        return None

    def get_api_key(self) -> str | None:
        selected = self.get_provider()
        return selected[1].api_key if selected else None

    def get_model(self) -> str | None:
        """Configured model override, else the selected provider's default."""
        if self.agents.defaults.model:
            return self.agents.defaults.model
        selected = self.get_provider()
        return selected[1].model if selected else None
