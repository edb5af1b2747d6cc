"""Provider contract consumed by the agent loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from zeptobot.agent.messages import Message, ToolCall
from zeptobot.providers.errors import ProviderError

__all__ = ["LLMProvider", "LLMResponse", "ProviderError"]


@dataclass
class LLMResponse:
    """Normalized model response."""

    content: str | None
    tool_calls: list[ToolCall] = field(default_factory=list)
    finish_reason: str = "stop"
    usage: dict[str, int] = field(default_factory=dict)

    @property
    def has_tool_calls(self) -> bool:
        return len(self.tool_calls) > 0


class LLMProvider(ABC):
    """
    Base class for LLM providers.

    Providers are stateless between calls: the full message history and the
    tool catalog are passed on every request.
    """

    def __init__(self, api_key: str | None = None, api_base: str | None = None) -> None:
        self.api_key = api_key
        self.api_base = api_base

    @abstractmethod
    async def chat(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """
        Request the next model turn.

        Args:
            messages: Full conversation history, oldest first.
            tools: Function-tool schemas the model may call.
            model: Model override; defaults to the provider's default model.
            max_tokens: Completion token limit.
            temperature: Sampling temperature.

        Returns:
            The normalized response.

        Raises:
            ProviderError: On any failure. Callers must not expect retries.
        """

    @abstractmethod
    def get_default_model(self) -> str:
        pass
