"""LiteLLM-based LLM provider implementation."""

import json
from typing import Any

from loguru import logger

from zeptobot.agent.messages import Message, ToolCall
from zeptobot.providers.base import LLMProvider, LLMResponse, ProviderError


class LiteLLMProvider(LLMProvider):
    """
    LLM provider using LiteLLM as a unified gateway.

    Works with Anthropic, OpenAI and any other backend LiteLLM routes to.
    Tool-call arguments are returned exactly as the model produced them.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str | None = None,
        default_model: str = "anthropic/claude-sonnet-4-20250514",
    ):
        super().__init__(api_key, api_base)
        self._default_model = default_model

    async def chat(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Send a chat completion request via LiteLLM."""
        try:
            import litellm
        except ImportError:
            raise RuntimeError("litellm is required. Install with: pip install litellm")

        use_model = model or self._default_model

        kwargs: dict[str, Any] = {
            "model": use_model,
            "messages": [m.to_dict() for m in messages],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.api_base:
            kwargs["api_base"] = self.api_base
        if tools:
            kwargs["tools"] = tools

        logger.debug(f"LLM request: model={use_model}, messages={len(messages)}, tools={len(tools or [])}")

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            logger.error(f"LLM request failed: {type(e).__name__}: {e}")
            raise ProviderError(f"LLM request failed: {e}") from e

        if not getattr(response, "choices", None):
            raise ProviderError("Malformed provider response: no choices")

        choice = response.choices[0]
        message = choice.message

        tool_calls: list[ToolCall] = []
        for tc in message.tool_calls or []:
            if not tc.id:
                raise ProviderError(f"Malformed provider response: tool call {tc.function.name!r} has no id")
            arguments = tc.function.arguments
            if arguments is None:
                arguments = ""
            elif not isinstance(arguments, str):
                arguments = json.dumps(arguments, ensure_ascii=False)

            tool_calls.append(
                ToolCall(
                    id=str(tc.id),
                    name=str(tc.function.name),
                    arguments=arguments,
                )
            )

        usage = {}
        if getattr(response, "usage", None):
            usage = {
                "prompt_tokens": response.usage.prompt_tokens or 0,
                "completion_tokens": response.usage.completion_tokens or 0,
                "total_tokens": response.usage.total_tokens or 0,
            }

        return LLMResponse(
            content=message.content,
            tool_calls=tool_calls,
            finish_reason=choice.finish_reason or "stop",
            usage=usage,
        )

    def get_default_model(self) -> str:
        """Get the default model for this provider."""
        return self._default_model
