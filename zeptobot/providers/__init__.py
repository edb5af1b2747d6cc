"""LLM providers module."""

from zeptobot.providers.base import LLMProvider, LLMResponse, ProviderError
from zeptobot.providers.litellm_provider import LiteLLMProvider

__all__ = ["LLMProvider", "LLMResponse", "ProviderError", "LiteLLMProvider"]
