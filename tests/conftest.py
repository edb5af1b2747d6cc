"""Shared test doubles."""

from __future__ import annotations

from typing import Any

import pytest

from zeptobot.agent.messages import Message, ToolCall
from zeptobot.automation.backend import DesktopBackend, Modifier, MouseButton
from zeptobot.providers.base import LLMProvider, LLMResponse


class ScriptedProvider(LLMProvider):
    """Returns queued responses in order and records what it was sent."""

    def __init__(self, responses: list[LLMResponse | Exception] | None = None, repeat_last: bool = False) -> None:
        super().__init__()
        self.responses = list(responses or [])
        self.repeat_last = repeat_last
        self.calls: list[list[Message]] = []
        self.tools_seen: list[list[dict[str, Any]] | None] = []

    async def chat(self, messages, tools=None, model=None, max_tokens=4096, temperature=0.7):
        self.calls.append(list(messages))
        self.tools_seen.append(tools)
        if len(self.responses) > 1 or not self.repeat_last:
            item = self.responses.pop(0)
        else:
            item = self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    def get_default_model(self) -> str:
        return "scripted"


class FakeBackend(DesktopBackend):
    """Records desktop calls instead of touching real devices."""

    def __init__(self, size: tuple[float, float] = (1920.0, 1080.0), position: tuple[float, float] = (10.0, 20.0)):
        self.calls: list[tuple[Any, ...]] = []
        self.size = size
        self.position = position

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def click(self, button: MouseButton = MouseButton.LEFT, count: int = 1) -> None:
        self.calls.append(("click", button, count))

    def type_text(self, text: str) -> None:
        self.calls.append(("type_text", text))

    def tap(self, key: str, modifiers: list[Modifier] | None = None) -> None:
        self.calls.append(("tap", key, list(modifiers or [])))

    def screen_size(self) -> tuple[float, float]:
        return self.size

    def mouse_position(self) -> tuple[float, float]:
        return self.position


def text_response(content: str) -> LLMResponse:
    return LLMResponse(content=content, finish_reason="stop")


def tool_response(*calls: ToolCall, content: str | None = None) -> LLMResponse:
    return LLMResponse(content=content, tool_calls=list(calls), finish_reason="tool_calls")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
