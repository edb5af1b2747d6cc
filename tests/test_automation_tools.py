"""Tests for the desktop automation tools."""

import json

import pytest

from zeptobot.agent.tools.automation import (
    ClickTool,
    KeyPressTool,
    MoveMouseTool,
    ScreenInfoTool,
    TypeTextTool,
)
from zeptobot.automation.backend import Modifier, MouseButton, parse_key, parse_modifier


class TestMoveMouseTool:
    @pytest.mark.asyncio
    async def test_moves_cursor(self, backend):
        output = await MoveMouseTool(backend).execute(x=100, y=200)
        assert output.success
        assert output.for_llm == "Mouse moved to (100, 200)"
        assert backend.calls == [("move_to", 100.0, 200.0)]

    @pytest.mark.asyncio
    async def test_missing_coordinate(self, backend):
        output = await MoveMouseTool(backend).execute(x=100)
        assert not output.success
        assert "'y'" in output.for_llm
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_backend_failure_reported(self, backend):
        def fail(x, y):
            raise OSError("outside screen")

        backend.move_to = fail
        output = await MoveMouseTool(backend).execute(x=1.5, y=2)
        assert not output.success
        assert output.for_llm == "Failed to move mouse to (1.5, 2): outside screen"


class TestClickTool:
    @pytest.mark.asyncio
    async def test_default_left_click(self, backend):
        output = await ClickTool(backend).execute()
        assert output.for_llm == "Performed left click"
        assert backend.calls == [("click", MouseButton.LEFT, 1)]

    @pytest.mark.asyncio
    async def test_double_right_click(self, backend):
        output = await ClickTool(backend).execute(button="right", count=2)
        assert output.for_llm == "Performed 2x right click"
        assert backend.calls == [("click", MouseButton.RIGHT, 2)]

    @pytest.mark.asyncio
    async def test_count_floor_is_one(self, backend):
        output = await ClickTool(backend).execute(count=0)
        assert output.for_llm == "Performed left click"

    @pytest.mark.asyncio
    async def test_unknown_button(self, backend):
        output = await ClickTool(backend).execute(button="side")
        assert not output.success
        assert "Unknown button 'side'" in output.for_llm
        assert backend.calls == []


class TestTypeTextTool:
    @pytest.mark.asyncio
    async def test_short_text(self, backend):
        output = await TypeTextTool(backend).execute(text="hello")
        assert output.for_llm == 'Typed 5 characters: "hello"'
        assert backend.calls == [("type_text", "hello")]

    @pytest.mark.asyncio
    async def test_long_text_preview(self, backend):
        text = "a" * 80
        output = await TypeTextTool(backend).execute(text=text)
        assert output.for_llm == f'Typed 80 characters: "{"a" * 57}..."'

    @pytest.mark.asyncio
    async def test_missing_text(self, backend):
        output = await TypeTextTool(backend).execute()
        assert not output.success


class TestScreenInfoTool:
    @pytest.mark.asyncio
    async def test_reports_screen_and_mouse(self, backend):
        output = await ScreenInfoTool(backend).execute()
        assert json.loads(output.for_llm) == {
            "screen": {"width": 1920.0, "height": 1080.0},
            "mouse": {"x": 10.0, "y": 20.0},
        }


class TestKeyPressTool:
    @pytest.mark.asyncio
    async def test_named_key_with_modifiers(self, backend):
        output = await KeyPressTool(backend).execute(key="space", modifiers=["cmd"])
        assert output.for_llm == "Pressed Cmd + space"
        assert backend.calls == [("tap", "space", [Modifier.META])]

    @pytest.mark.asyncio
    async def test_single_character(self, backend):
        output = await KeyPressTool(backend).execute(key="a", modifiers=["ctrl", "Shift", "hyper"])
        assert output.for_llm == "Pressed Ctrl + Shift + a"
        assert backend.calls == [("tap", "a", [Modifier.CONTROL, Modifier.SHIFT])]

    @pytest.mark.asyncio
    async def test_unknown_key(self, backend):
        output = await KeyPressTool(backend).execute(key="hyperspace")
        assert not output.success
        assert "Unknown key 'hyperspace'" in output.for_llm
        assert backend.calls == []


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Return", "return"),
        ("enter", "return"),
        ("ESC", "escape"),
        ("del", "delete"),
        ("UpArrow", "up"),
        ("f24", "f24"),
        ("x", "x"),
        ("1", "1"),
        ("f25", None),
        ("hyperspace", None),
    ],
)
def test_parse_key(name, expected):
    assert parse_key(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("shift", Modifier.SHIFT),
        ("CTRL", Modifier.CONTROL),
        ("option", Modifier.ALT),
        ("super", Modifier.META),
        ("hyper", None),
    ],
)
def test_parse_modifier(name, expected):
    assert parse_modifier(name) is expected
