"""Desktop automation tools: mouse, keyboard and screen queries."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from zeptobot.agent.tools.base import Tool, ToolOutput
from zeptobot.automation.backend import (
    DesktopBackend,
    MouseButton,
    parse_key,
    parse_modifier,
)
from zeptobot.utils.helpers import format_number, truncate_preview


class _DesktopTool(Tool):
    """Shared plumbing: backend calls are blocking and run on a worker thread."""

    def __init__(self, backend: DesktopBackend) -> None:
        self._backend = backend

    async def _call(self, func: Any, *args: Any) -> Any:
        return await asyncio.to_thread(func, *args)


class MoveMouseTool(_DesktopTool):
    @property
    def name(self) -> str:
        return "move_mouse"

    @property
    def description(self) -> str:
        return "Move the mouse cursor to absolute screen coordinates"

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "x": {"type": "number", "description": "X coordinate (pixels from left)"},
                "y": {"type": "number", "description": "Y coordinate (pixels from top)"},
            },
            "required": ["x", "y"],
        }

    async def execute(self, **kwargs: Any) -> ToolOutput:
        x, y = kwargs.get("x"), kwargs.get("y")
        if not isinstance(x, (int, float)):
            return ToolOutput.error("Missing or invalid 'x' parameter")
        if not isinstance(y, (int, float)):
            return ToolOutput.error("Missing or invalid 'y' parameter")

        point = f"({format_number(x)}, {format_number(y)})"
        try:
            await self._call(self._backend.move_to, float(x), float(y))
        except Exception as e:
            return ToolOutput.error(f"Failed to move mouse to {point}: {e}")
        return ToolOutput.llm_only(f"Mouse moved to {point}")


class ClickTool(_DesktopTool):
    @property
    def name(self) -> str:
        return "click"

    @property
    def description(self) -> str:
        return (
            "Click the mouse at the current cursor position. "
            "Optionally specify button (left/right/middle) and click count."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "button": {
                    "type": "string",
                    "enum": ["left", "right", "middle"],
                    "description": "Mouse button to click (default: left)",
                },
                "count": {
                    "type": "integer",
                    "description": "Number of clicks (default: 1, use 2 for double-click)",
                },
            },
            "required": [],
        }

    async def execute(self, **kwargs: Any) -> ToolOutput:
        button_name = kwargs.get("button", "left")
        try:
            button = MouseButton(button_name)
        except ValueError:
            return ToolOutput.error(f"Unknown button '{button_name}'. Use left, right, or middle.")

        count = kwargs.get("count", 1)
        if not isinstance(count, int):
            count = 1
        count = max(1, count)

        await self._call(self._backend.click, button, count)

        label = f"{button.value} click" if count == 1 else f"{count}x {button.value} click"
        return ToolOutput.llm_only(f"Performed {label}")


class TypeTextTool(_DesktopTool):
    @property
    def name(self) -> str:
        return "type_text"

    @property
    def description(self) -> str:
        return (
            "Type text using simulated keystrokes. "
            "Types the given string as if the user typed it on the keyboard."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "The text to type"},
            },
            "required": ["text"],
        }

    async def execute(self, **kwargs: Any) -> ToolOutput:
        text = kwargs.get("text")
        if not isinstance(text, str):
            return ToolOutput.error("Missing or invalid 'text' parameter")

        await self._call(self._backend.type_text, text)
        return ToolOutput.llm_only(f'Typed {len(text)} characters: "{truncate_preview(text, 60)}"')


class ScreenInfoTool(_DesktopTool):
    @property
    def name(self) -> str:
        return "screen_info"

    @property
    def description(self) -> str:
        return (
            "Get information about the screen and current mouse position. "
            "Returns screen dimensions and cursor coordinates."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    async def execute(self, **kwargs: Any) -> ToolOutput:
        width, height = await self._call(self._backend.screen_size)
        x, y = await self._call(self._backend.mouse_position)
        info = {
            "screen": {"width": width, "height": height},
            "mouse": {"x": x, "y": y},
        }
        return ToolOutput.llm_only(json.dumps(info))


class KeyPressTool(_DesktopTool):
    @property
    def name(self) -> str:
        return "key_press"

    @property
    def description(self) -> str:
        return (
            "Press a keyboard key or key combination. "
            "Supports modifier keys (cmd, ctrl, alt, shift) with regular keys."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "key": {
                    "type": "string",
                    "description": "Key to press (e.g. 'return', 'tab', 'escape', 'a', '1', 'f5')",
                },
                "modifiers": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Modifier keys (e.g. ['cmd'], ['cmd', 'shift'])",
                },
            },
            "required": ["key"],
        }

    async def execute(self, **kwargs: Any) -> ToolOutput:
        key_name = kwargs.get("key")
        if not isinstance(key_name, str):
            return ToolOutput.error("Missing or invalid 'key' parameter")

        modifiers = []
        for raw in kwargs.get("modifiers") or []:
            if isinstance(raw, str) and (modifier := parse_modifier(raw)) is not None:
                modifiers.append(modifier)

        key = parse_key(key_name)
        if key is None:
            return ToolOutput.error(
                f"Unknown key '{key_name}'. Use a single character or a named key "
                "(return, tab, escape, space, backspace, delete, up, down, left, right, "
                "home, end, pageup, pagedown, f1-f24)."
            )

        await self._call(self._backend.tap, key, modifiers)

        prefix = "".join(f"{m.label} + " for m in modifiers)
        return ToolOutput.llm_only(f"Pressed {prefix}{key_name}")


def all_automation_tools(backend: DesktopBackend) -> list[Tool]:
    """Every desktop tool, in the order they are offered to the model."""
    return [
        MoveMouseTool(backend),
        ClickTool(backend),
        TypeTextTool(backend),
        ScreenInfoTool(backend),
        KeyPressTool(backend),
    ]
