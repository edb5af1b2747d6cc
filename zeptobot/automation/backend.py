"""Desktop input backends and key-name helpers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from loguru import logger


class MouseButton(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class Modifier(str, Enum):
    """Keyboard modifier, valued by its display label."""

    SHIFT = "Shift"
    CONTROL = "Ctrl"
    ALT = "Alt"
    META = "Cmd"

    @property
    def label(self) -> str:
        return self.value


_MODIFIER_ALIASES = {
    "shift": Modifier.SHIFT,
    "control": Modifier.CONTROL,
    "ctrl": Modifier.CONTROL,
    "alt": Modifier.ALT,
    "option": Modifier.ALT,
    "meta": Modifier.META,
    "cmd": Modifier.META,
    "command": Modifier.META,
    "win": Modifier.META,
    "super": Modifier.META,
}

_NAMED_KEYS = {
    "return": "return",
    "enter": "return",
    "tab": "tab",
    "escape": "escape",
    "esc": "escape",
    "space": "space",
    "backspace": "backspace",
    "delete": "delete",
    "del": "delete",
    "up": "up",
    "uparrow": "up",
    "down": "down",
    "downarrow": "down",
    "left": "left",
    "leftarrow": "left",
    "right": "right",
    "rightarrow": "right",
    "home": "home",
    "end": "end",
    "pageup": "pageup",
    "pagedown": "pagedown",
    "capslock": "capslock",
    "printscreen": "printscreen",
    "scrolllock": "scrolllock",
    "pause": "pause",
    **{f"f{n}": f"f{n}" for n in range(1, 25)},
}


def parse_modifier(name: str) -> Modifier | None:
    """Map a modifier name such as 'cmd' or 'ctrl' to a Modifier."""
    return _MODIFIER_ALIASES.get(name.lower())


def parse_key(name: str) -> str | None:
    """
    Resolve a key name to its canonical form.

    Named keys are matched case-insensitively. Any other single character is
    returned as-is. Everything else is unknown and yields None.
    """
    named = _NAMED_KEYS.get(name.lower())
    if named is not None:
        return named
    if len(name) == 1:
        return name
    return None


class DesktopBackend(ABC):
    """Blocking mouse, keyboard and screen primitives."""

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        pass

    @abstractmethod
    def click(self, button: MouseButton = MouseButton.LEFT, count: int = 1) -> None:
        pass

    @abstractmethod
    def type_text(self, text: str) -> None:
        pass

    @abstractmethod
    def tap(self, key: str, modifiers: list[Modifier] | None = None) -> None:
        pass

    @abstractmethod
    def screen_size(self) -> tuple[float, float]:
        pass

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        pass


class PyAutoGUIBackend(DesktopBackend):
    """
    Backend driving the real desktop through pyautogui.

    pyautogui is imported on first use so hosts without a display can still
    load the agent.
    """

    _PYAUTOGUI_KEYS = {
        "return": "enter",
        "escape": "esc",
    }

    def __init__(self) -> None:
        self._gui: Any = None

    @property
    def gui(self) -> Any:
        if self._gui is None:
            try:
                import pyautogui
            except ImportError:
                raise RuntimeError("pyautogui is required. Install with: pip install pyautogui")
            self._gui = pyautogui
            logger.debug("pyautogui backend initialized")
        return self._gui

    @staticmethod
    def _modifier_key(modifier: Modifier) -> str:
        if modifier is Modifier.META:
            return "command" if sys.platform == "darwin" else "win"
        return {Modifier.SHIFT: "shift", Modifier.CONTROL: "ctrl", Modifier.ALT: "alt"}[modifier]

    def move_to(self, x: float, y: float) -> None:
        self.gui.moveTo(x, y)

    def click(self, button: MouseButton = MouseButton.LEFT, count: int = 1) -> None:
        self.gui.click(button=MouseButton(button).value, clicks=max(1, count))

    def type_text(self, text: str) -> None:
        self.gui.write(text)

    def tap(self, key: str, modifiers: list[Modifier] | None = None) -> None:
        key = self._PYAUTOGUI_KEYS.get(key, key)
        held = [self._modifier_key(m) for m in modifiers or []]
        if held:
            self.gui.hotkey(*held, key)
        else:
            self.gui.press(key)

    def screen_size(self) -> tuple[float, float]:
        width, height = self.gui.size()
        return float(width), float(height)

    def mouse_position(self) -> tuple[float, float]:
        x, y = self.gui.position()
        return float(x), float(y)
