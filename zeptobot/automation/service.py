"""Direct automation commands, outside the agent loop."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from zeptobot.automation.backend import DesktopBackend
from zeptobot.utils.helpers import format_error, format_number


class AutomationError(RuntimeError):
    """An automation command could not be carried out."""


def _require_number(params: dict[str, Any], key: str, action: str) -> float:
    value = params.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AutomationError(f"{action} requires numeric '{key}' param")
    return float(value)


class AutomationService:
    """
    Dispatches named automation actions to a desktop backend.

    Supported actions:
    - ``move_mouse``: requires ``x`` and ``y``
    - ``click``: left click at the current position
    - ``type``: requires ``text``
    - ``screen_size``: returns ``"WxH"``
    - ``mouse_position``: returns ``"(x, y)"``
    """

    def __init__(self, backend: DesktopBackend) -> None:
        self.backend = backend

    def execute(self, action: str, params: dict[str, Any] | None = None) -> str:
        """
        Run an action synchronously.

        Raises:
            AutomationError: Unknown action or missing/invalid parameters.
        """
        params = params or {}
        if action == "move_mouse":
            x = _require_number(params, "x", action)
            y = _require_number(params, "y", action)
            self.backend.move_to(x, y)
            return f"Moved mouse to ({format_number(x)}, {format_number(y)})"
        if action == "click":
            self.backend.click()
            return "Clicked at current position"
        if action == "type":
            text = params.get("text")
            if not isinstance(text, str):
                raise AutomationError("type requires string 'text' param")
            self.backend.type_text(text)
            return f"Typed: {text}"
        if action == "screen_size":
            w, h = self.backend.screen_size()
            return f"{format_number(w)}x{format_number(h)}"
        if action == "mouse_position":
            x, y = self.backend.mouse_position()
            return f"({format_number(x)}, {format_number(y)})"
        raise AutomationError(f"Unknown automation action: {action}")

    async def run(self, action: str, params: dict[str, Any] | None = None) -> str:
        """Run an action on a worker thread so the event loop stays free."""
        logger.debug(f"Automation action: {action} {params or {}}")
        try:
            return await asyncio.to_thread(self.execute, action, params)
        except AutomationError:
            raise
        except Exception as e:
            raise AutomationError(f"Automation task failed: {format_error(e)}") from e
