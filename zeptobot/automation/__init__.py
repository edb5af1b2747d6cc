"""Desktop automation module."""

from zeptobot.automation.backend import (
    DesktopBackend,
    Modifier,
    MouseButton,
    PyAutoGUIBackend,
    parse_key,
    parse_modifier,
)
from zeptobot.automation.service import AutomationError, AutomationService

__all__ = [
    "AutomationError",
    "AutomationService",
    "DesktopBackend",
    "Modifier",
    "MouseButton",
    "PyAutoGUIBackend",
    "parse_key",
    "parse_modifier",
]
