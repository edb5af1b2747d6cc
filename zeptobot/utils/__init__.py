"""Utility functions module."""

from zeptobot.utils.helpers import format_error, format_number, truncate_preview

__all__ = ["format_error", "format_number", "truncate_preview"]
