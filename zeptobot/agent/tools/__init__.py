"""Agent tools module."""

from zeptobot.agent.tools.base import Tool, ToolDefinition, ToolOutput
from zeptobot.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolDefinition", "ToolOutput", "ToolRegistry"]
