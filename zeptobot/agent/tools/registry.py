"""Fixed, ordered tool registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from loguru import logger

from zeptobot.agent.tools.base import Tool, ToolDefinition


class ToolRegistry:
    """
    Holds the tools available to the agent.

    The tool set is decided at construction and never changes afterwards, so
    the definitions sent to the provider are identical on every round-trip.
    """

    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name!r}")
            self._tools[tool.name] = tool
        self._definitions: tuple[ToolDefinition, ...] = tuple(t.definition() for t in self._tools.values())
        logger.debug(f"Tool registry built with {len(self._tools)} tools: {', '.join(self._tools)}")

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> tuple[ToolDefinition, ...]:
        """Tool definitions in registration order."""
        return self._definitions

    def schemas(self) -> list[dict[str, Any]]:
        return [d.to_schema() for d in self._definitions]

    def resolve(self, name: str) -> Tool | None:
        """Exact-name lookup; returns None when no tool matches."""
        return self._tools.get(name)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))
