"""Tool call dispatch with failure containment."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from zeptobot.agent.messages import ToolCall
from zeptobot.agent.tools.base import ToolOutput
from zeptobot.agent.tools.registry import ToolRegistry
from zeptobot.utils.helpers import format_error


def parse_arguments(raw: str) -> dict[str, Any] | None:
    """
    Parse provider-supplied tool arguments.

    Returns None for empty text, invalid JSON, or a JSON value that is not an
    object. Malformed arguments are never an error at this level.
    """
    if not raw or not raw.strip():
        return None
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning(f"Discarding unparseable tool arguments: {raw[:200]!r}")
        return None
    if not isinstance(parsed, dict):
        logger.warning(f"Discarding non-object tool arguments: {raw[:200]!r}")
        return None
    return parsed


class ToolExecutor:
    """
    Runs a single tool call and always returns text for the model.

    Unknown tools, bad arguments and exceptions raised by a tool are turned
    into tool-result text so the conversation can continue and the model can
    correct itself.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    async def execute(self, call: ToolCall) -> str:
        """
        Execute one tool call.

        Args:
            call: The call as requested by the provider.

        Returns:
            Text to embed in the matching tool message.
        """
        params = parse_arguments(call.arguments)

        tool = self.registry.resolve(call.name)
        if tool is None:
            logger.warning(f"Model requested unknown tool: {call.name}")
            return f"Unknown tool: {call.name}"

        logger.debug(f"Executing tool {call.name} (call {call.id})")
        try:
            errors = tool.validate_params(params)
            if errors:
                return f"Tool error: invalid parameters for '{call.name}': " + "; ".join(errors)
            result = await tool.execute(**(params or {}))
        except Exception as exc:
            logger.warning(f"Tool {call.name} failed: {format_error(exc)}")
            return f"Tool error: {format_error(exc)}"

        if isinstance(result, ToolOutput):
            if not result.success:
                logger.debug(f"Tool {call.name} reported failure: {result.for_llm}")
            return result.for_llm
        return str(result)
