from typing import Any

import pytest

from zeptobot.agent.tools.automation import all_automation_tools
from zeptobot.agent.tools.base import Tool
from zeptobot.agent.tools.registry import ToolRegistry


class NamedTool(Tool):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return f"{self._name} tool"

    @property
    def parameters(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def execute(self, **kwargs: Any) -> str:
        return self._name


def test_definitions_keep_registration_order() -> None:
    registry = ToolRegistry([NamedTool("b"), NamedTool("a"), NamedTool("c")])
    assert [d.name for d in registry.definitions()] == ["b", "a", "c"]
    assert registry.names == ["b", "a", "c"]


def test_definitions_are_stable() -> None:
    registry = ToolRegistry([NamedTool("a")])
    assert registry.definitions() is registry.definitions()
    assert registry.schemas() == registry.schemas()


def test_resolve_exact_name() -> None:
    tool = NamedTool("move_mouse")
    registry = ToolRegistry([tool])

    assert registry.resolve("move_mouse") is tool
    assert registry.resolve("move-mouse") is None
    assert registry.resolve("MOVE_MOUSE") is None
    assert "move_mouse" in registry
    assert len(registry) == 1


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate tool name"):
        ToolRegistry([NamedTool("a"), NamedTool("a")])


def test_automation_catalog(backend) -> None:
    registry = ToolRegistry(all_automation_tools(backend))
    assert registry.names == ["move_mouse", "click", "type_text", "screen_info", "key_press"]
