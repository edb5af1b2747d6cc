"""Tool contract, definitions and results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolDefinition:
    """What the provider is told about a tool on every round-trip."""

    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict)

    def to_schema(self) -> dict[str, Any]:
        """Render as an OpenAI function-tool schema."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


@dataclass(frozen=True)
class ToolOutput:
    """Result of a tool run. ``for_llm`` is always fed back to the model."""

    for_llm: str
    success: bool = True

    @classmethod
    def llm_only(cls, text: str) -> ToolOutput:
        return cls(for_llm=text, success=True)

    @classmethod
    def error(cls, text: str) -> ToolOutput:
        return cls(for_llm=text, success=False)


class Tool(ABC):
    """Base tool contract."""

    _TYPE_MAP = {
        "string": str,
        "integer": int,
        "number": (int, float),
        "boolean": bool,
        "array": list,
        "object": dict,
    }

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        pass

    @abstractmethod
    async def execute(self, **kwargs: Any) -> ToolOutput | str:
        pass

    def validate_params(self, params: dict[str, Any] | None) -> list[str]:
        """
        Check arguments against the tool's JSON schema.

        Args:
            params: Parsed arguments, or None when the model sent none.

        Returns:
            Human-readable violations; empty when the arguments are valid.

        Raises:
            ValueError: If the tool's own schema is not an object schema.
        """
        schema = self.parameters or {}
        if schema.get("type", "object") != "object":
            raise ValueError(f"Schema must be object type, got {schema.get('type')!r}")
        return self._validate(params or {}, {**schema, "type": "object"}, "")

    def _validate(self, value: Any, schema: dict[str, Any], path: str) -> list[str]:
        expected_type = schema.get("type")
        label = path or "parameter"
        if expected_type in self._TYPE_MAP:
            # bool is an int subclass but never a valid number here
            is_bool = isinstance(value, bool) and expected_type in ("integer", "number")
            if is_bool or not isinstance(value, self._TYPE_MAP[expected_type]):
                return [f"{label} should be {expected_type}"]

        errors: list[str] = []
        if "enum" in schema and value not in schema["enum"]:
            errors.append(f"{label} must be one of {schema['enum']}")
        if expected_type in ("integer", "number"):
            if "minimum" in schema and value < schema["minimum"]:
                errors.append(f"{label} must be >= {schema['minimum']}")
            if "maximum" in schema and value > schema["maximum"]:
                errors.append(f"{label} must be <= {schema['maximum']}")
        if expected_type == "string":
            if "minLength" in schema and len(value) < schema["minLength"]:
                errors.append(f"{label} must be at least {schema['minLength']} chars")
            if "maxLength" in schema and len(value) > schema["maxLength"]:
                errors.append(f"{label} must be at most {schema['maxLength']} chars")
        if expected_type == "object":
            properties = schema.get("properties", {})
            for key in schema.get("required", []):
                if key not in value:
                    errors.append(f"missing required {path + '.' + key if path else key}")
            for key, item in value.items():
                if key in properties:
                    next_path = f"{path}.{key}" if path else key
                    errors.extend(self._validate(item, properties[key], next_path))
        if expected_type == "array" and "items" in schema:
            for idx, item in enumerate(value):
                next_path = f"{path}[{idx}]" if path else f"[{idx}]"
                errors.extend(self._validate(item, schema["items"], next_path))
        return errors

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=dict(self.parameters),
        )
