from __future__ import annotations

import json as _json
from pathlib import Path
from typing import Any, TypeAlias

import jsonschema


JSONPyPrimitive: TypeAlias = str | int | float | bool | None
"""Python primitives that convert to JSON without special treatment."""

JSONPyDict: TypeAlias = dict[str, "JSONPyValue"]

JSONPyList: TypeAlias = list["JSONPyValue"]

JSONPyValue: TypeAlias = JSONPyPrimitive | JSONPyDict | JSONPyList

SchemaNode: TypeAlias = JSONPyValue
"""Any node of a JSON Schema tree. Boolean schemas and malformed nodes included."""


class JSONSchema(dict[str, JSONPyValue]):
    """A validated JSON Schema dictionary describing a tool's input.

    Validates against the JSON Schema meta-schema to ensure the schema is well-formed.
    Tool input schemas are checked once, when the tool is registered, so the
    selection path can trust them.
    """

    def __new__(cls, data: Any) -> JSONSchema:
        if not isinstance(data, dict):
            raise TypeError("JSONSchema must be a dict")
        try:
            jsonschema.Draft202012Validator.check_schema(data)
        except jsonschema.SchemaError as e:
            raise TypeError(f"Invalid JSON Schema: {e.message}") from e
        return super().__new__(cls, data)

    def __reduce__(self) -> tuple[type[JSONSchema], tuple[dict[str, Any]]]:
        """Support pickling and deepcopy."""
        return (JSONSchema, (dict(self),))


class json:
    """Typed wrapper around the standard json module."""

    JSONPyPrimitive = JSONPyPrimitive
    JSONPyValue = JSONPyValue
    JSONDecodeError = _json.JSONDecodeError

    @staticmethod
    def load(path: str | Path) -> JSONPyValue:
        """Load JSON from a file path.

        Args:
            path: Path to the JSON file (string or Path object)

        Returns:
            The parsed JSON value
        """
        return _json.loads(Path(path).read_text(encoding="utf-8"))
