"""ToolDescriptor - one callable capability advertised to the model.

A ToolDescriptor carries only what tool selection and the provider hand-off
need (id, description, input schema, category). The tool's executor lives in
the chat application and is looked up by id after the model calls it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from toolscope.util.json_utils import JSONSchema


@dataclass(frozen=True)
class ToolDescriptor:
    """Tool metadata used for selection and for the provider hand-off.

    Attributes:
        id: Unique, stable identifier. Also the tool name sent to the model.
        display_name: Human-readable name
        description: Human-readable description, also a ranking signal
        input_schema: JSON schema describing the tool's arguments
        category: Coarse domain tag (transport, accommodation, mapping, travel)
        integration: The MCP server / integration that owns the tool
        enabled: Whether the tool may be selected. Only the Catalog flips this.
    """

    id: str
    display_name: str
    description: str
    input_schema: JSONSchema
    category: str
    integration: str = ""
    enabled: bool = field(default=True)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ToolDescriptor id must be a non-empty string")
        if not self.category:
            raise ValueError(f"Tool {self.id!r} has no category")
        if not isinstance(self.input_schema, JSONSchema):
            # Frozen dataclass, so bypass __setattr__ for the one-time coercion.
            object.__setattr__(self, "input_schema", JSONSchema(self.input_schema))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> ToolDescriptor:
        """Build a descriptor from a static configuration record.

        Accepts both camelCase (``displayName``, ``inputSchema``) and
        snake_case keys. ``display_name`` defaults to ``id``.

        Raises:
            TypeError: If the record is not a mapping or its schema is invalid
            ValueError: If ``id`` or ``category`` is missing
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"Tool record must be a mapping, got {type(record).__name__}")

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in record:
                    return record[key]
            return default

        tool_id = pick("id", default="")
        return cls(
            id=tool_id,
            display_name=pick("display_name", "displayName", default=tool_id),
            description=pick("description", default=""),
            input_schema=pick(
                "input_schema", "inputSchema", default={"type": "object", "properties": {}}
            ),
            category=pick("category", default=""),
            integration=pick("integration", default=""),
            enabled=bool(pick("enabled", default=True)),
        )
