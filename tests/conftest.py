"""Shared test helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import pytest

from toolscope.tool.ToolDescriptor import ToolDescriptor

MakeTool: TypeAlias = Callable[..., ToolDescriptor]


def _make_tool(
    tool_id: str,
    category: str,
    description: str = "",
    enabled: bool = True,
    integration: str = "",
) -> ToolDescriptor:
    return ToolDescriptor(
        id=tool_id,
        display_name=tool_id,
        description=description,
        input_schema={"type": "object", "properties": {}},  # type: ignore[arg-type]
        category=category,
        integration=integration,
        enabled=enabled,
    )


@pytest.fixture
def make_tool() -> MakeTool:
    """Factory for minimal descriptors. Each test builds its own pool."""
    return _make_tool
