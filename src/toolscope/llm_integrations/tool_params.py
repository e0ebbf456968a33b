"""Turn a SelectionResult into the tool parameter each provider SDK expects.

Schemas go through sanitize() with the target provider, so strict providers
get cleaned schemas and everyone else gets the declared ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

from anthropic.types import ToolParam

from toolscope.schema.ProviderPolicy import ProviderPolicy
from toolscope.schema.sanitize import requires_strict_schema, sanitize
from toolscope.selection.ToolSelector import SelectionResult


class FunctionDefinition(TypedDict):
    name: str
    description: str
    parameters: dict[str, Any]
    strict: bool


class FunctionToolParam(TypedDict):
    """OpenAI-compatible function tool, as accepted by OpenAI and Cerebras."""

    type: str
    function: FunctionDefinition


def to_anthropic_tools(
    result: SelectionResult,
    policies: Mapping[str, ProviderPolicy] | None = None,
) -> list[ToolParam]:
    return [
        {
            "name": tool.id,
            "description": tool.description,
            "input_schema": dict(sanitize(tool.input_schema, "anthropic", policies)),  # type: ignore[arg-type]
        }
        for tool in result.values()
    ]


def to_openai_tools(
    result: SelectionResult,
    provider_id: str,
    policies: Mapping[str, ProviderPolicy] | None = None,
) -> list[FunctionToolParam]:
    """Build function tools for an OpenAI-compatible provider.

    ``strict`` is set for providers whose policy requires strict schemas.
    """
    strict = requires_strict_schema(provider_id, policies)
    tools: list[FunctionToolParam] = []
    for tool in result.values():
        parameters = sanitize(tool.input_schema, provider_id, policies)
        tools.append(
            {
                "type": "function",
                "function": {
                    "name": tool.id,
                    "description": tool.description,
                    "parameters": dict(parameters),  # type: ignore[arg-type]
                    "strict": strict,
                },
            }
        )
    return tools
