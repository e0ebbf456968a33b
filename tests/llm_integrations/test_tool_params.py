"""Tests for converting selections into provider tool parameters."""

from __future__ import annotations

from toolscope.llm_integrations.tool_params import to_anthropic_tools, to_openai_tools
from toolscope.selection.ToolSelector import SelectionRequest, ToolSelector
from toolscope.tool.default_catalog import default_catalog


def _ferry_selection():
    catalog = default_catalog()
    return ToolSelector().select(SelectionRequest("ferry from Piraeus", catalog.snapshot()))


class TestToOpenAITools:
    def test_cerebras_gets_strict_clean_schemas(self) -> None:
        result = _ferry_selection()
        tools = to_openai_tools(result, "cerebras")

        assert [t["function"]["name"] for t in tools] == list(result)
        trips = next(t for t in tools if t["function"]["name"] == "ferryhopper_search_trips")
        assert trips["type"] == "function"
        assert trips["function"]["strict"] is True
        parameters = trips["function"]["parameters"]
        assert "$schema" not in parameters
        assert parameters["additionalProperties"] is False
        assert parameters["properties"]["date"]["description"] == "Travel date in YYYY-MM-DD format"

    def test_openai_gets_declared_schemas(self) -> None:
        result = _ferry_selection()
        tools = to_openai_tools(result, "openai")
        for tool, descriptor in zip(tools, result.values()):
            assert tool["function"]["strict"] is False
            assert tool["function"]["parameters"] == descriptor.input_schema

    def test_empty_selection(self) -> None:
        catalog = default_catalog()
        result = ToolSelector().select(SelectionRequest("ferry", catalog.snapshot(), max_tools=0))
        assert to_openai_tools(result, "cerebras") == []


class TestToAnthropicTools:
    def test_tool_params(self) -> None:
        result = _ferry_selection()
        tools = to_anthropic_tools(result)

        assert [t["name"] for t in tools] == list(result)
        first = tools[0]
        descriptor = result[first["name"]]
        assert first["description"] == descriptor.description
        assert first["input_schema"] == descriptor.input_schema
        assert first["input_schema"] is not descriptor.input_schema
