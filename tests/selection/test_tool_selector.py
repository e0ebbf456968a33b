"""Tests for ToolSelector: classify -> expand -> rank."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from toolscope.selection.CategoryRule import CategoryRule
from toolscope.selection.SelectorConfig import SelectorConfig
from toolscope.selection.ToolSelector import (
    SelectionRequest,
    SelectionResult,
    ToolSelector,
    select,
)
from toolscope.tool.default_catalog import default_catalog
from toolscope.tool.ToolDescriptor import ToolDescriptor

MakeTool = Callable[..., ToolDescriptor]


@pytest.fixture
def mixed_pool(make_tool: MakeTool) -> list[ToolDescriptor]:
    return [
        make_tool("ferry_ports", "transport", "List ferry ports"),
        make_tool("ferry_trips", "transport", "Find ferry trips between two ports"),
        make_tool("map_directions", "mapping", "Directions between waypoints"),
        make_tool("map_static", "mapping", "Static map image"),
        make_tool("hotel_search", "accommodation", "Search for hotels"),
        make_tool("flight_search", "travel", "Search for flights"),
    ]


class TestSelect:
    def test_ferry_query_selects_only_transport(self, mixed_pool: list[ToolDescriptor]) -> None:
        result = ToolSelector().select(
            SelectionRequest("What ferries go from Piraeus to Aegina tomorrow?", mixed_pool, 8)
        )
        assert list(result) == ["ferry_ports", "ferry_trips"]
        assert result.categories == frozenset({"transport"})
        assert not result.used_fallback

    def test_empty_query_uses_general_tool(self, make_tool: MakeTool) -> None:
        pool = [make_tool("travel_recommendation", "travel", "Travel recommendations")]
        result = ToolSelector().select(SelectionRequest("", pool, 8))
        assert list(result) == ["travel_recommendation"]
        assert result.used_fallback

    def test_twelve_matching_tools_cut_to_budget(self, make_tool: MakeTool) -> None:
        pool = [make_tool(f"ferry_{i}", "transport", "ferry") for i in range(12)]
        result = ToolSelector().select(SelectionRequest("ferry", pool, 8))
        assert len(result) == 8
        assert set(result) < {t.id for t in pool}
        assert list(result) == [f"ferry_{i}" for i in range(8)]

    def test_request_budget_overrides_config(self, mixed_pool: list[ToolDescriptor]) -> None:
        selector = ToolSelector(SelectorConfig(max_tools=8))
        result = selector.select(SelectionRequest("ferry", mixed_pool, max_tools=1))
        assert len(result) == 1

    def test_config_budget_used_by_default(self, mixed_pool: list[ToolDescriptor]) -> None:
        selector = ToolSelector(SelectorConfig(max_tools=1))
        assert len(selector.select(SelectionRequest("ferry", mixed_pool))) == 1

    def test_empty_pool_gives_empty_result(self) -> None:
        result = ToolSelector().select(SelectionRequest("ferry", []))
        assert len(result) == 0

    def test_no_general_tools_gives_empty_fallback(self, make_tool: MakeTool) -> None:
        pool = [make_tool("map_static", "mapping")]
        result = ToolSelector().select(SelectionRequest("hello", pool))
        assert len(result) == 0
        assert result.used_fallback

    def test_negative_budget_clamped(self, mixed_pool: list[ToolDescriptor]) -> None:
        assert len(ToolSelector().select(SelectionRequest("ferry", mixed_pool, -1))) == 0

    def test_custom_rules(self, make_tool: MakeTool) -> None:
        config = SelectorConfig(
            rules=(CategoryRule("cruise", ("cruise",)), CategoryRule("general", ("help",))),
            boosts=(),
            fallback_categories=frozenset({"general"}),
        )
        pool = [make_tool("c", "cruise"), make_tool("g", "general")]
        assert list(select(SelectionRequest("cruise deals", pool), config)) == ["c"]
        assert list(select(SelectionRequest("hi", pool), config)) == ["g"]


class TestSelectionProperties:
    QUERIES = [
        "",
        "ferry",
        "hotel near the port with a map",
        "Find me a flight and a hotel and a ferry and directions",
        "????",
        "x" * 10_000,
    ]

    @pytest.mark.parametrize("query", QUERIES)
    @pytest.mark.parametrize("max_tools", [0, 1, 3, 8, 50])
    def test_cap_determinism_and_category_correctness(self, query: str, max_tools: int) -> None:
        catalog = default_catalog()
        selector = ToolSelector()
        request = SelectionRequest(query, catalog.snapshot(), max_tools)

        result = selector.select(request)

        assert len(result) <= max_tools
        assert selector.select(request) == result
        assert all(tool.category in result.categories for tool in result.values())
        assert all(tool.enabled for tool in result.values())

    def test_fallback_non_empty_when_general_tools_exist(self) -> None:
        catalog = default_catalog()
        result = ToolSelector().select(SelectionRequest("hello there", catalog.snapshot()))
        assert result.used_fallback
        assert len(result) > 0
        assert {t.category for t in result.values()} == {"travel"}

    def test_disabled_integration_not_selected(self) -> None:
        catalog = default_catalog()
        catalog.set_integration_enabled("ferryhopper", False)
        result = ToolSelector().select(SelectionRequest("ferry to aegina", catalog.snapshot()))
        assert not any(tool_id.startswith("ferryhopper") for tool_id in result)


class TestSelectionResult:
    def test_mapping_behaviour(self, make_tool: MakeTool) -> None:
        a, b = make_tool("a", "travel"), make_tool("b", "travel")
        result = SelectionResult([b, a])
        assert list(result) == ["b", "a"]
        assert result["a"] is a
        assert result.tools() == [b, a]
        assert "b" in result

    def test_equality_is_order_sensitive(self, make_tool: MakeTool) -> None:
        a, b = make_tool("a", "travel"), make_tool("b", "travel")
        assert SelectionResult([a, b]) == SelectionResult([a, b])
        assert SelectionResult([a, b]) != SelectionResult([b, a])
