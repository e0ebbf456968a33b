"""Tests for the deployment's default tool set."""

from __future__ import annotations

from toolscope.selection.default_rules import DEFAULT_RULES
from toolscope.tool.default_catalog import default_catalog


class TestDefaultCatalog:
    def test_every_rule_category_has_tools(self) -> None:
        """No default rule selects a category without tools."""
        catalog = default_catalog()
        for rule in DEFAULT_RULES:
            assert catalog.by_category(rule.category), rule.category

    def test_turkish_airlines_disabled_by_default(self) -> None:
        catalog = default_catalog()
        assert catalog.get("turkish_airlines_search_flights").enabled is False
        assert "turkish_airlines_search_flights" not in [t.id for t in catalog.snapshot()]

    def test_each_call_builds_an_isolated_catalog(self) -> None:
        first = default_catalog()
        second = default_catalog()

        first.set_integration_enabled("mapbox", False)

        assert second.by_category("mapping", enabled_only=True)
