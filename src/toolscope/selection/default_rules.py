"""Keyword tables for the travel deployment."""

from __future__ import annotations

from toolscope.selection.CategoryRule import CategoryRule, RankingBoost

TRAVEL = "travel"
"""General-purpose category; used when no keyword matches."""

DEFAULT_FALLBACK_CATEGORIES: frozenset[str] = frozenset({TRAVEL})

DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="transport",
        keywords=(
            "ferry",
            "ferries",
            "boat",
            "island",
            "greek",
            "greece",
            "santorini",
            "mykonos",
            "port",
            "maritime",
            "sea travel",
            "car rental",
            "rent a car",
        ),
    ),
    CategoryRule(
        category="accommodation",
        keywords=(
            "airbnb",
            "accommodation",
            "hotel",
            "stay",
            "lodging",
            "rental",
            "apartment",
            "house",
            "room",
        ),
    ),
    CategoryRule(
        category="mapping",
        keywords=(
            "map",
            "route",
            "directions",
            "location",
            "gas station",
            "restaurant",
            "nearby",
            "distance",
            "navigation",
        ),
    ),
    CategoryRule(
        category=TRAVEL,
        keywords=(
            "flight",
            "airline",
            "airport",
            "plane",
            "travel",
            "booking",
            "ticket",
            "departure",
            "arrival",
            "turkish airlines",
            "turkish",
            "istanbul",
            "turkey",
        ),
    ),
)

# Kept independent of DEFAULT_RULES even where keywords overlap; the overlap
# is pending product review (see DESIGN.md).
DEFAULT_BOOSTS: tuple[RankingBoost, ...] = (
    RankingBoost("ferry", "transport"),
    RankingBoost("hotel", "accommodation"),
    RankingBoost("map", "mapping"),
    RankingBoost("flight", TRAVEL),
)
