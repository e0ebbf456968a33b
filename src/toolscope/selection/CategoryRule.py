"""Keyword tables that drive tool selection.

CategoryRule decides which categories a query is about (classification).
RankingBoost gives extra weight to a category when a stronger keyword appears,
and only matters once the candidate set has to be cut down (ranking). The two
tables are configured independently.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _normalize_keywords(keywords: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(keywords, str):
        keywords = (keywords,)
    seen: dict[str, None] = {}
    for keyword in keywords:
        lowered = keyword.lower()
        if lowered:
            seen.setdefault(lowered, None)
    return tuple(seen)


@dataclass(frozen=True)
class CategoryRule:
    """Relevance rule for one category.

    Attributes:
        category: Category tag the rule selects
        keywords: Lower-case substrings; any one occurring in the query matches.
            Order is preserved and duplicates are dropped.
        enabled: Disabled rules never match and never act as fallback.
    """

    category: str
    keywords: tuple[str, ...]
    enabled: bool = field(default=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _normalize_keywords(self.keywords))

    def matched_keywords(self, query_lower: str) -> list[str]:
        """Return the keywords found in an already lower-cased query."""
        return [keyword for keyword in self.keywords if keyword in query_lower]

    def matches(self, query_lower: str) -> bool:
        return self.enabled and any(keyword in query_lower for keyword in self.keywords)


@dataclass(frozen=True)
class RankingBoost:
    """Score bonus for candidates of ``category`` when ``keyword`` is in the query."""

    keyword: str
    category: str
    weight: int = 10

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword", self.keyword.lower())

    def applies(self, query_lower: str, category: str) -> bool:
        return bool(self.keyword) and category == self.category and self.keyword in query_lower
