"""Relevance classifier: which tool categories is a query about?

Matching is a plain substring search of each keyword in the lower-cased query.
No stemming or tokenizing, so "ferry" does not match "ferries" unless both are
listed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from toolscope.selection.CategoryRule import CategoryRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Categories chosen for a query.

    Attributes:
        categories: Matched categories, or the fallback set when nothing matched
        used_fallback: True when no keyword matched and the fallback was used
    """

    categories: frozenset[str]
    used_fallback: bool = False

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.categories))

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def __len__(self) -> int:
        return len(self.categories)


def normalize_query(query_text: object) -> str:
    """Lower-case the query. Anything that is not a string counts as empty."""
    if not isinstance(query_text, str):
        return ""
    return query_text.lower()


def fallback_categories(
    rules: Iterable[CategoryRule], fallback: Iterable[str]
) -> frozenset[str]:
    """Return the configured fallback categories that have an enabled rule."""
    wanted = frozenset(fallback)
    return frozenset(rule.category for rule in rules if rule.enabled and rule.category in wanted)


def classify(
    query_text: object,
    rules: Iterable[CategoryRule],
    fallback: Iterable[str] = (),
) -> Classification:
    """Map a query to the categories whose keywords it mentions.

    Every enabled rule is checked; several categories may match at once and no
    rule takes precedence. When nothing matches, the fallback categories (those
    among ``fallback`` with an enabled rule) are returned instead.

    Args:
        query_text: The latest user message. Non-strings are treated as ""
        rules: Category keyword rules
        fallback: Categories to use when no rule matches

    Returns:
        The matched (or fallback) categories
    """
    rules = tuple(rules)
    query_lower = normalize_query(query_text)

    matched: set[str] = set()
    for rule in rules:
        if rule.matches(query_lower):
            matched.add(rule.category)
            logger.debug(
                "Query matches %s: %s", rule.category, rule.matched_keywords(query_lower)
            )

    if matched:
        return Classification(frozenset(matched))

    general = fallback_categories(rules, fallback)
    logger.debug("No keyword matched; falling back to %s", sorted(general))
    return Classification(general, used_fallback=True)
