from __future__ import annotations

from dataclasses import dataclass, field

from toolscope import environment
from toolscope.selection.CategoryRule import CategoryRule, RankingBoost
from toolscope.selection.default_rules import (
    DEFAULT_BOOSTS,
    DEFAULT_FALLBACK_CATEGORIES,
    DEFAULT_RULES,
)

DEFAULT_MAX_TOOLS = 8


@dataclass(frozen=True)
class SelectorConfig:
    """Configuration injected into a ToolSelector.

    Attributes:
        max_tools: Default tool budget per turn
        rules: Category keyword rules used by the classifier
        boosts: Strong-keyword bonuses used by the ranker
        fallback_categories: Categories used when no rule matches a query
    """

    max_tools: int = DEFAULT_MAX_TOOLS
    rules: tuple[CategoryRule, ...] = field(default=DEFAULT_RULES)
    boosts: tuple[RankingBoost, ...] = field(default=DEFAULT_BOOSTS)
    fallback_categories: frozenset[str] = field(default=DEFAULT_FALLBACK_CATEGORIES)

    @classmethod
    def from_env(cls) -> SelectorConfig:
        """Default tables with the budget and fallback taken from the environment."""
        return cls(
            max_tools=environment.env_int(environment.MAX_TOOLS_VAR, DEFAULT_MAX_TOOLS),
            fallback_categories=environment.env_list(
                environment.FALLBACK_CATEGORIES_VAR, DEFAULT_FALLBACK_CATEGORIES
            ),
        )

    def unmatched_rule_categories(self, tool_categories: frozenset[str]) -> frozenset[str]:
        """Rule categories no tool belongs to. Their matches select nothing."""
        return frozenset(rule.category for rule in self.rules) - tool_categories
