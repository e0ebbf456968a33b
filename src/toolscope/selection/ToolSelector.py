"""ToolSelector - pick the tools to expose to the model for one chat turn.

The selector is stateless: each call works only on the request it is given.
Take a Catalog snapshot first and pass it as the candidate pool.

Example:
    selector = ToolSelector(SelectorConfig.from_env())
    result = selector.select(SelectionRequest(text, catalog.snapshot()))
    for tool_id, tool in result.items():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from toolscope.selection.classify import classify
from toolscope.selection.expand import expand
from toolscope.selection.rank import rank
from toolscope.selection.SelectorConfig import SelectorConfig
from toolscope.tool.ToolDescriptor import ToolDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionRequest:
    """Inputs for one selection call.

    Attributes:
        query_text: Latest user message. Non-strings are treated as ""
        candidate_pool: Tools available this turn, usually Catalog.snapshot()
        max_tools: Tool budget. None uses the selector's configured budget
    """

    query_text: object
    candidate_pool: Sequence[ToolDescriptor] = field(default=())
    max_tools: int | None = None


class SelectionResult(Mapping[str, ToolDescriptor]):
    """Ordered, read-only mapping of tool id to descriptor.

    Attributes:
        categories: Categories the query was classified into
        used_fallback: True when no keyword matched and fallback categories were used
    """

    _tools: dict[str, ToolDescriptor]
    categories: frozenset[str]
    used_fallback: bool

    def __init__(
        self,
        tools: Sequence[ToolDescriptor] = (),
        categories: frozenset[str] = frozenset(),
        used_fallback: bool = False,
    ):
        self._tools = {tool.id: tool for tool in tools}
        self.categories = categories
        self.used_fallback = used_fallback

    def __getitem__(self, tool_id: str) -> ToolDescriptor:
        return self._tools[tool_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionResult):
            return NotImplemented
        return list(self._tools.items()) == list(other._tools.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SelectionResult({list(self._tools)!r}, used_fallback={self.used_fallback})"

    def tools(self) -> list[ToolDescriptor]:
        return list(self._tools.values())


class ToolSelector:
    config: SelectorConfig

    def __init__(self, config: SelectorConfig | None = None):
        self.config = config if config is not None else SelectorConfig()

    def select(self, request: SelectionRequest) -> SelectionResult:
        """Choose at most ``max_tools`` tools relevant to the query.

        classify -> expand -> rank. Never raises for any query text; an empty
        pool, or a pool without tools in the chosen categories, gives an empty
        result.
        """
        max_tools = self.config.max_tools if request.max_tools is None else request.max_tools
        classification = classify(
            request.query_text, self.config.rules, self.config.fallback_categories
        )
        candidates = expand(classification.categories, request.candidate_pool)
        selected = rank(candidates, request.query_text, max_tools, self.config.boosts)

        logger.debug(
            "Selected %d of %d candidate tools (%d in pool) for categories %s",
            len(selected),
            len(candidates),
            len(request.candidate_pool),
            sorted(classification.categories),
        )
        return SelectionResult(
            selected,
            categories=classification.categories,
            used_fallback=classification.used_fallback,
        )


def select(request: SelectionRequest, config: SelectorConfig | None = None) -> SelectionResult:
    """Run one selection with ``config`` (the default tables when omitted)."""
    return ToolSelector(config).select(request)
