"""Budgeted ranker: cut an oversized candidate list down to the tool budget."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from toolscope.selection.CategoryRule import RankingBoost
from toolscope.selection.classify import normalize_query
from toolscope.tool.ToolDescriptor import ToolDescriptor

DESCRIPTION_TOKEN_SCORE = 2


def score(
    candidate: ToolDescriptor,
    query_text: object,
    boosts: Iterable[RankingBoost] = (),
) -> int:
    """Score one candidate against the query.

    Each applicable boost adds its weight. Each whitespace-delimited query
    token found in the candidate's description adds 2 (repeated tokens count
    every time).
    """
    query_lower = normalize_query(query_text)
    return _score(candidate, query_lower, query_lower.split(), tuple(boosts))


def _score(
    candidate: ToolDescriptor,
    query_lower: str,
    tokens: list[str],
    boosts: tuple[RankingBoost, ...],
) -> int:
    total = sum(b.weight for b in boosts if b.applies(query_lower, candidate.category))
    description = candidate.description.lower()
    total += DESCRIPTION_TOKEN_SCORE * sum(1 for token in tokens if token in description)
    return total


def rank(
    candidates: Sequence[ToolDescriptor],
    query_text: object,
    max_tools: int,
    boosts: Iterable[RankingBoost] = (),
) -> list[ToolDescriptor]:
    """Keep at most ``max_tools`` candidates, best first.

    Candidates that already fit the budget come back unchanged, in their
    original order. Otherwise they are sorted by descending score; ties keep
    their original relative order.

    Args:
        candidates: Tools to choose from
        query_text: The latest user message
        max_tools: Tool budget. Zero or negative gives an empty list
        boosts: Category bonuses for strong keywords

    Returns:
        The kept tools
    """
    if max_tools <= 0:
        return []
    if len(candidates) <= max_tools:
        return list(candidates)

    query_lower = normalize_query(query_text)
    tokens = query_lower.split()
    boosts = tuple(boosts)
    scored = [(_score(c, query_lower, tokens, boosts), c) for c in candidates]
    # sorted() is stable, so equal scores keep candidate order.
    scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored[:max_tools]]
