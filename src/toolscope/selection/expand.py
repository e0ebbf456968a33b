from __future__ import annotations

from collections.abc import Iterable, Sequence

from toolscope.tool.ToolDescriptor import ToolDescriptor


def expand(
    categories: Iterable[str], pool: Sequence[ToolDescriptor]
) -> list[ToolDescriptor]:
    """Return the pool's enabled tools whose category is in ``categories``.

    Pool order is preserved. An empty category set gives an empty list.
    """
    wanted = frozenset(categories)
    if not wanted:
        return []
    return [tool for tool in pool if tool.enabled and tool.category in wanted]
