"""ProviderPolicy - how a model provider wants tool input schemas shaped.

Adding a provider with a strict schema dialect is a new entry in
DEFAULT_POLICIES (or in the mapping a caller passes to sanitize), not a new
code path.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

STRICT_DROPPED_KEYS: frozenset[str] = frozenset(
    {"$schema", "$id", "$comment", "title", "examples", "default"}
)
"""Annotation keys rejected by strict structured-output dialects.

``description`` is always kept.
"""


@dataclass(frozen=True)
class ProviderPolicy:
    """Schema policy for one provider.

    Attributes:
        provider_id: Provider identifier, e.g. "cerebras"
        strict: Whether schemas must be cleaned before sending
        dropped_keys: Keys removed from every schema node when strict
    """

    provider_id: str
    strict: bool = False
    dropped_keys: frozenset[str] = field(default=STRICT_DROPPED_KEYS)


DEFAULT_POLICIES: Mapping[str, ProviderPolicy] = {
    "cerebras": ProviderPolicy("cerebras", strict=True),
    "openai": ProviderPolicy("openai"),
    "anthropic": ProviderPolicy("anthropic"),
}


def policy_for(
    provider_id: str, policies: Mapping[str, ProviderPolicy] | None = None
) -> ProviderPolicy:
    """Look up a provider's policy. Unknown providers get a passthrough policy."""
    table = DEFAULT_POLICIES if policies is None else policies
    return table.get(provider_id) or ProviderPolicy(provider_id)
