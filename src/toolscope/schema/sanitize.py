"""Schema sanitizer for providers with a strict JSON-schema dialect.

Strict mode walks the whole schema tree and, at every schema node:

- drops annotation keys the provider rejects ($schema, $id, title, ...),
  keeping ``description``;
- sets ``additionalProperties: false`` when the node has a non-empty
  ``required`` list.

Property names are never touched: ``properties`` maps names to schemas and
only the schemas are cleaned. The input is never mutated and sanitizing twice
gives the same result as sanitizing once.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from toolscope.schema.ProviderPolicy import ProviderPolicy, policy_for
from toolscope.util.json_utils import SchemaNode

logger = logging.getLogger(__name__)

MINIMAL_OBJECT_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}

# Keywords whose value is a single subschema.
_SCHEMA_KEYS = (
    "additionalProperties",
    "items",
    "not",
    "if",
    "then",
    "else",
    "contains",
    "propertyNames",
    "unevaluatedItems",
    "unevaluatedProperties",
)
# Keywords whose value is a list of subschemas.
_SCHEMA_LIST_KEYS = ("anyOf", "allOf", "oneOf", "prefixItems")
# Keywords whose value maps names to subschemas.
_SCHEMA_MAP_KEYS = ("properties", "patternProperties", "$defs", "definitions", "dependentSchemas")


def requires_strict_schema(
    provider_id: str, policies: Mapping[str, ProviderPolicy] | None = None
) -> bool:
    return policy_for(provider_id, policies).strict


def sanitize(
    schema: Any,
    provider_id: str,
    policies: Mapping[str, ProviderPolicy] | None = None,
    fallback: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """Clean a tool input schema for ``provider_id``.

    Args:
        schema: The tool's declared input schema
        provider_id: Target provider
        policies: Provider policy table (defaults to DEFAULT_POLICIES)
        fallback: Schema used, in strict mode, when ``schema`` is not a dict
            at all. It is cleaned like any other schema. Defaults to an empty
            object schema.

    Returns:
        The schema unchanged for passthrough providers, otherwise a cleaned copy
    """
    policy = policy_for(provider_id, policies)
    if not policy.strict:
        return schema
    if not isinstance(schema, Mapping):
        logger.debug(
            "Schema for %s is %s, not an object; using fallback",
            provider_id,
            type(schema).__name__,
        )
        return _clean_node(
            fallback if fallback is not None else MINIMAL_OBJECT_SCHEMA, policy.dropped_keys
        )
    return _clean_node(schema, policy.dropped_keys)


def _clean_node(node: Any, dropped: frozenset[str]) -> Any:
    # Boolean schemas and malformed nodes pass through as copies.
    if not isinstance(node, Mapping):
        return copy.deepcopy(node)

    cleaned: dict[str, Any] = {}
    for key, value in node.items():
        if key in dropped:
            continue
        if key in _SCHEMA_MAP_KEYS and isinstance(value, Mapping):
            cleaned[key] = {name: _clean_node(sub, dropped) for name, sub in value.items()}
        elif key in _SCHEMA_LIST_KEYS and isinstance(value, list):
            cleaned[key] = [_clean_node(sub, dropped) for sub in value]
        elif key == "items" and isinstance(value, list):
            # Tuple-form items from older drafts.
            cleaned[key] = [_clean_node(sub, dropped) for sub in value]
        elif key in _SCHEMA_KEYS:
            cleaned[key] = _clean_node(value, dropped)
        else:
            cleaned[key] = copy.deepcopy(value)

    required = cleaned.get("required")
    if isinstance(required, list) and required:
        cleaned["additionalProperties"] = False
    return cleaned
