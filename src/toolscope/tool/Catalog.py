"""Catalog - the registry of every tool the chat application can offer.

The Catalog is an explicit, constructed value: build one per application (or
per test) and pass it around. Descriptors are immutable; toggling a tool swaps
in a new descriptor, so a snapshot taken for a selection call never changes
under it.

Example:
    catalog = Catalog.from_json_file("tools.json")
    catalog.set_integration_enabled("turkish-airlines", False)
    result = selector.select(SelectionRequest(query, catalog.snapshot()))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from deepdiff import DeepDiff, Delta

from toolscope.tool.ToolDescriptor import ToolDescriptor
from toolscope.util.json_utils import json

logger = logging.getLogger(__name__)


class Catalog:
    _tools: dict[str, ToolDescriptor]
    _defaults: dict[str, bool]
    last_updated: datetime

    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        self._tools = {}
        for descriptor in descriptors:
            if descriptor.id in self._tools:
                raise ValueError(f"Duplicate tool id: {descriptor.id!r}")
            self._tools[descriptor.id] = descriptor
        self._defaults = self._enablement()
        self.last_updated = datetime.now(UTC)

    @classmethod
    def from_dicts(cls, records: Iterable[Mapping[str, Any]]) -> Catalog:
        """Build a catalog from static configuration records.

        See ToolDescriptor.from_dict for the accepted record shape.
        """
        return cls(ToolDescriptor.from_dict(record) for record in records)

    @classmethod
    def from_json_file(cls, path: str | Path) -> Catalog:
        """Load a catalog from a JSON file.

        The file holds either a list of tool records or an object with a
        ``tools`` list.

        Raises:
            TypeError: If the file does not contain a list of tool records
        """
        data = json.load(path)
        if isinstance(data, dict):
            data = data.get("tools")
        if not isinstance(data, list):
            raise TypeError(f"{path}: expected a list of tool records")
        return cls.from_dicts(data)  # type: ignore[arg-type]

    # --- lookup ---

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(list(self._tools.values()))

    def get(self, tool_id: str) -> ToolDescriptor:
        """Return the descriptor for ``tool_id``.

        Raises:
            KeyError: If no tool has that id
        """
        try:
            return self._tools[tool_id]
        except KeyError:
            raise KeyError(f"Unknown tool id: {tool_id!r}") from None

    def ids(self) -> list[str]:
        return list(self._tools)

    def categories(self) -> frozenset[str]:
        return frozenset(t.category for t in self._tools.values())

    def by_category(self, category: str, enabled_only: bool = False) -> list[ToolDescriptor]:
        return [
            t
            for t in self._tools.values()
            if t.category == category and (t.enabled or not enabled_only)
        ]

    def snapshot(self) -> tuple[ToolDescriptor, ...]:
        """Return the enabled tools, in catalog order.

        This is the candidate pool for one selection call. Later enablement
        changes do not affect a snapshot already taken.
        """
        return tuple(t for t in self._tools.values() if t.enabled)

    # --- enablement settings ---

    def enabled_ids(self) -> list[str]:
        return [t.id for t in self._tools.values() if t.enabled]

    def disabled_ids(self) -> list[str]:
        return [t.id for t in self._tools.values() if not t.enabled]

    def set_enabled(self, tool_id: str, enabled: bool) -> None:
        """Enable or disable a single tool.

        Raises:
            KeyError: If no tool has that id
        """
        current = self.get(tool_id)
        if current.enabled == enabled:
            return
        self._tools[tool_id] = replace(current, enabled=enabled)
        self.last_updated = datetime.now(UTC)
        logger.debug("Tool %s %s", tool_id, "enabled" if enabled else "disabled")

    def toggle(self, tool_id: str) -> bool:
        """Flip a tool's enabled flag and return the new value."""
        new_value = not self.get(tool_id).enabled
        self.set_enabled(tool_id, new_value)
        return new_value

    def set_integration_enabled(self, integration: str, enabled: bool) -> list[str]:
        """Enable or disable every tool owned by an integration.

        Returns:
            Ids of the tools whose flag changed
        """
        settings = {
            t.id: enabled for t in self._tools.values() if t.integration == integration
        }
        if not settings:
            logger.warning("No tools belong to integration %r", integration)
        return self.apply_settings(settings)

    def apply_settings(self, settings: Mapping[str, bool]) -> list[str]:
        """Apply a batch of enablement flags from the settings collaborator.

        Unknown ids are ignored and logged.

        Args:
            settings: Mapping of tool id to desired enabled flag

        Returns:
            Ids of the tools whose flag changed, in catalog order
        """
        before = self._enablement()
        after = dict(before)
        for tool_id, enabled in settings.items():
            if tool_id not in self._tools:
                logger.warning("Ignoring setting for unknown tool %r", tool_id)
                continue
            after[tool_id] = bool(enabled)
        return self._apply_enablement(before, after)

    def reset_to_defaults(self) -> list[str]:
        """Restore every tool's enabled flag to its construction-time value."""
        return self._apply_enablement(self._enablement(), dict(self._defaults))

    def _enablement(self) -> dict[str, bool]:
        return {t.id: t.enabled for t in self._tools.values()}

    def _apply_enablement(self, before: dict[str, bool], after: dict[str, bool]) -> list[str]:
        diff = DeepDiff(before, after)
        if not diff:
            return []
        changed = {row.path[0] for row in Delta(diff).to_flat_rows()}
        for tool_id in changed:
            self._tools[tool_id] = replace(self._tools[tool_id], enabled=after[tool_id])
        self.last_updated = datetime.now(UTC)
        changed_ids = [tool_id for tool_id in self._tools if tool_id in changed]
        logger.debug("Enablement changed for %s", changed_ids)
        return changed_ids
