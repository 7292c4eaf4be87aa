"""Shared typed models.

This module defines the record and filter rule models used by the
stores, the filtering helpers, and the view coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from core.errors import MalformedItemError

# A record is a plain mapping with defined-or-absent semantics per field.
Record = Mapping[str, str]
Criteria = Mapping[str, str]


@dataclass(frozen=True)
class FilterRule:
    """Named, togglable set of field-substring criteria.

    Attributes:
        rule_id: Unique rule identifier.
        label: Human-readable label shown next to the toggle.
        criteria: Field name to expected substring mapping.
        enabled: Whether the rule currently participates in filtering.
        order: Display order and criteria merge precedence.
    """

    rule_id: str
    label: str
    criteria: Mapping[str, str] = field(default_factory=dict)
    enabled: bool = False
    order: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the rule in its bootstrap mapping shape."""
        return {
            "id": self.rule_id,
            "label": self.label,
            "criteria": dict(self.criteria),
            "enabled": self.enabled,
            "order": self.order,
        }


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of one upsert batch.

    Attributes:
        added: Ids inserted for the first time.
        updated: Ids whose stored attributes changed.
        removed: Ids dropped because the batch no longer listed them.
        errors: Malformed items skipped from the batch.
    """

    added: tuple[str, ...] = ()
    updated: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    errors: tuple[MalformedItemError, ...] = ()

    @property
    def skipped(self) -> int:
        """Return the number of malformed items skipped."""
        return len(self.errors)

    @property
    def changed(self) -> bool:
        """Return whether the batch altered membership or contents."""
        return bool(self.added or self.updated or self.removed)


@dataclass(frozen=True)
class BootstrapData:
    """Initial or incremental data delivered to the stores.

    Attributes:
        persons: Raw record mappings.
        filters: Raw filter rule mappings.
    """

    persons: tuple[Mapping[str, Any], ...] = ()
    filters: tuple[Mapping[str, Any], ...] = ()
