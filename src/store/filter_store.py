"""In-memory filter rule store with toggle support.

This module holds the filter rules shown next to the people list.
It emits ``FilterRuleAdded`` for first-time insertions, ``FilterRulesChanged``
for edits and removals, and ``FilterToggled`` whenever a rule flips.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator

from core.errors import MalformedFilterRuleError, MalformedItemError
from core.logging_config import get_logger
from core.types import FilterRule, UpsertResult
from store.events import (
    EventEmitter,
    EventHandler,
    EventT,
    FilterRuleAdded,
    FilterRulesChanged,
    FilterToggled,
    Unsubscribe,
)
from store.record_payload import RulePayload, id_sort_key, rule_from_payload

_LOGGER = get_logger(__name__)


class FilterStore:
    """Keyed filter rule collection ordered by rule order."""

    def __init__(self) -> None:
        self._rules: dict[str, FilterRule] = {}
        self._events = EventEmitter()

    def subscribe(self, event_type: type[EventT], handler: EventHandler[EventT]) -> Unsubscribe:
        """Subscribe to store events; see ``EventEmitter.subscribe``."""
        return self._events.subscribe(event_type, handler)

    def upsert(self, rules: Iterable[object], remove_missing: bool = True) -> UpsertResult:
        """Merge a batch of filter rules by id.

        New rules default to disabled and, without an explicit order, are
        placed after every stored rule. Updates keep attributes the incoming
        rule omits.

        Args:
            rules: Raw filter rule mappings.
            remove_missing: Whether ids absent from the batch are dropped.

        Returns:
            Summary of the applied changes and skipped items.
        """
        errors: list[MalformedItemError] = []
        seen_ids: set[str] = set()
        added: list[str] = []
        updated: list[str] = []
        for position, raw_rule in enumerate(rules):
            try:
                payload = rule_from_payload(raw_rule, position)
            except MalformedFilterRuleError as error:
                errors.append(error)
                # A malformed update for a known id leaves the stored rule in place.
                if error.item_id is not None:
                    seen_ids.add(error.item_id)
                continue
            seen_ids.add(payload.rule_id)
            existing = self._rules.get(payload.rule_id)
            if existing is None:
                self._rules[payload.rule_id] = self._new_rule(payload)
                added.append(payload.rule_id)
                continue
            merged = _merge_rule(existing, payload)
            if merged != existing:
                self._rules[payload.rule_id] = merged
                if payload.rule_id not in added and payload.rule_id not in updated:
                    updated.append(payload.rule_id)

        removed: list[str] = []
        if remove_missing:
            removed = [rule_id for rule_id in self._rules if rule_id not in seen_ids]
            for rule_id in removed:
                del self._rules[rule_id]

        result = UpsertResult(
            added=tuple(added),
            updated=tuple(updated),
            removed=tuple(removed),
            errors=tuple(errors),
        )
        _log_upsert(result)
        if result.added:
            self._events.emit(FilterRuleAdded(rule_ids=result.added))
        elif result.changed:
            self._events.emit(FilterRulesChanged(updated=result.updated, removed=result.removed))
        return result

    def toggle(self, rule_id: object) -> bool | None:
        """Flip the enabled flag of one rule.

        An unknown id is a no-op: the rule may have been removed while the
        user was interacting with it.

        Args:
            rule_id: Identifier of the rule to flip.

        Returns:
            The new enabled flag, or None when the id is unknown.
        """
        key = str(rule_id)
        rule = self._rules.get(key)
        if rule is None:
            _LOGGER.debug("filter_toggle_unknown_id", rule_id=key)
            return None
        toggled = replace(rule, enabled=not rule.enabled)
        self._rules[key] = toggled
        _LOGGER.debug("filter_toggled", rule_id=key, enabled=toggled.enabled)
        self._events.emit(FilterToggled(rule_id=key, enabled=toggled.enabled))
        return toggled.enabled

    def all(self) -> list[FilterRule]:
        """Return every rule sorted by order, then id."""
        return sorted(
            self._rules.values(),
            key=lambda rule: (rule.order, id_sort_key(rule.rule_id)),
        )

    def get(self, rule_id: object) -> FilterRule | None:
        """Return one rule, or None if the id is unknown."""
        return self._rules.get(str(rule_id))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return str(rule_id) in self._rules

    def __iter__(self) -> Iterator[FilterRule]:
        return iter(self.all())

    def _new_rule(self, payload: RulePayload) -> FilterRule:
        return FilterRule(
            rule_id=payload.rule_id,
            label=payload.label if payload.label is not None else payload.rule_id,
            criteria=dict(payload.criteria or {}),
            enabled=bool(payload.enabled),
            order=payload.order if payload.order is not None else self._next_order(),
        )

    def _next_order(self) -> int:
        if not self._rules:
            return 1
        return max(rule.order for rule in self._rules.values()) + 1


def _merge_rule(existing: FilterRule, payload: RulePayload) -> FilterRule:
    """Overlay the attributes present in a payload onto a stored rule."""
    return FilterRule(
        rule_id=existing.rule_id,
        label=payload.label if payload.label is not None else existing.label,
        criteria=dict(payload.criteria) if payload.criteria is not None else existing.criteria,
        enabled=payload.enabled if payload.enabled is not None else existing.enabled,
        order=payload.order if payload.order is not None else existing.order,
    )


def _log_upsert(result: UpsertResult) -> None:
    """Emit structured log lines for one applied filter batch."""
    if result.skipped:
        _LOGGER.warning(
            "upsert_skipped_items",
            store="filters",
            skipped=result.skipped,
            positions=[error.position for error in result.errors],
        )
    _LOGGER.debug(
        "filters_upserted",
        added=len(result.added),
        updated=len(result.updated),
        removed=len(result.removed),
    )
