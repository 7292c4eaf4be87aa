"""Merge enabled filter rules into one criteria map."""

from __future__ import annotations

from typing import Iterable

from core.types import FilterRule
from store.record_payload import id_sort_key


def aggregate_criteria(rules: Iterable[FilterRule]) -> dict[str, str]:
    """Merge the criteria of every enabled rule.

    Rules are visited in ascending ``(order, rule_id)`` whatever the input
    order, so on a field collision the enabled rule with the greater order
    wins.

    Args:
        rules: Current filter rules.

    Returns:
        Field to expected substring mapping; empty when no rule is enabled.
    """
    criteria: dict[str, str] = {}
    for rule in sorted(rules, key=lambda item: (item.order, id_sort_key(item.rule_id))):
        if rule.enabled:
            criteria.update(rule.criteria)
    return criteria
