"""Shared normalization for raw record and filter rule payloads.

This module turns loosely typed bootstrap mappings into the string-keyed,
string-valued shapes the stores hold. Items that cannot be identified are
reported as malformed errors for the caller to collect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from core.constants import (
    RECORD_ID_FIELD,
    RULE_CRITERIA_FIELD,
    RULE_ENABLED_FIELD,
    RULE_ID_FIELD,
    RULE_LABEL_FIELD,
    RULE_ORDER_FIELD,
)
from core.errors import MalformedFilterRuleError, MalformedRecordError

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True)
class RulePayload:
    """Normalized filter rule fields; ``None`` marks an omitted attribute."""

    rule_id: str
    label: str | None
    criteria: dict[str, str] | None
    enabled: bool | None
    order: int | None


def normalize_item_id(value: object) -> str | None:
    """Normalize an identity value to a non-empty string.

    Args:
        value: Raw identity value.

    Returns:
        String id, or None when the value is missing or blank.
    """
    if value is None:
        return None
    item_id = str(value).strip()
    return item_id or None


def record_from_payload(payload: object, position: int) -> dict[str, str | None]:
    """Normalize one raw record mapping.

    Args:
        payload: Raw record, expected to be a mapping.
        position: Zero-based position inside the batch.

    Returns:
        Record with string id and string field values. A ``None`` value is
        kept as a marker that the field should be unset on update.

    Raises:
        MalformedRecordError: If the record is not a mapping or lacks an id.
    """
    if not isinstance(payload, Mapping):
        raise MalformedRecordError(
            f"Record at position {position} is not a mapping.", position, payload
        )
    record_id = normalize_item_id(payload.get(RECORD_ID_FIELD))
    if record_id is None:
        raise MalformedRecordError(
            f"Record at position {position} has no '{RECORD_ID_FIELD}' field.", position, payload
        )
    record: dict[str, str | None] = {
        str(key): str(value) if value is not None else None
        for key, value in payload.items()
        if key != RECORD_ID_FIELD
    }
    record[RECORD_ID_FIELD] = record_id
    return record


def rule_from_payload(payload: object, position: int) -> RulePayload:
    """Normalize one raw filter rule mapping.

    Args:
        payload: Raw rule, expected to be a mapping.
        position: Zero-based position inside the batch.

    Returns:
        Normalized rule payload.

    Raises:
        MalformedFilterRuleError: If the rule lacks an id or has unusable fields.
    """
    if not isinstance(payload, Mapping):
        raise MalformedFilterRuleError(
            f"Filter rule at position {position} is not a mapping.", position, payload
        )
    rule_id = normalize_item_id(payload.get(RULE_ID_FIELD))
    if rule_id is None:
        raise MalformedFilterRuleError(
            f"Filter rule at position {position} has no '{RULE_ID_FIELD}' field.",
            position,
            payload,
        )
    label = payload.get(RULE_LABEL_FIELD)
    return RulePayload(
        rule_id=rule_id,
        label=str(label) if label is not None else None,
        criteria=_parse_criteria(payload.get(RULE_CRITERIA_FIELD), rule_id, position, payload),
        enabled=_parse_enabled(payload.get(RULE_ENABLED_FIELD)),
        order=_parse_order(payload.get(RULE_ORDER_FIELD), rule_id, position, payload),
    )


def _parse_criteria(
    value: object,
    rule_id: str,
    position: int,
    payload: object,
) -> dict[str, str] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise MalformedFilterRuleError(
            f"Filter rule '{rule_id}' criteria must be a mapping of field to substring.",
            position,
            payload,
            item_id=rule_id,
        )
    return {str(key): str(expected) for key, expected in value.items() if expected is not None}


def _parse_enabled(value: object) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _parse_order(value: object, rule_id: str, position: int, payload: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as error:
        raise MalformedFilterRuleError(
            f"Filter rule '{rule_id}' order must be an integer, got '{value}'.",
            position,
            payload,
            item_id=rule_id,
        ) from error


def id_sort_key(item_id: str) -> tuple[int, int, str]:
    """Order digit-only ids numerically, ahead of all other ids."""
    if item_id.isdigit():
        return (0, int(item_id), item_id)
    return (1, 0, item_id)
