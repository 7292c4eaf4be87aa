"""Record matching helpers.

This module applies a criteria map to records with case-insensitive
substring matching. It keeps the caller's ordering intact.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.types import Criteria, Record


def filter_records(records: Iterable[Record], criteria: Criteria) -> list[Record]:
    """Filter records using substring criteria.

    Args:
        records: Input records, already in display order.
        criteria: Field to expected substring mapping.

    Returns:
        Matching records in input order; every record when criteria is empty.
    """
    if not criteria:
        return list(records)
    folded_criteria = {field: expected.casefold() for field, expected in criteria.items()}
    return [record for record in records if _matches_folded(record, folded_criteria)]


def record_matches(record: Record, criteria: Criteria) -> bool:
    """Return whether one record satisfies every criterion.

    A record lacking a referenced field never matches that criterion.

    Args:
        record: Record to test.
        criteria: Field to expected substring mapping.

    Returns:
        True when all criteria hold.
    """
    folded_criteria = {field: expected.casefold() for field, expected in criteria.items()}
    return _matches_folded(record, folded_criteria)


def _matches_folded(record: Record, folded_criteria: Mapping[str, str]) -> bool:
    for field, expected in folded_criteria.items():
        value = record.get(field)
        if value is None:
            return False
        if expected not in value.casefold():
            return False
    return True
