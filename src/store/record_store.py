"""In-memory record store with upsert-by-id merge semantics.

This module holds the person records and notifies subscribers with a
``RecordsChanged`` event once an upsert has fully applied.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from core.constants import DEFAULT_SORT_FIELD, RECORD_ID_FIELD
from core.errors import MalformedItemError, MalformedRecordError
from core.logging_config import get_logger
from core.types import Record, UpsertResult
from store.events import EventEmitter, EventHandler, EventT, RecordsChanged, Unsubscribe
from store.record_payload import id_sort_key, record_from_payload

_LOGGER = get_logger(__name__)


class RecordStore:
    """Keyed record collection ordered by a configured sort field."""

    def __init__(self, sort_field: str = DEFAULT_SORT_FIELD) -> None:
        """Create an empty store.

        Args:
            sort_field: Record field used as the ascending comparator.
        """
        self._sort_field = sort_field
        self._records: dict[str, dict[str, str]] = {}
        self._events = EventEmitter()

    @property
    def sort_field(self) -> str:
        """Return the comparator field name."""
        return self._sort_field

    def subscribe(self, event_type: type[EventT], handler: EventHandler[EventT]) -> Unsubscribe:
        """Subscribe to store events; see ``EventEmitter.subscribe``."""
        return self._events.subscribe(event_type, handler)

    def upsert(
        self,
        records: Iterable[Mapping[str, object]],
        remove_missing: bool = True,
    ) -> UpsertResult:
        """Merge a batch of records by id.

        New ids are added, existing ids have their fields overwritten by the
        incoming values (a ``None`` value unsets the field), and ids absent from the batch are removed unless
        ``remove_missing`` is false. Records without an id are skipped and
        reported on the result.

        Args:
            records: Raw record mappings.
            remove_missing: Whether ids absent from the batch are dropped.

        Returns:
            Summary of the applied changes and skipped items.
        """
        errors: list[MalformedItemError] = []
        incoming: dict[str, dict[str, str | None]] = {}
        for position, payload in enumerate(records):
            try:
                record = record_from_payload(payload, position)
            except MalformedRecordError as error:
                errors.append(error)
                continue
            pending = incoming.setdefault(str(record[RECORD_ID_FIELD]), {})
            pending.update(record)

        added: list[str] = []
        updated: list[str] = []
        for record_id, record in incoming.items():
            existing = self._records.get(record_id)
            if existing is None:
                self._records[record_id] = _present_fields(record)
                added.append(record_id)
                continue
            merged = _apply_fields(existing, record)
            if merged != existing:
                self._records[record_id] = merged
                updated.append(record_id)

        removed: list[str] = []
        if remove_missing:
            removed = [record_id for record_id in self._records if record_id not in incoming]
            for record_id in removed:
                del self._records[record_id]

        result = UpsertResult(
            added=tuple(added),
            updated=tuple(updated),
            removed=tuple(removed),
            errors=tuple(errors),
        )
        _log_upsert(result)
        if result.changed:
            self._events.emit(
                RecordsChanged(added=result.added, updated=result.updated, removed=result.removed)
            )
        return result

    def all(self) -> list[Record]:
        """Return every record sorted by the comparator field, then id."""
        return sorted(
            (dict(record) for record in self._records.values()),
            key=self._sort_key,
        )

    def get(self, record_id: object) -> Record | None:
        """Return a copy of one record, or None if the id is unknown."""
        record = self._records.get(str(record_id))
        return dict(record) if record is not None else None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return str(record_id) in self._records

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all())

    def _sort_key(self, record: Record) -> tuple[bool, str, tuple[int, int, str]]:
        # Records lacking the sort field order before all others.
        value = record.get(self._sort_field)
        return (value is not None, value or "", id_sort_key(record[RECORD_ID_FIELD]))


def _present_fields(record: Mapping[str, str | None]) -> dict[str, str]:
    """Drop unset markers from a record being inserted."""
    return {key: value for key, value in record.items() if value is not None}


def _apply_fields(
    existing: Mapping[str, str],
    incoming: Mapping[str, str | None],
) -> dict[str, str]:
    """Overlay incoming fields on a stored record; ``None`` removes a field."""
    merged = dict(existing)
    for key, value in incoming.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged


def _log_upsert(result: UpsertResult) -> None:
    """Emit structured log lines for one applied record batch."""
    if result.skipped:
        _LOGGER.warning(
            "upsert_skipped_items",
            store="records",
            skipped=result.skipped,
            positions=[error.position for error in result.errors],
        )
    _LOGGER.debug(
        "records_upserted",
        added=len(result.added),
        updated=len(result.updated),
        removed=len(result.removed),
    )
