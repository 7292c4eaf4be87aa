"""Event-driven recomputation of the visible record set.

This module subscribes to both stores and re-derives the aggregate
criteria and the visible set after every relevant mutation.
"""

from __future__ import annotations

from typing import Callable, Sequence

from core.logging_config import get_logger
from core.types import FilterRule, Record
from filtering.criteria_aggregation import aggregate_criteria
from filtering.filter_engine import filter_records
from store.events import (
    FilterRuleAdded,
    FilterRulesChanged,
    FilterToggled,
    RecordsChanged,
    Unsubscribe,
)
from store.filter_store import FilterStore
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)

RenderRecords = Callable[[Sequence[Record]], None]
RenderFilters = Callable[[Sequence[FilterRule]], None]


class ViewCoordinator:
    """Keep rendered records and filters consistent with store state."""

    def __init__(
        self,
        records: RecordStore,
        filters: FilterStore,
        render_records: RenderRecords,
        render_filters: RenderFilters,
    ) -> None:
        """Create the coordinator and subscribe to both stores.

        Args:
            records: Record store to read snapshots from.
            filters: Filter store to read snapshots from.
            render_records: Callback receiving each new visible set.
            render_filters: Callback receiving the full rule list.
        """
        self._records = records
        self._filters = filters
        self._render_records = render_records
        self._render_filters = render_filters
        self._criteria: dict[str, str] = {}
        self._visible: list[Record] = []
        self._subscriptions: list[Unsubscribe] = [
            records.subscribe(RecordsChanged, self._on_records_changed),
            filters.subscribe(FilterRuleAdded, self._on_filter_rules_updated),
            filters.subscribe(FilterRulesChanged, self._on_filter_rules_updated),
            filters.subscribe(FilterToggled, self._on_filter_toggled),
        ]

    @property
    def criteria(self) -> dict[str, str]:
        """Return the aggregate criteria from the last recomputation."""
        return dict(self._criteria)

    @property
    def visible(self) -> list[Record]:
        """Return the visible set from the last recomputation."""
        return list(self._visible)

    def refresh(self) -> list[Record]:
        """Recompute the visible set and render both records and filters."""
        visible = self._recompute("refresh")
        self._render_filters(self._filters.all())
        return visible

    def detach(self) -> None:
        """Unsubscribe from both stores."""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()

    def _on_records_changed(self, event: RecordsChanged) -> None:
        self._recompute(type(event).__name__)

    def _on_filter_rules_updated(self, event: FilterRuleAdded | FilterRulesChanged) -> None:
        self._recompute(type(event).__name__)
        self._render_filters(self._filters.all())

    def _on_filter_toggled(self, event: FilterToggled) -> None:
        # Toggling leaves filter rows unchanged; records only.
        self._recompute(type(event).__name__)

    def _recompute(self, trigger: str) -> list[Record]:
        self._criteria = aggregate_criteria(self._filters.all())
        self._visible = filter_records(self._records.all(), self._criteria)
        _LOGGER.info(
            "view_recomputed",
            trigger=trigger,
            criteria_fields=sorted(self._criteria),
            visible=len(self._visible),
            total=len(self._records),
        )
        self._render_records(list(self._visible))
        return list(self._visible)
