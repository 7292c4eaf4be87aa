"""Application context owning the stores and the view coordinator.

This module replaces a shared global namespace with one explicit value
that collaborators receive by reference.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import PeopleListConfig
from core.logging_config import configure_logging, get_logger
from core.types import BootstrapData
from store.filter_store import FilterStore
from store.record_store import RecordStore
from view.view_coordinator import RenderFilters, RenderRecords, ViewCoordinator

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class DeliveryReport:
    """Skip counts reported for one data delivery.

    Attributes:
        skipped_persons: Malformed person records dropped.
        skipped_filters: Malformed filter rules dropped.
    """

    skipped_persons: int = 0
    skipped_filters: int = 0

    @property
    def skipped(self) -> int:
        """Return the total number of dropped items."""
        return self.skipped_persons + self.skipped_filters


class PeopleListApp:
    """Explicit context holding both stores and the coordinator."""

    def __init__(
        self,
        render_records: RenderRecords,
        render_filters: RenderFilters,
        config: PeopleListConfig | None = None,
    ) -> None:
        """Create stores and subscribe the coordinator before any data arrives.

        Args:
            render_records: External renderer for the visible set.
            render_filters: External renderer for the filter list.
            config: Optional runtime configuration.
        """
        self._config = config or PeopleListConfig.from_env()
        configure_logging(self._config.log_level)
        self.records = RecordStore(sort_field=self._config.sort_field)
        self.filters = FilterStore()
        self.coordinator = ViewCoordinator(
            self.records,
            self.filters,
            render_records=render_records,
            render_filters=render_filters,
        )

    @property
    def config(self) -> PeopleListConfig:
        """Return the runtime configuration."""
        return self._config

    def run(self, bootstrap: BootstrapData) -> DeliveryReport:
        """Load bootstrap data; filters first so the list renders before people.

        Args:
            bootstrap: Initial persons and filters.

        Returns:
            Skip counts for the delivered data.
        """
        report = self.deliver(bootstrap)
        _LOGGER.info(
            "bootstrap_loaded",
            persons=len(self.records),
            filters=len(self.filters),
            skipped=report.skipped,
        )
        return report

    def deliver(self, data: BootstrapData) -> DeliveryReport:
        """Upsert later data from an external source.

        Only the collections present in ``data`` are merged, so a delivery of
        persons alone leaves the filter rules untouched.

        Args:
            data: Persons and/or filters to merge.

        Returns:
            Skip counts for the delivered data.
        """
        skipped_filters = 0
        skipped_persons = 0
        if data.filters:
            skipped_filters = self.filters.upsert(data.filters).skipped
        if data.persons:
            skipped_persons = self.records.upsert(data.persons).skipped
        return DeliveryReport(skipped_persons=skipped_persons, skipped_filters=skipped_filters)

    def toggle_filter(self, rule_id: object) -> bool | None:
        """Flip one filter rule; unknown ids are ignored."""
        return self.filters.toggle(rule_id)
