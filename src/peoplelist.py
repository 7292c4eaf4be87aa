"""Public SDK surface for the people list.

This module provides a stable import path for embedding users.
It re-exports the application context, stores, and typed models.
"""

from __future__ import annotations

from core.config import PeopleListConfig
from core.errors import (
    MalformedFilterRuleError,
    MalformedRecordError,
    PeopleListError,
)
from core.types import BootstrapData, FilterRule, Record, UpsertResult
from filtering.criteria_aggregation import aggregate_criteria
from filtering.filter_engine import filter_records, record_matches
from ingest.bootstrap_reader import read_bootstrap
from store.events import FilterRuleAdded, FilterRulesChanged, FilterToggled, RecordsChanged
from store.filter_store import FilterStore
from store.record_store import RecordStore
from view.app_context import DeliveryReport, PeopleListApp
from view.view_coordinator import ViewCoordinator

__all__ = [
    "BootstrapData",
    "DeliveryReport",
    "FilterRule",
    "FilterRuleAdded",
    "FilterRulesChanged",
    "FilterStore",
    "FilterToggled",
    "MalformedFilterRuleError",
    "MalformedRecordError",
    "PeopleListApp",
    "PeopleListConfig",
    "PeopleListError",
    "Record",
    "RecordStore",
    "RecordsChanged",
    "UpsertResult",
    "ViewCoordinator",
    "aggregate_criteria",
    "filter_records",
    "read_bootstrap",
    "record_matches",
]
