"""People list exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises or collects a specific error type for debuggability.
"""

from __future__ import annotations


class PeopleListError(Exception):
    """Base exception for all people list failures."""


class PeopleListConfigError(PeopleListError):
    """Raised for invalid runtime configuration."""


class PeopleListIngestError(PeopleListError):
    """Raised for bootstrap and update file reading failures."""


class PeopleListEventError(PeopleListError):
    """Raised when a store event subscriber fails."""


class MalformedItemError(PeopleListError):
    """Base error for one unusable item inside an upsert batch.

    Malformed items are collected on the upsert result instead of being
    raised, so one bad item never aborts the rest of the batch.
    """

    def __init__(
        self,
        message: str,
        position: int,
        item: object,
        item_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.item = item
        self.item_id = item_id


class MalformedRecordError(MalformedItemError):
    """Reported for a record that lacks an ``id``."""


class MalformedFilterRuleError(MalformedItemError):
    """Reported for a filter rule that lacks an ``id`` or valid criteria."""
