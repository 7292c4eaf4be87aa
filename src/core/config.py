"""Runtime configuration model for the people list.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_DISPLAY_FIELDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SORT_FIELD,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import PeopleListConfigError


@dataclass(frozen=True)
class PeopleListConfig:
    """Validated runtime configuration.

    Attributes:
        sort_field: Record field used to order the visible set.
        display_fields: Record fields shown as table columns by the CLI.
        log_level: Minimum structured log level.
    """

    sort_field: str = DEFAULT_SORT_FIELD
    display_fields: tuple[str, ...] = DEFAULT_DISPLAY_FIELDS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "PeopleListConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PeopleListConfigError: If environment values are invalid.
        """
        sort_field = _parse_sort_field(os.getenv("PEOPLELIST_SORT_FIELD", DEFAULT_SORT_FIELD))
        display_fields_value = os.getenv("PEOPLELIST_DISPLAY_FIELDS")
        display_fields = (
            parse_display_fields(display_fields_value)
            if display_fields_value is not None
            else DEFAULT_DISPLAY_FIELDS
        )
        log_level = parse_log_level(os.getenv("PEOPLELIST_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(sort_field=sort_field, display_fields=display_fields, log_level=log_level)


def parse_display_fields(raw_value: str) -> tuple[str, ...]:
    """Parse a comma-separated display field list.

    Args:
        raw_value: Raw comma-separated string.

    Returns:
        Ordered tuple of field names.

    Raises:
        PeopleListConfigError: If no field names remain after trimming.
    """
    fields = tuple(part.strip() for part in raw_value.split(",") if part.strip())
    if not fields:
        raise PeopleListConfigError(
            f"Invalid PEOPLELIST_DISPLAY_FIELDS value '{raw_value}': no field names given. "
            "Provide a comma-separated list such as 'firstName,lastName'."
        )
    return fields


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Raw level name, any case.

    Returns:
        Upper-case level name.

    Raises:
        PeopleListConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise PeopleListConfigError(
            f"Invalid PEOPLELIST_LOG_LEVEL value '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _parse_sort_field(raw_value: str) -> str:
    sort_field = raw_value.strip()
    if not sort_field:
        raise PeopleListConfigError(
            "Invalid PEOPLELIST_SORT_FIELD value: expected a field name, got an empty string."
        )
    return sort_field
