"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import PeopleListConfig, parse_display_fields, parse_log_level
from core.constants import DEFAULT_DISPLAY_FIELDS
from core.errors import PeopleListConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to last-name sorting and default columns."""
    monkeypatch.delenv("PEOPLELIST_SORT_FIELD", raising=False)
    monkeypatch.delenv("PEOPLELIST_DISPLAY_FIELDS", raising=False)
    monkeypatch.delenv("PEOPLELIST_LOG_LEVEL", raising=False)

    config = PeopleListConfig.from_env()

    assert (config.sort_field, config.display_fields, config.log_level) == (
        "lastName",
        DEFAULT_DISPLAY_FIELDS,
        "WARNING",
    )


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read sort field, columns, and level from environment."""
    monkeypatch.setenv("PEOPLELIST_SORT_FIELD", "city")
    monkeypatch.setenv("PEOPLELIST_DISPLAY_FIELDS", " lastName , city ")
    monkeypatch.setenv("PEOPLELIST_LOG_LEVEL", "debug")

    config = PeopleListConfig.from_env()

    assert (config.sort_field, config.display_fields, config.log_level) == (
        "city",
        ("lastName", "city"),
        "DEBUG",
    )


def test_from_env_raises_for_blank_sort_field(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject an empty sort field."""
    monkeypatch.setenv("PEOPLELIST_SORT_FIELD", "  ")

    with pytest.raises(PeopleListConfigError):
        PeopleListConfig.from_env()


def test_parse_display_fields_rejects_empty_list() -> None:
    """Display field parsing should fail when only separators are given."""
    with pytest.raises(PeopleListConfigError):
        parse_display_fields(" , ,")


def test_parse_log_level_rejects_unknown_level() -> None:
    """Log level parsing should fail for unsupported names."""
    with pytest.raises(PeopleListConfigError):
        parse_log_level("verbose")
