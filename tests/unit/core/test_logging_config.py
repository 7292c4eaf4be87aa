"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

import pytest

from core.logging_config import configure_logging, get_logger


def test_configured_logger_writes_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Logger should emit one JSON line with event and fields on stderr."""
    configure_logging("INFO")

    get_logger("tests.logging").info("demo_event", count=2)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])

    assert (payload["event"], payload["count"], payload["level"]) == ("demo_event", 2, "info")


def test_configured_logger_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Debug events should be dropped when the level is WARNING."""
    configure_logging("WARNING")

    get_logger("tests.logging").debug("hidden_event")
    captured = capsys.readouterr()

    assert "hidden_event" not in captured.err


def test_get_logger_accepts_module_name(capsys: pytest.CaptureFixture[str]) -> None:
    """Module loggers built from a dotted name should log without errors."""
    configure_logging("INFO")
    logger = get_logger("store.record_store")

    logger.info("named_event")

    assert "named_event" in capsys.readouterr().err
