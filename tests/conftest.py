"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Sequence

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class RenderSpy:
    """Render callbacks that record every call for assertions."""

    def __init__(self) -> None:
        self.record_calls: list[list[Any]] = []
        self.filter_calls: list[list[Any]] = []

    def render_records(self, visible: Sequence[Any]) -> None:
        self.record_calls.append(list(visible))

    def render_filters(self, rules: Sequence[Any]) -> None:
        self.filter_calls.append(list(rules))

    @property
    def last_records(self) -> list[Any]:
        return self.record_calls[-1] if self.record_calls else []

    @property
    def last_filters(self) -> list[Any]:
        return self.filter_calls[-1] if self.filter_calls else []


@pytest.fixture
def render_spy() -> RenderSpy:
    """Return a fresh render spy."""
    return RenderSpy()


@pytest.fixture
def sample_persons() -> list[dict[str, object]]:
    """Return the two-person scenario records."""
    return [
        {"id": 1, "lastName": "Olsen", "city": "Portland", "streetAddress": "524 E Burnside"},
        {"id": 2, "lastName": "Moss", "city": "Hollywood", "streetAddress": "1 Sunset Blvd"},
    ]


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    """Keep structured logs on stderr at warning level for every test."""
    from core.logging_config import configure_logging

    configure_logging("WARNING")
