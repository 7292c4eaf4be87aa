"""Plain-text renderers for the CLI.

This module is the terminal counterpart of the HTML templates: it keeps
the latest rendered rows and formats them as printable lines.
"""

from __future__ import annotations

from typing import Sequence

from core.types import FilterRule, Record


class TextRenderer:
    """Render callbacks that remember the latest records and filters."""

    def __init__(self, display_fields: Sequence[str]) -> None:
        self._display_fields = tuple(display_fields)
        self._records: list[Record] = []
        self._filters: list[FilterRule] = []
        self.record_renders = 0
        self.filter_renders = 0

    def render_records(self, visible: Sequence[Record]) -> None:
        """Store the latest visible set."""
        self._records = list(visible)
        self.record_renders += 1

    def render_filters(self, rules: Sequence[FilterRule]) -> None:
        """Store the latest filter list."""
        self._filters = list(rules)
        self.filter_renders += 1

    def filter_lines(self) -> list[str]:
        """Format the filter list, one checkbox line per rule."""
        return [format_filter_line(rule) for rule in self._filters]

    def record_lines(self) -> list[str]:
        """Format the visible set as a tab-separated table with a header."""
        header = "\t".join(self._display_fields)
        rows = [format_record_line(record, self._display_fields) for record in self._records]
        return [header] + rows


def format_filter_line(rule: FilterRule) -> str:
    """Render one rule as ``[x] label (id)``."""
    mark = "x" if rule.enabled else " "
    return f"[{mark}] {rule.label} ({rule.rule_id})"


def format_record_line(record: Record, display_fields: Sequence[str]) -> str:
    """Render one record as tab-separated display fields; absent fields print as '-'."""
    return "\t".join(record.get(field, "-") for field in display_fields)
