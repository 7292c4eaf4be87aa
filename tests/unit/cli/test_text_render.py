"""Unit tests for plain-text rendering."""

from __future__ import annotations

from cli.text_render import TextRenderer, format_filter_line, format_record_line
from core.types import FilterRule


def test_format_filter_line_marks_enabled_rules() -> None:
    """Enabled rules should render a checked box."""
    rule = FilterRule(rule_id="f1", label="Portland", enabled=True, order=1)

    assert format_filter_line(rule) == "[x] Portland (f1)"


def test_format_record_line_prints_dash_for_absent_fields() -> None:
    """Absent fields should print as a dash."""
    line = format_record_line({"id": "1", "lastName": "Olsen"}, ("firstName", "lastName"))

    assert line == "-\tOlsen"


def test_renderer_keeps_latest_render() -> None:
    """Only the most recent render should be printed."""
    renderer = TextRenderer(("lastName",))
    renderer.render_records([{"id": "1", "lastName": "Olsen"}])
    renderer.render_records([{"id": "2", "lastName": "Moss"}])

    assert renderer.record_lines() == ["lastName", "Moss"] and renderer.record_renders == 2
