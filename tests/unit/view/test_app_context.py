"""Unit tests for the application context."""

from __future__ import annotations

import structlog

from core.config import PeopleListConfig
from core.types import BootstrapData
from view.app_context import PeopleListApp


def _app(render_spy, sort_field: str = "lastName") -> PeopleListApp:
    return PeopleListApp(
        render_records=render_spy.render_records,
        render_filters=render_spy.render_filters,
        config=PeopleListConfig(sort_field=sort_field),
    )


def test_run_loads_filters_before_persons(render_spy, sample_persons) -> None:
    """The filter list should be rendered before any person is loaded."""
    app = _app(render_spy)
    bootstrap = BootstrapData(
        persons=tuple(sample_persons),
        filters=({"id": "f1", "criteria": {"city": "portland"}},),
    )

    app.run(bootstrap)

    assert render_spy.record_calls[0] == [] and len(render_spy.last_records) == 2


def test_run_reports_skip_counts(render_spy, sample_persons) -> None:
    """Malformed persons and filters should be counted separately."""
    app = _app(render_spy)
    bootstrap = BootstrapData(
        persons=(*sample_persons, {"lastName": "Nobody"}),
        filters=({"label": "no id"},),
    )

    report = app.run(bootstrap)

    assert (report.skipped_persons, report.skipped_filters, report.skipped) == (1, 1, 2)


def test_deliver_persons_only_keeps_filters(render_spy, sample_persons) -> None:
    """A persons-only delivery should leave filter rules untouched."""
    app = _app(render_spy)
    app.run(BootstrapData(persons=tuple(sample_persons), filters=({"id": "f1"},)))

    app.deliver(BootstrapData(persons=(sample_persons[0],)))

    assert len(app.filters) == 1 and len(app.records) == 1


def test_configured_sort_field_orders_view(render_spy, sample_persons) -> None:
    """The context should pass the configured sort field to the record store."""
    app = _app(render_spy, sort_field="city")

    app.run(BootstrapData(persons=tuple(sample_persons)))

    assert [record["city"] for record in app.coordinator.visible] == ["Hollywood", "Portland"]


def test_toggle_filter_unknown_id_returns_none(render_spy) -> None:
    """Toggling an id that is not loaded should be a no-op."""
    app = _app(render_spy)

    assert app.toggle_filter("ghost") is None and render_spy.record_calls == []


def test_app_applies_configured_log_level(render_spy, sample_persons, capsys) -> None:
    """Embedding the app should log to stderr at the configured level only."""
    structlog.reset_defaults()
    app = PeopleListApp(
        render_records=render_spy.render_records,
        render_filters=render_spy.render_filters,
        config=PeopleListConfig(log_level="ERROR"),
    )

    app.run(BootstrapData(persons=tuple(sample_persons), filters=({"id": "f1"},)))
    app.toggle_filter("f1")
    captured = capsys.readouterr()

    assert captured.out == "" and captured.err == ""
