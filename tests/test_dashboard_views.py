"""Tests for the console and JSON dashboard views."""

import io
import json
import os
from unittest.mock import patch

import pytest

from ev_charging_insights.adapters.config import AppConfig
from ev_charging_insights.adapters.console import (
    ConsoleDashboardView,
    JsonDashboardView,
    create_dashboard_view,
)
from ev_charging_insights.domain.models import (
    ErrorDetails,
    FilterOptions,
    QueryResult,
    Stats,
    Suggestion,
)


def _config(output_format: str = "text") -> AppConfig:
    with patch.dict(os.environ, {}, clear=True):
        return AppConfig(config_file=None, output_format=output_format, _env_file=None)


@pytest.fixture
def result() -> QueryResult:
    """Create a query result with one suggestion."""
    return QueryResult(
        stats=Stats(
            active_count=20,
            planned_count=1,
            gap_count=3,
            density_by_region={"VIC": 18, "NSW": 3},
            count_by_operator={"Chargefox": 12, "Evie": 9},
        ),
        suggestions=(Suggestion(region="VIC", unit_count=3, rationale="Add chargers in VIC"),),
    )


def test_console_view_renders_sections(result: QueryResult) -> None:
    """Given a result, when rendering as text, then metrics, charts and suggestions are written."""
    stream = io.StringIO()
    view = create_dashboard_view(_config(), stream=stream)

    view.render(result)

    output = stream.getvalue()
    assert isinstance(view, ConsoleDashboardView)
    assert "Matching stations:    21" in output
    assert "Operational stations: 20" in output
    assert "Predicted gaps:       3" in output
    assert "== Charger Density ==" in output
    assert "VIC | " in output
    assert "Route Expansion: VIC (3 units)" in output
    assert "Add chargers in VIC" in output


def test_console_view_renders_empty_state() -> None:
    """Given an empty result, when rendering as text, then the empty-state lines are shown."""
    stream = io.StringIO()
    view = create_dashboard_view(_config(), stream=stream)

    view.render(QueryResult(stats=Stats()))

    output = stream.getvalue()
    assert "(no stations)" in output
    assert "No predictions for this filter." in output


def test_console_view_renders_error_to_error_stream() -> None:
    """Given a load error with status, when rendering, then it goes to the error stream."""
    stream, error_stream = io.StringIO(), io.StringIO()
    view = create_dashboard_view(_config(), stream=stream, error_stream=error_stream)

    view.render_error(ErrorDetails(status_code=503, reason="Data source returned status 503"))

    assert stream.getvalue() == ""
    assert error_stream.getvalue().splitlines() == [
        "Error Loading Data: Data source returned status 503",
        "HTTP status: 503",
    ]


def test_console_view_renders_options() -> None:
    """Given filter options, when rendering as text, then one line per filter is written."""
    stream = io.StringIO()
    view = create_dashboard_view(_config(), stream=stream)

    view.render_options(FilterOptions(regions=("VIC",), localities=("Geelong",)))

    lines = stream.getvalue().splitlines()
    assert lines[0] == "region: all, VIC"
    assert lines[3] == "status: all, operational, planned, unknown"


def test_json_view_uses_camel_case_names(result: QueryResult) -> None:
    """Given a result, when rendering as JSON, then stats and suggestions use camelCase keys."""
    stream = io.StringIO()
    view = create_dashboard_view(_config("json"), stream=stream)

    view.render(result)

    document = json.loads(stream.getvalue())
    assert isinstance(view, JsonDashboardView)
    assert document["stats"] == {
        "activeCount": 20,
        "plannedCount": 1,
        "gapCount": 3,
        "densityByRegion": {"VIC": 18, "NSW": 3},
        "countByOperator": {"Chargefox": 12, "Evie": 9},
    }
    assert document["suggestions"] == [
        {"region": "VIC", "unitCount": 3, "rationale": "Add chargers in VIC"}
    ]
    assert document["topOperators"] == {"Chargefox": 12, "Evie": 9}


def test_json_view_renders_error_document() -> None:
    """Given a load error without status, when rendering as JSON, then the error omits it."""
    error_stream = io.StringIO()
    view = create_dashboard_view(_config("json"), stream=io.StringIO(), error_stream=error_stream)

    view.render_error(ErrorDetails(reason="Could not load data", source="raw.json"))

    assert json.loads(error_stream.getvalue()) == {
        "error": {"reason": "Could not load data", "source": "raw.json"}
    }
