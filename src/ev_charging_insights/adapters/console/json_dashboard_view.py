"""JSON dashboard view for machine consumers."""

import json
import sys
from typing import Any, TextIO

from ev_charging_insights.domain.contracts.dashboard_data_builder import (
    DashboardDataBuilderProtocol,
)
from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.query_result import QueryResult
from ev_charging_insights.domain.ports.dashboard_view import DashboardView


class JsonDashboardView(DashboardView):
    """Renders dashboard snapshots as JSON documents.

    Stats and suggestions use their camelCase field names (activeCount,
    densityByRegion, unitCount, ...).
    """

    def __init__(
        self,
        builder: DashboardDataBuilderProtocol,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
    ) -> None:
        """Initialize with a data builder and output streams (stdout/stderr by default)."""
        self._builder = builder
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr

    def render(self, result: QueryResult) -> None:
        """Write stats, suggestions and the operator ranking as one JSON document."""
        data = self._builder.build_dashboard_data(result)
        document = {
            "stats": result.stats.model_dump(mode="json", by_alias=True),
            "suggestions": [
                suggestion.model_dump(mode="json", by_alias=True)
                for suggestion in result.suggestions
            ],
            "topOperators": dict(
                zip(data["operator_chart"]["labels"], data["operator_chart"]["data"], strict=True)
            ),
        }
        self._write(self._stream, document)

    def render_options(self, options: FilterOptions) -> None:
        """Write the selectable values of each filter."""
        self._write(self._stream, self._builder.build_options_data(options))

    def render_error(self, details: ErrorDetails) -> None:
        """Write a load error document to the error stream."""
        self._write(
            self._error_stream,
            {"error": details.model_dump(mode="json", by_alias=True, exclude_none=True)},
        )

    @staticmethod
    def _write(stream: TextIO, document: dict[str, Any]) -> None:
        stream.write(json.dumps(document, indent=2, ensure_ascii=False) + "\n")
        stream.flush()
