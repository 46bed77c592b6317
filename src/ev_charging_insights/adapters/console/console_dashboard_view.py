"""Plain-text dashboard view for terminals."""

import sys
from typing import Any, TextIO

from ev_charging_insights.domain.contracts.dashboard_data_builder import (
    DashboardDataBuilderProtocol,
)
from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.query_result import QueryResult
from ev_charging_insights.domain.ports.dashboard_view import DashboardView

BAR_WIDTH = 40


class ConsoleDashboardView(DashboardView):
    """Renders dashboard snapshots as text."""

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
        """Write a full dashboard snapshot."""
        data = self._builder.build_dashboard_data(result)
        lines: list[str] = []

        metrics = data["metrics"]
        lines.append("== Metrics ==")
        lines.append(f"Matching stations:    {metrics['total']}")
        lines.append(f"Operational stations: {metrics['active']}")
        lines.append(f"Planned stations:     {metrics['planned']}")
        lines.append(f"Predicted gaps:       {metrics['gaps']}")
        lines.append("")

        density = data["density_chart"]
        lines.append(f"== {density['label']} ==")
        lines.extend(self._bar_lines(density["labels"], density["data"]))
        lines.append("")

        operators = data["operator_chart"]
        lines.append("== Operator Share ==")
        lines.extend(self._bar_lines(operators["labels"], operators["data"]))
        lines.append("")

        lines.append("== Expansion Suggestions ==")
        if data["has_predictions"]:
            for item in data["predictions"]:
                lines.append(item["title"])
                lines.append(f"  {item['rationale']}")
        else:
            lines.append(data["no_predictions_message"])

        self._write(self._stream, lines)

    def render_options(self, options: FilterOptions) -> None:
        """Write the selectable values of each filter."""
        data = self._builder.build_options_data(options)
        lines = [f"{name}: {', '.join(values)}" for name, values in data.items()]
        self._write(self._stream, lines)

    def render_error(self, details: ErrorDetails) -> None:
        """Write a load error to the error stream."""
        lines = [f"Error Loading Data: {details.reason}"]
        if details.is_http_failure:
            lines.append(f"HTTP status: {details.status_code}")
        self._write(self._error_stream, lines)

    def _bar_lines(self, labels: list[str], values: list[int]) -> list[str]:
        if not labels:
            return ["(no stations)"]
        peak = max(values) or 1
        label_width = max(len(label) for label in labels)
        lines = []
        for label, value in zip(labels, values, strict=True):
            bar = "#" * max(1, round(value / peak * BAR_WIDTH)) if value else ""
            lines.append(f"{label.ljust(label_width)} | {bar} {value:,}")
        return lines

    @staticmethod
    def _write(stream: TextIO, lines: list[Any]) -> None:
        stream.write("\n".join(str(line) for line in lines) + "\n")
        stream.flush()
