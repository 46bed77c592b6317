"""Builder for dashboard display data."""

from typing import Any

from ev_charging_insights.adapters.config.app_config import AppConfig
from ev_charging_insights.domain.contracts.dashboard_data_builder import (
    DashboardDataBuilderProtocol,
)
from ev_charging_insights.domain.contracts.metrics_formatter import MetricsFormatterProtocol
from ev_charging_insights.domain.models.filter_criteria import ALL
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.query_result import QueryResult
from ev_charging_insights.domain.models.status_category import StatusCategory

NO_PREDICTIONS_MESSAGE = "No predictions for this filter."
DENSITY_CHART_LABEL = "Charger Density"


class DashboardDataBuilder(DashboardDataBuilderProtocol):
    """Builds the display data structure consumed by dashboard views."""

    def __init__(self, config: AppConfig, formatter: MetricsFormatterProtocol) -> None:
        """Initialize the dashboard data builder.

        Args:
            config: Application configuration (top_operators limits the operator chart).
            formatter: Formatter for counts and unit labels.
        """
        self.config = config
        self.formatter = formatter

    def build_dashboard_data(self, result: QueryResult) -> dict[str, Any]:
        """Build metrics, chart series and prediction items for one result."""
        stats = result.stats

        # Density keeps the aggregation order; operator share is ranked
        operator_entries = sorted(
            stats.count_by_operator.items(), key=lambda item: item[1], reverse=True
        )[: self.config.top_operators]

        predictions = [
            {
                "title": (
                    f"Route Expansion: {suggestion.region} "
                    f"({self.formatter.format_units(suggestion.unit_count)})"
                ),
                "region": suggestion.region,
                "unit_count": suggestion.unit_count,
                "rationale": suggestion.rationale,
            }
            for suggestion in result.suggestions
        ]

        return {
            "metrics": {
                "total": self.formatter.format_count(stats.total_count),
                "active": self.formatter.format_count(stats.active_count),
                "planned": self.formatter.format_count(stats.planned_count),
                "gaps": self.formatter.format_count(stats.gap_count),
            },
            "density_chart": {
                "label": DENSITY_CHART_LABEL,
                "labels": list(stats.density_by_region.keys()),
                "data": list(stats.density_by_region.values()),
            },
            "operator_chart": {
                "labels": [name for name, _ in operator_entries],
                "data": [count for _, count in operator_entries],
            },
            "predictions": predictions,
            "has_predictions": bool(predictions),
            "no_predictions_message": NO_PREDICTIONS_MESSAGE,
        }

    def build_options_data(self, options: FilterOptions) -> dict[str, Any]:
        """Build the option lists for the region, city, town and status selectors.

        City and town offer the same locality list.
        """
        localities = [ALL, *options.localities]
        return {
            "region": [ALL, *options.regions],
            "city": localities,
            "town": list(localities),
            "status": [ALL, *(category.value for category in StatusCategory)],
        }
