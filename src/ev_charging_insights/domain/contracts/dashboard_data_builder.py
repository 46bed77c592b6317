"""Protocol for building dashboard display data."""

from typing import Any, Protocol

from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.query_result import QueryResult


class DashboardDataBuilderProtocol(Protocol):
    """Protocol for turning query results into display data structures."""

    def build_dashboard_data(self, result: QueryResult) -> dict[str, Any]:
        """Build metrics, chart series and prediction items for one result.

        Args:
            result: Query result to present.

        Returns:
            Dictionary with metrics, density_chart, operator_chart, predictions,
            has_predictions and no_predictions_message keys.
        """
        ...

    def build_options_data(self, options: FilterOptions) -> dict[str, Any]:
        """Build the option lists for the region, city, town and status selectors."""
        ...
