"""Dashboard query service port."""

from typing import Protocol

from ev_charging_insights.domain.models.filter_criteria import FilterCriteria
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.normalized_dataset import NormalizedDataset
from ev_charging_insights.domain.models.query_result import QueryResult


class DashboardQueryService(Protocol):
    """Port for answering dashboard queries over a normalized dataset."""

    def run_query(self, dataset: NormalizedDataset, criteria: FilterCriteria) -> QueryResult:
        """Filter, aggregate and predict for one filter selection.

        Args:
            dataset: Records normalized once at load time.
            criteria: Current filter selection.

        Returns:
            Statistics and expansion suggestions for the matching records.
        """
        ...

    def filter_options(self, dataset: NormalizedDataset) -> FilterOptions:
        """Collect the selectable region and locality values of a dataset."""
        ...
