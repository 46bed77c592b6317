"""Dashboard view port."""

from abc import ABC, abstractmethod

from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.query_result import QueryResult


class DashboardView(ABC):
    """Port for presenting query results to users.

    Each render replaces whatever the view showed before.
    """

    @abstractmethod
    def render(self, result: QueryResult) -> None:
        """Display metrics, charts and expansion suggestions."""
        ...

    @abstractmethod
    def render_options(self, options: FilterOptions) -> None:
        """Display the selectable filter values."""
        ...

    @abstractmethod
    def render_error(self, details: ErrorDetails) -> None:
        """Display a fatal load error."""
        ...
