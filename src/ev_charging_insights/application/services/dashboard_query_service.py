"""Dashboard query pipeline: filter, aggregate, predict."""

import logging

from ev_charging_insights.application.services.expansion_predictor import ExpansionPredictor
from ev_charging_insights.application.services.station_aggregator import StationAggregator
from ev_charging_insights.application.services.station_filter import StationFilter
from ev_charging_insights.domain.models.filter_criteria import FilterCriteria
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.normalized_dataset import NormalizedDataset
from ev_charging_insights.domain.models.query_result import QueryResult

logger = logging.getLogger(__name__)


class DashboardQueryService:
    """Service answering dashboard queries over a normalized dataset."""

    def __init__(
        self,
        station_filter: StationFilter | None = None,
        aggregator: StationAggregator | None = None,
        predictor: ExpansionPredictor | None = None,
    ) -> None:
        """Initialize with pipeline stages (defaults are created if omitted)."""
        self._filter = station_filter or StationFilter()
        self._aggregator = aggregator or StationAggregator()
        self._predictor = predictor or ExpansionPredictor()

    def run_query(self, dataset: NormalizedDataset, criteria: FilterCriteria) -> QueryResult:
        """Filter, aggregate and predict for one filter selection.

        Every call recomputes from the dataset; nothing is carried over between
        calls and the dataset is never modified.
        """
        filtered = self._filter.filter(dataset.records, criteria)
        stats = self._aggregator.aggregate(filtered)
        prediction = self._predictor.predict(stats)
        stats = stats.model_copy(update={"gap_count": prediction.gap_count})

        logger.debug(
            f"Query {criteria}: {len(filtered)} of {len(dataset)} station(s), "
            f"{stats.active_count} active, {stats.planned_count} planned, "
            f"gap {stats.gap_count}"
        )
        return QueryResult(stats=stats, suggestions=prediction.suggestions)

    def filter_options(self, dataset: NormalizedDataset) -> FilterOptions:
        """Collect the selectable region and locality values of a dataset.

        Only records with an address group contribute, and empty localities
        are skipped.
        """
        regions: set[str] = set()
        localities: set[str] = set()
        for record in dataset.records:
            address = record.address_info
            if address is None:
                continue
            if address.state_or_province:
                regions.add(address.state_or_province)
            if address.town:
                localities.add(address.town)
        return FilterOptions(regions=tuple(sorted(regions)), localities=tuple(sorted(localities)))
