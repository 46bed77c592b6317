"""Coordinator owning the station dataset for the lifetime of the dashboard."""

import logging

from ev_charging_insights.application.services.station_normalizer import StationNormalizer
from ev_charging_insights.domain.models.filter_criteria import FilterCriteria
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.normalized_dataset import NormalizedDataset
from ev_charging_insights.domain.models.query_result import QueryResult
from ev_charging_insights.domain.ports.dashboard_query_service import DashboardQueryService
from ev_charging_insights.domain.ports.station_source import StationSource

logger = logging.getLogger(__name__)


class DashboardCoordinator:
    """Loads and normalizes the dataset once, then answers queries against it."""

    def __init__(
        self,
        station_source: StationSource,
        query_service: DashboardQueryService,
        normalizer: StationNormalizer | None = None,
    ) -> None:
        """Initialize with a station source, a query service and an optional normalizer."""
        self._station_source = station_source
        self._normalizer = normalizer or StationNormalizer()
        self._query_service = query_service
        self._dataset: NormalizedDataset | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether the dataset has been loaded and normalized."""
        return self._dataset is not None

    @property
    def dataset(self) -> NormalizedDataset:
        """The normalized dataset.

        Raises:
            RuntimeError: If load() has not completed yet.
        """
        if self._dataset is None:
            raise RuntimeError("Station data has not been loaded yet; call load() first")
        return self._dataset

    async def load(self) -> NormalizedDataset:
        """Load the records from the source and normalize them.

        Only the first call touches the source; later calls return the same
        dataset. StationDataLoadError from the source propagates unchanged.
        """
        if self._dataset is not None:
            return self._dataset

        records = await self._station_source.load_records()
        self._normalizer.normalize(records)
        self._dataset = NormalizedDataset(records=tuple(records))
        logger.info(f"Loaded {len(records)} charging stations.")
        return self._dataset

    def run_query(self, criteria: FilterCriteria) -> QueryResult:
        """Run one dashboard query against the loaded dataset."""
        return self._query_service.run_query(self.dataset, criteria)

    def filter_options(self) -> FilterOptions:
        """Return the selectable filter values of the loaded dataset."""
        return self._query_service.filter_options(self.dataset)
