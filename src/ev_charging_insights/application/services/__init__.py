"""Application services (use cases) for the station metrics pipeline."""

from ev_charging_insights.application.services.dashboard_coordinator import (
    DashboardCoordinator,
)
from ev_charging_insights.application.services.dashboard_query_service import (
    DashboardQueryService,
)
from ev_charging_insights.application.services.expansion_predictor import ExpansionPredictor
from ev_charging_insights.application.services.station_aggregator import StationAggregator
from ev_charging_insights.application.services.station_filter import StationFilter
from ev_charging_insights.application.services.station_normalizer import StationNormalizer
from ev_charging_insights.application.services.status_classifier import classify_status

__all__ = [
    "DashboardCoordinator",
    "DashboardQueryService",
    "ExpansionPredictor",
    "StationAggregator",
    "StationFilter",
    "StationNormalizer",
    "classify_status",
]
