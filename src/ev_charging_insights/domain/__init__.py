"""Domain layer - core models and ports."""

from ev_charging_insights.domain.exceptions import StationDataLoadError
from ev_charging_insights.domain.models import (
    FilterCriteria,
    NormalizedDataset,
    QueryResult,
    RegionCode,
    StationRecord,
    Stats,
    StatusCategory,
    Suggestion,
)
from ev_charging_insights.domain.ports import (
    DashboardQueryService,
    DashboardView,
    StationSource,
)

__all__ = [
    "DashboardQueryService",
    "DashboardView",
    "FilterCriteria",
    "NormalizedDataset",
    "QueryResult",
    "RegionCode",
    "StationDataLoadError",
    "StationRecord",
    "StationSource",
    "Stats",
    "StatusCategory",
    "Suggestion",
]
