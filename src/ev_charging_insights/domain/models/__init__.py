"""Domain models for EV charging insights."""

from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.filter_criteria import ALL, FilterCriteria
from ev_charging_insights.domain.models.filter_options import FilterOptions
from ev_charging_insights.domain.models.normalized_dataset import NormalizedDataset
from ev_charging_insights.domain.models.query_result import QueryResult
from ev_charging_insights.domain.models.region_code import REGION_VARIANTS, RegionCode
from ev_charging_insights.domain.models.station_record import (
    UNKNOWN_LABEL,
    AddressInfo,
    OperatorInfo,
    StationRecord,
    StatusType,
)
from ev_charging_insights.domain.models.stats import Stats
from ev_charging_insights.domain.models.status_category import StatusCategory
from ev_charging_insights.domain.models.suggestion import Prediction, Suggestion

__all__ = [
    "ALL",
    "AddressInfo",
    "ErrorDetails",
    "FilterCriteria",
    "FilterOptions",
    "NormalizedDataset",
    "OperatorInfo",
    "Prediction",
    "QueryResult",
    "REGION_VARIANTS",
    "RegionCode",
    "StationRecord",
    "Stats",
    "StatusCategory",
    "StatusType",
    "Suggestion",
    "UNKNOWN_LABEL",
]
