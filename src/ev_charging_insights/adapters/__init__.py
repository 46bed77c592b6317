"""Adapters layer - external system integrations."""

from ev_charging_insights.adapters.config import AppConfig
from ev_charging_insights.adapters.console import ConsoleDashboardView, JsonDashboardView
from ev_charging_insights.adapters.station_sources import (
    HttpStationSource,
    JsonFileStationSource,
)

__all__ = [
    "AppConfig",
    "ConsoleDashboardView",
    "HttpStationSource",
    "JsonDashboardView",
    "JsonFileStationSource",
]
