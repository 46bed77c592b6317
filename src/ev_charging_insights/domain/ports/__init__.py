"""Ports (interfaces) for the ports-and-adapters architecture."""

from ev_charging_insights.domain.ports.dashboard_query_service import DashboardQueryService
from ev_charging_insights.domain.ports.dashboard_view import DashboardView
from ev_charging_insights.domain.ports.station_source import StationSource

__all__ = [
    "DashboardQueryService",
    "DashboardView",
    "StationSource",
]
