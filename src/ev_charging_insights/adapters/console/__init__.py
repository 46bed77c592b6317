"""Console and JSON presentation adapters."""

from ev_charging_insights.adapters.console.console_dashboard_view import ConsoleDashboardView
from ev_charging_insights.adapters.console.dashboard_data_builder import DashboardDataBuilder
from ev_charging_insights.adapters.console.json_dashboard_view import JsonDashboardView
from ev_charging_insights.adapters.console.metrics_formatter import MetricsFormatter
from ev_charging_insights.adapters.console.view_factory import create_dashboard_view

__all__ = [
    "ConsoleDashboardView",
    "DashboardDataBuilder",
    "JsonDashboardView",
    "MetricsFormatter",
    "create_dashboard_view",
]
