"""Factory choosing the dashboard view from configuration."""

from typing import TextIO

from ev_charging_insights.adapters.config.app_config import AppConfig
from ev_charging_insights.adapters.console.console_dashboard_view import ConsoleDashboardView
from ev_charging_insights.adapters.console.dashboard_data_builder import DashboardDataBuilder
from ev_charging_insights.adapters.console.json_dashboard_view import JsonDashboardView
from ev_charging_insights.adapters.console.metrics_formatter import MetricsFormatter
from ev_charging_insights.domain.ports.dashboard_view import DashboardView


def create_dashboard_view(
    config: AppConfig,
    stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> DashboardView:
    """Create the text or JSON view selected by config.output_format."""
    builder = DashboardDataBuilder(config, MetricsFormatter())
    if config.output_format == "json":
        return JsonDashboardView(builder, stream=stream, error_stream=error_stream)
    return ConsoleDashboardView(builder, stream=stream, error_stream=error_stream)
