"""Formatter for dashboard metrics."""

from ev_charging_insights.domain.contracts.metrics_formatter import MetricsFormatterProtocol


class MetricsFormatter(MetricsFormatterProtocol):
    """Formats counts with comma digit grouping."""

    def format_count(self, value: int) -> str:
        """Format a count like "1,234"."""
        return f"{value:,}"

    def format_units(self, unit_count: int) -> str:
        """Format a suggested unit count like "15 units"."""
        return f"{self.format_count(unit_count)} units"
