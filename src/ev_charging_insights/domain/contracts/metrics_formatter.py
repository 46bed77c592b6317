"""Protocol for formatting dashboard metrics."""

from typing import Protocol


class MetricsFormatterProtocol(Protocol):
    """Protocol for formatting counts for display."""

    def format_count(self, value: int) -> str:
        """Format a count with locale-style digit grouping.

        Args:
            value: The count to format.

        Returns:
            Grouped number string like "1,234".
        """
        ...

    def format_units(self, unit_count: int) -> str:
        """Format a suggested unit count (e.g., '15 units')."""
        ...
