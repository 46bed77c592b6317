"""Filter criteria loader."""

from dataclasses import replace

from ev_charging_insights.adapters.config.app_config import AppConfig
from ev_charging_insights.domain.models.filter_criteria import ALL, FilterCriteria

FILTER_FIELDS = ("region", "city", "town", "status")


class FilterCriteriaLoader:
    """Builds the default filter criteria from app config."""

    @staticmethod
    def load(config: AppConfig) -> FilterCriteria:
        """Load default filter criteria from the [filters] table of the TOML config."""
        filters_data = config.get_filters_config()
        values: dict[str, str] = {}

        for name in FILTER_FIELDS:
            value = filters_data.get(name)
            if value is None or isinstance(value, (dict, list)):
                continue
            text = str(value).strip()
            values[name] = text or ALL

        return FilterCriteria(**values)

    @staticmethod
    def apply_overrides(criteria: FilterCriteria, overrides: dict[str, str | None]) -> FilterCriteria:
        """Replace criteria fields with explicitly given values (None means keep)."""
        changes = {
            name: value
            for name, value in overrides.items()
            if name in FILTER_FIELDS and value is not None
        }
        return replace(criteria, **changes) if changes else criteria
