"""Configuration adapters."""

from ev_charging_insights.adapters.config.app_config import AppConfig
from ev_charging_insights.adapters.config.filter_criteria_loader import FilterCriteriaLoader

__all__ = ["AppConfig", "FilterCriteriaLoader"]
