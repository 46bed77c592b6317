"""Main entry point for the EV charging insights dashboard."""

import asyncio
import logging
import sys

import aiohttp

from ev_charging_insights.adapters.config import AppConfig, FilterCriteriaLoader
from ev_charging_insights.adapters.console import create_dashboard_view
from ev_charging_insights.adapters.station_sources import create_station_source
from ev_charging_insights.application.services import DashboardCoordinator, DashboardQueryService
from ev_charging_insights.domain.exceptions import StationDataLoadError
from ev_charging_insights.domain.models import FilterCriteria
from ev_charging_insights.domain.ports import DashboardView
from ev_charging_insights.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def load_coordinator(config: AppConfig, view: DashboardView) -> DashboardCoordinator | None:
    """Load and normalize the station dataset once.

    Returns:
        The loaded coordinator, or None if loading failed (the error is rendered).
    """
    async with aiohttp.ClientSession() as session:
        coordinator = DashboardCoordinator(
            create_station_source(config, session), DashboardQueryService()
        )
        try:
            await coordinator.load()
        except StationDataLoadError as e:
            logger.error(f"Initialization error: {e}")
            view.render_error(e.details)
            return None
    return coordinator


async def run_dashboard(config: AppConfig, criteria: FilterCriteria, view: DashboardView) -> int:
    """Load the dataset, then render the filter options and one query result."""
    coordinator = await load_coordinator(config, view)
    if coordinator is None:
        return 1

    view.render_options(coordinator.filter_options())
    view.render(coordinator.run_query(criteria))
    return 0


async def main() -> int:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level_value)

    # Load default filters (and [data]/[display] overrides) from the TOML config
    try:
        criteria = FilterCriteriaLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.info(f"Using station data from {config.data_source}")
    view = create_dashboard_view(config)
    return await run_dashboard(config, criteria, view)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
