"""Factory choosing the station source adapter from configuration."""

from typing import TYPE_CHECKING

from ev_charging_insights.adapters.config.app_config import AppConfig
from ev_charging_insights.adapters.station_sources.http_station_source import HttpStationSource
from ev_charging_insights.adapters.station_sources.json_file_station_source import (
    JsonFileStationSource,
)
from ev_charging_insights.domain.ports.station_source import StationSource

if TYPE_CHECKING:
    from aiohttp import ClientSession


def is_http_source(data_source: str) -> bool:
    """Whether the configured data source is an http(s) URL."""
    return data_source.lower().startswith(("http://", "https://"))


def create_station_source(
    config: AppConfig, session: "ClientSession | None" = None
) -> StationSource:
    """Create the station source for config.data_source (URL or file path)."""
    if is_http_source(config.data_source):
        return HttpStationSource(
            config.data_source,
            session=session,
            timeout_seconds=config.data_timeout_seconds,
        )
    return JsonFileStationSource(config.data_source)
