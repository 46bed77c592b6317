"""Station source adapters."""

from ev_charging_insights.adapters.station_sources.http_station_source import HttpStationSource
from ev_charging_insights.adapters.station_sources.json_file_station_source import (
    JsonFileStationSource,
)
from ev_charging_insights.adapters.station_sources.station_source_factory import (
    create_station_source,
)

__all__ = ["HttpStationSource", "JsonFileStationSource", "create_station_source"]
