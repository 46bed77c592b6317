"""Station source reading a cached JSON export from disk."""

import asyncio
import logging
from pathlib import Path

from ev_charging_insights.adapters.station_sources.record_parser import parse_station_json
from ev_charging_insights.domain.exceptions import StationDataLoadError
from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.station_record import StationRecord
from ev_charging_insights.domain.ports.station_source import StationSource

logger = logging.getLogger(__name__)


class JsonFileStationSource(StationSource):
    """Adapter loading station records from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the JSON export."""
        self._path = Path(path)

    async def load_records(self) -> list[StationRecord]:
        """Read and parse the JSON file."""
        source = str(self._path)
        if not self._path.is_file():
            raise StationDataLoadError(
                ErrorDetails(
                    reason=(
                        f"Could not load data from {source}. "
                        "Did you run the data extraction step?"
                    ),
                    source=source,
                )
            )

        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StationDataLoadError(
                ErrorDetails(reason=f"Could not read {source}: {e}", source=source)
            ) from e

        logger.debug(f"Read {len(text)} characters from {source}")
        return parse_station_json(text, source)
