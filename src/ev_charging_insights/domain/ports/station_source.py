"""Station source port."""

from typing import Protocol

from ev_charging_insights.domain.models.station_record import StationRecord


class StationSource(Protocol):
    """Port for loading the raw charging-station record collection."""

    async def load_records(self) -> list[StationRecord]:
        """Load every station record.

        Raises:
            StationDataLoadError: If the source is unreachable or its payload is malformed.
        """
        ...
