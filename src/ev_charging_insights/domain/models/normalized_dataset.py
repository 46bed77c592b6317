"""Normalized dataset domain model."""

from dataclasses import dataclass

from ev_charging_insights.domain.models.station_record import StationRecord


@dataclass(frozen=True)
class NormalizedDataset:
    """Station records after one-time normalization, shared read-only by every query."""

    records: tuple[StationRecord, ...]

    def __len__(self) -> int:
        return len(self.records)
