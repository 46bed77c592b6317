"""Aggregated statistics domain model."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class Stats(BaseModel):
    """Counts computed over one filtered record set.

    Serialized names (``model_dump(by_alias=True)``) are the camelCase names
    consumed by the rendering side: activeCount, plannedCount, gapCount,
    densityByRegion and countByOperator. The count mappings are read-only.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, validate_default=True
    )

    active_count: int = 0
    planned_count: int = 0
    gap_count: int = 0
    density_by_region: Mapping[str, int] = {}  # region code -> station count, first-seen order
    count_by_operator: Mapping[str, int] = {}  # operator title -> station count, first-seen order

    @field_validator("density_by_region", "count_by_operator")
    @classmethod
    def freeze_counts(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        """Wrap a copy of the counts in a read-only view, keeping insertion order."""
        return MappingProxyType(dict(v))

    @field_serializer("density_by_region", "count_by_operator")
    def serialize_counts(self, v: Mapping[str, int]) -> dict[str, int]:
        return dict(v)

    @property
    def total_count(self) -> int:
        """Number of records the stats were computed over."""
        return sum(self.density_by_region.values())
