"""Filter options domain model."""

from pydantic import BaseModel, ConfigDict


class FilterOptions(BaseModel):
    """Selectable filter values observed in a normalized dataset."""

    model_config = ConfigDict(frozen=True)

    regions: tuple[str, ...] = ()
    localities: tuple[str, ...] = ()  # Offered for both the city and the town filter
