"""Status category domain model."""

from enum import StrEnum


class StatusCategory(StrEnum):
    """Derived operational state of a charging station."""

    OPERATIONAL = "operational"
    PLANNED = "planned"
    UNKNOWN = "unknown"
