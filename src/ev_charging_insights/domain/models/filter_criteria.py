"""Filter criteria domain model."""

from dataclasses import dataclass

ALL = "all"  # Sentinel meaning "no constraint" for any criterion


@dataclass(frozen=True)
class FilterCriteria:
    """Current filter selection: each field is a value to match or the ALL sentinel."""

    region: str = ALL  # Region code, e.g. "VIC" or "Unknown"
    city: str = ALL  # Locality; sourced from the same field as town
    town: str = ALL  # Locality; synonymous with city in the upstream data
    status: str = ALL  # "operational", "planned" or "unknown"

    @property
    def is_unconstrained(self) -> bool:
        """True when every criterion is the ALL sentinel."""
        return all(value == ALL for value in (self.region, self.city, self.town, self.status))
