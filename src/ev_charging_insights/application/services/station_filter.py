"""Multi-field filtering of normalized station records."""

import logging
from collections.abc import Iterable

from ev_charging_insights.application.services.status_classifier import classify_status
from ev_charging_insights.domain.models.filter_criteria import ALL, FilterCriteria
from ev_charging_insights.domain.models.station_record import StationRecord

logger = logging.getLogger(__name__)


class StationFilter:
    """Applies a conjunction of optional equality predicates to station records."""

    def filter(
        self, records: Iterable[StationRecord], criteria: FilterCriteria
    ) -> list[StationRecord]:
        """Return the records matching every constrained criterion, in input order."""
        if criteria.is_unconstrained:
            return list(records)

        filtered = [record for record in records if self.matches(record, criteria)]
        logger.debug(f"Filter {criteria} matched {len(filtered)} record(s)")
        return filtered

    def matches(self, record: StationRecord, criteria: FilterCriteria) -> bool:
        """Check whether a single record satisfies the criteria.

        City and town are both read from the record's locality, since the
        upstream data carries a single town field.
        """
        if criteria.region != ALL and record.region != criteria.region:
            return False
        if criteria.city != ALL and record.locality != criteria.city:
            return False
        if criteria.town != ALL and record.locality != criteria.town:
            return False
        if criteria.status != ALL and classify_status(record) != criteria.status:
            return False
        return True
