"""Grouped counting over filtered station records."""

from collections.abc import Iterable

from ev_charging_insights.application.services.status_classifier import classify_status
from ev_charging_insights.domain.models.station_record import StationRecord
from ev_charging_insights.domain.models.stats import Stats
from ev_charging_insights.domain.models.status_category import StatusCategory


class StationAggregator:
    """Computes status totals and per-region / per-operator counts."""

    def aggregate(self, records: Iterable[StationRecord]) -> Stats:
        """Aggregate a filtered record set.

        Group maps keep first-seen order; callers sort for display. The gap
        count is left at zero for the expansion heuristic to fill in.
        """
        active = 0
        planned = 0
        density: dict[str, int] = {}
        operators: dict[str, int] = {}

        for record in records:
            category = classify_status(record)
            if category == StatusCategory.OPERATIONAL:
                active += 1
            elif category == StatusCategory.PLANNED:
                planned += 1

            region = record.region
            density[region] = density.get(region, 0) + 1

            operator = record.operator_title
            operators[operator] = operators.get(operator, 0) + 1

        return Stats(
            active_count=active,
            planned_count=planned,
            density_by_region=density,
            count_by_operator=operators,
        )
