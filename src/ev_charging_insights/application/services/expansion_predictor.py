"""Expansion gap heuristic.

A fixed arithmetic rule, not a model: the gap is 15% of the active stations,
and the three densest regions each get 15% of their station count (rounded
up) as suggested new units.
"""

import logging
import math

from ev_charging_insights.domain.models.stats import Stats
from ev_charging_insights.domain.models.suggestion import Prediction, Suggestion

logger = logging.getLogger(__name__)

GAP_RATE = 0.15
MAX_SUGGESTIONS = 3

RATIONALE_TEMPLATE = (
    "High existing density suggests strong EV adoption. Identifying transit gaps "
    "between current top clusters in {region} to support highway connectivity "
    "with {unit_count} new units."
)


class ExpansionPredictor:
    """Derives expansion suggestions from aggregated station density."""

    def predict(self, stats: Stats) -> Prediction:
        """Compute the gap count and up to MAX_SUGGESTIONS regional suggestions.

        A zero gap count yields no suggestions at all.
        """
        gap_count = math.floor(stats.active_count * GAP_RATE)
        if gap_count == 0:
            return Prediction(gap_count=0)

        # sorted() is stable, so regions with equal counts keep first-seen order
        top_regions = sorted(
            stats.density_by_region.items(), key=lambda item: item[1], reverse=True
        )[:MAX_SUGGESTIONS]

        suggestions = tuple(
            self._build_suggestion(region, count) for region, count in top_regions
        )
        logger.debug(f"Predicted gap of {gap_count} with {len(suggestions)} suggestion(s)")
        return Prediction(gap_count=gap_count, suggestions=suggestions)

    def _build_suggestion(self, region: str, station_count: int) -> Suggestion:
        unit_count = math.ceil(station_count * GAP_RATE)
        return Suggestion(
            region=region,
            unit_count=unit_count,
            rationale=RATIONALE_TEMPLATE.format(region=region, unit_count=unit_count),
        )
