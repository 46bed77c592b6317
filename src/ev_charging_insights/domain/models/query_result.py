"""Query result domain model."""

from pydantic import BaseModel, ConfigDict

from ev_charging_insights.domain.models.stats import Stats
from ev_charging_insights.domain.models.suggestion import Suggestion


class QueryResult(BaseModel):
    """Statistics and expansion suggestions for one filter selection."""

    model_config = ConfigDict(frozen=True)

    stats: Stats
    suggestions: tuple[Suggestion, ...] = ()
