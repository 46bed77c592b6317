"""Expansion suggestion domain models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Suggestion(BaseModel):
    """A heuristic recommendation to add charging units in a region."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    region: str
    unit_count: int
    rationale: str


class Prediction(BaseModel):
    """Output of the expansion heuristic: the gap estimate and its suggestions."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    gap_count: int
    suggestions: tuple[Suggestion, ...] = ()
