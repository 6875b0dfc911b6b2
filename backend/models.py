"""Data models used across the analysis pipeline.

HTTP request/response envelopes are in schemas.py.
Types produced by the hosting checker, carbon calculator, score engine
and orchestrator live here. All of them are immutable once built and
serialize with camelCase keys.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Ranking = Literal["A", "B", "C", "D", "E", "F"]


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HostingDescriptor(FrozenModel):
    """Green-hosting verdict for the domain serving a page."""

    is_green: bool
    hosted_by: str
    hosted_by_website: str | None = None


class Equivalence(FrozenModel):
    """Everyday equivalents of a page view's emissions."""

    trees_planted: float = Field(ge=0)
    kettles_boiled: float = Field(ge=0)
    km_driven: float = Field(ge=0)


class CarbonEstimate(FrozenModel):
    """Estimated emissions for one page view."""

    grams_co2_per_view: float = Field(ge=0, alias="gramsCO2PerView")
    equivalence: Equivalence
    cleaner_than_percent: int = Field(ge=0, le=100)


class ScoreResult(FrozenModel):
    """Eco-score and its letter ranking."""

    eco_score: int = Field(ge=0, le=100)
    ranking: Ranking


class AnalysisResult(FrozenModel):
    """Full analysis of one URL. This is the unit stored in the result cache."""

    url: str
    eco_score: int = Field(ge=0, le=100)
    ranking: Ranking
    hosting: HostingDescriptor
    carbon: CarbonEstimate
    page_weight: int = Field(ge=0)
    last_analyzed: datetime
