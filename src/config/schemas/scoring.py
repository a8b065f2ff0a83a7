"""Scoring configuration schema."""

from typing import Annotated, Literal

from pydantic import Field

from src.data_model import StrictBaseModel


BatchErrorPolicy = Literal["skip", "abort"]


class ScoringConfig(StrictBaseModel):
    """Tunable constants for the NES formula and batch filtering.

    Attributes:
        decay_hours: Hours over which velocity decays by one factor of 0.9.
        controversy_weight: Boost multiplier applied inside the controversy band.
        min_score_threshold: Raw score below which batch posts are dropped as noise.
        min_age_hours: Floor applied to post age. Keeps the one-decimal
            rounded age strictly positive.
        default_baseline: Baseline score used for unconfigured sources.
        batch_error_policy: What score_batch does with an invalid post
            ("skip" logs and continues, "abort" raises).
    """

    decay_hours: Annotated[float, Field(gt=0.0, le=10_000.0)] = 24.0
    controversy_weight: Annotated[float, Field(ge=0.0, le=100.0)] = 2.0
    min_score_threshold: int = 100
    min_age_hours: Annotated[float, Field(ge=0.05, le=24.0)] = 0.1
    default_baseline: Annotated[float, Field(ge=1.0)] = 1000.0
    batch_error_policy: BatchErrorPolicy = "skip"
