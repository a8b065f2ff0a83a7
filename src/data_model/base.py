"""Shared Pydantic base models."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model for configuration and output records.

    Frozen so records cannot change after they are produced, and strict
    about unknown keys so typos in YAML surface as validation errors.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
