"""Source configuration schema."""

from typing import Annotated

from pydantic import Field, field_validator, model_validator

from src.config.schemas.base import ContentCategory, SourceTier
from src.data_model import StrictBaseModel


class SourceConfig(StrictBaseModel):
    """Configuration for a single community source.

    Attributes:
        name: Source name as it appears on posts (matched case-insensitively).
        category: Category tag assigned to every post from this source.
        baseline_score: Typical score of an ordinary post from this source.
        tier: Polling priority tier.
        subscribers: Approximate audience size (informational only).
    """

    name: Annotated[str, Field(min_length=1, max_length=100)]
    category: ContentCategory
    baseline_score: Annotated[float, Field(ge=1.0)]
    tier: SourceTier
    subscribers: Annotated[int, Field(ge=0)] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are blank or padded with whitespace."""
        if v != v.strip() or not v.strip():
            msg = "Source name must not be blank or padded with whitespace"
            raise ValueError(msg)
        return v

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.lower()


class SourcesConfig(StrictBaseModel):
    """Root configuration for sources.yaml.

    Attributes:
        version: Schema version.
        sources: Ordered list of source configurations.
    """

    version: Annotated[str, Field(pattern=r"^\d+\.\d+$")] = "1.0"
    sources: list[SourceConfig]

    @model_validator(mode="after")
    def validate_unique_names(self) -> "SourcesConfig":
        """Ensure no two sources collide case-insensitively."""
        keys = [s.key for s in self.sources]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            msg = f"Duplicate source names found: {duplicates}"
            raise ValueError(msg)
        return self
