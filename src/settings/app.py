"""Application settings powered by Pydantic BaseSettings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Settings fields that map one-to-one onto ScoringConfig
SCORING_FIELDS = (
    "decay_hours",
    "controversy_weight",
    "min_score_threshold",
    "min_age_hours",
    "default_baseline",
    "batch_error_policy",
)


class AppSettings(BaseSettings):
    """Centralized environment configuration.

    Every value is optional; unset values leave the file or built-in
    defaults in place.
    """

    model_config = SettingsConfigDict(
        env_prefix="NES_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    decay_hours: float | None = None
    controversy_weight: float | None = None
    min_score_threshold: int | None = None
    min_age_hours: float | None = None
    default_baseline: float | None = None
    batch_error_policy: Literal["skip", "abort"] | None = None

    log_level: str = Field(default="INFO")
    log_json: bool = True

    def scoring_overrides(self) -> dict[str, object]:
        """Return the scoring values set in the environment.

        Returns:
            Mapping of ScoringConfig field name to override value.
        """
        return {
            name: getattr(self, name)
            for name in SCORING_FIELDS
            if getattr(self, name) is not None
        }


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
