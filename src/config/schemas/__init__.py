"""Configuration schema definitions."""

from src.config.schemas.base import ContentCategory, SourceTier
from src.config.schemas.scoring import BatchErrorPolicy, ScoringConfig
from src.config.schemas.sources import SourceConfig, SourcesConfig


__all__ = [
    "BatchErrorPolicy",
    "ContentCategory",
    "ScoringConfig",
    "SourceConfig",
    "SourceTier",
    "SourcesConfig",
]
