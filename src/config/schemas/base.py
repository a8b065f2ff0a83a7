"""Base schema types for configuration."""

from enum import Enum


class SourceTier(int, Enum):
    """Source tier classification.

    Tier 1: High-volume communities, polled most often
    Tier 2: Mid-volume communities
    Tier 3: Niche communities, polled least often
    """

    TIER_1 = 1
    TIER_2 = 2
    TIER_3 = 3


class ContentCategory(str, Enum):
    """Category tag a trend is grouped under."""

    TECHNOLOGY = "technology"
    FINANCE = "finance"
    ENTERTAINMENT = "entertainment"
    GAMING = "gaming"
    LIFESTYLE = "lifestyle"
    NEWS = "news"
    DRAMA = "drama"
    SPORTS = "sports"
    SCIENCE = "science"
    OTHER = "other"
