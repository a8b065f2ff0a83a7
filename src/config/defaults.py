"""Built-in source table.

Used when no sources.yaml is supplied. Baselines are the typical score of
an ordinary front-page post in each community.
"""

from typing import Final

from src.config.schemas.sources import SourcesConfig


DEFAULT_SOURCES: Final[tuple[dict[str, object], ...]] = (
    # Technology
    {"name": "technology", "category": "technology", "tier": 1, "baseline_score": 5_000, "subscribers": 15_000_000},
    {"name": "programming", "category": "technology", "tier": 1, "baseline_score": 2_000, "subscribers": 6_000_000},
    {"name": "apple", "category": "technology", "tier": 1, "baseline_score": 3_000, "subscribers": 4_000_000},
    {"name": "Android", "category": "technology", "tier": 2, "baseline_score": 1_500, "subscribers": 3_000_000},
    {"name": "gadgets", "category": "technology", "tier": 2, "baseline_score": 2_000, "subscribers": 20_000_000},
    {"name": "Futurology", "category": "technology", "tier": 2, "baseline_score": 3_000, "subscribers": 18_000_000},
    {"name": "artificial", "category": "technology", "tier": 1, "baseline_score": 1_000, "subscribers": 500_000},

    # Finance
    {"name": "wallstreetbets", "category": "finance", "tier": 1, "baseline_score": 5_000, "subscribers": 15_000_000},
    {"name": "stocks", "category": "finance", "tier": 1, "baseline_score": 1_000, "subscribers": 6_000_000},
    {"name": "cryptocurrency", "category": "finance", "tier": 1, "baseline_score": 2_000, "subscribers": 6_500_000},
    {"name": "Bitcoin", "category": "finance", "tier": 2, "baseline_score": 1_500, "subscribers": 5_000_000},
    {"name": "personalfinance", "category": "finance", "tier": 2, "baseline_score": 3_000, "subscribers": 18_000_000},

    # Entertainment
    {"name": "movies", "category": "entertainment", "tier": 1, "baseline_score": 5_000, "subscribers": 32_000_000},
    {"name": "television", "category": "entertainment", "tier": 1, "baseline_score": 3_000, "subscribers": 18_000_000},
    {"name": "Music", "category": "entertainment", "tier": 2, "baseline_score": 2_000, "subscribers": 32_000_000},
    {"name": "videos", "category": "entertainment", "tier": 1, "baseline_score": 5_000, "subscribers": 26_000_000},
    {"name": "funny", "category": "entertainment", "tier": 1, "baseline_score": 10_000, "subscribers": 50_000_000},
    {"name": "memes", "category": "entertainment", "tier": 1, "baseline_score": 15_000, "subscribers": 22_000_000},

    # Gaming
    {"name": "gaming", "category": "gaming", "tier": 1, "baseline_score": 10_000, "subscribers": 37_000_000},
    {"name": "pcgaming", "category": "gaming", "tier": 2, "baseline_score": 2_000, "subscribers": 6_000_000},
    {"name": "Games", "category": "gaming", "tier": 2, "baseline_score": 1_500, "subscribers": 3_500_000},
    {"name": "PS5", "category": "gaming", "tier": 2, "baseline_score": 1_000, "subscribers": 4_000_000},

    # Lifestyle
    {"name": "LifeProTips", "category": "lifestyle", "tier": 1, "baseline_score": 5_000, "subscribers": 25_000_000},
    {"name": "todayilearned", "category": "lifestyle", "tier": 1, "baseline_score": 10_000, "subscribers": 32_000_000},
    {"name": "GetMotivated", "category": "lifestyle", "tier": 2, "baseline_score": 3_000, "subscribers": 18_000_000},
    {"name": "Fitness", "category": "lifestyle", "tier": 2, "baseline_score": 1_000, "subscribers": 11_000_000},

    # News
    {"name": "worldnews", "category": "news", "tier": 1, "baseline_score": 10_000, "subscribers": 32_000_000},
    {"name": "news", "category": "news", "tier": 1, "baseline_score": 8_000, "subscribers": 25_000_000},
    {"name": "UpliftingNews", "category": "news", "tier": 2, "baseline_score": 5_000, "subscribers": 18_000_000},

    # Drama
    {"name": "AmItheAsshole", "category": "drama", "tier": 1, "baseline_score": 8_000, "subscribers": 10_000_000},
    {"name": "relationship_advice", "category": "drama", "tier": 1, "baseline_score": 3_000, "subscribers": 9_000_000},
    {"name": "tifu", "category": "drama", "tier": 1, "baseline_score": 10_000, "subscribers": 18_000_000},
    {"name": "confessions", "category": "drama", "tier": 2, "baseline_score": 2_000, "subscribers": 4_000_000},

    # Science
    {"name": "science", "category": "science", "tier": 1, "baseline_score": 8_000, "subscribers": 30_000_000},
    {"name": "space", "category": "science", "tier": 2, "baseline_score": 5_000, "subscribers": 23_000_000},
    {"name": "Astronomy", "category": "science", "tier": 3, "baseline_score": 2_000, "subscribers": 2_000_000},

    # Sports
    {"name": "sports", "category": "sports", "tier": 2, "baseline_score": 3_000, "subscribers": 20_000_000},
    {"name": "nba", "category": "sports", "tier": 1, "baseline_score": 5_000, "subscribers": 10_000_000},
    {"name": "soccer", "category": "sports", "tier": 1, "baseline_score": 3_000, "subscribers": 5_000_000},
)


def default_sources_config() -> SourcesConfig:
    """Validate and return the built-in source table.

    Returns:
        SourcesConfig built from DEFAULT_SOURCES.
    """
    return SourcesConfig.model_validate({"sources": list(DEFAULT_SOURCES)})
