"""NES scoring module.

Turns raw posts into trend records: per-source baseline normalization,
age-decayed engagement velocity and an approval-ratio controversy
multiplier, plus batch filtering of pinned and low-score posts.
"""

from src.scoring.aggregation import deduplicate_trends, summarize_trends
from src.scoring.controversy import ControversyWeightModel
from src.scoring.engine import ScoringEngine
from src.scoring.errors import PostValidationError
from src.scoring.metrics import ScoringMetrics
from src.scoring.models import RawPost, TrendRecord, TrendSummary
from src.scoring.registry import SourceConfigRegistry
from src.scoring.rounding import round_to
from src.scoring.velocity import EngagementVelocityModel


__all__ = [
    "ControversyWeightModel",
    "EngagementVelocityModel",
    "PostValidationError",
    "RawPost",
    "ScoringEngine",
    "ScoringMetrics",
    "SourceConfigRegistry",
    "TrendRecord",
    "TrendSummary",
    "deduplicate_trends",
    "round_to",
    "summarize_trends",
]
