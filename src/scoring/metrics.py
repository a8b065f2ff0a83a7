"""Metrics collection for the scoring module."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class ScoringMetrics:
    """Counters for scoring operations.

    Attributes:
        posts_in: Posts received by score_batch.
        posts_scored: Records produced (single and batch).
        filtered_pinned: Batch posts dropped because they were pinned.
        filtered_below_threshold: Batch posts dropped as below the noise floor.
        invalid_posts: Posts rejected by validation.
        invalid_by_field: Rejections per offending field.
        nes_values: NES of every record, for percentiles.
        scoring_duration_ms: Time spent in the last batch.
    """

    posts_in: int = 0
    posts_scored: int = 0
    filtered_pinned: int = 0
    filtered_below_threshold: int = 0
    invalid_posts: int = 0
    invalid_by_field: dict[str, int] = field(default_factory=dict)
    nes_values: list[float] = field(default_factory=list)
    scoring_duration_ms: float = 0.0

    _instance: ClassVar["ScoringMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ScoringMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_posts_in(self, count: int) -> None:
        """Add to the batch input count."""
        self.posts_in += count

    def record_scored(self, nes: float) -> None:
        """Record one produced record.

        Args:
            nes: Rounded NES of the record.
        """
        self.posts_scored += 1
        self.nes_values.append(nes)

    def record_filtered(self, reason: str) -> None:
        """Record a post dropped by the batch filter.

        Args:
            reason: "pinned" or "below_threshold".
        """
        if reason == "pinned":
            self.filtered_pinned += 1
        else:
            self.filtered_below_threshold += 1

    def record_invalid(self, fields: list[str]) -> None:
        """Record a rejected post.

        Args:
            fields: Locations of the validation errors.
        """
        self.invalid_posts += 1
        for name in fields:
            self.invalid_by_field[name] = self.invalid_by_field.get(name, 0) + 1

    def record_scoring_duration(self, duration_ms: float) -> None:
        """Record batch duration in milliseconds."""
        self.scoring_duration_ms = duration_ms

    def get_nes_percentiles(self) -> dict[str, float]:
        """Calculate NES percentiles (p50/p90/p99).

        Returns:
            Dictionary with p50, p90, p99 values.
        """
        if not self.nes_values:
            return {"p50": 0.0, "p90": 0.0, "p99": 0.0}

        sorted_values = sorted(self.nes_values)
        n = len(sorted_values)

        def percentile(p: float) -> float:
            idx = int(p * n / 100)
            return sorted_values[min(idx, n - 1)]

        return {
            "p50": percentile(50),
            "p90": percentile(90),
            "p99": percentile(99),
        }

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "posts_in": self.posts_in,
            "posts_scored": self.posts_scored,
            "filtered_pinned": self.filtered_pinned,
            "filtered_below_threshold": self.filtered_below_threshold,
            "invalid_posts": self.invalid_posts,
            "invalid_by_field": self.invalid_by_field,
            "scoring_duration_ms": self.scoring_duration_ms,
            "nes_percentiles": self.get_nes_percentiles(),
        }
