"""NES scoring engine."""

import time
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime

import structlog
from pydantic import ValidationError

from src.config.constants import COMPONENT_SCORING
from src.config.effective import EffectiveConfig
from src.config.errors import errors_from_pydantic
from src.config.schemas.base import ContentCategory
from src.config.schemas.scoring import ScoringConfig
from src.scoring.constants import (
    AGE_DECIMALS,
    CONTROVERSY_DECIMALS,
    NES_DECIMALS,
    SECONDS_PER_HOUR,
    VELOCITY_DECIMALS,
)
from src.scoring.controversy import ControversyWeightModel
from src.scoring.errors import PostValidationError
from src.scoring.metrics import ScoringMetrics
from src.scoring.models import RawPost, TrendRecord
from src.scoring.registry import SourceConfigRegistry
from src.scoring.rounding import round_to
from src.scoring.velocity import EngagementVelocityModel


logger = structlog.get_logger()

PostInput = RawPost | Mapping[str, object]


class ScoringEngine:
    """Turns raw posts into NES trend records.

    Scoring formula:
        age_hours = max((now - created_utc) / 3600, min_age_hours)
        nes = (score / baseline) * velocity * controversy

    Where:
        - baseline: the source's baseline score, default_baseline if unconfigured
        - velocity: EngagementVelocityModel over score, comments and age
        - controversy: ControversyWeightModel over the approval ratio

    The engine holds no mutable state besides metrics; the registry and
    config are read-only, so one instance may be shared freely.
    """

    def __init__(
        self,
        registry: SourceConfigRegistry | None = None,
        scoring_config: ScoringConfig | None = None,
        metrics: ScoringMetrics | None = None,
        now: datetime | None = None,
        run_id: str = "default",
    ) -> None:
        """Initialize the engine.

        Args:
            registry: Source registry (built-in table if omitted).
            scoring_config: Tunable constants (schema defaults if omitted).
            metrics: Optional metrics instance.
            now: Fixed timezone-aware clock for reproducible runs; wall
                clock if omitted.
            run_id: Run identifier for logging.

        Raises:
            ValueError: If now is a naive datetime.
        """
        self._registry = (
            registry if registry is not None else SourceConfigRegistry.default()
        )
        self._config = scoring_config or ScoringConfig()
        self._metrics = metrics or ScoringMetrics.get_instance()
        if now is not None and now.utcoffset() is None:
            msg = f"now must be timezone-aware, got naive {now.isoformat()}"
            raise ValueError(msg)
        self._fixed_now = now
        self._velocity = EngagementVelocityModel(self._config.decay_hours)
        self._controversy = ControversyWeightModel(self._config.controversy_weight)
        self._log = logger.bind(
            component=COMPONENT_SCORING,
            subcomponent="engine",
            run_id=run_id,
        )

    @classmethod
    def from_config(
        cls,
        config: EffectiveConfig,
        metrics: ScoringMetrics | None = None,
        now: datetime | None = None,
    ) -> "ScoringEngine":
        """Build an engine from a loaded EffectiveConfig."""
        return cls(
            registry=SourceConfigRegistry.from_config(config.sources),
            scoring_config=config.scoring,
            metrics=metrics,
            now=now,
            run_id=config.run_id,
        )

    @property
    def registry(self) -> SourceConfigRegistry:
        """Source registry used for baselines and categories."""
        return self._registry

    @property
    def scoring_config(self) -> ScoringConfig:
        """Tunable constants in effect."""
        return self._config

    def score(self, post: PostInput) -> TrendRecord:
        """Score a single post.

        Args:
            post: A RawPost or a mapping with RawPost fields.

        Returns:
            The trend record.

        Raises:
            PostValidationError: If the post is malformed.
        """
        raw = self._validate(post)
        return self._score(raw, self._now())

    def score_batch(self, posts: Iterable[PostInput]) -> list[TrendRecord]:
        """Filter and score a batch, keeping input order.

        Pinned posts and posts scoring below min_score_threshold are
        dropped. Invalid posts are logged and skipped, or abort the batch
        when batch_error_policy is "abort". Records are never re-sorted.

        Args:
            posts: Posts in upstream order.

        Returns:
            Trend records for the posts that passed the filter.

        Raises:
            PostValidationError: On the first invalid post under the abort policy.
        """
        start = time.perf_counter()
        now = self._now()
        records: list[TrendRecord] = []
        received = 0

        for post in posts:
            received += 1
            try:
                raw = self._validate(post)
            except PostValidationError as e:
                if self._config.batch_error_policy == "abort":
                    self._log.error(
                        "batch_aborted", post_id=e.post_id, errors=e.errors
                    )
                    raise
                self._log.warning("post_invalid", post_id=e.post_id, errors=e.errors)
                continue

            reason = self._filter_reason(raw)
            if reason is not None:
                self._metrics.record_filtered(reason)
                self._log.debug("post_filtered", post_id=raw.id, reason=reason)
                continue

            records.append(self._score(raw, now))

        duration_ms = (time.perf_counter() - start) * 1000
        self._metrics.record_posts_in(received)
        self._metrics.record_scoring_duration(duration_ms)
        self._log.info(
            "batch_scored",
            posts_in=received,
            posts_out=len(records),
            min_nes=min((r.nes for r in records), default=0.0),
            max_nes=max((r.nes for r in records), default=0.0),
            duration_ms=duration_ms,
        )
        return records

    def _now(self) -> datetime:
        return self._fixed_now or datetime.now(UTC)

    def _filter_reason(self, post: RawPost) -> str | None:
        """Why a batch post is dropped, or None to keep it."""
        if post.pinned:
            return "pinned"
        if post.score < self._config.min_score_threshold:
            return "below_threshold"
        return None

    def _validate(self, post: PostInput) -> RawPost:
        """Coerce input into a RawPost.

        Raises:
            PostValidationError: If validation fails.
        """
        if isinstance(post, RawPost):
            return post
        try:
            return RawPost.model_validate(post)
        except ValidationError as e:
            post_id = post.get("id") if isinstance(post, Mapping) else None
            errors = errors_from_pydantic(e)
            self._metrics.record_invalid([err["loc"] for err in errors])
            raise PostValidationError(
                str(post_id) if post_id is not None else None, errors
            ) from e

    def _score(self, post: RawPost, now: datetime) -> TrendRecord:
        """Apply the NES formula to a validated post."""
        age_hours = max(
            (now.timestamp() - post.created_utc) / SECONDS_PER_HOUR,
            self._config.min_age_hours,
        )

        source_config = self._registry.lookup(post.source)
        if source_config is not None:
            baseline = source_config.baseline_score
            category = source_config.category
            tier: int | None = int(source_config.tier)
        else:
            baseline = self._config.default_baseline
            category = ContentCategory.OTHER
            tier = None

        velocity = self._velocity.compute(post.score, post.comment_count, age_hours)
        controversy = self._controversy.compute(post.approval_ratio)
        normalized_score = post.score / baseline
        nes = normalized_score * velocity * controversy

        record = TrendRecord(
            id=post.id,
            title=post.title,
            source=post.source,
            category=category,
            tier=tier,
            score=post.score,
            approval_ratio=post.approval_ratio,
            comment_count=post.comment_count,
            created_utc=post.created_utc,
            age_hours=round_to(age_hours, AGE_DECIMALS),
            nes=round_to(nes, NES_DECIMALS),
            engagement_velocity=round_to(velocity, VELOCITY_DECIMALS),
            controversy_factor=round_to(controversy, CONTROVERSY_DECIMALS),
            permalink=post.permalink,
            source_url=post.url,
            fetched_at=now,
        )
        self._metrics.record_scored(record.nes)
        self._log.debug(
            "post_scored",
            post_id=post.id,
            category=category.value,
            nes=record.nes,
        )
        return record
