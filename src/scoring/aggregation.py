"""Order-preserving helpers over scored trend records."""

import re
from collections.abc import Iterable
from datetime import UTC, datetime

import structlog

from src.config.constants import COMPONENT_SCORING
from src.config.schemas.base import ContentCategory
from src.scoring.constants import DEDUPE_KEY_LENGTH, VELOCITY_DECIMALS
from src.scoring.models import TrendRecord, TrendSummary
from src.scoring.rounding import round_to


logger = structlog.get_logger()

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def summarize_trends(
    records: Iterable[TrendRecord],
    now: datetime | None = None,
) -> TrendSummary:
    """Count records per category and average their velocity.

    Args:
        records: Scored records.
        now: Timestamp for the summary (wall clock if omitted).

    Returns:
        TrendSummary with every category present.
    """
    breakdown = {category.value: 0 for category in ContentCategory}
    total = 0
    velocity_sum = 0.0
    for record in records:
        breakdown[record.category.value] += 1
        velocity_sum += record.engagement_velocity
        total += 1

    avg_velocity = velocity_sum / total if total else 0.0
    return TrendSummary(
        category_breakdown=breakdown,
        total_processed=total,
        avg_engagement_velocity=round_to(avg_velocity, VELOCITY_DECIMALS),
        generated_at=now or datetime.now(UTC),
    )


def normalize_title(title: str) -> str:
    """Reduce a title to a comparison key.

    Lowercases, strips everything but ASCII letters, digits and
    whitespace, collapses whitespace and keeps the first 50 characters.
    """
    key = _NON_ALNUM.sub("", title.lower())
    key = _WHITESPACE.sub(" ", key).strip()
    return key[:DEDUPE_KEY_LENGTH]


def deduplicate_trends(records: Iterable[TrendRecord]) -> list[TrendRecord]:
    """Drop records whose normalized title was already seen.

    The first occurrence wins and input order is kept.

    Args:
        records: Scored records.

    Returns:
        Records with unique normalized titles.
    """
    seen: set[str] = set()
    unique: list[TrendRecord] = []
    total = 0
    for record in records:
        total += 1
        key = normalize_title(record.title)
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)

    logger.debug(
        "trends_deduplicated",
        component=COMPONENT_SCORING,
        records_in=total,
        records_out=len(unique),
        duplicates_removed=total - len(unique),
    )
    return unique
