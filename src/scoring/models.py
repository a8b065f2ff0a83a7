"""Data models for posts and trend records."""

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, ConfigDict, Field

from src.config.schemas.base import ContentCategory
from src.data_model import StrictBaseModel
from src.scoring.constants import MAX_ABS_SCORE, MAX_COMMENT_COUNT


class RawPost(StrictBaseModel):
    """A post as delivered by the acquisition layer.

    Accepts both the neutral field names and the Reddit listing names
    (subreddit, upvote_ratio, num_comments, stickied). Unknown keys are
    ignored so listing payloads validate as-is.

    Attributes:
        id: Post identifier.
        title: Post title.
        source: Community the post was published in.
        score: Net approvals; may be negative, bounded by MAX_ABS_SCORE.
        approval_ratio: Share of positive votes, 0 to 1.
        comment_count: Number of comments.
        created_utc: Creation time in unix seconds.
        permalink: Path of the discussion page.
        url: External link the post points to.
        pinned: Whether moderators pinned the post.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Annotated[str, Field(min_length=1)]
    title: str
    source: Annotated[
        str,
        Field(min_length=1, validation_alias=AliasChoices("source", "subreddit")),
    ]
    score: Annotated[int, Field(ge=-MAX_ABS_SCORE, le=MAX_ABS_SCORE)]
    approval_ratio: Annotated[
        float,
        Field(
            ge=0.0,
            le=1.0,
            validation_alias=AliasChoices("approval_ratio", "upvote_ratio"),
        ),
    ]
    comment_count: Annotated[
        int,
        Field(
            ge=0,
            le=MAX_COMMENT_COUNT,
            validation_alias=AliasChoices("comment_count", "num_comments"),
        ),
    ]
    created_utc: Annotated[float, Field(allow_inf_nan=False)]
    permalink: str = ""
    url: str = ""
    pinned: Annotated[
        bool, Field(validation_alias=AliasChoices("pinned", "stickied"))
    ] = False


class TrendRecord(StrictBaseModel):
    """A scored post, produced once per RawPost.

    Attributes:
        id: Post identifier.
        title: Post title.
        source: Community name as given on the post.
        category: Resolved category ("other" for unconfigured sources).
        tier: Source tier, None for unconfigured sources.
        score: Raw net approvals.
        approval_ratio: Raw approval ratio.
        comment_count: Raw comment count.
        created_utc: Creation time in unix seconds.
        age_hours: Floored age in hours, rounded to 1 decimal.
        nes: Normalized Engagement Score, rounded to 3 decimals.
        engagement_velocity: Decayed engagement per hour, 2 decimals.
        controversy_factor: Approval-ratio multiplier, 2 decimals.
        permalink: Path of the discussion page.
        source_url: External link the post points to.
        fetched_at: When the record was produced (UTC).
    """

    id: str
    title: str
    source: str
    category: ContentCategory
    tier: int | None = None
    score: Annotated[int, Field(ge=-MAX_ABS_SCORE, le=MAX_ABS_SCORE)]
    approval_ratio: float
    comment_count: int
    created_utc: float
    age_hours: Annotated[float, Field(gt=0.0)]
    nes: float
    engagement_velocity: float
    controversy_factor: float
    permalink: str = ""
    source_url: str = ""
    fetched_at: datetime


class TrendSummary(StrictBaseModel):
    """Aggregate view over a batch of trend records.

    Attributes:
        category_breakdown: Record count per category value, zero-filled.
        total_processed: Number of records summarized.
        avg_engagement_velocity: Mean velocity, 2 decimals.
        generated_at: When the summary was produced (UTC).
    """

    category_breakdown: dict[str, int]
    total_processed: Annotated[int, Field(ge=0)]
    avg_engagement_velocity: float
    generated_at: datetime
