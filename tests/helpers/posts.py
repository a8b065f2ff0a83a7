"""Post payload builders for tests."""

from tests.helpers.time import hours_ago


def make_post_data(
    post_id: str = "p1",
    *,
    title: str = "Test Post",
    source: str = "technology",
    score: int = 1000,
    approval_ratio: float = 0.9,
    comment_count: int = 50,
    age_hours: float = 2.0,
    pinned: bool = False,
    **extra: object,
) -> dict[str, object]:
    """Build a valid post mapping; keyword overrides replace fields."""
    data: dict[str, object] = {
        "id": post_id,
        "title": title,
        "source": source,
        "score": score,
        "approval_ratio": approval_ratio,
        "comment_count": comment_count,
        "created_utc": hours_ago(age_hours),
        "permalink": f"/r/{source}/comments/{post_id}/",
        "url": f"https://example.com/{post_id}",
        "pinned": pinned,
    }
    data.update(extra)
    return data
