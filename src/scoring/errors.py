"""Errors raised while scoring posts."""


class PostValidationError(Exception):
    """Raised when a post is missing a field or holds an out-of-domain value.

    Scoring is deterministic, so retrying the same post always fails the
    same way.
    """

    def __init__(self, post_id: str | None, errors: list[dict[str, str]]) -> None:
        """Initialize the error.

        Args:
            post_id: ID of the rejected post, when it could be read.
            errors: Validation error details, each with loc/msg/type keys.
        """
        self.post_id = post_id
        self.errors = errors
        details = "; ".join(f"{e['loc']}: {e['msg']}" for e in errors)
        super().__init__(f"Invalid post {post_id or '<unknown>'}: {details}")
