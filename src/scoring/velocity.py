"""Engagement velocity with age decay."""

from src.scoring.constants import COMMENT_WEIGHT, DECAY_BASE


class EngagementVelocityModel:
    """Engagement gained per hour, discounted by age.

    velocity = (score + 2 * comments) / age_hours * 0.9 ** (age_hours / decay_hours)

    For a fixed positive engagement the result strictly decreases as the
    post ages. Callers floor age_hours above zero beforehand.
    """

    def __init__(self, decay_hours: float) -> None:
        """Initialize the model.

        Args:
            decay_hours: Hours over which velocity shrinks by one DECAY_BASE step.

        Raises:
            ValueError: If decay_hours is not positive.
        """
        if decay_hours <= 0:
            msg = f"decay_hours must be positive, got {decay_hours}"
            raise ValueError(msg)
        self._decay_hours = decay_hours

    @property
    def decay_hours(self) -> float:
        """Configured decay constant."""
        return self._decay_hours

    def decay_factor(self, age_hours: float) -> float:
        """Multiplier in (0, 1] applied for the given age."""
        return DECAY_BASE ** (age_hours / self._decay_hours)

    def compute(self, raw_score: int, comment_count: int, age_hours: float) -> float:
        """Compute decayed engagement velocity.

        Args:
            raw_score: Net approvals (may be negative).
            comment_count: Number of comments.
            age_hours: Post age in hours, already floored above zero.

        Returns:
            Velocity in engagement points per hour.
        """
        total_engagement = raw_score + comment_count * COMMENT_WEIGHT
        return (total_engagement / age_hours) * self.decay_factor(age_hours)
