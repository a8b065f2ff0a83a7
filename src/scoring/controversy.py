"""Controversy multiplier derived from the approval ratio."""

from src.scoring.constants import (
    CONTROVERSY_HIGH_BOUND,
    CONTROVERSY_LOW_BOUND,
    NEUTRAL_FACTOR,
    SUPPRESSED_FACTOR,
)


class ControversyWeightModel:
    """Multiplier rewarding contested posts.

    Bands over the approval ratio (half-open, lower bound inclusive):
        [0.0, 0.4)  -> 0.5, broadly disliked
        [0.4, 0.7)  -> 1 + (1 - ratio) * weight, contested
        [0.7, 1.0]  -> 1.0, well received

    The value jumps at both 0.4 and 0.7.
    """

    def __init__(self, controversy_weight: float) -> None:
        """Initialize the model.

        Args:
            controversy_weight: Boost applied inside the contested band.
        """
        self._weight = controversy_weight

    @property
    def controversy_weight(self) -> float:
        """Configured boost weight."""
        return self._weight

    def compute(self, approval_ratio: float) -> float:
        """Compute the controversy factor.

        Args:
            approval_ratio: Share of positive votes, 0 to 1.

        Returns:
            Multiplier for the NES product.
        """
        if approval_ratio < CONTROVERSY_LOW_BOUND:
            return SUPPRESSED_FACTOR
        if approval_ratio < CONTROVERSY_HIGH_BOUND:
            return 1 + (1 - approval_ratio) * self._weight
        return NEUTRAL_FACTOR
