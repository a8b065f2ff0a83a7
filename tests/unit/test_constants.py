"""Unit tests for configuration and scoring constants."""

import pytest

from src.config.constants import (
    COMPONENT_CLI,
    COMPONENT_CONFIG,
    COMPONENT_SCORING,
    FILE_TYPE_SCORING,
    FILE_TYPE_SOURCES,
)
from src.config.schemas.scoring import ScoringConfig
from src.scoring import constants as scoring_constants


class TestComponentConstants:
    """Tests for log component names."""

    @pytest.mark.unit
    def test_component_names_are_unique(self) -> None:
        """Component names must not collide in log output."""
        components = [COMPONENT_CONFIG, COMPONENT_CLI, COMPONENT_SCORING]
        assert len(components) == len(set(components))

    @pytest.mark.unit
    def test_file_types_are_unique(self) -> None:
        """File type tags are distinct."""
        assert FILE_TYPE_SOURCES != FILE_TYPE_SCORING


class TestScoringConstants:
    """Tests for formula constants."""

    @pytest.mark.unit
    def test_controversy_bounds_ordered(self) -> None:
        """The contested band is non-empty."""
        assert (
            0
            < scoring_constants.CONTROVERSY_LOW_BOUND
            < scoring_constants.CONTROVERSY_HIGH_BOUND
            <= 1
        )

    @pytest.mark.unit
    def test_decimal_places(self) -> None:
        """Output precision is fixed per field."""
        assert scoring_constants.NES_DECIMALS == 3
        assert scoring_constants.VELOCITY_DECIMALS == 2
        assert scoring_constants.CONTROVERSY_DECIMALS == 2
        assert scoring_constants.AGE_DECIMALS == 1

    @pytest.mark.unit
    def test_default_age_floor_survives_rounding(self) -> None:
        """The default floor stays positive at one decimal place."""
        assert round(ScoringConfig().min_age_hours, 1) > 0
