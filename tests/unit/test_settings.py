"""Unit tests for environment settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.errors import ConfigurationError
from src.config.loader import load_settings
from src.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run without NES_* variables or a stray .env file."""
    for name in (
        "NES_DECAY_HOURS",
        "NES_CONTROVERSY_WEIGHT",
        "NES_MIN_SCORE_THRESHOLD",
        "NES_MIN_AGE_HOURS",
        "NES_DEFAULT_BASELINE",
        "NES_BATCH_ERROR_POLICY",
        "NES_LOG_LEVEL",
        "NES_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestAppSettings:
    """Tests for AppSettings."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Nothing set means no overrides."""
        settings = AppSettings()
        assert settings.scoring_overrides() == {}
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    @pytest.mark.unit
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """NES_* variables become scoring overrides."""
        monkeypatch.setenv("NES_DECAY_HOURS", "12")
        monkeypatch.setenv("NES_MIN_SCORE_THRESHOLD", "50")
        monkeypatch.setenv("NES_BATCH_ERROR_POLICY", "abort")

        overrides = AppSettings().scoring_overrides()

        assert overrides == {
            "decay_hours": 12.0,
            "min_score_threshold": 50,
            "batch_error_policy": "abort",
        }

    @pytest.mark.unit
    def test_lowercase_env_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variable names are case-insensitive."""
        monkeypatch.setenv("nes_controversy_weight", "3.5")
        assert AppSettings().controversy_weight == 3.5

    @pytest.mark.unit
    def test_bad_policy_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only skip and abort are accepted."""
        monkeypatch.setenv("NES_BATCH_ERROR_POLICY", "retry")
        with pytest.raises(ValidationError):
            AppSettings()

    @pytest.mark.unit
    def test_dotenv_file(self, tmp_path: Path) -> None:
        """Values are also read from .env in the working directory."""
        (tmp_path / ".env").write_text("NES_LOG_LEVEL=DEBUG\nNES_LOG_JSON=false\n")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is False


class TestLoadSettings:
    """Tests for load_settings."""

    @pytest.mark.unit
    def test_valid_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Well-formed variables load as usual."""
        monkeypatch.setenv("NES_DECAY_HOURS", "12")
        assert load_settings().decay_hours == 12.0

    @pytest.mark.unit
    def test_malformed_value_is_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A wrong-typed variable is reported against the environment."""
        monkeypatch.setenv("NES_DECAY_HOURS", "soon")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert exc_info.value.source == "environment"
        assert [e["loc"] for e in exc_info.value.errors] == ["decay_hours"]
