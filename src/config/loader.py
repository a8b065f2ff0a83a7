"""Configuration loader with validation and state machine."""

import hashlib
import json
import time
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from src.config.constants import COMPONENT_CONFIG, FILE_TYPE_SCORING, FILE_TYPE_SOURCES
from src.config.defaults import default_sources_config
from src.config.effective import EffectiveConfig
from src.config.errors import ConfigurationError, errors_from_pydantic
from src.config.schemas.scoring import ScoringConfig
from src.config.schemas.sources import SourcesConfig
from src.config.state_machine import ConfigState, ConfigStateMachine
from src.settings import AppSettings


logger = structlog.get_logger()

# Error sources for values that do not come from a file
ENVIRONMENT_SOURCE = "environment"
DEFAULTS_SOURCE = "built-in defaults"


def load_settings() -> AppSettings:
    """Read AppSettings from NES_* variables and .env.

    Returns:
        The settings.

    Raises:
        ConfigurationError: If a variable holds a value of the wrong type.
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(errors_from_pydantic(e), ENVIRONMENT_SOURCE) from e


def _scoring_error_source(
    errors: list[dict[str, str]],
    overrides: dict[str, object],
    scoring_path: Path | None,
) -> str:
    """Name where the failing scoring values came from."""
    file_source = str(scoring_path) if scoring_path is not None else DEFAULTS_SOURCE
    failing = {err["loc"].split(".")[0] for err in errors}
    from_env = failing & overrides.keys()
    if not from_env:
        return file_source
    if from_env == failing:
        return ENVIRONMENT_SOURCE
    return f"{file_source} and {ENVIRONMENT_SOURCE}"


class ConfigLoader:
    """Loads and validates configuration files.

    Implements a state machine for configuration loading:
    UNLOADED -> LOADING -> VALIDATED -> READY

    Either path may be omitted: sources fall back to the built-in table
    and scoring to schema defaults. Environment overrides from
    AppSettings are applied on top of the scoring file.
    """

    def __init__(self, run_id: str, settings: AppSettings | None = None) -> None:
        """Initialize the loader.

        Args:
            run_id: Unique identifier for the current run.
            settings: Environment settings (read during load() if omitted).
        """
        self._run_id = run_id
        self._settings = settings
        self._state_machine = ConfigStateMachine()
        self._file_checksums: dict[str, str] = {}
        self._validation_errors: list[dict[str, str]] = []
        self._validation_duration_ms: float = 0

    @property
    def state(self) -> ConfigState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def file_checksums(self) -> dict[str, str]:
        """Get SHA-256 checksums of loaded files."""
        return self._file_checksums.copy()

    @property
    def validation_errors(self) -> list[dict[str, str]]:
        """Get validation errors if any."""
        return self._validation_errors.copy()

    @property
    def validation_duration_ms(self) -> float:
        """Get validation duration in milliseconds."""
        return self._validation_duration_ms

    def _load_yaml_file(self, file_path: Path) -> dict[str, object]:
        """Read a YAML mapping and record its checksum.

        Args:
            file_path: Path to the YAML file.

        Returns:
            Parsed mapping (empty for an empty file).

        Raises:
            FileNotFoundError: If file does not exist.
            yaml.YAMLError: If YAML parsing fails.
        """
        content_bytes = file_path.read_bytes()
        self._file_checksums[str(file_path.resolve())] = hashlib.sha256(
            content_bytes
        ).hexdigest()
        parsed = yaml.safe_load(content_bytes.decode("utf-8")) or {}
        if not isinstance(parsed, dict):
            msg = f"{file_path}: top level must be a mapping"
            raise yaml.YAMLError(msg)
        return parsed

    def load(
        self,
        sources_path: Path | None = None,
        scoring_path: Path | None = None,
    ) -> EffectiveConfig:
        """Load and validate the configuration.

        Args:
            sources_path: Optional path to sources.yaml.
            scoring_path: Optional path to scoring.yaml.

        Returns:
            EffectiveConfig ready to build a scoring engine from.

        Raises:
            ConfigurationError: If an environment value is invalid, or any
                file is missing, unreadable, unparsable or invalid.
            ConfigStateError: If called twice on the same loader.
        """
        start_time = time.perf_counter()
        self._state_machine.transition(ConfigState.LOADING)

        log = logger.bind(
            run_id=self._run_id,
            component=COMPONENT_CONFIG,
            phase="LOADING",
        )
        current = ENVIRONMENT_SOURCE

        try:
            settings = self._settings if self._settings is not None else AppSettings()

            current = DEFAULTS_SOURCE
            if sources_path is None:
                sources = default_sources_config()
            else:
                current = str(sources_path)
                log.info(
                    "loading_config_file",
                    file_path=current,
                    file_type=FILE_TYPE_SOURCES,
                )
                sources = SourcesConfig.model_validate(
                    self._load_yaml_file(sources_path)
                )
            log.info("sources_validated", source_count=len(sources.sources))

            scoring_data: dict[str, object] = {}
            if scoring_path is not None:
                current = str(scoring_path)
                log.info(
                    "loading_config_file",
                    file_path=current,
                    file_type=FILE_TYPE_SCORING,
                )
                scoring_data = self._load_yaml_file(scoring_path)

            overrides = settings.scoring_overrides()
            if overrides:
                log.info("scoring_env_overrides", overridden=sorted(overrides))
            try:
                scoring = ScoringConfig.model_validate({**scoring_data, **overrides})
            except ValidationError as e:
                current = _scoring_error_source(
                    errors_from_pydantic(e), overrides, scoring_path
                )
                raise

        except ValidationError as e:
            self._fail(errors_from_pydantic(e), log, "config_validation_failed")
            raise ConfigurationError(self._validation_errors, current) from e

        except FileNotFoundError as e:
            self._fail(
                [{"loc": "file", "msg": str(e), "type": "file_not_found"}],
                log,
                "config_file_not_found",
            )
            raise ConfigurationError(self._validation_errors, current) from e

        except UnicodeDecodeError as e:
            self._fail(
                [{"loc": "file", "msg": str(e), "type": "encoding_error"}],
                log,
                "config_encoding_error",
            )
            raise ConfigurationError(self._validation_errors, current) from e

        except OSError as e:
            self._fail(
                [{"loc": "file", "msg": str(e), "type": "file_read_error"}],
                log,
                "config_file_unreadable",
            )
            raise ConfigurationError(self._validation_errors, current) from e

        except yaml.YAMLError as e:
            self._fail(
                [{"loc": "yaml", "msg": str(e), "type": "yaml_parse_error"}],
                log,
                "config_yaml_parse_error",
            )
            raise ConfigurationError(self._validation_errors, current) from e

        self._state_machine.transition(ConfigState.VALIDATED)
        self._validation_duration_ms = (time.perf_counter() - start_time) * 1000
        log.info(
            "config_validation_complete",
            phase="VALIDATED",
            validation_error_count=0,
            config_validation_duration_ms=self._validation_duration_ms,
        )

        effective = EffectiveConfig(
            sources=sources,
            scoring=scoring,
            file_checksums=self._file_checksums.copy(),
            run_id=self._run_id,
        )
        self._state_machine.transition(ConfigState.READY)
        log.info("config_ready", phase="READY")
        return effective

    def _fail(
        self,
        errors: list[dict[str, str]],
        log: structlog.stdlib.BoundLogger,
        event: str,
    ) -> None:
        """Record errors, move to FAILED and log them."""
        self._state_machine.transition(ConfigState.FAILED)
        self._validation_errors.extend(errors)
        log.error(
            event,
            phase="FAILED",
            validation_error_count=len(self._validation_errors),
            errors=self._validation_errors,
        )

    def get_validation_summary(self) -> dict[str, object]:
        """Get a summary of the validation process.

        Returns:
            Dictionary with validation summary.
        """
        return {
            "run_id": self._run_id,
            "state": self._state_machine.state.name,
            "file_checksums": self._file_checksums,
            "validation_error_count": len(self._validation_errors),
            "validation_errors": self._validation_errors,
            "validation_duration_ms": self._validation_duration_ms,
        }

    def get_validation_summary_json(self) -> str:
        """Get validation summary as JSON string with stable ordering."""
        return json.dumps(self.get_validation_summary(), sort_keys=True, indent=2)
