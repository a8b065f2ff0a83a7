"""Configuration loading and validation module."""

from src.config.effective import EffectiveConfig
from src.config.errors import ConfigurationError
from src.config.loader import ConfigLoader, load_settings
from src.config.state_machine import ConfigState, ConfigStateError


__all__ = [
    "ConfigLoader",
    "ConfigState",
    "ConfigStateError",
    "ConfigurationError",
    "EffectiveConfig",
    "load_settings",
]
