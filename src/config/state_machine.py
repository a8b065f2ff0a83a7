"""Configuration state machine implementation."""

from enum import Enum, auto
from typing import ClassVar


class ConfigState(Enum):
    """Configuration loading states.

    State transitions:
        UNLOADED -> LOADING: Start reading configuration files
        LOADING -> VALIDATED: Every file parsed and passed schema validation
        VALIDATED -> READY: EffectiveConfig assembled and handed out
        Any non-terminal -> FAILED: Missing file, YAML or schema error
    """

    UNLOADED = auto()
    LOADING = auto()
    VALIDATED = auto()
    READY = auto()
    FAILED = auto()


class ConfigStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ConfigState, to_state: ConfigState) -> None:
        """Initialize the error.

        Args:
            from_state: The current state.
            to_state: The attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


class ConfigStateMachine:
    """Guards the order of configuration loading phases.

    A loader instance is single use: once READY or FAILED it cannot
    load again.
    """

    VALID_TRANSITIONS: ClassVar[dict[ConfigState, frozenset[ConfigState]]] = {
        ConfigState.UNLOADED: frozenset({ConfigState.LOADING, ConfigState.FAILED}),
        ConfigState.LOADING: frozenset({ConfigState.VALIDATED, ConfigState.FAILED}),
        ConfigState.VALIDATED: frozenset({ConfigState.READY, ConfigState.FAILED}),
        ConfigState.READY: frozenset(),
        ConfigState.FAILED: frozenset(),
    }

    def __init__(self) -> None:
        """Start in UNLOADED."""
        self._state = ConfigState.UNLOADED
        self._history: list[ConfigState] = [ConfigState.UNLOADED]

    @property
    def state(self) -> ConfigState:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> tuple[ConfigState, ...]:
        """States visited so far, oldest first."""
        return tuple(self._history)

    def can_transition(self, to_state: ConfigState) -> bool:
        """Check whether moving to ``to_state`` is allowed."""
        return to_state in self.VALID_TRANSITIONS[self._state]

    def transition(self, to_state: ConfigState) -> None:
        """Move to a new state.

        Args:
            to_state: The target state.

        Raises:
            ConfigStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise ConfigStateError(self._state, to_state)
        self._state = to_state
        self._history.append(to_state)

    def is_ready(self) -> bool:
        """Check if configuration is ready for use."""
        return self._state == ConfigState.READY

    def is_failed(self) -> bool:
        """Check if configuration loading has failed."""
        return self._state == ConfigState.FAILED
