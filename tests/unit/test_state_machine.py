"""Unit tests for configuration state machine."""

import pytest

from src.config.state_machine import (
    ConfigState,
    ConfigStateError,
    ConfigStateMachine,
)


def _machine_in(state: ConfigState) -> ConfigStateMachine:
    """Drive a fresh machine along the happy path up to ``state``."""
    machine = ConfigStateMachine()
    path = [ConfigState.LOADING, ConfigState.VALIDATED, ConfigState.READY]
    if state == ConfigState.FAILED:
        machine.transition(ConfigState.FAILED)
        return machine
    for step in path:
        if machine.state == state:
            break
        machine.transition(step)
    return machine


class TestConfigState:
    """Tests for ConfigState enum."""

    @pytest.mark.unit
    def test_all_states_defined(self) -> None:
        """Test that all expected states are defined."""
        expected_states = {"UNLOADED", "LOADING", "VALIDATED", "READY", "FAILED"}
        actual_states = {state.name for state in ConfigState}
        assert actual_states == expected_states


class TestConfigStateMachine:
    """Tests for ConfigStateMachine."""

    @pytest.mark.unit
    def test_initial_state(self) -> None:
        """Test that initial state is UNLOADED."""
        machine = ConfigStateMachine()
        assert machine.state == ConfigState.UNLOADED
        assert machine.history == (ConfigState.UNLOADED,)

    @pytest.mark.unit
    def test_happy_path(self) -> None:
        """UNLOADED -> LOADING -> VALIDATED -> READY."""
        machine = ConfigStateMachine()
        machine.transition(ConfigState.LOADING)
        machine.transition(ConfigState.VALIDATED)
        machine.transition(ConfigState.READY)
        assert machine.is_ready()
        assert not machine.is_failed()
        assert machine.history == (
            ConfigState.UNLOADED,
            ConfigState.LOADING,
            ConfigState.VALIDATED,
            ConfigState.READY,
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "start_state",
        [ConfigState.UNLOADED, ConfigState.LOADING, ConfigState.VALIDATED],
    )
    def test_non_terminal_states_can_fail(self, start_state: ConfigState) -> None:
        """Test that every non-terminal state can move to FAILED."""
        machine = _machine_in(start_state)
        assert machine.state == start_state
        machine.transition(ConfigState.FAILED)
        assert machine.is_failed()

    @pytest.mark.unit
    @pytest.mark.parametrize("terminal", [ConfigState.READY, ConfigState.FAILED])
    def test_terminal_states_reject_everything(self, terminal: ConfigState) -> None:
        """READY and FAILED have no outgoing transitions."""
        machine = _machine_in(terminal)
        for target in ConfigState:
            assert not machine.can_transition(target)
            with pytest.raises(ConfigStateError):
                machine.transition(target)

    @pytest.mark.unit
    def test_cannot_skip_validation(self) -> None:
        """Test that LOADING cannot go straight to READY."""
        machine = _machine_in(ConfigState.LOADING)
        with pytest.raises(ConfigStateError) as exc_info:
            machine.transition(ConfigState.READY)
        assert exc_info.value.from_state == ConfigState.LOADING
        assert exc_info.value.to_state == ConfigState.READY
        assert "LOADING -> READY" in str(exc_info.value)

    @pytest.mark.unit
    def test_failed_transition_leaves_state_unchanged(self) -> None:
        """A rejected transition does not alter state or history."""
        machine = ConfigStateMachine()
        with pytest.raises(ConfigStateError):
            machine.transition(ConfigState.VALIDATED)
        assert machine.state == ConfigState.UNLOADED
        assert machine.history == (ConfigState.UNLOADED,)
