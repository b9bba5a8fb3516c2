"""On/off flags keyed by a state enumeration."""

from __future__ import annotations

from enum import Enum


class StateEnum(Enum):
    """Visual states of the cursor."""

    BLINKING = 0
    HIDDEN = 1


class States:
    """Holds a boolean flag for every StateEnum member, all off at start."""

    def __init__(self) -> None:
        self._states = {state: False for state in StateEnum}

    def enable(self, state: StateEnum) -> None:
        """Set the state on."""
        self._states[StateEnum(state)] = True

    def disable(self, state: StateEnum) -> None:
        """Set the state off."""
        self._states[StateEnum(state)] = False

    def toggle(self, state: StateEnum) -> None:
        """Flip the state."""
        key = StateEnum(state)
        self._states[key] = not self._states[key]

    def check(self, state: StateEnum) -> bool:
        """Return the current value of the state."""
        return self._states[StateEnum(state)]