"""Undo history for text input."""

from __future__ import annotations

from typing import List


class UndoStack:
    """Stack of previous input states."""

    def __init__(self) -> None:
        self._states: List[str] = []

    def save_state(self, state: str) -> None:
        """Push an input state onto the stack."""
        self._states.append(state)

    def undo(self) -> str:
        """Remove and return the last saved state, or an empty string."""
        if self._states:
            return self._states.pop()
        return ""

    def __len__(self) -> int:
        return len(self._states)