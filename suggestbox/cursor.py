"""Blinking text cursor with a character position."""

from __future__ import annotations

BLINK_INTERVAL = 0.5
CURSOR_WIDTH = 2.0


class Cursor:
    """A vertical cursor line that blinks and tracks a character index."""

    def __init__(self, size: int) -> None:
        self.width = CURSOR_WIDTH
        self.height = float(size)
        self.blink_time = 0.0
        self.visible = True
        self.position = 0

    def update(self, delta_seconds: float) -> None:
        """Advance the blink timer, toggling visibility every half second."""
        self.blink_time += delta_seconds
        if self.blink_time >= BLINK_INTERVAL:
            self.visible = not self.visible
            self.blink_time = 0.0

    def move_left(self) -> None:
        """Move one character left, stopping at the start."""
        if self.position > 0:
            self.position -= 1

    def move_right(self) -> None:
        """Move one character right."""
        self.position += 1