"""Text input box state: typing, cursor, undo and suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from suggestbox.cursor import Cursor
from suggestbox.heap import Heap
from suggestbox.history import UndoStack
from suggestbox.words import AutoCorrect, PathType, Word

BACKSPACE = 8
MAX_LENGTH = 100
OUTLINE_THICKNESS = 2.0
TEXT_PADDING = 5.0
CHARACTER_SIZE = 24
CURSOR_SIZE = 30
DEFAULT_SUGGESTION_LIMIT = 10


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle of the input box."""

    x: float
    y: float
    width: float
    height: float


class TextInput:
    """An input box that edits a line of text and ranks word suggestions."""

    def __init__(
        self, width: float, height: float, x: float, y: float, word_bank: PathType
    ) -> None:
        self.box = Box(float(x), float(y), float(width), float(height))
        self.text_x = x + TEXT_PADDING
        self.text_y = y + TEXT_PADDING
        self.content = ""
        self.active = False
        self.max_length = MAX_LENGTH
        self.cursor = Cursor(CURSOR_SIZE)
        self.history = UndoStack()
        self.autocorrect = AutoCorrect(word_bank)
        self.suggestions: List[Word] = []
        self.suggestions_heap = Heap()

    def contains(self, px: float, py: float) -> bool:
        """Return whether the point lies within the box including its outline."""
        left = self.box.x - OUTLINE_THICKNESS
        top = self.box.y - OUTLINE_THICKNESS
        right = self.box.x + self.box.width + OUTLINE_THICKNESS
        bottom = self.box.y + self.box.height + OUTLINE_THICKNESS
        return left <= px < right and top <= py < bottom

    def click(self, px: float, py: float) -> None:
        """Activate the box when clicked inside it, deactivate otherwise."""
        self.active = self.contains(px, py)

    def enter_text(self, code: Union[int, str]) -> None:
        """Handle an entered character if the box is active."""
        if self.active:
            self.process_input(code)

    def process_input(self, code: Union[int, str]) -> None:
        """Insert an ASCII character at the cursor, or delete on backspace."""
        if isinstance(code, str):
            code = ord(code)
        if code == BACKSPACE:
            self.delete_character()
        elif code < 128 and len(self.content) < self.max_length:
            self.history.save_state(self.content)
            position = self.cursor.position
            self.content = self.content[:position] + chr(code) + self.content[position:]
            self.cursor.move_right()
            self._update_suggestions()

    def delete_character(self) -> None:
        """Remove the character before the cursor."""
        position = self.cursor.position
        if self.content and position > 0:
            self.history.save_state(self.content)
            self.content = self.content[: position - 1] + self.content[position:]
            self.cursor.move_left()
            self._update_suggestions()

    def undo(self) -> None:
        """Restore the previous non-empty state and put the cursor at its end."""
        previous = self.history.undo()
        if previous:
            self.content = previous
            self.cursor.position = len(self.content)
            self._update_suggestions()

    def update(self, delta_seconds: float) -> None:
        """Advance the cursor blink timer."""
        self.cursor.update(delta_seconds)

    def visible_suggestions(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[Word]:
        """Return the first ``limit`` suggestions to show under the box."""
        return self.suggestions[:limit]

    def _update_suggestions(self) -> None:
        self.suggestions = self.autocorrect.sorted_words(self.content)
        self.suggestions_heap = Heap()
        for word in self.suggestions:
            self.suggestions_heap.push(word)