"""Min-heap of words ordered by priority."""

from __future__ import annotations

import heapq
from itertools import count
from typing import List, Tuple

from suggestbox.words import Word


class Heap:
    """A min-heap that yields the word with the lowest priority first."""

    def __init__(self) -> None:
        self._entries: List[Tuple[int, int, Word]] = []
        self._counter = count()

    def push(self, word: Word) -> None:
        """Add a word to the heap."""
        heapq.heappush(self._entries, (word.priority, next(self._counter), word))

    def pop(self) -> Word:
        """Remove and return the word with the lowest priority."""
        if not self._entries:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._entries)[2]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)