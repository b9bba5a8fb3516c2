"""Word bank loading and prefix-based ranking of suggestions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from os import PathLike
from typing import List, Union

PathType = Union[str, "PathLike[str]"]


@dataclass
class Word:
    """A suggestion candidate with a priority value."""

    word: str
    priority: int = 0


def read_words(path: PathType) -> List[str]:
    """Return the whitespace-separated words stored in the file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().split()
    except OSError as exc:
        raise OSError(f"Unable to open file {path}") from exc


def prefix_match_length(text: str, word: str) -> int:
    """Count matching leading characters of ``text`` and ``word``."""
    length = 0
    for left, right in zip(text, word):
        if left != right:
            break
        length += 1
    return length


class WordSort:
    """Ranks the words of a dictionary file by how well they match an input."""

    def __init__(self, dictionary_path: PathType) -> None:
        self._words = [Word(text) for text in read_words(dictionary_path)]

    def sorted_words(self, text: str) -> List[Word]:
        """Return the words ordered by descending prefix match with ``text``."""
        for entry in self._words:
            entry.priority = prefix_match_length(text, entry.word)
        self._words.sort(key=lambda entry: entry.priority, reverse=True)
        return [replace(entry) for entry in self._words]


class AutoCorrect:
    """Produces suggestions for user input from a word bank file."""

    def __init__(self, word_bank_path: PathType) -> None:
        self._sorter = WordSort(word_bank_path)

    def sorted_words(self, text: str) -> List[Word]:
        """Return suggestions sorted by relevance to ``text``."""
        return self._sorter.sorted_words(text)