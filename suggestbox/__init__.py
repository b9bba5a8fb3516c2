"""A text input box with prefix-based word suggestions from a word bank."""

__version__ = "0.1.0"