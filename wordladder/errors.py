"""Exceptions raised by the ladder engine.

A search that finds no path is not an error: it comes back as a
:class:`~wordladder.result.Ladder` in the ``EXHAUSTED`` state.
"""

from __future__ import annotations


class LadderError(Exception):
    """Base class for every error raised by this package."""


class WordsUnequalLength(LadderError, ValueError):
    """The start and end words differ in length, so no ladder can exist."""

    def __init__(self, start: str, end: str):
        self.start = start
        self.end = end
        super().__init__(
            f"The start word '{start}' is not the same length as the end word '{end}'."
        )


class NotInDictionary(LadderError, LookupError):
    """A query word is missing from the dictionary (strict mode only)."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"The word '{word}' is not in the dictionary.")


class SearchTimeout(LadderError, TimeoutError):
    def __init__(self, start: str, end: str, timeout: float, visited: int):
        self.start = start
        self.end = end
        self.timeout = timeout
        self.visited = visited
        super().__init__(
            f"Gave up on '{start}' -> '{end}' after {timeout:g}s ({visited:,} words visited)."
        )
