"""Search result for a single start/end query."""

from __future__ import annotations

import enum


class SearchState(enum.Enum):
    """Lifecycle of one search: RUNNING ends in exactly one of the others."""

    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class Ladder:
    """Outcome of a ladder search.

    ``path`` runs from ``start`` to ``end`` inclusive when the search
    found one, and is empty when the search exhausted the graph.
    """

    __slots__ = ("start", "end", "path", "state", "visited", "elapsed")

    def __init__(
        self,
        start: str,
        end: str,
        path: list[str],
        state: SearchState,
        visited: int = 0,
        elapsed: float = 0.0,
    ):
        self.start = start
        self.end = end
        self.path = path
        self.state = state
        self.visited = visited  # words discovered, start included
        self.elapsed = elapsed  # seconds

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND

    @property
    def steps(self) -> int | None:
        """Number of substitutions, or None when there is no path."""
        return len(self.path) - 1 if self.found else None

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)

    def __repr__(self) -> str:
        if self.found:
            return f"{' -> '.join(self.path)} ({self.steps} steps)"
        return f"no path from {self.start!r} to {self.end!r} ({self.visited:,} visited)"
