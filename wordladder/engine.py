"""Ladder search -- breadth-first search over the one-substitution graph."""

from __future__ import annotations

import logging
import time
from collections import deque

from wordladder.dictionary import Dictionary
from wordladder.errors import NotInDictionary, SearchTimeout, WordsUnequalLength
from wordladder.result import Ladder, SearchState

logger = logging.getLogger("wordladder.search")


class LadderEngine:
    """Finds shortest word ladders through a shared, read-only dictionary.

    The engine keeps no per-query state, so one instance can serve many
    searches, including searches running in parallel threads.
    """

    def __init__(self, dictionary: Dictionary, require_known: bool = False):
        self.dict = dictionary
        self.require_known = require_known

    # public API

    def find_ladder(self, start: str, end: str, timeout: float | None = None) -> Ladder:
        """Shortest ladder from *start* to *end*.

        Raises :class:`WordsUnequalLength` if the words differ in length,
        :class:`NotInDictionary` in strict mode, and :class:`SearchTimeout`
        once *timeout* seconds have passed. A missing path is returned as
        an ``EXHAUSTED`` ladder, not raised.
        """
        if len(start) != len(end):
            raise WordsUnequalLength(start, end)
        if self.require_known:
            for word in (start, end):
                if word not in self.dict:
                    raise NotInDictionary(word)

        t0 = time.perf_counter()
        if start == end:
            return Ladder(start, end, [start], SearchState.FOUND, visited=1)

        parents, state = self._search(start, end, t0, timeout)
        path = self._reconstruct(parents, end) if state is SearchState.FOUND else []
        ladder = Ladder(start, end, path, state, len(parents), time.perf_counter() - t0)
        logger.debug(
            "%s -> %s: %s, %d visited in %.3fs",
            start, end, state.value, ladder.visited, ladder.elapsed,
        )
        return ladder

    # search

    def _search(
        self,
        start: str,
        end: str,
        t0: float,
        timeout: float | None,
    ) -> tuple[dict[str, str | None], SearchState]:
        deadline = None if timeout is None else t0 + timeout
        # An end word outside the dictionary is still a valid target.
        extra = () if end in self.dict else (end,)

        parents: dict[str, str | None] = {start: None}
        queue = deque([start])
        state = SearchState.RUNNING

        while state is SearchState.RUNNING:
            if not queue:
                state = SearchState.EXHAUSTED
                break
            if deadline is not None and time.perf_counter() >= deadline:
                raise SearchTimeout(start, end, timeout, len(parents))

            word = queue.popleft()
            for neighbor in self.dict.neighbors(word, extra):
                if neighbor in parents:
                    continue
                parents[neighbor] = word
                if neighbor == end:
                    # First discovery under BFS is at minimum depth.
                    state = SearchState.FOUND
                    break
                queue.append(neighbor)

        return parents, state

    @staticmethod
    def _reconstruct(parents: dict[str, str | None], end: str) -> list[str]:
        path: list[str] = []
        word: str | None = end
        while word is not None:
            path.append(word)
            word = parents[word]
        path.reverse()
        return path


def shortest_path(dictionary: Dictionary, start: str, end: str) -> list[str] | None:
    """Shortest ladder as a list of words, or None if the words are not connected."""
    ladder = LadderEngine(dictionary).find_ladder(start, end)
    return ladder.path if ladder.found else None
