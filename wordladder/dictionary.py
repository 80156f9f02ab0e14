"""Word list indexed by length, with one-substitution neighbor lookup."""

from __future__ import annotations

import logging
import os
from typing import Collection, Iterable, Iterator

from wordladder.constants import DICTIONARY_SEARCH_PATHS
from wordladder.words import is_dictionary_word, normalize_word

log = logging.getLogger("wordladder")

# Used only when no word list can be found on disk.
_MINIMAL_WORDS = (
    "bag", "bat", "bog", "can", "car", "cat", "cog", "cot", "cut", "dog",
    "dot", "hat", "hit", "hot", "log", "lot", "man", "mat", "van",
    "bare", "bore", "card", "care", "cave", "cold", "cord", "core", "gave",
    "ward", "warm", "wore", "word", "worm",
    "bone", "tone", "tope", "type", "name", "nare", "nard", "nord", "norm",
    "head", "heal", "teal", "tell", "tall", "tail",
)


class Dictionary:
    """Read-only word list, partitioned by word length.

    Membership is a set lookup. Neighbors are never stored: they are
    generated on demand by substituting every other letter of the alphabet
    at each position, position-major and then in alphabetical order, so the
    same word always yields its neighbors in the same order.
    """

    def __init__(
        self,
        dict_path: str | None = None,
        words: Iterable[str] | None = None,
        word_length: int | None = None,
    ):
        self.word_length = word_length
        self.by_length: dict[int, frozenset[str]] = {}
        self.alphabet: str = ""
        self.source: str | None = None
        if words is not None:
            self._index(words)
            self.source = "<memory>"
        else:
            self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            if not os.path.exists(dict_path):
                log.warning("Dictionary file %s not found -- searching defaults.", dict_path)
            search_paths.append(dict_path)
        search_paths.extend(DICTIONARY_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                with open(path, "r", encoding="utf-8") as f:
                    seen = self._index(f)
                if seen:
                    self.source = path
                    log.info("Loaded %s words from %s", f"{len(self):,}", path)
                    return

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Run with --fetch-dictionary or save a word list as dictionary.txt.")
        self._index(_MINIMAL_WORDS)
        self.source = "<built-in>"

    def _index(self, lines: Iterable[str]) -> int:
        """Index *lines*; returns how many valid words were read before length filtering."""
        buckets: dict[int, set[str]] = {}
        letters: set[str] = set()
        seen = 0
        for line in lines:
            word = normalize_word(line)
            if not is_dictionary_word(word):
                continue
            seen += 1
            if self.word_length is not None and len(word) != self.word_length:
                continue
            buckets.setdefault(len(word), set()).add(word)
            letters.update(word)
        self.by_length = {n: frozenset(ws) for n, ws in buckets.items()}
        self.alphabet = "".join(sorted(letters))
        return seen

    # lookups

    def contains(self, word: str) -> bool:
        return word in self.by_length.get(len(word), ())

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return sum(len(ws) for ws in self.by_length.values())

    def __iter__(self) -> Iterator[str]:
        for n in self.lengths():
            yield from sorted(self.by_length[n])

    def words_of_length(self, length: int) -> frozenset[str]:
        return self.by_length.get(length, frozenset())

    def lengths(self) -> list[int]:
        return sorted(self.by_length)

    # neighbors

    def neighbors(self, word: str, extra: Collection[str] = ()) -> Iterator[str]:
        """Yield every dictionary word one substitution away from *word*.

        Words in *extra* count as members for this call only, and their
        letters join the alphabet. The search uses this to reach an end
        word that is not itself in the dictionary.
        """
        candidates = self.words_of_length(len(word))
        alphabet = self.alphabet
        if extra:
            extra = {w for w in extra if len(w) == len(word)}
            alphabet = "".join(sorted(set(alphabet).union(*extra)))
        if not candidates and not extra:
            return

        for i, original in enumerate(word):
            prefix, suffix = word[:i], word[i + 1:]
            for ch in alphabet:
                if ch == original:
                    continue
                variant = prefix + ch + suffix
                if variant in candidates or variant in extra:
                    yield variant
