"""Helpers for single words and ladders of words."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from wordladder.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH

if TYPE_CHECKING:
    from wordladder.dictionary import Dictionary


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_dictionary_word(word: str) -> bool:
    """True if *word* is fit to go in a dictionary (letters only)."""
    return MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and word.isalpha()


def hamming_distance(word1: str, word2: str) -> int:
    """Number of positions at which two equal-length words differ."""
    if len(word1) != len(word2):
        raise ValueError(f"Hamming distance is undefined for '{word1}' and '{word2}'")
    return sum(1 for c1, c2 in zip(word1, word2) if c1 != c2)


def is_adjacent(word1: str, word2: str) -> bool:
    """True if one substitution turns *word1* into *word2*."""
    return len(word1) == len(word2) and hamming_distance(word1, word2) == 1


def is_valid_ladder(path: Sequence[str], dictionary: "Dictionary") -> bool:
    """Check that *path* is a ladder through *dictionary*.

    Consecutive words must be adjacent and every interior word must be in
    the dictionary. The two ends may be outside it.
    """
    if not path:
        return False
    for prev, word in zip(path, path[1:]):
        if not is_adjacent(prev, word):
            return False
    return all(word in dictionary for word in path[1:-1])
