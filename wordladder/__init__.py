"""Word Ladder — shortest one-letter-at-a-time paths between words."""

from wordladder.dictionary import Dictionary
from wordladder.engine import LadderEngine, shortest_path
from wordladder.errors import LadderError, NotInDictionary, SearchTimeout, WordsUnequalLength
from wordladder.result import Ladder, SearchState
from wordladder.batch import read_pairs, solve_pairs
from wordladder.words import hamming_distance, is_adjacent, is_valid_ladder

__all__ = [
    "Dictionary",
    "Ladder",
    "LadderEngine",
    "LadderError",
    "NotInDictionary",
    "SearchState",
    "SearchTimeout",
    "WordsUnequalLength",
    "hamming_distance",
    "is_adjacent",
    "is_valid_ladder",
    "read_pairs",
    "shortest_path",
    "solve_pairs",
]
