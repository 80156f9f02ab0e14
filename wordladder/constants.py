"""Constants shared across the word ladder package."""

from __future__ import annotations

import os

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 45

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_DICT_PATH = "dictionary.txt"
SYSTEM_DICT_PATH = "/usr/share/dict/words"

# Tried in order; the first file that yields any words wins.
DICTIONARY_SEARCH_PATHS: list[str] = [
    DEFAULT_DICT_PATH,
    "english3.txt",
    "words.txt",
    os.path.join(_PACKAGE_DIR, "..", "dictionary.txt"),
    SYSTEM_DICT_PATH,
]

DICTIONARY_URLS: list[str] = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_USAGE = 2
EXIT_ERROR = 3
