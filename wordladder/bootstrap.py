"""Fetch a word list for the ladder engine.

Usage:
    word-ladder --fetch-dictionary [--dict PATH]

Builds ``dictionary.txt`` from the system word list when there is one,
otherwise downloads a public list. Either way the result is normalized the
same way :class:`~wordladder.dictionary.Dictionary` normalizes its input.
"""

from __future__ import annotations

import os
import urllib.request
from typing import Iterable

from wordladder.constants import DEFAULT_DICT_PATH, DICTIONARY_URLS, SYSTEM_DICT_PATH
from wordladder.words import is_dictionary_word, normalize_word


def clean_words(lines: Iterable[str]) -> set[str]:
    """Lowercased, deduplicated, letters-only words from raw lines."""
    words: set[str] = set()
    for line in lines:
        word = normalize_word(line)
        if is_dictionary_word(word):
            words.add(word)
    return words


def _write_words(dict_path: str, words: set[str]) -> None:
    with open(dict_path, "w", encoding="utf-8") as f:
        for word in sorted(words):
            f.write(word + "\n")


def download_dictionary(
    dict_path: str = DEFAULT_DICT_PATH,
    urls: list[str] | None = None,
    system_dict: str = SYSTEM_DICT_PATH,
) -> int:
    """Make sure a word list exists at *dict_path*.

    Returns the number of words in it, or 0 if none could be obtained.
    """
    if os.path.exists(dict_path):
        with open(dict_path, encoding="utf-8") as f:
            count = len(clean_words(f))
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return count

    print("Fetching word dictionary...")

    if os.path.exists(system_dict):
        print(f"  Using system dictionary: {system_dict}")
        with open(system_dict, encoding="utf-8") as f:
            words = clean_words(f)
        _write_words(dict_path, words)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return len(words)

    # Download beside the target so a failed or partial fetch never
    # leaves a file at dict_path.
    part_path = dict_path + ".part"
    for url in urls if urls is not None else DICTIONARY_URLS:
        try:
            print(f"  Trying {url}...")
            urllib.request.urlretrieve(url, part_path)
            with open(part_path, encoding="utf-8") as f:
                words = clean_words(f)
        except (OSError, ValueError) as e:
            print(f"  Failed: {e}")
            continue
        finally:
            if os.path.exists(part_path):
                os.remove(part_path)
        if not words:
            print("  Failed: no usable words")
            continue
        _write_words(dict_path, words)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return len(words)

    print("\n⚠ Could not fetch a dictionary automatically.")
    print("  Save a word list with one word per line as:")
    print(f"  {dict_path}")
    return 0
