"""
Word Ladder

Finds the shortest path between two words of equal length, changing one
letter at a time, where every word along the way is in the dictionary.

Usage:
    word-ladder cat dog
    word-ladder --pairs pairs.txt --workers 4
    word-ladder --fetch-dictionary
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordladder.batch import read_pairs
from wordladder.bootstrap import download_dictionary
from wordladder.cli import run_batch, run_cli
from wordladder.constants import DEFAULT_DICT_PATH, EXIT_ERROR, EXIT_OK
from wordladder.dictionary import Dictionary
from wordladder.errors import LadderError
from wordladder.words import normalize_word

log = logging.getLogger("wordladder")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-ladder",
        description=(
            "Find the shortest path, changing one character at a time, "
            "between two words of equal length."
        ),
    )
    parser.add_argument("start", nargs="?", metavar="START_WORD", help="The starting word.")
    parser.add_argument("end", nargs="?", metavar="END_WORD", help="The ending word.")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--pairs", type=str, default=None,
                        help="File of 'START END' lines to solve in one run")
    parser.add_argument("--workers", type=int, default=1,
                        help="Threads to use with --pairs")
    parser.add_argument("--strict", action="store_true",
                        help="Require both words to be in the dictionary")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Give up on a search after this many seconds")
    parser.add_argument("--fetch-dictionary", action="store_true",
                        help="Download or build a word list, then exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def _validate_words(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.start is None or args.end is None:
        parser.error("START_WORD and END_WORD are required (or use --pairs)")
    args.start = normalize_word(args.start)
    args.end = normalize_word(args.end)
    for word in (args.start, args.end):
        if not word:
            parser.error("words must not be empty")
        if not word.isalpha():
            parser.error(f"'{word}' must contain letters only")
    if len(args.start) != len(args.end):
        parser.error(
            f"the start word '{args.start}' is not the same length as the end word '{args.end}'"
        )


def _read_pairs_file(
    parser: argparse.ArgumentParser, pairs_path: str
) -> list[tuple[str, str]] | None:
    try:
        with open(pairs_path, encoding="utf-8") as f:
            return read_pairs(f)
    except OSError as e:
        log.error("%s", e)
        return None
    except ValueError as e:
        parser.error(f"{pairs_path}: {e}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.fetch_dictionary:
        count = download_dictionary(args.dict or DEFAULT_DICT_PATH)
        return EXIT_OK if count else EXIT_ERROR

    pairs = None
    if args.pairs is None:
        _validate_words(parser, args)
    else:
        pairs = _read_pairs_file(parser, args.pairs)
        if pairs is None:
            return EXIT_ERROR
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        if args.pairs is not None:
            dictionary = Dictionary(args.dict)
            return run_batch(dictionary, pairs, args.workers, args.strict, args.timeout)
        dictionary = Dictionary(args.dict, word_length=len(args.start))
        return run_cli(dictionary, args.start, args.end, args.strict, args.timeout)
    except LadderError as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        return EXIT_ERROR
    except (OSError, ValueError) as e:
        log.error("%s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
