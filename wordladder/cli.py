"""CLI / terminal mode for the word ladder engine."""

from __future__ import annotations

import sys
import time

from tqdm import tqdm

from wordladder.batch import solve_pairs
from wordladder.constants import EXIT_NO_PATH, EXIT_OK
from wordladder.dictionary import Dictionary
from wordladder.engine import LadderEngine
from wordladder.result import Ladder


def format_ladder(ladder: Ladder) -> str:
    plural = "" if ladder.steps == 1 else "s"
    return f"{' -> '.join(ladder.path)} ({ladder.steps} step{plural})"


def run_cli(
    dictionary: Dictionary,
    start: str,
    end: str,
    strict: bool = False,
    timeout: float | None = None,
) -> int:
    """Solve a single query and print the result. Returns the exit code."""
    engine = LadderEngine(dictionary, require_known=strict)

    print(f"Finding the shortest path from '{start}' to '{end}'...")
    t0 = time.time()
    ladder = engine.find_ladder(start, end, timeout=timeout)
    elapsed = time.time() - t0

    if not ladder:
        print(f"No path from '{start}' to '{end}' exists.", file=sys.stderr)
        print(f"Searched {ladder.visited:,} words in {elapsed:.2f}s.")
        return EXIT_NO_PATH

    print(f"The shortest path is {format_ladder(ladder)}")
    print(f"Searched {ladder.visited:,} words in {elapsed:.2f}s.")
    return EXIT_OK


def run_batch(
    dictionary: Dictionary,
    pairs: list[tuple[str, str]],
    workers: int = 1,
    strict: bool = False,
    timeout: float | None = None,
) -> int:
    """Solve every pair in *pairs*; one output line per pair."""
    engine = LadderEngine(dictionary, require_known=strict)

    with tqdm(total=len(pairs), desc="ladders", unit="pair", disable=None) as bar:
        ladders = solve_pairs(
            engine, pairs, workers=workers, timeout=timeout,
            progress_callback=lambda done, total: bar.update(1),
        )

    for ladder in ladders:
        if ladder:
            print(f"{ladder.start} {ladder.end}: {format_ladder(ladder)}")
        else:
            print(f"{ladder.start} {ladder.end}: no path")

    missing = sum(1 for ladder in ladders if not ladder)
    print(f"\n{len(ladders) - missing}/{len(ladders)} pairs connected.")
    return EXIT_OK if missing == 0 else EXIT_NO_PATH
