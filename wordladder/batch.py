"""Solve many start/end pairs against one shared dictionary.

Each search owns its frontier and predecessor map and only reads the
dictionary, so pairs can be spread across worker threads without locking.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Callable, Iterable

from wordladder.words import normalize_word

if TYPE_CHECKING:
    from wordladder.engine import LadderEngine
    from wordladder.result import Ladder

logger = logging.getLogger("wordladder.batch")


def read_pairs(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Parse ``start end`` pairs, one per line.

    Blank lines and ``#`` comments are skipped. Raises ``ValueError`` on a
    line that does not hold exactly two alphabetic words of equal length.
    """
    pairs: list[tuple[str, str]] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"line {lineno}: expected 'START END', got {line!r}")
        start, end = normalize_word(parts[0]), normalize_word(parts[1])
        for word in (start, end):
            if not word.isalpha():
                raise ValueError(f"line {lineno}: '{word}' must contain letters only")
        if len(start) != len(end):
            raise ValueError(
                f"line {lineno}: '{start}' and '{end}' are not the same length"
            )
        pairs.append((start, end))
    return pairs


def solve_pairs(
    engine: "LadderEngine",
    pairs: list[tuple[str, str]],
    workers: int = 1,
    timeout: float | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> list["Ladder"]:
    """Find a ladder for every pair, returned in input order.

    Parameters
    ----------
    engine : LadderEngine
        Engine wrapping the shared dictionary.
    pairs : list[tuple[str, str]]
        ``(start, end)`` queries.
    workers : int
        Number of threads. ``1`` solves the pairs inline.
    timeout : float | None
        Per-pair deadline in seconds, passed to ``find_ladder``.
    progress_callback : callable, optional
        Called with ``(completed, total)`` after each pair finishes.

    Returns
    -------
    list[Ladder]
        One result per pair. Errors from any pair propagate.
    """
    total = len(pairs)
    results: list[Ladder | None] = [None] * total

    if workers <= 1:
        for i, (start, end) in enumerate(pairs):
            results[i] = engine.find_ladder(start, end, timeout=timeout)
            if progress_callback:
                progress_callback(i + 1, total)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(engine.find_ladder, start, end, timeout)
                for start, end in pairs
            ]
            index = {f: i for i, f in enumerate(futures)}
            try:
                for done, future in enumerate(as_completed(futures), start=1):
                    results[index[future]] = future.result()
                    if progress_callback:
                        progress_callback(done, total)
            except BaseException:
                pool.shutdown(wait=False, cancel_futures=True)
                raise

    found = sum(1 for r in results if r)
    logger.info("Solved %d/%d pairs", found, total)
    return results  # type: ignore[return-value]
