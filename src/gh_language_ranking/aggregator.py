"""Count event lines per language."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ProcessPoolExecutor
from itertools import islice

from gh_language_ranking.exceptions import InvalidInputError
from gh_language_ranking.finder import LANGUAGE_KEY, find_language_in_line

logger = logging.getLogger(__name__)

# A line without this substring cannot hold a language label.
_PREFILTER = f'"{LANGUAGE_KEY}"'

DEFAULT_CHUNK_SIZE = 5000


def _count_lines(lines: Iterable[str]) -> tuple[Counter[str], int]:
    """Count languages in ``lines``; also return how many lines were read."""
    counts: Counter[str] = Counter()
    read = 0
    for line in lines:
        read += 1
        if not isinstance(line, str):
            raise InvalidInputError(
                f"Expected text lines, got {type(line).__name__} at line {read}"
            )
        if _PREFILTER not in line:
            continue
        language = find_language_in_line(line)
        if language is not None:
            counts[language] += 1
    return counts, read


def _chunked(lines: Iterable[str], size: int) -> Iterator[list[str]]:
    it = iter(lines)
    while chunk := list(islice(it, size)):
        yield chunk


def _check_lines(lines: object) -> None:
    if lines is None or isinstance(lines, (str, bytes)):
        raise InvalidInputError(
            f"Expected an iterable of lines, got {type(lines).__name__}"
        )
    if not isinstance(lines, Iterable):
        raise InvalidInputError(f"{type(lines).__name__} is not iterable")


def aggregate(
    lines: Iterable[str],
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> dict[str, int]:
    """Map each language label to the number of lines whose record names it.

    Lines that are not valid JSON, or that hold no language label, are
    skipped. With ``workers > 1`` the lines are counted chunk by chunk in a
    process pool and the partial counts summed, which gives the same result
    as the sequential pass.

    Raises:
        InvalidInputError: If ``lines`` is not an iterable of text lines.
    """
    _check_lines(lines)

    if workers <= 1:
        counts, read = _count_lines(lines)
    else:
        counts = Counter()
        read = 0
        with ProcessPoolExecutor(max_workers=workers) as executor:
            for partial, partial_read in executor.map(
                _count_lines, _chunked(lines, chunk_size)
            ):
                counts.update(partial)
                read += partial_read

    matched = sum(counts.values())
    logger.debug(
        "Read %d lines, %d with a language, %d without",
        read, matched, read - matched,
    )
    logger.info("Found %d languages in %d activities", len(counts), matched)
    return dict(counts)
