"""Order languages by activity volume."""

from __future__ import annotations

from collections.abc import Mapping

Ranking = list[tuple[str, int]]


def rank(counts: Mapping[str, int]) -> Ranking:
    """Sort languages by count descending, then by name ascending.

    Every entry of ``counts`` appears exactly once in the result.
    """
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
