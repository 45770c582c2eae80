"""Tests for per-language counting."""

from __future__ import annotations

import json

import pytest

from gh_language_ranking.aggregator import aggregate
from gh_language_ranking.exceptions import InvalidInputError


def _event(language: str | None) -> str:
    return json.dumps({"type": "PullRequestEvent", "repo": {"language": language}})


class TestAggregate:
    def test_sample_lines(self, sample_lines: list[str]) -> None:
        assert aggregate(sample_lines) == {"Python": 4, "Java": 3}

    def test_seven_lines(self) -> None:
        lines = [_event("Python")] * 4 + [_event("Java")] * 3
        assert aggregate(lines) == {"Python": 4, "Java": 3}

    def test_skips_bad_and_unmatched_lines(self) -> None:
        lines = [
            _event("Go"),
            '{"language": "Go"',
            "",
            '{"type": "PushEvent"}',
            _event(None),
            '["language"]',
        ]
        assert aggregate(lines) == {"Go": 1}

    def test_empty_input(self) -> None:
        assert aggregate([]) == {}
        assert aggregate(iter([])) == {}

    def test_accepts_generator(self, sample_lines: list[str]) -> None:
        assert aggregate(line for line in sample_lines) == {"Python": 4, "Java": 3}

    def test_idempotent(self, sample_lines: list[str]) -> None:
        assert aggregate(sample_lines) == aggregate(sample_lines)

    def test_case_sensitive_labels(self) -> None:
        lines = [_event("Python"), _event("python"), _event("Python")]
        assert aggregate(lines) == {"Python": 2, "python": 1}

    def test_counts_are_positive(self, sample_lines: list[str]) -> None:
        assert all(count > 0 for count in aggregate(sample_lines).values())

    def test_parallel_matches_sequential(self, sample_lines: list[str]) -> None:
        lines = sample_lines * 5
        expected = aggregate(lines)
        assert aggregate(lines, workers=2, chunk_size=3) == expected
        assert expected == {"Python": 20, "Java": 15}

    @pytest.mark.parametrize(
        "bad",
        [None, "a line", b"a line", 42, [b'{"language":"Go"}'], ["{}", None]],
    )
    def test_rejects_unusable_line_source(self, bad: object) -> None:
        with pytest.raises(InvalidInputError):
            aggregate(bad)  # type: ignore[arg-type]

    def test_rejects_bytes_lines_in_parallel(self) -> None:
        lines = [_event("Go")] * 4 + [b'{"language":"Go"}']
        with pytest.raises(InvalidInputError):
            aggregate(lines, workers=2, chunk_size=2)  # type: ignore[arg-type]
