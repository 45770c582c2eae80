"""Shared test fixtures for GitHub Language Ranking tests."""

from __future__ import annotations

import gzip
import json
from pathlib import Path
from typing import Any

import pytest

from gh_language_ranking.config import (
    AggregationConfig,
    ArchiveConfig,
    LanguageRankingConfig,
    ReportConfig,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def java_event_line() -> str:
    return (FIXTURES_DIR / "oneline-java.json").read_text(encoding="utf-8").strip()


@pytest.fixture
def java_event(java_event_line: str) -> dict[str, Any]:
    return json.loads(java_event_line)


@pytest.fixture
def sample_lines() -> list[str]:
    """Ten events: 4 Python, 3 Java, one truncated, two without a language."""
    text = (FIXTURES_DIR / "sample.jsonl").read_text(encoding="utf-8")
    return text.splitlines()


@pytest.fixture
def sample_gzip(tmp_path: Path, sample_lines: list[str]) -> Path:
    path = tmp_path / "sample.json.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write("\n".join(sample_lines) + "\n")
    return path


@pytest.fixture
def config(tmp_path: Path) -> LanguageRankingConfig:
    return LanguageRankingConfig(
        archive=ArchiveConfig(
            base_url="https://archive.test",
            download_dir=str(tmp_path / "downloads"),
        ),
        report=ReportConfig(output_dir=str(tmp_path / "reports")),
        aggregation=AggregationConfig(),
    )
