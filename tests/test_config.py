"""Tests for configuration."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest
import yaml

from gh_language_ranking.config import (
    AggregationConfig,
    ArchiveConfig,
    LanguageRankingConfig,
    ReportConfig,
    load_config,
)


class TestArchiveConfig:
    def test_defaults(self) -> None:
        config = ArchiveConfig()
        assert config.base_url == "https://data.gharchive.org"
        assert config.timeout_seconds == 60.0
        assert config.download_dir == "."


class TestReportConfig:
    def test_defaults(self) -> None:
        config = ReportConfig()
        assert config.output_dir == "."
        assert config.top == 10


class TestAggregationConfig:
    def test_defaults(self) -> None:
        config = AggregationConfig()
        assert config.workers == 1
        assert config.chunk_size == 5000

    def test_rejects_zero_workers(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            AggregationConfig(workers=0)


class TestLoadConfig:
    def test_load_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert isinstance(config, LanguageRankingConfig)
        assert config.archive.base_url == "https://data.gharchive.org"

    def test_load_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / ".language-ranking.yml"
        config_file.write_text(yaml.dump({
            "archive": {"download_dir": "/tmp/archives"},
            "aggregation": {"workers": 4},
        }))
        config = load_config(config_file)
        assert config.archive.download_dir == "/tmp/archives"
        assert config.aggregation.workers == 4
        # Defaults preserved
        assert config.archive.timeout_seconds == 60.0
        assert config.aggregation.chunk_size == 5000

    def test_load_nonexistent_path(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yml")
        assert config.report.output_dir == "."

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.aggregation.workers == 1

    def test_default_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".language-ranking.yaml").write_text(
            yaml.dump({"report": {"top": 3}})
        )
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.report.top == 3

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text(yaml.dump({"aggregation": {"workers": 2}}))
        monkeypatch.setenv("LANGUAGE_RANKING_WORKERS", "8")
        monkeypatch.setenv("LANGUAGE_RANKING_BASE_URL", "https://mirror.test")
        monkeypatch.setenv("LANGUAGE_RANKING_TIMEOUT", "5")
        monkeypatch.setenv("LANGUAGE_RANKING_OUTPUT_DIR", "reports")
        config = load_config(config_file)
        assert config.aggregation.workers == 8
        assert config.archive.base_url == "https://mirror.test"
        assert config.archive.timeout_seconds == 5.0
        assert config.report.output_dir == "reports"
