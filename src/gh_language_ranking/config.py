"""Configuration models for GitHub Language Ranking."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class ArchiveConfig(BaseModel):
    """Where hourly event archives come from and where they are kept."""
    base_url: str = "https://data.gharchive.org"
    timeout_seconds: float = 60.0
    download_dir: str = "."


class ReportConfig(BaseModel):
    """Report output settings."""
    output_dir: str = "."
    top: int = 10


class AggregationConfig(BaseModel):
    """Line counting parameters."""
    workers: int = Field(default=1, ge=1)
    chunk_size: int = Field(default=5000, ge=1)


class LanguageRankingConfig(BaseModel):
    """Top-level configuration composing all sub-configs."""
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)


_DEFAULT_PATHS = (".language-ranking.yml", ".language-ranking.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(path: str | Path | None = None) -> LanguageRankingConfig:
    """Load configuration from YAML file, environment variables, and defaults.

    Priority (highest to lowest):
    1. Environment variables (LANGUAGE_RANKING_*)
    2. YAML config file
    3. Defaults
    """
    config_data: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path)
        if config_path.exists():
            config_data = _read_yaml(config_path)
    else:
        for default_path in _DEFAULT_PATHS:
            p = Path(default_path)
            if p.exists():
                config_data = _read_yaml(p)
                break

    env_mapping = {
        "LANGUAGE_RANKING_BASE_URL": ("archive", "base_url", str),
        "LANGUAGE_RANKING_TIMEOUT": ("archive", "timeout_seconds", float),
        "LANGUAGE_RANKING_DOWNLOAD_DIR": ("archive", "download_dir", str),
        "LANGUAGE_RANKING_OUTPUT_DIR": ("report", "output_dir", str),
        "LANGUAGE_RANKING_WORKERS": ("aggregation", "workers", int),
        "LANGUAGE_RANKING_CHUNK_SIZE": ("aggregation", "chunk_size", int),
    }

    for env_var, (section, key, type_fn) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            if section not in config_data:
                config_data[section] = {}
            config_data[section][key] = type_fn(value)

    return LanguageRankingConfig(**config_data)
