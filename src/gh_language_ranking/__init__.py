"""GitHub Language Ranking - programming languages ranked by hourly activity."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from gh_language_ranking.aggregator import aggregate
from gh_language_ranking.config import LanguageRankingConfig
from gh_language_ranking.exceptions import LanguageRankingError
from gh_language_ranking.finder import find_language, find_language_in_line
from gh_language_ranking.formatter import build_bar, render
from gh_language_ranking.models import RankingReport
from gh_language_ranking.pipeline import analyze, rank_file
from gh_language_ranking.ranking import rank

try:
    __version__ = version("github-language-ranking")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "LanguageRankingConfig",
    "LanguageRankingError",
    "RankingReport",
    "__version__",
    "aggregate",
    "analyze",
    "build_bar",
    "find_language",
    "find_language_in_line",
    "rank",
    "rank_file",
    "render",
]
