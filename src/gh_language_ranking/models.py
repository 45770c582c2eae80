"""Data models for GitHub Language Ranking reports."""

from __future__ import annotations

from pydantic import BaseModel


class ReportRow(BaseModel):
    """One rendered line of a ranking report."""
    rank: int
    language: str
    activities: int
    percent: float
    proportion: str
    bar: str


class LanguageShare(BaseModel):
    """A language's share of all activities in an hour."""
    language: str
    activities: int
    percent: float


class RankingReport(BaseModel):
    """Summary of one completed ranking run."""
    date_hour: str
    source: str
    output: str
    total_activities: int = 0
    languages: list[LanguageShare] = []
