"""Custom exception hierarchy for GitHub Language Ranking."""

from __future__ import annotations


class LanguageRankingError(Exception):
    """Base exception for GitHub Language Ranking."""


class InvalidInputError(LanguageRankingError):
    """The pipeline was handed an unusable line source or sink."""


class ConfigError(LanguageRankingError):
    """Error with configuration or command-line arguments."""


class TransferError(LanguageRankingError):
    """The archive file could not be fetched."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
