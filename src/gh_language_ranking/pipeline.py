"""Runs the download, count, rank and render stages for one hour."""

from __future__ import annotations

import logging
import zlib
from datetime import datetime
from pathlib import Path
from typing import TextIO

from gh_language_ranking.aggregator import DEFAULT_CHUNK_SIZE, aggregate
from gh_language_ranking.archive import ArchiveClient, read_lines
from gh_language_ranking.config import LanguageRankingConfig, load_config
from gh_language_ranking.exceptions import ConfigError, InvalidInputError
from gh_language_ranking.formatter import render
from gh_language_ranking.models import LanguageShare, RankingReport
from gh_language_ranking.ranking import Ranking, rank

logger = logging.getLogger(__name__)

DEFAULT_DATE_HOUR = "2016-03-14-15"
DATE_HOUR_FORMAT = "%Y-%m-%d-%H"


def parse_date_hour(token: str) -> str:
    """Validate a ``yyyy-MM-dd-HH`` token and return it zero-padded.

    Raises:
        ConfigError: If the token is not a calendar date and hour.
    """
    try:
        parsed = datetime.strptime(token, DATE_HOUR_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"Wrong date format: {token}\n"
            f"Use 'yyyy-MM-dd-HH' like '{DEFAULT_DATE_HOUR}'"
        ) from exc
    return parsed.strftime(DATE_HOUR_FORMAT)


def count_file(
    path: str | Path,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> dict[str, int]:
    """Count languages in a local JSON-lines file.

    Raises:
        InvalidInputError: If the file cannot be read or decoded.
    """
    try:
        return aggregate(read_lines(path), workers=workers, chunk_size=chunk_size)
    except (OSError, EOFError, UnicodeDecodeError, zlib.error) as exc:
        raise InvalidInputError(f"Cannot read {path}: {exc}") from exc


def rank_file(
    path: str | Path,
    sink: TextIO,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Ranking:
    """Rank the languages of a local file and render the report to ``sink``."""
    ranking = rank(count_file(path, workers=workers, chunk_size=chunk_size))
    render(ranking, sink)
    return ranking


def build_report(
    date_hour: str, source: Path, output: Path, ranking: Ranking
) -> RankingReport:
    total = sum(count for _, count in ranking)
    return RankingReport(
        date_hour=date_hour,
        source=str(source),
        output=str(output),
        total_activities=total,
        languages=[
            LanguageShare(
                language=language,
                activities=count,
                percent=count / total * 100.0,
            )
            for language, count in ranking
        ],
    )


async def analyze(
    date_hour: str,
    config: LanguageRankingConfig | None = None,
    client: ArchiveClient | None = None,
) -> RankingReport:
    """Produce the ranking report ``<output_dir>/<yyyy-MM-dd-HH>.csv``.

    Raises:
        ConfigError: If ``date_hour`` is malformed.
        TransferError: If the archive cannot be downloaded.
        InvalidInputError: If the downloaded archive cannot be read.
    """
    config = config if config is not None else load_config()
    stamp = parse_date_hour(date_hour)

    if client is None:
        async with ArchiveClient(config) as owned_client:
            source = await owned_client.download(stamp)
    else:
        source = await client.download(stamp)

    counts = count_file(
        source,
        workers=config.aggregation.workers,
        chunk_size=config.aggregation.chunk_size,
    )
    ranking = rank(counts)

    output = Path(config.report.output_dir) / f"{stamp}.csv"
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8", newline="") as sink:
        render(ranking, sink)

    logger.info("Ranking report completed %s", output.name)
    return build_report(stamp, source, output, ranking)
