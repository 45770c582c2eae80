"""Click-based CLI for GitHub Language Ranking."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TextIO

import click

from gh_language_ranking.config import LanguageRankingConfig, load_config
from gh_language_ranking.exceptions import LanguageRankingError
from gh_language_ranking.formatter import format_cli_output, format_json
from gh_language_ranking.pipeline import DEFAULT_DATE_HOUR, analyze, rank_file

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(quiet: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def _apply_overrides(
    config: LanguageRankingConfig,
    download_dir: str | None,
    output_dir: str | None,
    workers: int | None,
) -> LanguageRankingConfig:
    if download_dir is not None:
        archive = config.archive.model_copy(update={"download_dir": download_dir})
        config = config.model_copy(update={"archive": archive})
    if output_dir is not None:
        report = config.report.model_copy(update={"output_dir": output_dir})
        config = config.model_copy(update={"report": report})
    if workers is not None:
        aggregation = config.aggregation.model_copy(update={"workers": workers})
        config = config.model_copy(update={"aggregation": aggregation})
    return config


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="github-language-ranking")
def main() -> None:
    """GitHub Language Ranking - programming languages by hourly activity."""


@main.command("rank")
@click.argument("date_hour", default=DEFAULT_DATE_HOUR)
@click.option("--silent", "-s", is_flag=True, help="Silent mode (don't output anything)")
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--download-dir", default=None, help="Directory for downloaded archives")
@click.option("--output-dir", default=None, help="Directory for the CSV report")
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Worker processes used to count events",
)
@click.option("--json", "output_json", is_flag=True, help="Output summary as JSON")
def rank_command(
    date_hour: str,
    silent: bool,
    config_path: str | None,
    download_dir: str | None,
    output_dir: str | None,
    workers: int | None,
    output_json: bool,
) -> None:
    """Rank languages for one hour of activity.

    DATE_HOUR requires the pattern 'yyyy-MM-dd-HH' like '2016-03-14-15'.
    """
    _configure_logging(quiet=silent)
    config = _apply_overrides(
        load_config(config_path), download_dir, output_dir, workers
    )

    try:
        report = asyncio.run(analyze(date_hour, config))
    except LanguageRankingError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if silent:
        return
    if output_json:
        click.echo(format_json(report))
    else:
        click.echo(format_cli_output(report, top=config.report.top))


@main.command("rank-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="CSV report destination (default: stdout)",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=1,
    help="Worker processes used to count events",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def rank_file_command(path: str, output: TextIO, workers: int, verbose: bool) -> None:
    """Rank languages in a local JSON-lines file, optionally gzipped."""
    _configure_logging(quiet=not verbose)
    try:
        rank_file(path, output, workers=workers)
    except LanguageRankingError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
