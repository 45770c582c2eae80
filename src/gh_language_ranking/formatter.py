"""Output formatting for language rankings."""

from __future__ import annotations

from collections.abc import Iterator
from decimal import ROUND_HALF_UP, Decimal
from typing import TextIO

import click

from gh_language_ranking.exceptions import InvalidInputError
from gh_language_ranking.models import RankingReport, ReportRow
from gh_language_ranking.ranking import Ranking

CSV_HEADER = "RANK,LANGUAGE,ACTIVITIES,PROPORTION,"

FULL_BLOCK = "█"

# Trailing glyph per eighth of a block unit:
#   ██   2.000 -> #0
#   ██▏  2.125 -> #1
#   ██▎  2.250 -> #2
#   ██▍  2.375 -> #3
#   ██▌  2.500 -> #4
#   ██▋  2.625 -> #5
#   ██▊  2.750 -> #6
#   ██▉  2.875 -> #7
#   ███  2.938 and up -> #8
BLOCKS: tuple[str, ...] = (
    "",
    "▏",  # U+258F
    "▎",  # U+258E
    "▍",  # U+258D
    "▌",  # U+258C
    "▋",  # U+258B
    "▊",  # U+258A
    "▉",  # U+2589
    FULL_BLOCK,
)

_ONE = Decimal(1)
_CENTS = Decimal("0.01")


def build_bar(percent: float) -> str:
    """Build a bar of Unicode blocks, one full block per percentage point.

    The fractional part picks one of the eighth-block glyphs in ``BLOCKS``,
    rounding half up, so a fraction of 0.938 or more adds a full block.
    """
    full = int(percent)
    eighths = Decimal(percent % 1 / 1.25 * 10)
    trail = int(eighths.quantize(_ONE, rounding=ROUND_HALF_UP))
    return FULL_BLOCK * full + BLOCKS[trail]


def format_percent(percent: float) -> str:
    """Format a percentage with two decimals, rounding half up: ``"33.33 %"``."""
    value = Decimal(repr(percent)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{value} %"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def report_rows(ranking: Ranking) -> Iterator[ReportRow]:
    """Yield one report row per ranked language, numbered from 1."""
    total = sum(count for _, count in ranking)
    if total == 0:
        return
    for position, (language, count) in enumerate(ranking, start=1):
        percent = count / total * 100.0
        yield ReportRow(
            rank=position,
            language=language,
            activities=count,
            percent=percent,
            proportion=format_percent(percent),
            bar=build_bar(percent),
        )


def format_csv_row(row: ReportRow) -> str:
    """Format a report row as a CSV line without terminator."""
    return ",".join([
        str(row.rank),
        _quote(row.language),
        str(row.activities),
        _quote(row.proportion),
        _quote(row.bar),
    ])


def render(ranking: Ranking, sink: TextIO) -> None:
    """Write the CSV report for ``ranking`` to ``sink``.

    The sink is flushed but not closed; the caller owns it.

    Raises:
        InvalidInputError: If ``sink`` cannot be written to.
    """
    write = getattr(sink, "write", None)
    if not callable(write):
        raise InvalidInputError(f"{type(sink).__name__} is not a writable sink")

    try:
        write(CSV_HEADER + "\n")
        for row in report_rows(ranking):
            write(format_csv_row(row) + "\n")
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except (TypeError, ValueError) as exc:
        # Binary sinks reject str; closed sinks raise ValueError.
        raise InvalidInputError(f"Cannot write report: {exc}") from exc


def format_cli_output(report: RankingReport, top: int = 10) -> str:
    """Format a ranking summary for terminal display with color."""
    header = click.style(report.date_hour, bold=True)
    lines: list[str] = [
        f"Language ranking for {header}",
        f"Activities: {report.total_activities:,} | "
        f"Languages: {len(report.languages)}",
        f"Report: {report.output}",
    ]

    shown = report.languages[:top]
    if shown:
        lines.append("")
        width = max(len(s.language) for s in shown)
        for position, share in enumerate(shown, start=1):
            name = click.style(share.language.ljust(width), fg="green")
            lines.append(
                f"{position:>3}. {name} {share.activities:>8,} "
                f"{format_percent(share.percent):>9} {build_bar(share.percent)}"
            )
        hidden = len(report.languages) - len(shown)
        if hidden > 0:
            lines.append(f"     ... and {hidden} more")

    return "\n".join(lines)


def format_json(report: RankingReport) -> str:
    """Format a ranking report as JSON."""
    return report.model_dump_json(indent=2)
