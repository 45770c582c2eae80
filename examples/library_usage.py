"""Example: Rank languages for one hour of GitHub activity."""

from __future__ import annotations

import asyncio

from gh_language_ranking import analyze
from gh_language_ranking.config import load_config


async def main() -> None:
    config = load_config()
    report = await analyze("2016-03-14-15", config)
    print(f"Hour: {report.date_hour}")
    print(f"Activities: {report.total_activities}")
    print(f"Report written to {report.output}")

    for position, share in enumerate(report.languages[:5], start=1):
        print(f"{position}. {share.language}: {share.activities} ({share.percent:.2f}%)")


if __name__ == "__main__":
    asyncio.run(main())
