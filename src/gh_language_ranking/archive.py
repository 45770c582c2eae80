"""Async client for the hourly public event archive."""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterator
from pathlib import Path

import httpx

from gh_language_ranking.config import LanguageRankingConfig, load_config
from gh_language_ranking.exceptions import TransferError

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"
_CHUNK_BYTES = 1 << 16


def local_name(date_hour: str) -> str:
    """Cache file name for a normalized ``yyyy-MM-dd-HH`` stamp."""
    return f"{date_hour}.json.gz"


def remote_name(date_hour: str) -> str:
    """Archive file name for a stamp; the feed does not zero-pad hours."""
    day, hour = date_hour[:10], date_hour[11:]
    return f"{day}-{int(hour)}.json.gz"


class ArchiveClient:
    """Downloads hourly event archives, skipping files already on disk."""

    def __init__(self, config: LanguageRankingConfig | None = None) -> None:
        self._config = config if config is not None else load_config()
        self._client = httpx.AsyncClient(
            timeout=self._config.archive.timeout_seconds,
            follow_redirects=True,
        )

    async def __aenter__(self) -> ArchiveClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._client.aclose()

    def url_for(self, date_hour: str) -> str:
        base_url = self._config.archive.base_url.rstrip("/")
        return f"{base_url}/{remote_name(date_hour)}"

    async def download(
        self, date_hour: str, dest_dir: str | Path | None = None
    ) -> Path:
        """Download the archive for ``date_hour`` unless it is already present.

        The body is streamed to a ``.part`` file that is renamed once the
        transfer completes, so an interrupted download never looks cached.

        Raises:
            TransferError: On a non-2xx response or a transport failure.
        """
        if dest_dir is None:
            dest_dir = self._config.archive.download_dir
        directory = Path(dest_dir)
        path = directory / local_name(date_hour)
        if path.exists():
            logger.info("File %s already downloaded", path.name)
            return path

        directory.mkdir(parents=True, exist_ok=True)
        url = self.url_for(date_hour)
        partial = path.with_name(path.name + ".part")
        logger.info("Downloading %s to %s", url, path.name)

        try:
            await self._fetch(url, partial)
        except httpx.HTTPError as exc:
            partial.unlink(missing_ok=True)
            logger.warning("Download of %s failed", url)
            raise TransferError(f"Download of {url} failed: {exc}", url=url) from exc

        partial.replace(path)
        logger.info("Downloaded %s (%d bytes)", path.name, path.stat().st_size)
        return path

    async def _fetch(self, url: str, target: Path) -> None:
        async with self._client.stream("GET", url) as response:
            if not response.is_success:
                logger.warning("Download of %s failed", url)
                raise TransferError(
                    f"Received HTTP {response.status_code} "
                    f"{response.reason_phrase} for {url}",
                    status_code=response.status_code,
                    url=url,
                )
            with open(target, "wb") as f:
                async for chunk in response.aiter_bytes(_CHUNK_BYTES):
                    f.write(chunk)


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a JSON-lines file, gzip-compressed or not."""
    path = Path(path)
    with open(path, "rb") as raw:
        compressed = raw.read(2) == _GZIP_MAGIC

    opener = gzip.open if compressed else open
    with opener(path, "rt", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")
