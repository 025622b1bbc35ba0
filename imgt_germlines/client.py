"""IMGT download client with retries and a local file cache."""

import logging
from pathlib import Path
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    CHUNK_SIZE,
    DOWNLOAD_TIMEOUT,
    LIGM_DB_FILENAME,
    LIGM_DB_URL,
    MAX_RETRIES,
    RETRY_BACKOFF,
)

logger = logging.getLogger(__name__)


class IMGTClient:
    """Client for the IMGT bulk download area."""

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        use_cache: bool = True,
        timeout: float = DOWNLOAD_TIMEOUT,
    ):
        self.session = requests.Session()

        # Configure retry with exponential backoff
        retry = Retry(
            total=MAX_RETRIES,
            backoff_factor=RETRY_BACKOFF,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        self.session.mount("https://", HTTPAdapter(max_retries=retry))

        self.cache_dir = Path(cache_dir) if cache_dir else None
        self.use_cache = use_cache and self.cache_dir is not None
        self.timeout = timeout

    def download(self, url: str, dest: Path) -> Path:
        """
        Stream ``url`` to ``dest``.

        The body is written to a temporary sibling first so an interrupted
        download never leaves a truncated file at ``dest``.
        """
        dest.parent.mkdir(parents=True, exist_ok=True)
        partial = dest.with_name(dest.name + ".part")
        with self.session.get(url, stream=True, timeout=self.timeout) as resp:
            resp.raise_for_status()
            size = 0
            with open(partial, "wb") as f:
                for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
                    size += len(chunk)
        partial.replace(dest)
        logger.info("Downloaded %s (%d bytes) to %s", url, size, dest)
        return dest

    def fetch_ligm_db(self, url: str = LIGM_DB_URL, dest: Optional[Path] = None) -> Path:
        """
        Return a local copy of the LIGM-DB flat file archive, downloading it
        unless a cached copy exists.
        """
        if dest is None:
            if self.cache_dir is None:
                raise ValueError("Either dest or cache_dir is required")
            dest = self.cache_dir / LIGM_DB_FILENAME
        if self.use_cache and dest.exists():
            logger.info("Using cached %s", dest)
            return dest
        return self.download(url, dest)
