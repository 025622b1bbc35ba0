"""Orchestrates fetching and reading the LIGM-DB flat file."""

import gzip
import logging
from pathlib import Path
from typing import Iterator

from .client import IMGTClient

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"


def fetch_ligm_db(client: IMGTClient, dest: Path | None = None) -> Path:
    """Download (or reuse) the LIGM-DB archive and report its size."""
    path = client.fetch_ligm_db(dest=dest)
    logger.info("LIGM-DB archive ready: %s (%.1f MB)", path, path.stat().st_size / 1e6)
    return path


def is_gzip(path: Path) -> bool:
    """True if the file starts with the gzip magic number, whatever its suffix."""
    with open(path, "rb") as f:
        return f.read(2) == _GZIP_MAGIC


def open_dat(path: Path) -> Iterator[str]:
    """
    Yield the lines of a plain or gzip-compressed ``.dat`` file without
    their line endings.
    """
    opener = gzip.open if is_gzip(path) else open
    with opener(path, "rt", encoding="latin-1") as handle:
        for line in handle:
            yield line.rstrip("\r\n")
