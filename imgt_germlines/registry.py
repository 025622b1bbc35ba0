"""Lazy, memoized access to the persisted per-species databases.

Each species file is read at most once per registry: the first ``get``
for a species deserializes it under that species' lock and every later
call returns the same object. The process-wide registry is created on
first use by ``default_registry()`` and lives until the process exits.
"""

import logging
import os
import threading
from pathlib import Path

from .config import DATA_DIR, DATABASE_DIR_ENV, DATABASE_SUFFIX
from .database import Germlines
from .species import Species

logger = logging.getLogger(__name__)

_MISSING = object()


class GermlineRegistry:
    def __init__(self, directory: Path | str | None = None):
        if directory is None:
            directory = os.environ.get(DATABASE_DIR_ENV, DATA_DIR)
        self.directory = Path(directory)
        self._loaded: dict[Species, Germlines | None] = {}
        self._locks: dict[Species, threading.Lock] = {}
        self._guard = threading.Lock()

    def path(self, species: Species) -> Path:
        return self.directory / f"{species.name}{DATABASE_SUFFIX}"

    def available(self) -> list[Species]:
        """Species with a database file, in enumeration name order."""
        if not self.directory.is_dir():
            return []
        found = []
        for path in self.directory.glob(f"*{DATABASE_SUFFIX}"):
            name = path.name[: -len(DATABASE_SUFFIX)]
            if name in Species.__members__:
                found.append(Species[name])
        return sorted(found)

    def _lock(self, species: Species) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(species, threading.Lock())

    def get(self, species: Species) -> Germlines | None:
        """The database for ``species``, or None if none was built."""
        db = self._loaded.get(species, _MISSING)
        if db is not _MISSING:
            return db
        with self._lock(species):
            db = self._loaded.get(species, _MISSING)
            if db is _MISSING:
                path = self.path(species)
                if path.exists():
                    logger.debug("Loading %s", path)
                    db = Germlines.load(path)
                else:
                    db = None
                self._loaded[species] = db
        return db

    def __contains__(self, species: Species) -> bool:
        return self.get(species) is not None

    def clear(self) -> None:
        """Forget loaded databases so the next access reads from disk again."""
        with self._guard:
            self._loaded.clear()
            self._locks.clear()


_default: GermlineRegistry | None = None
_default_guard = threading.Lock()


def default_registry() -> GermlineRegistry:
    """The process-wide registry, created on first use."""
    global _default
    with _default_guard:
        if _default is None:
            _default = GermlineRegistry()
        return _default
