"""Split a LIGM-DB flat file into per-record field bags."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .config import LINE_PREFIX_WIDTH, REQUIRED_KEYWORDS
from .species import Species, UnknownSpeciesError

logger = logging.getLogger(__name__)

_SEQUENCE_CHARS = frozenset("acgt")


@dataclass
class RawRecord:
    """The lines of one record that matter downstream, before feature parsing."""

    id: str = ""
    keywords: list[str] = field(default_factory=list)
    ft_key_width: int | None = None
    ft: list[str] = field(default_factory=list)
    species: Species | None = None
    organism: str | None = None
    sequence: str = ""

    def add_line(self, line: str) -> None:
        if line.startswith("ID"):
            self.id = line[LINE_PREFIX_WIDTH:].split(";", 1)[0].strip()
        elif line.startswith("KW"):
            self.keywords.extend(
                k.strip().rstrip(".")
                for k in line[LINE_PREFIX_WIDTH:].split(";")
                if k.strip().rstrip(".")
            )
        elif line.startswith("FH   Key"):
            column = line.find("Location")
            if column >= 0:
                self.ft_key_width = column - LINE_PREFIX_WIDTH
        elif line.startswith("FT"):
            self.ft.append(line)
        elif line.startswith("OS") and self.organism is None:
            self.organism = line[LINE_PREFIX_WIDTH:].strip()
            try:
                self.species = Species.from_imgt(self.organism)
            except UnknownSpeciesError as e:
                logger.warning("Dropping record %s: %s", self.id or "?", e)
        elif line.startswith("  "):
            self.sequence += "".join(c for c in line if c in _SEQUENCE_CHARS)

    @property
    def is_retained(self) -> bool:
        """Functional immunoglobulin records with a resolved species."""
        return (
            all(k in self.keywords for k in REQUIRED_KEYWORDS)
            and self.species is not None
        )


def iter_records(lines: Iterable[str]) -> Iterator[RawRecord]:
    """
    Group lines into records terminated by a literal ``//`` line.

    Lazy and single-pass; content after the last ``//`` is not a record.
    """
    record = RawRecord()
    pending = False
    for line in lines:
        line = line.rstrip("\r\n")
        if line == "//":
            yield record
            record = RawRecord()
            pending = False
            continue
        record.add_line(line)
        pending = pending or bool(line.strip())
    if pending:
        logger.warning("Ignoring unterminated trailing record %s", record.id or "?")


def retained_records(lines: Iterable[str]) -> Iterator[RawRecord]:
    """Yield only records worth interpreting; everything else is skipped silently."""
    for record in iter_records(lines):
        if record.is_retained:
            yield record
