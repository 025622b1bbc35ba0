"""Interpret the feature table of a LIGM-DB record into gene drafts.

A feature line carries the key in a fixed-width column (measured from the
record's ``FH   Key`` header) followed by its location. Qualifier lines that
follow it belong to the same feature until the next key appears:

    FT   V-GENE              1..297
    FT                       /IMGT_allele="IGHV1-2*02"
    FT                       /functional
    FT   FR1-IMGT            1..75
    FT                       /codon_start=1

Genes (``V-GENE``, ``J-GENE``, ``C-GENE``) that are functional, complete and
carry an IMGT allele name open a draft; structural sub-features are attached
to the first draft that contains them.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .config import GENE_KEYS, GENE_PREFIX, LINE_PREFIX_WIDTH, STRUCTURAL_KEYS
from .location import Location, ParseError
from .species import Species
from .tokenizer import RawRecord, retained_records
from .translation import TranslatedSpan, TranslationError, translate_span

logger = logging.getLogger(__name__)


@dataclass
class RawRegion:
    """One feature table entry."""

    key: str
    location: Location
    reported_sequence: str = ""
    allele: str = ""
    functional: bool = False
    partial: bool = False
    frame_shift: int = 0
    spliced_residue: str | None = None
    translation: TranslatedSpan | None = None
    error: str | None = None

    @property
    def amino_acids(self) -> str | None:
        return self.translation.amino_acids if self.translation else None

    def finalize(self, sequence: str) -> None:
        """Extract and translate this feature from the record sequence."""
        try:
            self.translation = translate_span(
                sequence, self.location, self.frame_shift, self.spliced_residue
            )
        except TranslationError as e:
            self.error = str(e)
            return
        if self.reported_sequence and self.reported_sequence != self.amino_acids:
            logger.debug(
                "%s %s: reported translation differs from derived (%s vs %s)",
                self.key, self.location, self.reported_sequence, self.amino_acids,
            )


@dataclass
class GeneDraft:
    """A gene with the sub-features found inside its span."""

    key: str
    location: Location
    allele: str
    regions: dict[str, RawRegion] = field(default_factory=dict)


@dataclass
class DataItem:
    """One interpreted record."""

    id: str
    species: Species
    sequence: str
    genes: list[GeneDraft] = field(default_factory=list)
    orphans: list[RawRegion] = field(default_factory=list)

    def add_region(self, region: RawRegion) -> None:
        if (
            region.key in GENE_KEYS
            and region.functional
            and not region.partial
            and region.allele.startswith(GENE_PREFIX)
        ):
            self.genes.append(GeneDraft(region.key, region.location, region.allele))
        elif region.key in STRUCTURAL_KEYS:
            region.finalize(self.sequence)
            for gene in self.genes:
                if gene.location.contains(region.location):
                    gene.regions[region.key] = region
                    break
            else:
                logger.debug("%s: no gene contains %s %s", self.id, region.key, region.location)
                self.orphans.append(region)


@dataclass
class ParseResult:
    """Either an interpreted record or the error that aborted it."""

    record_id: str
    item: DataItem | None = None
    error: ParseError | None = None


def _parse_qualifier(region: RawRegion, text: str) -> bool:
    """
    Apply one qualifier line to ``region``.

    Returns True when a ``/translation`` value continues on following lines.
    """
    if text.startswith('/translation="'):
        region.reported_sequence = text[len('/translation="'):].rstrip('"')
        return not text.endswith('"') or text == '/translation="'
    if text.startswith('/IMGT_allele="'):
        region.allele = text[len('/IMGT_allele="'):].rstrip('"')
    elif text.startswith("/functional"):
        region.functional = True
    elif text.startswith("/partial"):
        region.partial = True
    elif text.startswith("/codon_start="):
        value = text[len("/codon_start="):].strip('"')
        if value not in ("1", "2", "3"):
            raise ParseError("Invalid codon_start", text)
        region.frame_shift = int(value) - 1
    elif text.startswith("/splice-expectedcodon="):
        close = text.rfind("]")
        if close > 0 and text[close - 1].isalpha():
            region.spliced_residue = text[close - 1].upper()
    return False


def interpret(record: RawRecord) -> DataItem:
    """
    Walk the ``FT`` lines of a retained record.

    Raises:
        ParseError: for a missing feature header or malformed location text.
    """
    item = DataItem(id=record.id, species=record.species, sequence=record.sequence)
    if not record.ft:
        return item
    width = record.ft_key_width
    if width is None:
        raise ParseError("Missing `FH   Key ... Location` header", record.id)

    current: RawRegion | None = None
    in_translation = False
    for raw in record.ft:
        line = raw[LINE_PREFIX_WIDTH:]
        if not line.startswith(" ") or current is None:
            if current is not None:
                item.add_region(current)
            key, position = line[:width].strip(), line[width:].strip()
            current = RawRegion(key=key, location=Location.parse(position))
            in_translation = False
            continue

        text = line.strip()
        if in_translation:
            current.reported_sequence += text.rstrip('"')
            in_translation = not text.endswith('"')
        else:
            in_translation = _parse_qualifier(current, text)
    if current is not None:
        item.add_region(current)
    return item


def parse_dat(lines: Iterable[str]) -> Iterator[ParseResult]:
    """
    Lazily tokenize and interpret a LIGM-DB stream.

    Records that are not functional immunoglobulin loci of a known species
    are skipped; a record whose feature table cannot be read is reported
    as a failed ParseResult and does not stop the stream.
    """
    for record in retained_records(lines):
        try:
            yield ParseResult(record.id, item=interpret(record))
        except ParseError as e:
            logger.warning("Skipping record %s: %s", record.id or "?", e)
            yield ParseResult(record.id, error=e)
