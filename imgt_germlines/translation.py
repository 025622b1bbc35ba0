"""Nucleotide extraction and translation with IMGT frame annotations."""

from dataclasses import dataclass

from Bio.Data.CodonTable import standard_dna_table
from Bio.Seq import Seq

from .location import Location

_CODONS: dict[str, str] = {
    codon.lower(): aa for codon, aa in standard_dna_table.forward_table.items()
}
_CODONS.update({codon.lower(): "*" for codon in standard_dna_table.stop_codons})


class TranslationError(ValueError):
    """Raised for invalid codons or spans that cannot be extracted."""


@dataclass(frozen=True)
class TranslatedSpan:
    """
    A translated region.

    ``origin`` is the span whose reading-direction start is the first codon
    of the translation; ``leading`` counts residues that precede it in
    ``amino_acids`` (a prepended spliced residue).
    """

    nucleotides: str
    amino_acids: str
    origin: Location
    leading: int = 0


def translate(nucleotides: str) -> tuple[str, str]:
    """
    Translate codon by codon from offset 0. A trailing partial codon is
    dropped. Stop codons at the end of the span are dropped; an internal
    stop stays in place as ``*`` so residue indices still follow the codons.

    Returns:
        (nucleotides, amino_acids)

    Raises:
        TranslationError: naming the first codon not in the genetic code.
    """
    residues = []
    for i in range(0, len(nucleotides) - 2, 3):
        codon = nucleotides[i:i + 3]
        aa = _CODONS.get(codon.lower())
        if aa is None:
            raise TranslationError(f"Not a valid codon: `{codon}`")
        residues.append(aa)
    return nucleotides, "".join(residues).rstrip("*")


def extract(sequence: str, location: Location) -> str:
    """Nucleotides covered by ``location``, reverse-complemented on the complement strand."""
    if location.end >= len(sequence):
        raise TranslationError(
            f"Location {location} outside sequence of length {len(sequence)}"
        )
    return str(location.to_feature_location().extract(Seq(sequence)))


def reading_frame(location: Location, frame_shift: int) -> Location:
    """
    The span starting at the first codon for a ``/codon_start`` of
    ``frame_shift + 1``.

    Shifts 0 and 1 trim leading nucleotides. A shift of 2 means the first
    codon was split by a splice site, so the span is widened by one
    nucleotide upstream to complete that codon.
    """
    origin = location.advance(-1 if frame_shift == 2 else frame_shift)
    if origin is None:
        raise TranslationError(
            f"Cannot apply frame shift {frame_shift} to location {location}"
        )
    return origin


def translate_span(
    sequence: str,
    location: Location,
    frame_shift: int = 0,
    spliced_residue: str | None = None,
) -> TranslatedSpan:
    """
    Extract and translate one feature.

    The spliced residue from ``/splice-expectedcodon`` is prepended for a
    nonzero frame shift, except shift 2 where the widened codon already
    encodes it.
    """
    origin = reading_frame(location, frame_shift)
    nucleotides, amino_acids = translate(extract(sequence, origin))
    leading = 0
    if spliced_residue and frame_shift not in (0, 2):
        amino_acids = spliced_residue + amino_acids
        leading = 1
    return TranslatedSpan(nucleotides, amino_acids, origin, leading)
