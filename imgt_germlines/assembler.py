"""Finish gene drafts into annotated amino-acid sequences.

A draft's sub-features are concatenated in a fixed order per gene kind:

    V-GENE: FR1 CDR1 FR2 CDR2 FR3 CDR3
    J-GENE: J-REGION, split into CDR3 | FR4 at the first [WF]G.G motif
    C-GENE: CH1 [H] CH2 CH3 [CH4 .. CH9] CHS

Conserved residues are then placed by mapping each IMGT marker location
onto the assembled regions, and N-glycosylation sites (N, any, S/T) are
found on the final sequence.
"""

import logging
import re
from dataclasses import dataclass

from .database import AnnotatedSequence
from .features import DataItem, GeneDraft
from .location import Location
from .names import Annotation, Gene, GeneNameError, Region, parse_allele_name
from .translation import TranslatedSpan

logger = logging.getLogger(__name__)

V_REGIONS = (
    ("FR1-IMGT", Region.FR1),
    ("CDR1-IMGT", Region.CDR1),
    ("FR2-IMGT", Region.FR2),
    ("CDR2-IMGT", Region.CDR2),
    ("FR3-IMGT", Region.FR3),
    ("CDR3-IMGT", Region.CDR3),
)

# (key, region, required)
C_REGIONS = (
    ("CH1", Region.CH1, True),
    ("H", Region.HINGE, False),
    ("CH2", Region.CH2, True),
    ("CH3", Region.CH3, True),
    ("CH4", Region.CH4, False),
    ("CH5", Region.CH5, False),
    ("CH6", Region.CH6, False),
    ("CH7", Region.CH7, False),
    ("CH8", Region.CH8, False),
    ("CH9", Region.CH9, False),
    ("CHS", Region.CHS, True),
)

MARKERS = (
    ("1st-CYS", Annotation.CYSTEINE1),
    ("2nd-CYS", Annotation.CYSTEINE2),
    ("CONSERVED-TRP", Annotation.TRYPTOPHAN),
    ("J-PHE", Annotation.PHENYLALANINE),
    ("J-TRP", Annotation.TRYPTOPHAN),
)

J_MOTIF = re.compile(r"[WF]G.G")


class FinishError(ValueError):
    """A draft that cannot become a database entry."""

    def __init__(self, message: str, allele: str = ""):
        super().__init__(message)
        self.allele = allele


@dataclass(frozen=True)
class Part:
    """An assembled region and the span its first translated codon came from."""

    region: Region
    amino_acids: str
    origin: Location | None
    leading: int = 0


@dataclass(frozen=True)
class FinishedAllele:
    gene: Gene
    allele: int
    sequence: AnnotatedSequence


# ---------------------------------------------------------------------------
# Region assembly
# ---------------------------------------------------------------------------


def _translation(draft: GeneDraft, key: str) -> TranslatedSpan:
    region = draft.regions.get(key)
    if region is None:
        raise FinishError(f"Could not find {key}", draft.allele)
    if region.translation is None:
        raise FinishError(f"{key} does not have a sequence: {region.error}", draft.allele)
    return region.translation


def _part(region: Region, span: TranslatedSpan) -> Part:
    return Part(region, span.amino_acids, span.origin, span.leading)


def _assemble_v(draft: GeneDraft) -> tuple[list[Part], list[tuple[Annotation, int]]]:
    return [_part(region, _translation(draft, key)) for key, region in V_REGIONS], []


def _assemble_c(draft: GeneDraft) -> tuple[list[Part], list[tuple[Annotation, int]]]:
    parts = [
        _part(region, _translation(draft, key))
        for key, region, required in C_REGIONS
        if required or key in draft.regions
    ]
    return parts, []


def _assemble_j(draft: GeneDraft) -> tuple[list[Part], list[tuple[Annotation, int]]]:
    """
    Split the J-REGION at the conserved Trp/Phe of the [WF]G.G motif.

    Residues before the motif end the CDR3, the rest is FR4. Without a
    motif the whole region is labelled FR4, which misplaces any CDR3
    residues it contains.
    """
    span = _translation(draft, "J-REGION")
    amino_acids = span.amino_acids
    match = J_MOTIF.search(amino_acids)
    if match is None:
        logger.debug("%s: no [WF]G.G motif in %s", draft.allele, amino_acids)
        return [_part(Region.FR4, span)], []

    i = match.start()
    anchor = Annotation.TRYPTOPHAN if amino_acids[i] == "W" else Annotation.PHENYLALANINE
    annotations = [(anchor, i), (Annotation.GLYCINE, i + 1), (Annotation.GLYCINE, i + 3)]
    if i == 0:
        return [_part(Region.FR4, span)], annotations

    split = i - span.leading
    if split <= 0:
        # only the spliced residue precedes the motif
        return [
            Part(Region.CDR3, amino_acids[:i], None, span.leading),
            Part(Region.FR4, amino_acids[i:], span.origin),
        ], annotations
    halves = span.origin.splice(split)
    if halves is None:
        raise FinishError(f"Cannot split J-REGION {span.origin} at residue {split}", draft.allele)
    cdr3, fr4 = halves
    return [
        Part(Region.CDR3, amino_acids[:i], cdr3, span.leading),
        Part(Region.FR4, amino_acids[i:], fr4),
    ], annotations


ASSEMBLERS = {
    "V-GENE": _assemble_v,
    "J-GENE": _assemble_j,
    "C-GENE": _assemble_c,
}


# ---------------------------------------------------------------------------
# Annotations
# ---------------------------------------------------------------------------


def locate(parts: list[Part], location: Location) -> int | None:
    """
    Amino acid index of ``location`` in the concatenated parts, found by
    walking the parts in order and mapping against each original span.
    """
    offset = 0
    for part in parts:
        if part.origin is not None:
            residues = part.origin.to_amino_acid_range(location)
            if residues is not None:
                index = offset + part.leading + residues[0]
                if index < offset + len(part.amino_acids):
                    return index
        offset += len(part.amino_acids)
    return None


def nglycan_sites(sequence: str) -> list[int]:
    """Start indices of every N-x-S/T motif."""
    return [
        i for i in range(len(sequence) - 2)
        if sequence[i] == "N" and sequence[i + 2] in "ST"
    ]


def finish(draft: GeneDraft) -> FinishedAllele:
    """
    Turn one draft into a named, annotated allele.

    Raises:
        FinishError: for missing or untranslatable sub-features, markers
            that fall outside every assembled region, unsupported gene
            kinds and malformed allele names.
    """
    assemble = ASSEMBLERS.get(draft.key)
    if assemble is None:
        raise FinishError(f"Unsupported gene kind {draft.key}", draft.allele)
    parts, annotations = assemble(draft)

    sequence = "".join(part.amino_acids for part in parts)
    if not sequence:
        raise FinishError("Empty sequence", draft.allele)
    regions = [(part.region, len(part.amino_acids)) for part in parts if part.amino_acids]

    for key, annotation in MARKERS:
        marker = draft.regions.get(key)
        if marker is None:
            continue
        index = locate(parts, marker.location)
        if index is None:
            raise FinishError(f"Could not place {key} at {marker.location}", draft.allele)
        annotations.append((annotation, index))
    annotations.extend((Annotation.NGLYCAN, i) for i in nglycan_sites(sequence))
    annotations = sorted(set(annotations), key=lambda a: (a[1], a[0].rank))

    try:
        gene, allele = parse_allele_name(draft.allele)
    except GeneNameError as e:
        raise FinishError(str(e), draft.allele) from e

    try:
        annotated = AnnotatedSequence(sequence, regions, annotations)
    except ValueError as e:
        raise FinishError(str(e), draft.allele) from e
    return FinishedAllele(gene, allele, annotated)


def finish_item(item: DataItem) -> list[FinishedAllele | FinishError]:
    """Finish every draft of a record; failures are returned, not raised."""
    results: list[FinishedAllele | FinishError] = []
    for draft in item.genes:
        try:
            results.append(finish(draft))
        except FinishError as e:
            logger.debug("%s %s: %s", item.id, draft.allele, e)
            results.append(e)
    return results
