"""Score an amino-acid query against germline alleles."""

import logging
from typing import Iterable

from Bio.Align import PairwiseAligner, substitution_matrices

from .registry import GermlineRegistry
from .select import Allele, Selection

logger = logging.getLogger(__name__)


def make_aligner() -> PairwiseAligner:
    aligner = PairwiseAligner()
    aligner.mode = "local"
    aligner.substitution_matrix = substitution_matrices.load("BLOSUM62")
    aligner.open_gap_score = -10
    aligner.extend_gap_score = -0.5
    return aligner


def score_alleles(
    query: str,
    alleles: Iterable[Allele],
    aligner: PairwiseAligner | None = None,
) -> list[tuple[float, Allele]]:
    """Local alignment score of ``query`` against each allele's sequence."""
    aligner = aligner or make_aligner()
    query = query.strip().upper()
    scores = []
    for allele in alleles:
        if not allele.sequence.sequence:
            continue
        scores.append((aligner.score(query, allele.sequence.sequence), allele))
    return scores


def best_matches(
    query: str,
    selection: Selection,
    registry: GermlineRegistry | None = None,
    top: int = 5,
) -> list[tuple[float, Allele]]:
    """The ``top`` highest scoring alleles, ties broken by allele name."""
    scores = score_alleles(query, selection.germlines(registry))
    scores.sort(key=lambda s: (-s[0], s[1].name()))
    logger.debug("Scored %d alleles against a %d residue query", len(scores), len(query))
    return scores[:top]
