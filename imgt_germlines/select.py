"""Query the germline databases.

    selection = Selection().species(Species.HOMO_SAPIENS).chain(ChainType.HEAVY).segment(Segment.V)
    for allele in selection.germlines():
        print(allele.name(), allele.sequence.sequence)

Filters are applied at every level (species, chain, segment) before
descending, so species outside the selection are never loaded.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator

from .database import AnnotatedSequence, Germline
from .names import Annotation, ChainType, Gene, Region, Segment, allele_name, parse_allele_name
from .registry import GermlineRegistry, default_registry
from .species import Species

logger = logging.getLogger(__name__)


class AlleleSelection(Enum):
    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class Allele:
    """One allele of one gene, as produced by a query."""

    species: Species
    gene: Gene
    number: int
    sequence: AnnotatedSequence

    def name(self) -> str:
        return allele_name(self.gene, self.number)

    def fancy_name(self) -> str:
        return f"{self.gene.fancy_name()}*{self.number:02}"

    def region(self, index: int) -> tuple[Region, bool] | None:
        """The region at ``index`` and whether ``index`` is its first residue."""
        if index < 0:
            return None
        start = 0
        for region, length in self.sequence.regions:
            if index < start + length:
                return region, index == start
            start += length
        return None

    def annotations_at(self, index: int) -> list[Annotation]:
        return [a for a, i in self.sequence.annotations if i == index]


def _as_set(values) -> frozenset:
    if isinstance(values, Enum):
        return frozenset([values])
    return frozenset(values)


@dataclass(frozen=True)
class Selection:
    """
    An immutable filter over the germline databases.

    ``None`` filters match everything. Builder methods return a new
    Selection and accept a single value or an iterable of values.
    """

    species_filter: frozenset[Species] | None = None
    chain_filter: frozenset[ChainType] | None = None
    segment_filter: frozenset[Segment] | None = None
    allele_policy: AlleleSelection = AlleleSelection.FIRST

    def species(self, species: Species | Iterable[Species]) -> "Selection":
        return replace(self, species_filter=_as_set(species))

    def chain(self, chains: ChainType | Iterable[ChainType]) -> "Selection":
        return replace(self, chain_filter=_as_set(chains))

    def segment(self, segments: Segment | Iterable[Segment]) -> "Selection":
        return replace(self, segment_filter=_as_set(segments))

    def allele(self, policy: AlleleSelection) -> "Selection":
        return replace(self, allele_policy=policy)

    def _selected_species(self, registry: GermlineRegistry) -> list[Species]:
        if self.species_filter is None:
            return registry.available()
        return sorted(self.species_filter)

    def _selected_chains(self) -> list[ChainType]:
        return [c for c in ChainType if self.chain_filter is None or c in self.chain_filter]

    def _selected_segments(self) -> list[Segment]:
        return [s for s in Segment if self.segment_filter is None or s in self.segment_filter]

    def _alleles(self, germline: Germline) -> list[tuple[int, AnnotatedSequence]]:
        if self.allele_policy is AlleleSelection.FIRST:
            return germline.alleles[:1]
        return germline.alleles

    def _tasks(self, registry: GermlineRegistry) -> Iterator[tuple[Species, list[Germline]]]:
        for species in self._selected_species(registry):
            db = registry.get(species)
            if db is None:
                logger.debug("No database for %s", species.name)
                continue
            for kind in self._selected_chains():
                chain = db.chain(kind)
                for segment in self._selected_segments():
                    yield species, chain.segment(segment)

    def _expand(self, species: Species, germlines: list[Germline]) -> list[Allele]:
        return [
            Allele(species, germline.name, number, sequence)
            for germline in germlines
            for number, sequence in self._alleles(germline)
        ]

    def germlines(self, registry: GermlineRegistry | None = None) -> Iterator[Allele]:
        """
        Lazily yield every matching allele, ordered by species, chain,
        segment, gene and allele number.
        """
        registry = registry or default_registry()
        for species, germlines in self._tasks(registry):
            for germline in germlines:
                for number, sequence in self._alleles(germline):
                    yield Allele(species, germline.name, number, sequence)

    def par_germlines(
        self,
        registry: GermlineRegistry | None = None,
        max_workers: int | None = None,
    ) -> Iterator[Allele]:
        """
        Like ``germlines`` but each (species, chain, segment) slice is
        expanded on a worker thread. Every match is produced exactly once,
        in no particular order.
        """
        registry = registry or default_registry()
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(self._expand, species, germlines)
                for species, germlines in self._tasks(registry)
                if germlines
            ]
            for future in as_completed(futures):
                yield from future.result()


def get_germline(
    species: Species,
    gene: Gene | str,
    allele: int | None = None,
    registry: GermlineRegistry | None = None,
) -> Allele | None:
    """
    Look up one allele by gene name; the lowest allele number is used
    when none is given.

    A string name may carry its own allele suffix (``IGHV3-23*03``), which
    applies unless ``allele`` is passed explicitly.
    """
    registry = registry or default_registry()
    if isinstance(gene, str):
        text = gene
        gene, number = parse_allele_name(text)
        if allele is None and "*" in text:
            allele = number
    db = registry.get(species)
    if db is None:
        return None
    found = db.find(gene, allele)
    if found is None:
        return None
    number, sequence = found
    return Allele(species, gene, number, sequence)
