"""Per-species germline database: sorted, deduplicated and serializable.

Layout:

    Germlines (one species)
      └─ Chain (heavy, kappa, lambda, iota)
           └─ variable / joining / constant: list[Germline], sorted by Gene
                └─ alleles: list[(number, AnnotatedSequence)], sorted by number

Lists are kept sorted on insertion so lookups can binary search.
"""

import gzip
import json
import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from pathlib import Path

from .config import DATABASE_SUFFIX
from .names import Annotation, ChainType, Constant, Gene, Region, Segment
from .species import Species

logger = logging.getLogger(__name__)


@dataclass
class AnnotatedSequence:
    """Amino acids of one allele with region lengths and conserved positions."""

    sequence: str
    regions: list[tuple[Region, int]] = field(default_factory=list)
    annotations: list[tuple[Annotation, int]] = field(default_factory=list)

    def __post_init__(self):
        total = sum(length for _, length in self.regions)
        if total != len(self.sequence):
            raise ValueError(
                f"Region lengths sum to {total}, sequence has {len(self.sequence)} residues"
            )

    @property
    def completeness(self) -> int:
        """Used to choose between duplicate records of the same allele."""
        return len(self.annotations) + len(self.regions)

    def to_dict(self) -> dict:
        return {
            "seq": self.sequence,
            "regions": [[r.value, n] for r, n in self.regions],
            "annotations": [[a.value, i] for a, i in self.annotations],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnnotatedSequence":
        return cls(
            sequence=data["seq"],
            regions=[(Region(r), n) for r, n in data["regions"]],
            annotations=[(Annotation(a), i) for a, i in data["annotations"]],
        )


@dataclass
class Germline:
    """A gene and its alleles, sorted and unique by allele number."""

    name: Gene
    alleles: list[tuple[int, AnnotatedSequence]] = field(default_factory=list)

    def insert(self, number: int, sequence: AnnotatedSequence) -> None:
        """
        Add an allele. On a duplicate number the entry with more
        annotations plus regions wins; the existing entry wins a tie.
        """
        i = bisect_left(self.alleles, number, key=lambda a: a[0])
        if i < len(self.alleles) and self.alleles[i][0] == number:
            current = self.alleles[i][1]
            if sequence.completeness > current.completeness:
                logger.debug("Replacing %s*%02d with a more complete duplicate", self.name, number)
                self.alleles[i] = (number, sequence)
            return
        self.alleles.insert(i, (number, sequence))

    def get(self, number: int) -> AnnotatedSequence | None:
        i = bisect_left(self.alleles, number, key=lambda a: a[0])
        if i < len(self.alleles) and self.alleles[i][0] == number:
            return self.alleles[i][1]
        return None

    def to_dict(self) -> dict:
        return {
            "chain": self.name.chain.value,
            "segment": self.name.segment.value,
            "isotype": self.name.isotype.value if self.name.isotype else None,
            "number": self.name.number,
            "family": [list(part) for part in self.name.family],
            "alleles": [[n, seq.to_dict()] for n, seq in self.alleles],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Germline":
        gene = Gene(
            chain=ChainType(data["chain"]),
            segment=Segment(data["segment"]),
            isotype=Constant(data["isotype"]) if data["isotype"] else None,
            number=data["number"],
            family=tuple((n, s) for n, s in data["family"]),
        )
        return cls(gene, [(n, AnnotatedSequence.from_dict(s)) for n, s in data["alleles"]])


@dataclass
class Chain:
    variable: list[Germline] = field(default_factory=list)
    joining: list[Germline] = field(default_factory=list)
    constant: list[Germline] = field(default_factory=list)

    def segment(self, segment: Segment) -> list[Germline]:
        return {
            Segment.V: self.variable,
            Segment.J: self.joining,
            Segment.C: self.constant,
        }[segment]

    def find(self, gene: Gene) -> Germline | None:
        germlines = self.segment(gene.segment)
        i = bisect_left(germlines, gene, key=lambda g: g.name)
        if i < len(germlines) and germlines[i].name == gene:
            return germlines[i]
        return None

    def insert(self, gene: Gene, number: int, sequence: AnnotatedSequence) -> None:
        germlines = self.segment(gene.segment)
        i = bisect_left(germlines, gene, key=lambda g: g.name)
        if i == len(germlines) or germlines[i].name != gene:
            germlines.insert(i, Germline(gene))
        germlines[i].insert(number, sequence)


@dataclass
class Germlines:
    """All germlines of one species."""

    species: Species
    heavy: Chain = field(default_factory=Chain)
    kappa: Chain = field(default_factory=Chain)
    lambda_: Chain = field(default_factory=Chain)
    iota: Chain = field(default_factory=Chain)

    def chain(self, kind: ChainType) -> Chain:
        return {
            ChainType.HEAVY: self.heavy,
            ChainType.LIGHT_KAPPA: self.kappa,
            ChainType.LIGHT_LAMBDA: self.lambda_,
            ChainType.IOTA: self.iota,
        }[kind]

    def chains(self) -> list[tuple[ChainType, Chain]]:
        return [(kind, self.chain(kind)) for kind in ChainType]

    def insert(self, gene: Gene, number: int, sequence: AnnotatedSequence) -> None:
        self.chain(gene.chain).insert(gene, number, sequence)

    def find(self, gene: Gene, allele: int | None = None) -> tuple[int, AnnotatedSequence] | None:
        """
        Look up one allele; without an allele number the lowest one is
        returned.
        """
        germline = self.chain(gene.chain).find(gene)
        if germline is None or not germline.alleles:
            return None
        if allele is None:
            return germline.alleles[0]
        sequence = germline.get(allele)
        return (allele, sequence) if sequence is not None else None

    def counts(self) -> dict[ChainType, dict[Segment, tuple[int, int]]]:
        """(genes, alleles) per chain and segment."""
        return {
            kind: {
                segment: (
                    len(chain.segment(segment)),
                    sum(len(g.alleles) for g in chain.segment(segment)),
                )
                for segment in Segment
            }
            for kind, chain in self.chains()
        }

    def __len__(self) -> int:
        return sum(a for per_chain in self.counts().values() for _, a in per_chain.values())

    # -----------------------------------------------------------------
    # Persistence
    # -----------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "species": self.species.name,
            "chains": {
                kind.value: {
                    segment.value: [g.to_dict() for g in chain.segment(segment)]
                    for segment in Segment
                }
                for kind, chain in self.chains()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Germlines":
        db = cls(Species[data["species"]])
        for kind_value, segments in data["chains"].items():
            chain = db.chain(ChainType(kind_value))
            for segment_value, germlines in segments.items():
                chain.segment(Segment(segment_value)).extend(
                    Germline.from_dict(g) for g in germlines
                )
        return db

    def to_bytes(self) -> bytes:
        payload = json.dumps(self.to_dict(), separators=(",", ":"))
        return gzip.compress(payload.encode("utf-8"), mtime=0)

    @classmethod
    def from_bytes(cls, blob: bytes) -> "Germlines":
        return cls.from_dict(json.loads(gzip.decompress(blob).decode("utf-8")))

    def save(self, directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.species.name}{DATABASE_SUFFIX}"
        path.write_bytes(self.to_bytes())
        logger.info("Wrote %s (%d alleles)", path, len(self))
        return path

    @classmethod
    def load(cls, path: Path) -> "Germlines":
        return cls.from_bytes(path.read_bytes())
