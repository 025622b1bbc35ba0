"""Structured IMGT gene nomenclature and the enums shared across the database.

Gene names follow the IMGT grammar:

    IG <chain> <segment> [(<roman group>)] [-]<family>[-<family>...] [*<allele>]

e.g. ``IGHV3-23*03``, ``IGKV(IV)-novel-0*01`` or ``IGHG1*02``. A family
component is an optional number followed by optional letters. A missing
allele suffix means allele 1, and for double names joined by `` or `` only
the first alternative is used.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class GeneNameError(ValueError):
    """Raised when a declared allele name does not follow the IMGT grammar."""


class _OrderedEnum(Enum):
    """Enum ordered by declaration order."""

    @property
    def rank(self) -> int:
        return type(self)._member_names_.index(self.name)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.rank < other.rank


class ChainType(_OrderedEnum):
    HEAVY = "H"
    LIGHT_KAPPA = "K"
    LIGHT_LAMBDA = "L"
    IOTA = "I"

    def fancy(self) -> str:
        return {"H": "H", "K": "Κ", "L": "Λ", "I": "Ι"}[self.value]


class Segment(_OrderedEnum):
    V = "V"
    J = "J"
    C = "C"


class Constant(_OrderedEnum):
    """Constant-region isotype tag."""

    A = "A"
    D = "D"
    E = "E"
    G = "G"
    M = "M"
    O = "O"
    T = "T"

    def fancy(self) -> str:
        return {
            "A": "Α", "D": "Δ", "E": "Ε", "G": "Ɣ",
            "M": "Μ", "O": "Ο", "T": "Τ",
        }[self.value]


class Region(_OrderedEnum):
    FR1 = "FR1"
    CDR1 = "CDR1"
    FR2 = "FR2"
    CDR2 = "CDR2"
    FR3 = "FR3"
    CDR3 = "CDR3"
    FR4 = "FR4"
    CH1 = "CH1"
    HINGE = "H"
    CH2 = "CH2"
    CH3 = "CH3"
    CH4 = "CH4"
    CH5 = "CH5"
    CH6 = "CH6"
    CH7 = "CH7"
    CH8 = "CH8"
    CH9 = "CH9"
    CHS = "CHS"


class Annotation(_OrderedEnum):
    CYSTEINE1 = "Cys1"
    CYSTEINE2 = "Cys2"
    TRYPTOPHAN = "Trp"
    PHENYLALANINE = "Phe"
    GLYCINE = "Gly"
    NGLYCAN = "NGlycan"


ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X")
FANCY_ROMAN = ("Ⅰ", "Ⅱ", "Ⅲ", "Ⅳ", "Ⅴ", "Ⅵ", "Ⅶ", "Ⅷ", "Ⅸ", "Ⅹ")

_SEGMENT_CODES = {
    "V": (Segment.V, None),
    "J": (Segment.J, None),
    "C": (Segment.C, None),
    **{c.value: (Segment.C, c) for c in Constant},
}

_NAME_RE = re.compile(
    r"^IG(?P<chain>.)(?P<segment>.)"
    r"(?:\((?P<number>[IVX]+)\))?"
    r"(?P<family>[^*]*)"
    r"(?:\*(?P<allele>.*))?$"
)
_FAMILY_RE = re.compile(r"^(\d*)([A-Za-z]*)$")


@total_ordering
@dataclass(frozen=True)
class Gene:
    """A gene name, ordered by (chain, segment, isotype, group number, family)."""

    chain: ChainType
    segment: Segment
    isotype: Constant | None = None
    number: int | None = None
    family: tuple[tuple[int | None, str], ...] = ()

    @classmethod
    def parse(cls, text: str) -> "Gene":
        """Parse a gene name, with or without an allele suffix."""
        return parse_allele_name(text)[0]

    def _sort_key(self) -> tuple:
        return (
            self.chain.rank,
            self.segment.rank,
            -1 if self.isotype is None else self.isotype.rank,
            -1 if self.number is None else self.number,
            tuple((-1 if n is None else n, s) for n, s in self.family),
        )

    def __lt__(self, other):
        if not isinstance(other, Gene):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    @property
    def segment_code(self) -> str:
        return self.isotype.value if self.isotype else self.segment.value

    def _family_text(self) -> str:
        return "-".join(
            f"{'' if n is None else n}{s}" for n, s in self.family
        )

    def __str__(self) -> str:
        name = f"IG{self.chain.value}{self.segment_code}"
        if self.number is not None:
            name += f"({ROMAN[self.number - 1]})"
        family = self._family_text()
        if family:
            name += ("-" if self.number is not None else "") + family
        return name

    def fancy_name(self) -> str:
        """The name with Greek chain/isotype letters and roman numeral glyphs."""
        segment = self.isotype.fancy() if self.isotype else self.segment.value
        name = f"IG{self.chain.fancy()}{segment}"
        if self.number is not None:
            name += f"({FANCY_ROMAN[self.number - 1]})"
        family = self._family_text()
        if family:
            name += ("-" if self.number is not None else "") + family
        return name


def parse_allele_name(text: str) -> tuple[Gene, int]:
    """
    Parse a declared IMGT allele string into a Gene and allele number.

    Args:
        text: e.g. "IGHV1-2*02" or "IGHV1-69*01 or IGHV1-69D*01".

    Returns:
        (Gene, allele_number); the allele defaults to 1 when absent.

    Raises:
        GeneNameError: if the text does not follow the grammar.
    """
    name = text.split(" or ", 1)[0].strip()
    match = _NAME_RE.match(name)
    if not match:
        raise GeneNameError(f"Gene name does not start with IG: `{text}`")

    try:
        chain = ChainType(match.group("chain"))
    except ValueError:
        raise GeneNameError(f"Invalid chain: `{match.group('chain')}` in `{text}`") from None
    if match.group("segment") not in _SEGMENT_CODES:
        raise GeneNameError(f"Invalid segment: `{match.group('segment')}` in `{text}`")
    segment, isotype = _SEGMENT_CODES[match.group("segment")]

    number = None
    if match.group("number"):
        if match.group("number") not in ROMAN:
            raise GeneNameError(
                f"Invalid roman numeral (or too big) `{match.group('number')}` in `{text}`"
            )
        number = ROMAN.index(match.group("number")) + 1

    family = []
    family_text = match.group("family").strip("-")
    if family_text:
        for component in family_text.split("-"):
            part = _FAMILY_RE.match(component)
            if not component or not part:
                raise GeneNameError(f"Invalid family `{component}` in `{text}`")
            digits, letters = part.groups()
            family.append((int(digits) if digits else None, letters))

    allele_text = match.group("allele")
    if allele_text is None:
        allele = 1
    elif allele_text.isdigit():
        allele = int(allele_text)
    else:
        raise GeneNameError(f"Invalid allele spec: `{allele_text}` in `{text}`")

    gene = Gene(
        chain=chain,
        segment=segment,
        isotype=isotype,
        number=number,
        family=tuple(family),
    )
    return gene, allele


def allele_name(gene: Gene, allele: int) -> str:
    """Canonical IMGT allele name, e.g. ``IGHV3-23*03``."""
    return f"{gene}*{allele:02}"
