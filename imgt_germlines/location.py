"""Genomic spans on a LIGM-DB record sequence.

Coordinates are 0-based and inclusive. Complement spans are stored with
start <= end, just like forward spans; the reversal to the reading
direction happens only when a span is extracted or measured. All offsets
that relate a span to amino acids are taken from the reading-direction
start: the low coordinate on the forward strand, the high coordinate on
the complement strand.
"""

import re
from dataclasses import dataclass

from Bio.SeqFeature import FeatureLocation

_RANGE_RE = re.compile(r"^[<>]?(\d+)\.\.[<>]?(\d+)$")
_POINT_RE = re.compile(r"^[<>]?(\d+)$")


class ParseError(ValueError):
    """Raised when feature table text cannot be interpreted."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(f"{message}: `{text}`" if text else message)
        self.text = text


@dataclass(frozen=True)
class Location:
    """A non-empty span (or single position) on one strand."""

    start: int
    end: int
    complement: bool = False
    single: bool = False

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span {self.start}..{self.end}")
        if self.single and self.start != self.end:
            raise ValueError("A single position must have start == end")

    @classmethod
    def normal(cls, start: int, end: int) -> "Location":
        return cls(start, end)

    @classmethod
    def reverse(cls, start: int, end: int) -> "Location":
        return cls(start, end, complement=True)

    @classmethod
    def point(cls, position: int, complement: bool = False) -> "Location":
        return cls(position, position, complement=complement, single=True)

    @classmethod
    def parse(cls, text: str) -> "Location":
        """
        Parse an EMBL-style location such as ``12..300``, ``complement(5..40)``
        or a bare ``17``. Partial markers (``<``/``>``) are dropped.

        Raises:
            ParseError: naming the literal text on any syntax problem.
        """
        body = text.strip()
        complement = False
        if body.startswith("complement("):
            if not body.endswith(")"):
                raise ParseError("Unbalanced complement location", text)
            body = body[len("complement("):-1].strip()
            complement = True
        if "(" in body or ")" in body:
            raise ParseError("Unsupported location syntax", text)

        match = _RANGE_RE.match(body)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start < 1 or end < start:
                raise ParseError("Invalid location bounds", text)
            return cls(start - 1, end - 1, complement=complement)

        match = _POINT_RE.match(body)
        if match:
            position = int(match.group(1))
            if position < 1:
                raise ParseError("Invalid location bounds", text)
            return cls.point(position - 1, complement=complement)

        raise ParseError("Not a valid location", text)

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        body = (
            f"{self.start + 1}" if self.single
            else f"{self.start + 1}..{self.end + 1}"
        )
        return f"complement({body})" if self.complement else body

    def offset(self, position: int) -> int:
        """Nucleotide offset of ``position`` from the reading-direction start."""
        if self.complement:
            return self.end - position
        return position - self.start

    def contains(self, inner: "Location") -> bool:
        """
        True when ``inner`` lies within this span on the same strand.

        A single position never contains anything; cross-strand
        containment is always false.
        """
        if self.single or self.complement != inner.complement:
            return False
        return self.start <= inner.start and inner.end <= self.end

    def to_amino_acid_range(self, inner: "Location") -> tuple[int, int] | None:
        """
        Map ``inner`` to an inclusive, codon-aligned amino acid index range
        relative to this span's reading-direction start.

        Returns None if ``inner`` is not contained in this span.
        """
        if not self.contains(inner):
            return None
        first = self.offset(inner.end if self.complement else inner.start)
        last = self.offset(inner.start if self.complement else inner.end)
        return first // 3, last // 3

    def splice(self, amino_acid_position: int) -> tuple["Location", "Location"] | None:
        """
        Split the span before the codon at ``amino_acid_position``.

        Returns the (upstream, downstream) halves in reading order, or None
        for single positions and for split points at or beyond either edge.
        """
        if self.single or amino_acid_position <= 0:
            return None
        shift = amino_acid_position * 3
        if self.complement:
            split = self.end - shift
            if split < self.start:
                return None
            return (
                Location.reverse(split + 1, self.end),
                Location.reverse(self.start, split),
            )
        split = self.start + shift
        if split > self.end:
            return None
        return Location.normal(self.start, split - 1), Location.normal(split, self.end)

    def advance(self, nucleotides: int) -> "Location | None":
        """
        Move the reading-direction start by ``nucleotides``; a negative value
        widens the span. Returns None if the result would be empty or fall
        below coordinate 0.
        """
        if self.single:
            return self if nucleotides == 0 else None
        start, end = self.start, self.end
        if self.complement:
            end -= nucleotides
        else:
            start += nucleotides
        if start < 0 or end < start:
            return None
        return Location(start, end, complement=self.complement)

    def to_feature_location(self) -> FeatureLocation:
        """Equivalent BioPython location (half-open, stranded)."""
        return FeatureLocation(
            self.start, self.end + 1, strand=-1 if self.complement else 1
        )
