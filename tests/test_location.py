"""Tests for the genomic Location algebra."""

import pytest
from Bio.Seq import Seq

from imgt_germlines.location import Location, ParseError


class TestParse:
    def test_forward_range(self):
        """EMBL coordinates are 1-based and stored 0-based."""
        assert Location.parse("12..300") == Location.normal(11, 299)

    def test_complement_range(self):
        loc = Location.parse("complement(5..40)")
        assert loc == Location.reverse(4, 39)
        assert loc.complement

    def test_single_positions(self):
        assert Location.parse("17") == Location.point(16)
        assert Location.parse("complement(17)") == Location.point(16, complement=True)

    def test_partial_markers_dropped(self):
        assert Location.parse("<1..>90") == Location.normal(0, 89)

    @pytest.mark.parametrize("text", [
        "complement(5..40",
        "join(1..10,20..30)",
        "a..b",
        "10..5",
        "0..5",
        "",
    ])
    def test_invalid(self, text):
        """Malformed text raises ParseError naming the literal text."""
        with pytest.raises(ParseError) as exc:
            Location.parse(text)
        assert exc.value.text == text

    def test_str_round_trip(self):
        for text in ("12..300", "complement(5..40)", "17", "complement(3)"):
            assert str(Location.parse(text)) == text


class TestContains:
    def test_same_strand(self):
        assert Location.normal(0, 99).contains(Location.normal(10, 20))
        assert Location.reverse(0, 99).contains(Location.reverse(10, 20))

    def test_cross_strand_is_false(self):
        assert not Location.normal(0, 99).contains(Location.reverse(10, 20))
        assert not Location.reverse(0, 99).contains(Location.normal(10, 20))

    def test_single_point_inner(self):
        assert Location.normal(0, 99).contains(Location.point(50))
        assert not Location.normal(0, 99).contains(Location.point(50, complement=True))

    def test_single_point_outer_contains_nothing(self):
        assert not Location.point(5).contains(Location.point(5))

    def test_outside(self):
        assert not Location.normal(10, 20).contains(Location.normal(5, 15))
        assert not Location.normal(10, 20).contains(Location.normal(15, 25))


class TestAminoAcidRange:
    def test_forward(self):
        outer = Location.normal(100, 189)
        assert outer.to_amino_acid_range(Location.normal(106, 108)) == (2, 2)
        assert outer.to_amino_acid_range(Location.normal(100, 129)) == (0, 9)

    def test_complement_measured_from_high_end(self):
        """Reverse-strand residues are counted from the high coordinate down."""
        outer = Location.reverse(100, 189)
        assert outer.to_amino_acid_range(Location.reverse(181, 183)) == (2, 2)
        assert outer.to_amino_acid_range(Location.reverse(187, 189)) == (0, 0)

    def test_not_contained(self):
        assert Location.normal(0, 29).to_amino_acid_range(Location.normal(30, 32)) is None
        assert Location.normal(0, 29).to_amino_acid_range(Location.reverse(3, 5)) is None

    @pytest.mark.parametrize("start,end", [(0, 2), (3, 11), (6, 29), (12, 14)])
    def test_width_matches_codons(self, start, end):
        """Codon-aligned inner spans map to len/3 residues."""
        for outer in (Location.normal(0, 29), Location.reverse(0, 29)):
            inner = Location(start, end, complement=outer.complement)
            first, last = outer.to_amino_acid_range(inner)
            assert last - first + 1 == len(inner) // 3


class TestSplice:
    def test_forward(self):
        assert Location.normal(10, 39).splice(4) == (
            Location.normal(10, 21),
            Location.normal(22, 39),
        )

    def test_complement(self):
        """The upstream half of a reverse span holds the high coordinates."""
        assert Location.reverse(10, 39).splice(4) == (
            Location.reverse(28, 39),
            Location.reverse(10, 27),
        )

    def test_rejects_edges_and_points(self):
        loc = Location.normal(0, 29)
        assert loc.splice(0) is None
        assert loc.splice(11) is None
        assert Location.point(3).splice(1) is None

    @pytest.mark.parametrize("complement", [False, True])
    def test_halves_reconstruct_span(self, complement):
        loc = Location(7, 36, complement=complement)
        for k in range(1, len(loc) // 3):
            upstream, downstream = loc.splice(k)
            covered = sorted(
                list(range(upstream.start, upstream.end + 1))
                + list(range(downstream.start, downstream.end + 1))
            )
            assert covered == list(range(loc.start, loc.end + 1))
            assert len(upstream) == 3 * k


class TestAdvance:
    def test_forward_trims_start(self):
        assert Location.normal(10, 20).advance(1) == Location.normal(11, 20)

    def test_complement_trims_end(self):
        assert Location.reverse(10, 20).advance(2) == Location.reverse(10, 18)

    def test_negative_widens(self):
        assert Location.normal(10, 20).advance(-1) == Location.normal(9, 20)
        assert Location.reverse(10, 20).advance(-1) == Location.reverse(10, 21)

    def test_invalid_results(self):
        assert Location.normal(0, 5).advance(-1) is None
        assert Location.normal(0, 1).advance(3) is None


class TestFeatureLocation:
    def test_extracts_reverse_complement(self):
        seq = Seq("aaaccctttggg")
        assert str(Location.reverse(3, 5).to_feature_location().extract(seq)) == "ggg"
        assert str(Location.normal(3, 5).to_feature_location().extract(seq)) == "ccc"
