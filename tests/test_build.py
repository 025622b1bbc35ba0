"""End-to-end tests for building databases from LIGM-DB text."""

import csv

from imgt_germlines.build import BuildReport, build_databases, write_databases
from imgt_germlines.names import Annotation, Gene, Region
from imgt_germlines.registry import GermlineRegistry
from imgt_germlines.select import Selection, get_germline
from imgt_germlines.species import Species

from records import MOUSE, RecordBuilder, c_gene_record, j_gene_record, v_gene_record


class TestBuildDatabases:
    def test_v_and_j_records(self):
        """A V and a J record for one species end up in one database."""
        lines = v_gene_record("V1").lines() + j_gene_record("J1").lines(complement=True)
        databases, report = build_databases(lines)

        assert list(databases) == [Species.HOMO_SAPIENS]
        human = databases[Species.HOMO_SAPIENS]
        number, v = human.find(Gene.parse("IGHV1-2"))
        assert number == 2
        assert v.regions[0] == (Region.FR1, 25)

        number, j = human.find(Gene.parse("IGHJ4"))
        assert number == 2
        assert j.regions == [(Region.CDR3, 4), (Region.FR4, 11)]
        assert j.sequence[4:6] == "WG"
        assert (Annotation.TRYPTOPHAN, 4) in j.annotations
        assert report.summary() == {"record_errors": 0, "failed_alleles": 0, "orphan_regions": 0}

    def test_missing_cdr2_reported(self):
        lines = v_gene_record("V1", skip=("CDR2-IMGT",)).lines() + c_gene_record("C1").lines()
        databases, report = build_databases(lines)

        human = databases[Species.HOMO_SAPIENS]
        assert human.find(Gene.parse("IGHV1-2")) is None
        assert human.find(Gene.parse("IGHG1")) is not None
        reasons = report.failures[Species.HOMO_SAPIENS]["IGHV1-2*02"]
        assert reasons == ["Could not find CDR2-IMGT"]

    def test_species_partitioned(self):
        lines = (
            v_gene_record("V1").lines()
            + v_gene_record("V2", allele="IGHV1-1*01", organism=MOUSE).lines()
        )
        databases, _ = build_databases(lines)
        assert sorted(databases) == [Species.HOMO_SAPIENS, Species.MUS_MUSCULUS]
        assert databases[Species.MUS_MUSCULUS].find(Gene.parse("IGHV1-1")) is not None
        assert databases[Species.HOMO_SAPIENS].find(Gene.parse("IGHV1-1")) is None

    def test_duplicate_records_merge(self):
        lines = v_gene_record("V1").lines() + v_gene_record("V2").lines()
        databases, _ = build_databases(lines)
        germline = databases[Species.HOMO_SAPIENS].heavy.variable
        assert len(germline) == 1
        assert [n for n, _ in germline[0].alleles] == [2]

    def test_bad_records_do_not_stop_the_build(self):
        bad = RecordBuilder("BAD1").lines()
        bad.insert(bad.index("FH") + 1, "FT   J-REGION            complement(4..9")
        lines = bad + j_gene_record("J1").lines()
        databases, report = build_databases(lines)
        assert "BAD1" in report.record_errors
        assert databases[Species.HOMO_SAPIENS].find(Gene.parse("IGHJ4")) is not None

    def test_orphans_counted(self):
        builder = j_gene_record("J1")
        builder.add_feature("CH1", 1, 3)
        _, report = build_databases(builder.lines())
        assert report.orphans["CH1"] == 1

    def test_empty_input(self):
        databases, report = build_databases([])
        assert databases == {}
        assert report.summary()["failed_alleles"] == 0


class TestWriteDatabases:
    def test_round_trip_through_registry(self, tmp_path):
        lines = v_gene_record("V1").lines() + j_gene_record("J1").lines()
        databases, _ = build_databases(lines)
        paths = write_databases(databases, tmp_path)
        assert [p.name for p in paths] == ["HOMO_SAPIENS.json.gz"]

        registry = GermlineRegistry(tmp_path)
        allele = get_germline(Species.HOMO_SAPIENS, "IGHJ4", registry=registry)
        assert allele.sequence.sequence == "YFDYWGQGTLVTVSS"
        assert [a.name() for a in Selection().germlines(registry)] == ["IGHV1-2*02", "IGHJ4*02"]


class TestBuildReport:
    def test_write_tsv(self, tmp_path):
        lines = v_gene_record("V1", skip=("FR2-IMGT",)).lines()
        _, report = build_databases(lines)
        report.record_errors["X1"] = "Not a valid location: `a..b`"
        path = tmp_path / "docs" / "errors.tsv"
        report.write_tsv(path)

        with open(path) as f:
            rows = list(csv.reader(f, delimiter="\t"))
        assert rows[0] == ["species", "allele", "reason"]
        assert rows[1] == ["HOMO_SAPIENS", "IGHV1-2*02", "Could not find FR2-IMGT"]
        assert rows[2] == ["", "X1", "Not a valid location: `a..b`"]

    def test_summary_counts(self):
        report = BuildReport()
        assert report.summary() == {"record_errors": 0, "failed_alleles": 0, "orphan_regions": 0}
