"""Tests for selections, point lookups and the database registry."""

from concurrent.futures import ThreadPoolExecutor

from imgt_germlines import registry as registry_module
from imgt_germlines.names import Annotation, ChainType, Gene, Region, Segment
from imgt_germlines.registry import GermlineRegistry
from imgt_germlines.select import AlleleSelection, Selection, get_germline
from imgt_germlines.species import Species


def _names(alleles) -> list[str]:
    return [allele.name() for allele in alleles]


class TestSelection:
    def test_default_first_allele_everywhere(self, registry):
        assert _names(Selection().germlines(registry)) == [
            "IGHV1-2*02", "IGHV3-23*01", "IGHJ4*02", "IGKV1-5*01", "IGHV1-1*01",
        ]

    def test_species_chain_segment(self, registry):
        """Heavy variable genes of one species, lowest allele each."""
        selection = (
            Selection()
            .species({Species.HOMO_SAPIENS})
            .chain({ChainType.HEAVY})
            .segment({Segment.V})
        )
        alleles = list(selection.germlines(registry))
        assert _names(alleles) == ["IGHV1-2*02", "IGHV3-23*01"]
        assert all(a.species is Species.HOMO_SAPIENS for a in alleles)

    def test_all_alleles(self, registry):
        selection = Selection().species(Species.HOMO_SAPIENS).segment(Segment.V).allele(AlleleSelection.ALL)
        assert _names(selection.germlines(registry)) == [
            "IGHV1-2*02", "IGHV3-23*01", "IGHV3-23*03", "IGKV1-5*01",
        ]

    def test_builders_do_not_mutate(self):
        base = Selection()
        narrowed = base.chain(ChainType.LIGHT_KAPPA)
        assert base.chain_filter is None
        assert narrowed.chain_filter == frozenset({ChainType.LIGHT_KAPPA})

    def test_restartable(self, registry):
        selection = Selection().chain(ChainType.LIGHT_KAPPA)
        assert _names(selection.germlines(registry)) == _names(selection.germlines(registry))

    def test_unselected_species_not_loaded(self, registry):
        list(Selection().species(Species.MUS_MUSCULUS).germlines(registry))
        assert Species.HOMO_SAPIENS not in registry._loaded

    def test_missing_species_yields_nothing(self, registry):
        assert list(Selection().species(Species.VICUGNA_PACOS).germlines(registry)) == []

    def test_parallel_matches_serial(self, registry):
        selection = Selection().allele(AlleleSelection.ALL)
        serial = _names(selection.germlines(registry))
        parallel = _names(selection.par_germlines(registry, max_workers=4))
        assert sorted(parallel) == sorted(serial)
        assert len(parallel) == len(set(parallel)) == 6


class TestAllele:
    def test_regions_and_annotations(self, registry):
        allele = get_germline(Species.HOMO_SAPIENS, "IGHJ4", registry=registry)
        assert allele.region(0) == (Region.CDR3, True)
        assert allele.region(3) == (Region.CDR3, False)
        assert allele.region(4) == (Region.FR4, True)
        assert allele.region(15) is None
        assert allele.region(-1) is None
        assert allele.annotations_at(4) == [Annotation.TRYPTOPHAN]
        assert allele.annotations_at(6) == []

    def test_names(self, registry):
        allele = get_germline(Species.HOMO_SAPIENS, "IGKV1-5", registry=registry)
        assert allele.name() == "IGKV1-5*01"
        assert allele.fancy_name() == "IGΚV1-5*01"


class TestGetGermline:
    def test_defaults_to_lowest_allele(self, registry):
        assert get_germline(Species.HOMO_SAPIENS, "IGHV3-23", registry=registry).number == 1

    def test_explicit_allele(self, registry):
        allele = get_germline(Species.HOMO_SAPIENS, Gene.parse("IGHV3-23"), 3, registry=registry)
        assert allele.name() == "IGHV3-23*03"

    def test_allele_suffix_in_name(self, registry):
        allele = get_germline(Species.HOMO_SAPIENS, "IGHV3-23*03", registry=registry)
        assert allele.name() == "IGHV3-23*03"
        assert get_germline(Species.HOMO_SAPIENS, "IGHV3-23*02", registry=registry) is None

    def test_explicit_allele_overrides_suffix(self, registry):
        allele = get_germline(Species.HOMO_SAPIENS, "IGHV3-23*03", 1, registry=registry)
        assert allele.name() == "IGHV3-23*01"

    def test_missing(self, registry):
        assert get_germline(Species.HOMO_SAPIENS, "IGHV3-23", 2, registry=registry) is None
        assert get_germline(Species.VICUGNA_PACOS, "IGHV3-23", registry=registry) is None


class TestRegistry:
    def test_available(self, registry):
        assert registry.available() == [Species.HOMO_SAPIENS, Species.MUS_MUSCULUS]

    def test_memoized(self, registry):
        first = registry.get(Species.HOMO_SAPIENS)
        assert registry.get(Species.HOMO_SAPIENS) is first
        registry.clear()
        assert registry.get(Species.HOMO_SAPIENS) is not first

    def test_missing_directory(self, tmp_path):
        empty = GermlineRegistry(tmp_path / "nowhere")
        assert empty.available() == []
        assert Species.HOMO_SAPIENS not in empty

    def test_environment_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("IMGT_GERMLINES_DIR", str(tmp_path))
        assert GermlineRegistry().directory == tmp_path

    def test_default_registry_is_shared(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_default", None)
        assert registry_module.default_registry() is registry_module.default_registry()

    def test_concurrent_get_loads_once(self, registry):
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: registry.get(Species.HOMO_SAPIENS), range(32)))
        assert all(r is results[0] for r in results)

    def test_get_while_clearing(self, registry):
        """Lookups racing with clear() always return a database."""

        def lookups():
            return [registry.get(Species.HOMO_SAPIENS) for _ in range(200)]

        def clears():
            for _ in range(200):
                registry.clear()

        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(lookups) for _ in range(3)] + [executor.submit(clears)]
            results = [f.result() for f in futures]
        assert all(db is not None for batch in results[:3] for db in batch)
