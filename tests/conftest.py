"""Shared test fixtures."""

import pytest

from imgt_germlines.database import AnnotatedSequence, Germlines
from imgt_germlines.names import Annotation, Gene, Region
from imgt_germlines.registry import GermlineRegistry
from imgt_germlines.species import Species

from records import J_PROTEIN, annotated


@pytest.fixture
def human_databases():
    """Human and mouse databases with two heavy V genes, a kappa V and a J."""
    human = Germlines(Species.HOMO_SAPIENS)
    human.insert(Gene.parse("IGHV3-23"), 3, annotated("EVQLLESGGGLVQPGGSLRLSCAAS"))
    human.insert(Gene.parse("IGHV3-23"), 1, annotated("EVQLLESGGGLVQPGGSLRLSCAAS"))
    human.insert(Gene.parse("IGHV1-2"), 2, annotated("QVQLVQSGAEVKKPGASVKVSCKAS"))
    human.insert(Gene.parse("IGKV1-5"), 1, annotated("DIQMTQSPSTLSASVGDRVTITC"))
    human.insert(
        Gene.parse("IGHJ4"), 2,
        AnnotatedSequence(
            J_PROTEIN,
            [(Region.CDR3, 4), (Region.FR4, 11)],
            [(Annotation.TRYPTOPHAN, 4), (Annotation.GLYCINE, 5), (Annotation.GLYCINE, 7)],
        ),
    )
    mouse = Germlines(Species.MUS_MUSCULUS)
    mouse.insert(Gene.parse("IGHV1-1"), 1, annotated("EVQLQQSGPELVKPGASVKISCKAS"))
    return {Species.HOMO_SAPIENS: human, Species.MUS_MUSCULUS: mouse}

@pytest.fixture
def registry(tmp_path, human_databases):
    """A registry over databases written to a temporary directory."""
    for db in human_databases.values():
        db.save(tmp_path / "data")
    return GermlineRegistry(tmp_path / "data")

@pytest.fixture
def tmp_repo(tmp_path):
    """Create a temporary repo-like directory structure."""
    (tmp_path / "cache").mkdir()
    (tmp_path / "data").mkdir()
    (tmp_path / "docs").mkdir()
    return tmp_path
