"""Synthetic LIGM-DB records for tests.

Records are generated from amino-acid parts: each part is back-translated
with one fixed codon per residue and laid out back to back, so every
feature location and translation is exact by construction.
"""

from Bio.Seq import Seq

from imgt_germlines.database import AnnotatedSequence
from imgt_germlines.names import Region

HUMAN = "Homo sapiens (human)"
MOUSE = "Mus musculus (house mouse)"

CODONS = {
    "A": "gct", "C": "tgt", "D": "gat", "E": "gaa", "F": "ttt",
    "G": "ggt", "H": "cat", "I": "att", "K": "aaa", "L": "ctg",
    "M": "atg", "N": "aat", "P": "cct", "Q": "caa", "R": "cgt",
    "S": "tct", "T": "act", "V": "gtt", "W": "tgg", "Y": "tat",
    "*": "taa",
}

V_PARTS = (
    ("FR1-IMGT", "QVQLVQSGAEVKKPGASVKVSCKAS"),
    ("CDR1-IMGT", "GYTFTGYY"),
    ("FR2-IMGT", "MHWVRQAPGQGLEWMGW"),
    ("CDR2-IMGT", "INPNSGGT"),
    ("FR3-IMGT", "NYAQKFQGRVTMTRDTSISTAYMELSRLRSDDTAVYYC"),
    ("CDR3-IMGT", "AR"),
)
V_SEQUENCE = "".join(protein for _, protein in V_PARTS)

J_PROTEIN = "YFDYWGQGTLVTVSS"

C_PARTS = (
    ("CH1", "ASTKGPSVFPLAP"),
    ("H", "EPKSCDKTHTCPPCP"),
    ("CH2", "APELLGGQYNSTYRVV"),
    ("CH3", "GQPREPQVYTLPPSRDE"),
    ("CHS", "LSLSPGK"),
)


def back_translate(protein: str) -> str:
    return "".join(CODONS[aa] for aa in protein)


def _feature_order(feature: tuple) -> tuple:
    """By start, then widest first; a gene precedes sub-features with the same span."""
    key, start, end, _ = feature
    return start, -end, not key.endswith("-GENE")


class RecordBuilder:
    """Assemble one LIGM-DB record as a list of lines."""

    def __init__(
        self,
        record_id: str = "TEST0001",
        organism: str = HUMAN,
        keywords: tuple[str, ...] = ("immunoglobulin (IG)", "germline", "functional"),
    ):
        self.record_id = record_id
        self.organism = organism
        self.keywords = list(keywords)
        self.sequence = ""
        self.features: list[tuple[str, int, int, list[str]]] = []
        self._open: list[tuple[str, int, list[str]]] = []

    def add_nucleotides(self, nucleotides: str) -> "RecordBuilder":
        self.sequence += nucleotides
        return self

    def add_feature(self, key: str, start: int, end: int, *qualifiers: str) -> None:
        """Add a feature with 1-based inclusive forward coordinates."""
        self.features.append((key, start, end, list(qualifiers)))

    def add_region(self, key: str, protein: str, *qualifiers: str) -> int:
        """Append a back-translated region; returns its 1-based start."""
        start = len(self.sequence) + 1
        self.sequence += back_translate(protein)
        self.add_feature(key, start, len(self.sequence), *qualifiers)
        return start

    def add_marker(self, key: str, region_start: int, index: int) -> None:
        """A single-codon marker at residue ``index`` of the region starting at ``region_start``."""
        start = region_start + 3 * index
        self.add_feature(key, start, start + 2)

    def begin_gene(self, key: str, allele: str, functional: bool = True, partial: bool = False) -> None:
        qualifiers = [f'/IMGT_allele="{allele}"']
        if functional:
            qualifiers.append("/functional")
        if partial:
            qualifiers.append("/partial")
        self._open.append((key, len(self.sequence) + 1, qualifiers))

    def end_gene(self) -> None:
        key, start, qualifiers = self._open.pop()
        self.add_feature(key, start, len(self.sequence), *qualifiers)

    def lines(self, complement: bool = False) -> list[str]:
        """
        Render the record. With ``complement`` the stored sequence is the
        reverse complement and every location is written as
        ``complement(...)`` so the features read the same residues.
        """
        length = len(self.sequence)
        ft = []
        for key, start, end, qualifiers in sorted(self.features, key=_feature_order):
            if complement:
                location = f"complement({length - end + 1}..{length - start + 1})"
            else:
                location = f"{start}..{end}"
            ft.append(f"FT   {key:<20}{location}")
            ft.extend("FT" + " " * 23 + q for q in qualifiers)

        sequence = str(Seq(self.sequence).reverse_complement()) if complement else self.sequence
        lines = [
            f"ID   {self.record_id}; standard; genomic DNA; HUM; {length} BP.",
            "XX",
            "KW   " + "; ".join(self.keywords) + ".",
            "XX",
            f"OS   {self.organism}",
            "OC   Eukaryota; Metazoa; Chordata.",
            "XX",
            "FH   Key                 Location/Qualifiers",
            "FH",
            *ft,
            "XX",
            f"SQ   Sequence {length} BP;",
        ]
        for i in range(0, length, 60):
            chunk = sequence[i:i + 60]
            blocks = " ".join(chunk[j:j + 10] for j in range(0, len(chunk), 10))
            lines.append(f"     {blocks:<66}{i + len(chunk):>9}")
        lines.append("//")
        return lines


def v_gene_record(
    record_id: str = "V0001",
    allele: str = "IGHV1-2*02",
    skip: tuple[str, ...] = (),
    organism: str = HUMAN,
) -> RecordBuilder:
    """A V-GENE with FR1..CDR3 and the three conserved-residue markers."""
    builder = RecordBuilder(record_id, organism)
    builder.add_nucleotides("ccgtta")
    builder.begin_gene("V-GENE", allele)
    starts = {}
    for key, protein in V_PARTS:
        if key in skip:
            builder.add_nucleotides(back_translate(protein))
        else:
            starts[key] = builder.add_region(key, protein)
    builder.end_gene()
    builder.add_nucleotides("ggtacc")
    for key, region, index in (
        ("1st-CYS", "FR1-IMGT", 21),
        ("CONSERVED-TRP", "FR2-IMGT", 2),
        ("2nd-CYS", "FR3-IMGT", 37),
    ):
        if region in starts:
            builder.add_marker(key, starts[region], index)
    return builder


def j_gene_record(
    record_id: str = "J0001",
    allele: str = "IGHJ4*02",
    protein: str = J_PROTEIN,
    codon_start: int = 1,
    trp_index: int | None = 4,
    organism: str = HUMAN,
) -> RecordBuilder:
    """
    A J-GENE whose J-REGION translates to ``protein``. A ``codon_start`` of 2
    puts one extra nucleotide in front of the first codon.
    """
    builder = RecordBuilder(record_id, organism)
    builder.add_nucleotides("ccgtta")
    builder.begin_gene("J-GENE", allele)
    start = len(builder.sequence) + 1
    builder.add_nucleotides("g" * (codon_start - 1) + back_translate(protein))
    builder.add_feature("J-REGION", start, len(builder.sequence), f"/codon_start={codon_start}")
    builder.end_gene()
    builder.add_nucleotides("gtaagt")
    if trp_index is not None:
        builder.add_marker("J-TRP", start + codon_start - 1, trp_index)
    return builder


def c_gene_record(
    record_id: str = "C0001",
    allele: str = "IGHG1*01",
    skip: tuple[str, ...] = (),
    organism: str = HUMAN,
) -> RecordBuilder:
    builder = RecordBuilder(record_id, organism)
    builder.add_nucleotides("ccgtta")
    builder.begin_gene("C-GENE", allele)
    for key, protein in C_PARTS:
        if key in skip:
            continue
        builder.add_region(key, protein)
        builder.add_nucleotides("gtaagtcag")
    builder.end_gene()
    return builder


def annotated(sequence: str, *regions: tuple[Region, int]) -> AnnotatedSequence:
    """An AnnotatedSequence whose regions default to one FR1 spanning everything."""
    return AnnotatedSequence(sequence, list(regions) or [(Region.FR1, len(sequence))], [])
