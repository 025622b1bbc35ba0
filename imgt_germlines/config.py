"""Configuration constants for the germline database build."""

LIGM_DB_URL = "https://www.imgt.org/download/LIGM-DB/imgt.dat.Z"
LIGM_DB_FILENAME = "imgt.dat.Z"

# Download settings
DOWNLOAD_TIMEOUT = 300
CHUNK_SIZE = 1 << 20

# Retry configuration
MAX_RETRIES = 3
RETRY_BACKOFF = 2.0  # Exponential backoff base (seconds)

# Paths (relative to repo root)
CACHE_DIR = "cache"
DATA_DIR = "data"
DOCS_DIR = "docs"
ERRORS_FILE = "errors.tsv"
INDEX_FILE = "germlines.json"
MARKDOWN_FILE = "germlines.md"

# Persisted database files, one per species: <SPECIES>.json.gz
DATABASE_SUFFIX = ".json.gz"
DATABASE_DIR_ENV = "IMGT_GERMLINES_DIR"

# Records must carry both keywords to be considered
REQUIRED_KEYWORDS = ("immunoglobulin (IG)", "functional")

# Width of the two-letter line code plus padding ("ID   ", "FT   ", ...)
LINE_PREFIX_WIDTH = 5

# Feature keys that open a new gene draft
GENE_KEYS = ("V-GENE", "C-GENE", "J-GENE")
GENE_PREFIX = "IG"

# Sub-features attached to the first gene draft that contains them
STRUCTURAL_KEYS = (
    "FR1-IMGT",
    "FR2-IMGT",
    "FR3-IMGT",
    "CDR1-IMGT",
    "CDR2-IMGT",
    "CDR3-IMGT",
    "1st-CYS",
    "2nd-CYS",
    "CONSERVED-TRP",
    "J-PHE",
    "J-TRP",
    "J-REGION",
    "CH1",
    "H",
    "CH2",
    "CH3",
    "CH4",
    "CH5",
    "CH6",
    "CH7",
    "CH8",
    "CH9",
    "CHS",
    "M",
    "M1",
    "M2",
)
