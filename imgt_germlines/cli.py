"""CLI entry points for the IMGT germline database builder."""

import argparse
import logging
import sys
from pathlib import Path

from .align import best_matches
from .build import build_databases, write_databases
from .client import IMGTClient
from .config import CACHE_DIR, DATA_DIR, DOCS_DIR, ERRORS_FILE, INDEX_FILE, LIGM_DB_FILENAME, MARKDOWN_FILE
from .fetch import fetch_ligm_db, open_dat
from .index import build_database_index, write_markdown
from .names import ChainType, GeneNameError, Segment
from .registry import GermlineRegistry
from .select import AlleleSelection, Allele, Selection, get_germline
from .species import Species, UnknownSpeciesError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Build and query IMGT immunoglobulin germline databases"
    )
    parser.add_argument(
        "--repo-root", type=Path, default=Path.cwd(),
        help="Directory holding cache/, data/ and docs/ (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    dl_cmd = sub.add_parser("download", help="Download the LIGM-DB flat file")
    dl_cmd.add_argument("--no-cache", action="store_true")

    build_cmd = sub.add_parser("build", help="Build per-species databases from LIGM-DB")
    build_cmd.add_argument("--input", type=Path, help="LIGM-DB .dat file, plain or gzip (default: cached download)")
    build_cmd.add_argument("--output", type=Path, help="Database directory (default: <repo-root>/data)")

    list_cmd = sub.add_parser("list", help="List germline alleles")
    list_cmd.add_argument("--species", nargs="+", default=None, help="Species (e.g., human, Mus musculus)")
    list_cmd.add_argument("--chain", nargs="+", choices=[c.value for c in ChainType], default=None)
    list_cmd.add_argument("--segment", nargs="+", choices=[s.value for s in Segment], default=None)
    list_cmd.add_argument("--all-alleles", action="store_true", help="Show every allele, not just the first")

    show_cmd = sub.add_parser("show", help="Show one allele with its regions and annotations")
    show_cmd.add_argument("species")
    show_cmd.add_argument("gene", help="Gene name (e.g., IGHV3-23)")
    show_cmd.add_argument("--allele", type=int, default=None)

    align_cmd = sub.add_parser("align", help="Find the closest germlines for an amino-acid sequence")
    align_cmd.add_argument("species")
    align_cmd.add_argument("sequence")
    align_cmd.add_argument("--top", type=int, default=5)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    repo_root = args.repo_root
    registry = GermlineRegistry(repo_root / DATA_DIR)

    try:
        if args.command == "download":
            run_download(repo_root, args)
        elif args.command == "build":
            run_build(repo_root, args)
        elif args.command == "list":
            run_list(registry, args)
        elif args.command == "show":
            run_show(registry, args)
        elif args.command == "align":
            run_align(registry, args)
        else:
            parser.print_help()
            sys.exit(1)
    except (UnknownSpeciesError, GeneNameError, OSError) as e:
        logger.error("%s", e)
        sys.exit(1)


def run_download(repo_root: Path, args) -> None:
    client = IMGTClient(cache_dir=repo_root / CACHE_DIR, use_cache=not args.no_cache)
    fetch_ligm_db(client)


def run_build(repo_root: Path, args) -> None:
    """Parse LIGM-DB, write one database per species plus the reports."""
    source = args.input or repo_root / CACHE_DIR / LIGM_DB_FILENAME
    if not source.exists():
        logger.error("Input not found: %s. Run 'download' first or pass --input.", source)
        sys.exit(1)
    output = args.output or repo_root / DATA_DIR

    logger.info("=== Building databases from %s ===", source)
    databases, report = build_databases(open_dat(source))
    write_databases(databases, output)

    docs = repo_root / DOCS_DIR
    report.write_tsv(docs / ERRORS_FILE)
    index = build_database_index(list(databases.values()), docs / INDEX_FILE)
    write_markdown(index, docs / MARKDOWN_FILE)

    summary = report.summary()
    logger.info(
        "Build complete: %d species, %d alleles excluded, %d records unreadable",
        len(databases), summary["failed_alleles"], summary["record_errors"],
    )


def _format_allele(allele: Allele) -> str:
    return f"{allele.species.name}\t{allele.name()}\t{allele.sequence.sequence}"


def run_list(registry: GermlineRegistry, args) -> None:
    selection = Selection()
    if args.species:
        selection = selection.species(Species.parse(s) for s in args.species)
    if args.chain:
        selection = selection.chain(ChainType(c) for c in args.chain)
    if args.segment:
        selection = selection.segment(Segment(s) for s in args.segment)
    if args.all_alleles:
        selection = selection.allele(AlleleSelection.ALL)

    count = 0
    for allele in selection.germlines(registry):
        print(_format_allele(allele))
        count += 1
    logger.info("%d alleles", count)


def run_show(registry: GermlineRegistry, args) -> None:
    species = Species.parse(args.species)
    allele = get_germline(species, args.gene, args.allele, registry=registry)
    if allele is None:
        logger.error("No germline %s for %s", args.gene, species.name)
        sys.exit(1)

    print(f"{allele.name()}\t{allele.fancy_name()}\t{species.scientific_name}")
    print(allele.sequence.sequence)
    start = 0
    for region, length in allele.sequence.regions:
        print(f"{region.value}\t{start + 1}-{start + length}\t{allele.sequence.sequence[start:start + length]}")
        start += length
    for annotation, index in allele.sequence.annotations:
        print(f"{annotation.value}\t{index + 1}\t{allele.sequence.sequence[index]}")


def run_align(registry: GermlineRegistry, args) -> None:
    species = Species.parse(args.species)
    selection = Selection().species(species).allele(AlleleSelection.ALL)
    matches = best_matches(args.sequence, selection, registry, top=args.top)
    if not matches:
        logger.error("No germlines available for %s", species.name)
        sys.exit(1)
    for score, allele in matches:
        print(f"{score:.1f}\t{allele.name()}")


if __name__ == "__main__":
    main()
