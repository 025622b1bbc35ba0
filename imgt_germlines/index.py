"""Build the JSON coverage index and Markdown summary of the built databases."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .database import Germlines
from .names import ChainType, Segment

logger = logging.getLogger(__name__)


def _species_entry(db: Germlines) -> dict:
    chains = {}
    for kind, per_segment in db.counts().items():
        if not any(alleles for _, alleles in per_segment.values()):
            continue
        chains[kind.value] = {
            segment.value: {"genes": genes, "alleles": alleles}
            for segment, (genes, alleles) in per_segment.items()
        }
    return {
        "scientificName": db.species.scientific_name,
        "commonName": db.species.common_name,
        "chains": chains,
    }


def build_database_index(databases: list[Germlines], output_path: Path) -> dict:
    """
    Write docs/germlines.json summarizing every species database.

    Per species and chain it records gene and allele counts for V, J and C.
    """
    species_map = {}
    totals = {"species": 0, "genes": 0, "alleles": 0}

    for db in sorted(databases, key=lambda d: d.species):
        entry = _species_entry(db)
        species_map[db.species.name] = entry
        totals["species"] += 1
        for per_segment in entry["chains"].values():
            for counts in per_segment.values():
                totals["genes"] += counts["genes"]
                totals["alleles"] += counts["alleles"]

    index = {
        "generated": datetime.now(timezone.utc).isoformat(),
        "species": species_map,
        "totals": totals,
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(index, separators=(",", ":")))
    logger.info(
        "Wrote index for %d species (%d alleles) to %s",
        totals["species"], totals["alleles"], output_path,
    )
    return index


def render_markdown(index: dict) -> str:
    """
    Render one table per species with ``genes/alleles`` cells:

        | Kind | V | J | C |
        |------|---|---|---|
        | IGH  | 56/120 | 6/13 | 9/30 |
    """
    lines = ["# Germline coverage", ""]
    for name, entry in index["species"].items():
        lines.append(f"## {entry['commonName']} (_{entry['scientificName']}_)")
        lines.append("")
        lines.append("| Kind | V | J | C |")
        lines.append("|------|---|---|---|")
        for kind in ChainType:
            counts = entry["chains"].get(kind.value)
            if counts is None:
                continue
            cells = [
                f"{counts[s.value]['genes']}/{counts[s.value]['alleles']}"
                for s in Segment
            ]
            lines.append(f"| IG{kind.value} | " + " | ".join(cells) + " |")
        lines.append("")
    return "\n".join(lines)


def write_markdown(index: dict, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_markdown(index))
    logger.info("Wrote %s", output_path)
