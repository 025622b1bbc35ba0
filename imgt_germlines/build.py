"""Build per-species germline databases from a LIGM-DB line stream."""

import csv
import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .assembler import FinishError, FinishedAllele, finish_item
from .database import Germlines
from .features import parse_dat
from .species import Species

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Everything that was left out of a build, and why."""

    record_errors: dict[str, str] = field(default_factory=dict)
    failures: dict[Species, dict[str, list[str]]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(list))
    )
    orphans: Counter = field(default_factory=Counter)

    def add_failure(self, species: Species, error: FinishError) -> None:
        self.failures[species][error.allele].append(str(error))

    def rows(self) -> list[tuple[str, str, str]]:
        """(species, allele, reason) sorted by species then allele."""
        rows = [
            (species.name, allele, reason)
            for species in sorted(self.failures)
            for allele in sorted(self.failures[species])
            for reason in self.failures[species][allele]
        ]
        rows.extend(("", record_id, reason) for record_id, reason in sorted(self.record_errors.items()))
        return rows

    def write_tsv(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["species", "allele", "reason"])
            writer.writerows(self.rows())
        logger.info("Wrote %d excluded entries to %s", len(self.rows()), path)

    def summary(self) -> dict[str, int]:
        return {
            "record_errors": len(self.record_errors),
            "failed_alleles": sum(len(alleles) for alleles in self.failures.values()),
            "orphan_regions": sum(self.orphans.values()),
        }


def build_databases(lines: Iterable[str]) -> tuple[dict[Species, Germlines], BuildReport]:
    """
    Parse, finish and insert every retained record.

    Never aborts on bad data: unreadable records and unfinished alleles end
    up in the report and everything else in the databases.
    """
    databases: dict[Species, Germlines] = {}
    report = BuildReport()
    records = 0

    for result in parse_dat(lines):
        records += 1
        if result.error is not None:
            report.record_errors[result.record_id] = str(result.error)
            continue
        item = result.item
        for orphan in item.orphans:
            report.orphans[orphan.key] += 1

        for finished in finish_item(item):
            if isinstance(finished, FinishError):
                report.add_failure(item.species, finished)
                continue
            db = databases.setdefault(item.species, Germlines(item.species))
            db.insert(finished.gene, finished.allele, finished.sequence)

    logger.info(
        "Parsed %d records into %d species databases (%s)",
        records, len(databases), report.summary(),
    )
    return databases, report


def write_databases(databases: dict[Species, Germlines], output_dir: Path) -> list[Path]:
    return [databases[species].save(output_dir) for species in sorted(databases)]


__all__ = ["BuildReport", "FinishedAllele", "build_databases", "write_databases"]
