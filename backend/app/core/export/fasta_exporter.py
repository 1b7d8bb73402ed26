# File: backend/app/core/export/fasta_exporter.py
# Version: v0.3.0

"""
FASTA export for LAMP primer sets.

v0.3.0
- One record per primer role (ID = role), template included.
- Description carries len/gc and, where computed, tm/dG.
"""

from pathlib import Path
from typing import List

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from backend.app.core.primer.models import PrimerRecord, PrimerSet


def _describe(r: PrimerRecord) -> str:
    parts = [f"len={r.profile.length}", f"gc={r.profile.gc_percent}"]
    if r.profile.tm is not None:
        parts.append(f"tm={r.profile.tm:.1f}")
    if r.profile.dg is not None:
        parts.append(f"dG={r.profile.dg:.2f}")
    return " ".join(parts)


def primer_set_records(primer_set: PrimerSet) -> List[SeqRecord]:
    return [
        SeqRecord(Seq(r.sequence), id=r.role.value, description=_describe(r))
        for r in primer_set.records
    ]


def export_primer_set_to_fasta(primer_set: PrimerSet, fasta_path: Path) -> int:
    """Write every primer of the set as FASTA; returns the number of records written."""
    return SeqIO.write(primer_set_records(primer_set), fasta_path, "fasta")
