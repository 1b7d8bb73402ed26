# File: backend/app/cli/lamp_cli.py
# Version: v0.1.0
"""
CLI for miRLAMP primer-set design.

- Sequences may be given inline (--mirna1/--mirna2) or as single-record FASTA
  files (--mirna1-fasta/--mirna2-fasta); RNA (U) or DNA, any case.
- --params-json uses the lamp_defaults.json layout (parameters, conditions,
  options, placeholders); omitted sections fall back to built-in defaults.
- Writes primers.fasta and primers.json into --outdir.

Usage:
    python -m backend.app.cli.lamp_cli \
        --architecture f2-only \
        --mirna1-name hsa-let-7a-5p --mirna1 UGAGGUAGUAGGUUGUAUAGUU \
        --outdir backend/data/out/lamp \
        [--params-json backend/app/config/lamp_defaults.json] [--log-level DEBUG]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from backend.app.config.config_lamp import load_lamp_defaults
from backend.app.core.export.fasta_exporter import export_primer_set_to_fasta
from backend.app.core.export.json_exporter import export_primer_set_to_json
from backend.app.core.primer.builder import PrimerSetBuilder
from backend.app.core.primer.parameters import Architecture, DesignRequest, MicroRnaInput
from backend.app.core.primer.placeholders import LiteralPrimerSource

# ---------- IO helpers ----------

def read_sequence_text(inline: Optional[str], fasta: Optional[Path]) -> str:
    """Return raw sequence text from an inline value or a single-record FASTA file."""
    if fasta is None:
        return inline or ""
    text = fasta.read_text(encoding="utf-8")
    headers = sum(1 for line in text.splitlines() if line.startswith(">"))
    if headers > 1:
        raise ValueError(f"Multiple FASTA records found in {fasta}. Provide a single-sequence FASTA.")
    return text


def _add_mirna_args(p: argparse.ArgumentParser, n: int, required: bool) -> None:
    p.add_argument(f"--mirna{n}-name", default="", required=required, help=f"Name of microRNA {n}")
    g = p.add_mutually_exclusive_group(required=required)
    g.add_argument(f"--mirna{n}", default=None, help=f"Sequence of microRNA {n} (RNA or DNA)")
    g.add_argument(f"--mirna{n}-fasta", type=Path, default=None, help=f"Single-record FASTA for microRNA {n}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="LAMP primer-set design for microRNA targets")
    p.add_argument("--architecture", default=Architecture.F2_ONLY.value, choices=[a.value for a in Architecture])
    _add_mirna_args(p, 1, required=True)
    _add_mirna_args(p, 2, required=False)
    p.add_argument("--outdir", required=True, type=Path)
    p.add_argument("--params-json", type=Path, default=None,
                   help="JSON with parameters/conditions/options/placeholders (lamp_defaults.json layout)")
    p.add_argument("--log-level", dest="log_level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    return p


# ---------- Main ----------

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("lamp_cli")

    try:
        defaults = load_lamp_defaults(args.params_json)
        architecture = Architecture(args.architecture)
        mirna2 = None
        if architecture.requires_second_input:
            mirna2 = MicroRnaInput(
                name=args.mirna2_name,
                sequence=read_sequence_text(args.mirna2, args.mirna2_fasta),
            )
        request = DesignRequest(
            architecture=architecture,
            mirna1=MicroRnaInput(name=args.mirna1_name, sequence=read_sequence_text(args.mirna1, args.mirna1_fasta)),
            mirna2=mirna2,
            parameters=defaults.parameters,
            conditions=defaults.conditions,
            options=defaults.options,
        )
        log.debug("Request: %s", request.model_dump_json())

        builder = PrimerSetBuilder(LiteralPrimerSource(defaults.placeholders))
        primer_set = builder.build(request)

        args.outdir.mkdir(parents=True, exist_ok=True)
        out_fa = args.outdir / "primers.fasta"
        out_json = args.outdir / "primers.json"
        export_primer_set_to_fasta(primer_set, out_fa)
        export_primer_set_to_json(primer_set, out_json)

        for r in primer_set:
            log.info("%-8s %3d bp  GC %3d%%  %s", r.role.value, r.profile.length, r.profile.gc_percent, r.sequence)
        print(f"[OK] Wrote {out_fa} and {out_json} ({architecture.label}, {len(primer_set)} records)")

    except Exception as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
