# File: backend/app/core/primer/builder.py
# Version: v0.1.0
"""
Primer-set orchestration for one LAMP design run.

What this file does
-------------------
- Checks that every required microRNA (name + sequence) was entered, for all
  inputs, before parsing any of them.
- Parses inputs (FASTA/RNA/DNA text -> DNA) and propagates parser errors.
- Derives the input-dependent primers:
    F2  = mirna1 without its first two bases
    FIP = FIP adapter + F2
    f2-and-b2 only: B2 = mirna2, BIP = BIP adapter + mirna2[1:]
- Takes everything else (LF, LB, F1c, B1c, single-input BIP/B2, hairpin calls)
  from a PlaceholderPrimerSource.
- Assembles the template and profiles every primer.

The run is atomic: a DesignError is raised before any record is returned.
f2-only and b2-only currently build identical sets; only the label differs.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .constants import BIP_ADAPTER, BIP_TAIL_OFFSET, F2_CUT_OFFSET, FIP_ADAPTER
from .errors import InvalidSequence, MissingInput
from .models import HAIRPIN_ROLES, PrimerRecord, PrimerRole, PrimerSet, TargetSummary, ThermoProfile
from .parameters import (
    Architecture,
    DesignOptions,
    DesignParameters,
    DesignRequest,
    MicroRnaInput,
    ReactionConditions,
)
from .placeholders import LiteralPrimerSource, PlaceholderPrimerSource
from .sequence import parse_sequence
from .template import assemble_template
from .thermodynamics import gc_content

_ORDINALS = ("first", "second")


class PrimerSetBuilder:
    """Builds a PrimerSet from a DesignRequest; holds no per-run state."""

    def __init__(self, source: Optional[PlaceholderPrimerSource] = None):
        self.source = source or LiteralPrimerSource()

    # --- Input handling -------------------------------------------------------------------------

    @staticmethod
    def _required_inputs(request: DesignRequest) -> List[MicroRnaInput]:
        inputs = [request.mirna1]
        if request.architecture.requires_second_input:
            inputs.append(request.mirna2 or MicroRnaInput())
        return inputs

    @staticmethod
    def _missing_message(idx: int, architecture: Architecture) -> str:
        msg = f"Please enter the {_ORDINALS[idx]} microRNA name and sequence"
        if idx > 0:
            msg += f" for {architecture.label} architecture"
        return msg

    def _parse_inputs(self, request: DesignRequest) -> List[TargetSummary]:
        inputs = self._required_inputs(request)
        for idx, item in enumerate(inputs):
            if not item.name.strip() or not item.sequence.strip():
                raise MissingInput(self._missing_message(idx, request.architecture))

        targets: List[TargetSummary] = []
        for idx, item in enumerate(inputs):
            res = parse_sequence(item.sequence)
            if not res.valid:
                raise InvalidSequence(res.error, _ORDINALS[idx])
            if not res.sequence:
                # headers/digits only: nothing usable was entered
                raise MissingInput(self._missing_message(idx, request.architecture))
            targets.append(
                TargetSummary(
                    name=item.name.strip(),
                    sequence=res.sequence,
                    length=len(res.sequence),
                    gc_percent=gc_content(res.sequence),
                )
            )
        return targets

    # --- Primer derivation ----------------------------------------------------------------------

    def _inner_backward(self, architecture: Architecture, targets: List[TargetSummary]) -> Tuple[str, str]:
        """(BIP, B2) for the architecture."""
        if architecture is Architecture.F2_AND_B2:
            mirna2 = targets[1].sequence
            return BIP_ADAPTER + mirna2[BIP_TAIL_OFFSET:], mirna2
        return self.source.sequence(PrimerRole.BIP), self.source.sequence(PrimerRole.B2)

    def _record(self, role: PrimerRole, seq: str, conditions: ReactionConditions) -> PrimerRecord:
        if role is PrimerRole.TEMPLATE:
            return PrimerRecord(role, seq, ThermoProfile.composition(seq))
        hairpin = self.source.hairpin(role) if role in HAIRPIN_ROLES else None
        return PrimerRecord(role, seq, ThermoProfile.of(seq, conditions), hairpin)

    # --- Public API -----------------------------------------------------------------------------

    def build(self, request: DesignRequest) -> PrimerSet:
        targets = self._parse_inputs(request)

        f2 = targets[0].sequence[F2_CUT_OFFSET:]
        fip = FIP_ADAPTER + f2
        lf = self.source.sequence(PrimerRole.LF)
        lb = self.source.sequence(PrimerRole.LB)
        f1c = self.source.sequence(PrimerRole.F1C)
        b1c = self.source.sequence(PrimerRole.B1C)
        bip, b2 = self._inner_backward(request.architecture, targets)
        template = assemble_template(fip, lf, f1c, b1c, lb, bip)

        ordered = (
            (PrimerRole.LF, lf),
            (PrimerRole.LB, lb),
            (PrimerRole.FIP, fip),
            (PrimerRole.BIP, bip),
            (PrimerRole.F2, f2),
            (PrimerRole.B2, b2),
            (PrimerRole.F1C, f1c),
            (PrimerRole.B1C, b1c),
            (PrimerRole.TEMPLATE, template),
        )
        records = tuple(self._record(role, seq, request.conditions) for role, seq in ordered)

        return PrimerSet(
            architecture=request.architecture,
            targets=tuple(targets),
            records=records,
            parameters=request.parameters,
            conditions=request.conditions,
            options=request.options,
        )


def build_primer_set(
    architecture: Architecture,
    mirna1: MicroRnaInput,
    mirna2: Optional[MicroRnaInput] = None,
    parameters: Optional[DesignParameters] = None,
    *,
    conditions: Optional[ReactionConditions] = None,
    options: Optional[DesignOptions] = None,
    source: Optional[PlaceholderPrimerSource] = None,
) -> PrimerSet:
    """Convenience entry point: one call, one immutable PrimerSet (or a DesignError)."""
    request = DesignRequest(
        architecture=Architecture(architecture),
        mirna1=mirna1,
        mirna2=mirna2,
        parameters=parameters or DesignParameters(),
        conditions=conditions or ReactionConditions(),
        options=options or DesignOptions(),
    )
    return PrimerSetBuilder(source).build(request)
