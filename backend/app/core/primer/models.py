# File: backend/app/core/primer/models.py
# Version: v0.2.0
"""
Immutable result types of a design run.

A PrimerSet is created once per run, never mutated, and replaced wholesale by
the next run; nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .parameters import Architecture, DesignOptions, DesignParameters, ReactionConditions
from .thermodynamics import delta_g, gc_content, melting_temperature


class PrimerRole(str, Enum):
    LF = "LF"
    LB = "LB"
    FIP = "FIP"
    BIP = "BIP"
    F2 = "F2"
    B2 = "B2"
    F1C = "F1c"
    B1C = "B1c"
    TEMPLATE = "Template"


# Loop and inner primers carry a hairpin call; outer primers and the template do not
HAIRPIN_ROLES = frozenset({PrimerRole.LF, PrimerRole.LB, PrimerRole.FIP, PrimerRole.BIP})


@dataclass(frozen=True)
class ThermoProfile:
    length: int
    gc_percent: int
    tm: Optional[float] = None
    dg: Optional[float] = None

    @classmethod
    def of(cls, seq: str, conditions: ReactionConditions) -> "ThermoProfile":
        return cls(
            length=len(seq),
            gc_percent=gc_content(seq),
            tm=melting_temperature(
                seq,
                na_conc=conditions.naConc,
                mg_conc=conditions.mgConc,
                primer_conc=conditions.primerConc,
                dntp_conc=conditions.dntpConc,
            ),
            dg=delta_g(
                seq,
                temperature=conditions.temperature,
                na_conc=conditions.naConc,
                mg_conc=conditions.mgConc,
                dntp_conc=conditions.dntpConc,
            ),
        )

    @classmethod
    def composition(cls, seq: str) -> "ThermoProfile":
        """Length and GC% only (used for the template)."""
        return cls(length=len(seq), gc_percent=gc_content(seq))


@dataclass(frozen=True)
class PrimerRecord:
    role: PrimerRole
    sequence: str
    profile: ThermoProfile
    hairpin: Optional[str] = None


@dataclass(frozen=True)
class TargetSummary:
    """A parsed microRNA input as shown next to the results."""
    name: str
    sequence: str
    length: int
    gc_percent: int


@dataclass(frozen=True)
class PrimerSet:
    architecture: Architecture
    targets: Tuple[TargetSummary, ...]
    records: Tuple[PrimerRecord, ...]
    parameters: DesignParameters = field(default_factory=DesignParameters)
    conditions: ReactionConditions = field(default_factory=ReactionConditions)
    options: DesignOptions = field(default_factory=DesignOptions)

    def __iter__(self) -> Iterator[PrimerRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def get(self, role: PrimerRole) -> PrimerRecord:
        for r in self.records:
            if r.role == role:
                return r
        raise KeyError(role)

    def sequences(self) -> Dict[str, str]:
        return {r.role.value: r.sequence for r in self.records}

    @property
    def template(self) -> PrimerRecord:
        return self.get(PrimerRole.TEMPLATE)
