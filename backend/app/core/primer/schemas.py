# File: backend/app/core/primer/schemas.py
# Version: v0.3.0
"""
DTOs for requests and responses used by the primer endpoints and exporters.

v0.3.0:
- LAMP primer-set DTOs. `DesignRunRequest.parameters`, `.conditions` and
  `.options` are optional; when omitted the backend uses the configured
  defaults (backend/app/config/lamp_defaults.json, falling back to built-ins).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .models import PrimerRecord, PrimerSet, TargetSummary
from .parameters import (
    Architecture,
    DesignOptions,
    DesignParameters,
    MicroRnaInput,
    ReactionConditions,
)


class ErrorResponse(BaseModel):
    error: str
    message: str


class ArchitectureInfo(BaseModel):
    value: Architecture
    label: str
    requiresSecondInput: bool


class DefaultsResponse(BaseModel):
    parameters: DesignParameters
    conditions: ReactionConditions
    options: DesignOptions


class ParseRequest(BaseModel):
    sequence: str = Field("", description="Raw text: plain or FASTA, RNA or DNA.")


class ParseResponse(BaseModel):
    valid: bool
    sequence: str
    error: Optional[str] = None
    length: int = 0
    gc: int = 0


class ThermoRequest(BaseModel):
    sequence: str = Field(..., description="DNA oligo (A/C/G/T).")
    conditions: Optional[ReactionConditions] = None


class ThermoResponse(BaseModel):
    sequence: str
    length: int
    gc: int
    tm: float
    dg: float


class ReverseComplementRequest(BaseModel):
    sequence: str


class ReverseComplementResponse(BaseModel):
    sequence: str
    reverseComplement: str


class TemplateRequest(BaseModel):
    fip: str
    lf: str
    f1c: str
    b1c: str
    lb: str
    bip: str


class TemplateResponse(BaseModel):
    sequence: str
    length: int
    gc: int


class DesignRunRequest(BaseModel):
    """Request to build a LAMP primer set for one or two microRNAs."""
    architecture: Architecture = Architecture.F2_ONLY
    mirna1: MicroRnaInput
    mirna2: Optional[MicroRnaInput] = None
    parameters: Optional[DesignParameters] = None
    conditions: Optional[ReactionConditions] = None
    options: Optional[DesignOptions] = None


class TargetInfo(BaseModel):
    name: str
    sequence: str
    length: int
    gc: int

    @classmethod
    def from_target(cls, t: TargetSummary) -> "TargetInfo":
        return cls(name=t.name, sequence=t.sequence, length=t.length, gc=t.gc_percent)


class PrimerInfo(BaseModel):
    """One primer row; tm/dg absent for the template, hairpin only for loop/inner primers."""
    role: str
    sequence: str
    length: int
    gc: int
    tm: Optional[float] = None
    dg: Optional[float] = None
    hairpin: Optional[str] = None

    @classmethod
    def from_record(cls, r: PrimerRecord) -> "PrimerInfo":
        return cls(
            role=r.role.value,
            sequence=r.sequence,
            length=r.profile.length,
            gc=r.profile.gc_percent,
            tm=r.profile.tm,
            dg=r.profile.dg,
            hairpin=r.hairpin,
        )


class PrimerSetResponse(BaseModel):
    architecture: Architecture
    architectureLabel: str
    targets: List[TargetInfo]
    primers: List[PrimerInfo]
    parameters: DesignParameters
    conditions: ReactionConditions
    options: DesignOptions

    @classmethod
    def from_primer_set(cls, ps: PrimerSet) -> "PrimerSetResponse":
        return cls(
            architecture=ps.architecture,
            architectureLabel=ps.architecture.label,
            targets=[TargetInfo.from_target(t) for t in ps.targets],
            primers=[PrimerInfo.from_record(r) for r in ps.records],
            parameters=ps.parameters,
            conditions=ps.conditions,
            options=ps.options,
        )
