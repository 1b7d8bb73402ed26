# File: backend/app/core/primer/parameters.py
# Version: v2.0.0
"""
Pydantic models for a LAMP primer-set design run (camelCase keys, frozen).

- DesignParameters: optimizer targets. Accepted and validated, recorded on the
  result, but not consumed by any computation yet.
- ReactionConditions: buffer/temperature used for Tm and ΔG.
- DesignOptions: feature toggles carried over from the design form; recorded only.
- MicroRnaInput / DesignRequest: the explicit, immutable input of one run.

Usage:
    from backend.app.core.primer.parameters import DesignRequest
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, confloat, conint, model_validator

from .constants import (
    DEFAULT_DNTP_CONC,
    DEFAULT_LENGTH_ADJUSTMENT,
    DEFAULT_MG_CONC,
    DEFAULT_NA_CONC,
    DEFAULT_PRIMER_CONC,
    DEFAULT_REACTION_TEMP,
    DEFAULT_TARGET_GC,
    DEFAULT_TARGET_TM,
)


class Architecture(str, Enum):
    F2_ONLY = "f2-only"
    B2_ONLY = "b2-only"
    F2_AND_B2 = "f2-and-b2"

    @property
    def label(self) -> str:
        return _ARCHITECTURE_LABELS[self]

    @property
    def requires_second_input(self) -> bool:
        return self is Architecture.F2_AND_B2


_ARCHITECTURE_LABELS = {
    Architecture.F2_ONLY: "F2 Only",
    Architecture.B2_ONLY: "B2 Only",
    Architecture.F2_AND_B2: "F2 and B2 (AND-gate)",
}


class DesignParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    targetGC: conint(ge=0, le=100) = Field(DEFAULT_TARGET_GC, description="Target GC percentage")
    targetTm: confloat(ge=0) = Field(DEFAULT_TARGET_TM, description="Target primer Tm (°C)")
    lengthAdjustment: int = Field(DEFAULT_LENGTH_ADJUSTMENT, description="Signed primer length adjustment (bp)")


class ReactionConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    naConc: confloat(ge=0) = Field(DEFAULT_NA_CONC, description="Monovalent salt (mM)")
    mgConc: confloat(ge=0) = Field(DEFAULT_MG_CONC, description="Mg2+ (mM)")
    primerConc: confloat(gt=0) = Field(DEFAULT_PRIMER_CONC, description="Primer concentration (µM)")
    dntpConc: confloat(ge=0) = Field(DEFAULT_DNTP_CONC, description="dNTP concentration (mM)")
    temperature: float = Field(DEFAULT_REACTION_TEMP, description="Reaction temperature for ΔG (°C)")

    @model_validator(mode="after")
    def _check_salt(self) -> "ReactionConditions":
        # Na+ or free Mg2+ (Mg - dNTP) must remain for the salt correction
        if self.naConc <= 0 and self.mgConc <= self.dntpConc:
            raise ValueError("naConc must be > 0 unless mgConc exceeds dntpConc")
        return self


class DesignOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    generateLoop: bool = True
    optimizeSpecificity: bool = True
    checkHairpins: bool = True
    calculateDG: bool = True


class MicroRnaInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Display name, e.g. hsa-let-7a-5p")
    sequence: str = Field("", description="Raw text: plain or FASTA, RNA or DNA")


class DesignRequest(BaseModel):
    """Everything one design run depends on."""
    model_config = ConfigDict(frozen=True)

    architecture: Architecture = Architecture.F2_ONLY
    mirna1: MicroRnaInput
    mirna2: Optional[MicroRnaInput] = None
    parameters: DesignParameters = Field(default_factory=DesignParameters)
    conditions: ReactionConditions = Field(default_factory=ReactionConditions)
    options: DesignOptions = Field(default_factory=DesignOptions)
