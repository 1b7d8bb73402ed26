# File: backend/app/core/primer/placeholders.py
# Version: v0.1.0
"""
Placeholder primer literals and the strategy interface that serves them.

The builder asks a PlaceholderPrimerSource for every primer it cannot derive
from the microRNA inputs (LF, LB, F1c, B1c, and BIP/B2 for single-input
architectures) and for the hairpin calls. Swapping in a real optimizer means
providing another source; the builder's orchestration does not change.
"""

from __future__ import annotations

from typing import Dict, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DNA_BASES
from .models import PrimerRole

HAIRPIN_NONE = "None"


class PlaceholderPrimers(BaseModel):
    """Fixed primer literals (DNA, 5'->3'); loadable from lamp_defaults.json."""
    model_config = ConfigDict(frozen=True)

    lf: str = "TCACTGATCTGGCCGTAGACCA"
    lb: str = "TGACAGGACATCGGTGACAGT"
    f1c: str = "CGGAGAGGTCGCGATAGTCA"
    b1c: str = "GATGACAGTGACATCCTGCCT"
    bip: str = "GATGACAGTGACATCCTGCCTAGGCAGTGTCTTAGCTGGTTGT"
    b2: str = "TGGCAGTGTCTTAGCTGGTTGT"
    hairpins: Dict[str, str] = Field(
        default_factory=lambda: {"LF": HAIRPIN_NONE, "LB": HAIRPIN_NONE, "FIP": "1 weak", "BIP": HAIRPIN_NONE},
        description="Hairpin call per loop/inner primer role",
    )

    @field_validator("lf", "lb", "f1c", "b1c", "bip", "b2")
    @classmethod
    def _dna_only(cls, v: str) -> str:
        s = v.strip().upper()
        if not s or set(s) - DNA_BASES:
            raise ValueError("placeholder primers must be non-empty A/C/G/T sequences")
        return s


class PlaceholderPrimerSource(Protocol):
    def sequence(self, role: PrimerRole) -> str:
        ...

    def hairpin(self, role: PrimerRole) -> str:
        ...


class LiteralPrimerSource:
    """Serves the configured literals unchanged."""

    def __init__(self, primers: PlaceholderPrimers | None = None):
        self.primers = primers or PlaceholderPrimers()
        self._by_role = {
            PrimerRole.LF: self.primers.lf,
            PrimerRole.LB: self.primers.lb,
            PrimerRole.F1C: self.primers.f1c,
            PrimerRole.B1C: self.primers.b1c,
            PrimerRole.BIP: self.primers.bip,
            PrimerRole.B2: self.primers.b2,
        }

    def sequence(self, role: PrimerRole) -> str:
        try:
            return self._by_role[role]
        except KeyError:
            raise KeyError(f"No placeholder literal for role {role.value}") from None

    def hairpin(self, role: PrimerRole) -> str:
        return self.primers.hairpins.get(role.value, HAIRPIN_NONE)
