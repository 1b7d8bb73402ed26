# File: backend/app/api/v1/primers/deps.py
# Version: v0.3.0
"""
Dependency providers for primer endpoints.

Tests (or a future optimizer) can swap either provider through
`app.dependency_overrides`.
"""

from __future__ import annotations

from fastapi import Depends

from backend.app.config.config_lamp import LampDefaults, load_lamp_defaults
from backend.app.core.primer.builder import PrimerSetBuilder
from backend.app.core.primer.placeholders import LiteralPrimerSource


def lamp_defaults() -> LampDefaults:
    """Return the configured LAMP defaults (re-read per request)."""
    return load_lamp_defaults()


def primer_set_builder(defaults: LampDefaults = Depends(lamp_defaults)) -> PrimerSetBuilder:
    """Return a builder backed by the configured placeholder primers."""
    return PrimerSetBuilder(LiteralPrimerSource(defaults.placeholders))
