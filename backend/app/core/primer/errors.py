# File: backend/app/core/primer/errors.py
# Version: v0.1.0
"""
Error taxonomy for a primer-set design run.

All errors are terminal for the current run: nothing is retried and no partial
primer set is returned. They subclass ValueError so callers that already treat
bad input as ValueError keep working.
"""

from __future__ import annotations

from typing import Iterable


class DesignError(ValueError):
    """Base class for every failure raised by the primer core."""

    kind = "DesignError"


class MissingInput(DesignError):
    """A required microRNA name or sequence was left blank."""

    kind = "MissingInput"


class InvalidSequence(DesignError):
    """The sequence parser rejected an input; `reason` is the parser's message."""

    kind = "InvalidSequence"

    def __init__(self, reason: str, label: str = ""):
        self.reason = reason
        self.label = label
        msg = f"Invalid {label} microRNA sequence: {reason}" if label else reason
        super().__init__(msg)


class InvalidBase(DesignError):
    """A non-ACGT character reached the reverse complement."""

    kind = "InvalidBase"

    def __init__(self, bases: Iterable[str]):
        self.bases = "".join(sorted(set(bases)))
        super().__init__(f"Invalid base(s) for reverse complement: {self.bases!r}")
