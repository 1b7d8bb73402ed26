# File: backend/app/core/primer/sequence.py
# Version: v0.1.1
"""
Normalization of raw nucleic-acid text into a validated DNA sequence.

Steps, in order:
1) Drop FASTA header lines (any line starting with '>').
2) Drop every character that is not an ASCII letter.
3) Upper-case.
4) Reject anything outside A/C/G/T/U (RNA or DNA input).
5) Translate U -> T.

An empty result is valid; callers that need to tell "nothing entered" from
"entered but empty" check the raw text themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .constants import INPUT_BASES, INVALID_CHARACTERS_MESSAGE

_FASTA_HEADER = re.compile(r"^>.*$", re.MULTILINE)
_NON_LETTER = re.compile(r"[^A-Za-z]")


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed DNA sequence or the reason it was rejected."""
    sequence: str = ""
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, sequence: str) -> "ParseResult":
        return cls(sequence=sequence)

    @classmethod
    def invalid(cls, reason: str) -> "ParseResult":
        return cls(sequence="", error=reason)


def parse_sequence(raw: str) -> ParseResult:
    cleaned = _FASTA_HEADER.sub("", raw or "")
    cleaned = _NON_LETTER.sub("", cleaned).upper()
    if cleaned and not set(cleaned) <= INPUT_BASES:
        return ParseResult.invalid(INVALID_CHARACTERS_MESSAGE)
    return ParseResult.ok(cleaned.replace("U", "T"))
