# File: backend/app/core/primer/template.py
# Version: v0.1.0
"""
Synthetic LAMP template ("ultramer") assembly.

The template spans F1c+F2+LF+F1+B1c+LB+B2c+B1 of the amplicon and is built as:

    FIP + rc(LF) + "C" + rc(F1c) + "GT" + B1c + "G" + LB + "T" + rc(BIP)

The linker bases are fixed. Nothing is validated here beyond what
reverse_complement enforces on LF, F1c and BIP.
"""

from __future__ import annotations

from .constants import LINKER_B1C, LINKER_BIP, LINKER_F1C, LINKER_LB
from .thermodynamics import reverse_complement


def assemble_template(fip: str, lf: str, f1c: str, b1c: str, lb: str, bip: str) -> str:
    return "".join(
        (
            fip,
            reverse_complement(lf),
            LINKER_F1C,
            reverse_complement(f1c),
            LINKER_B1C,
            b1c,
            LINKER_LB,
            lb,
            LINKER_BIP,
            reverse_complement(bip),
        )
    )
