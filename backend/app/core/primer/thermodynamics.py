# File: backend/app/core/primer/thermodynamics.py
# Version: v0.3.0
"""
Thermodynamics utilities for LAMP oligos.

Implements:
- GC percentage (integer, half-up)
- Strict reverse complement (BioPython Seq)
- Melting temperature: Wallace rule for short oligos, nearest-neighbor otherwise
  (BioPython MeltingTemp)
- ΔG of duplex formation at the reaction temperature

Notes:
- Tm and ΔG share one NN table (constants.NN_TABLE), the same initiation terms
  and terminal A/T penalties. Salt correction (MeltingTemp method 5) folds
  Mg2+ (minus dNTP chelation) into an effective Na+ concentration.
- All functions are pure; inputs are DNA strings (A/C/G/T, any case).
"""

from __future__ import annotations

from typing import Tuple

from Bio.Seq import Seq
from Bio.SeqUtils import MeltingTemp as mt

from .constants import (
    DEFAULT_DNTP_CONC,
    DEFAULT_MG_CONC,
    DEFAULT_NA_CONC,
    DEFAULT_PRIMER_CONC,
    DEFAULT_REACTION_TEMP,
    DNA_BASES,
    KELVIN,
    NN_MIN_LEN,
    NN_TABLE,
    SALT_CORRECTION_METHOD,
    WALLACE_OFFSET,
)
from .errors import InvalidBase


def _checked(seq: str) -> str:
    s = (seq or "").upper()
    bad = set(s) - DNA_BASES
    if bad:
        raise InvalidBase(bad)
    return s


def reverse_complement(seq: str) -> str:
    """Reverse-complement (A<->T, C<->G); every base is validated before transforming."""
    s = _checked(seq)
    return str(Seq(s).reverse_complement())


def is_self_complementary(seq: str) -> bool:
    s = _checked(seq)
    return bool(s) and s == reverse_complement(s)


def gc_content(seq: str) -> int:
    s = (seq or "").upper()
    if not s:
        return 0
    gc = s.count("G") + s.count("C")
    # integer half-up rounding of 100 * gc / len
    return (200 * gc + len(s)) // (2 * len(s))


def _nn_sums(s: str) -> Tuple[float, float]:
    """Initiation + stacked pairs + terminal A/T penalties -> (dH kcal/mol, dS cal/(mol·K))."""
    dh, ds = NN_TABLE["init"]
    comp = str(Seq(s).complement())
    for i in range(len(s) - 1):
        step_dh, step_ds = NN_TABLE[f"{s[i:i + 2]}/{comp[i:i + 2]}"]
        dh += step_dh
        ds += step_ds
    at_dh, at_ds = NN_TABLE["init_A/T"]
    ends = s[0] + s[-1]
    n_at = ends.count("A") + ends.count("T")
    return dh + at_dh * n_at, ds + at_ds * n_at


def wallace_tm(seq: str) -> float:
    """Short-oligo Tm (°C): 2*(A+T) + 4*(G+C) + 5."""
    return float(mt.Tm_Wallace(seq.upper())) + WALLACE_OFFSET


def melting_temperature(
    seq: str,
    na_conc: float = DEFAULT_NA_CONC,
    mg_conc: float = DEFAULT_MG_CONC,
    primer_conc: float = DEFAULT_PRIMER_CONC,
    dntp_conc: float = DEFAULT_DNTP_CONC,
) -> float:
    """
    Melting temperature (°C, one decimal).

    Args:
        seq: oligo sequence (A/C/G/T)
        na_conc: monovalent salt (mM)
        mg_conc: Mg2+ (mM)
        primer_conc: primer strand concentration (µM)
        dntp_conc: dNTP concentration (mM)

    Returns:
        Tm in °C; 0.0 for an empty sequence.
    """
    s = _checked(seq)
    if not s:
        return 0.0
    if len(s) < NN_MIN_LEN:
        return wallace_tm(s)

    # Tm_NN takes salts in mM and strands in nM; dnac1 - dnac2/2 gives Ct/4
    dnac = primer_conc * 1000.0 / 2.0
    tm = mt.Tm_NN(
        s,
        nn_table=NN_TABLE,
        Na=na_conc,
        Mg=mg_conc,
        dNTPs=dntp_conc,
        dnac1=dnac,
        dnac2=dnac,
        saltcorr=SALT_CORRECTION_METHOD,
    )
    return round(float(tm), 1)


def delta_g(
    seq: str,
    temperature: float = DEFAULT_REACTION_TEMP,
    na_conc: float = DEFAULT_NA_CONC,
    mg_conc: float = DEFAULT_MG_CONC,
    dntp_conc: float = DEFAULT_DNTP_CONC,
) -> float:
    """
    ΔG of duplex formation (kcal/mol, two decimals) at the reaction temperature (°C).

    Uses the fixed reaction temperature, not the oligo's own Tm. More negative
    means a more stable duplex. Returns 0.0 for an empty sequence.
    """
    s = _checked(seq)
    if not s:
        return 0.0

    dh, ds = _nn_sums(s)
    if is_self_complementary(s):
        ds += NN_TABLE["sym"][1]
    ds += mt.salt_correction(Na=na_conc, Mg=mg_conc, dNTPs=dntp_conc, method=SALT_CORRECTION_METHOD, seq=s)
    t_kelvin = temperature + KELVIN
    return round(dh - (t_kelvin * ds / 1000.0), 2)
