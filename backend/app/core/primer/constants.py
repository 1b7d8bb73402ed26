# File: backend/app/core/primer/constants.py
# Version: v0.3.0
"""
Constants and defaults for the LAMP primer subsystem.

v0.3.0
- Parser accepts DNA (T) as well as RNA (U) input.
- NN table laid out for Bio.SeqUtils.MeltingTemp (Tm_NN).

v0.2.0
- Nearest-neighbor table shared by the Tm and ΔG calculators.
- Reaction-condition defaults for isothermal (65 °C) LAMP buffers.
- Fixed adapters and linker bases used for FIP/BIP and the ultramer template.
"""

from __future__ import annotations

from typing import Dict, Tuple

DNA_BASES = frozenset("ACGT")
# Parser input alphabet (RNA or DNA); U is translated to T afterwards
INPUT_BASES = frozenset("ACGTU")

INVALID_CHARACTERS_MESSAGE = "Invalid characters. Only A, C, G, U allowed."

# Unified NN parameters: dinucleotide -> (dH kcal/mol, dS cal/(mol·K))
NN_PARAMS: Dict[str, Tuple[float, float]] = {
    "AA": (-7.9, -22.2), "TT": (-7.9, -22.2),
    "AT": (-7.2, -20.4),
    "TA": (-7.2, -21.3),
    "CA": (-8.5, -22.7), "TG": (-8.5, -22.7),
    "GT": (-8.4, -22.4), "AC": (-8.4, -22.4),
    "CT": (-7.8, -21.0), "AG": (-7.8, -21.0),
    "GA": (-8.2, -22.2), "TC": (-8.2, -22.2),
    "CG": (-10.6, -27.2),
    "GC": (-9.8, -24.4),
    "GG": (-8.0, -19.9), "CC": (-8.0, -19.9),
}

INIT_DH = 0.2    # kcal/mol
INIT_DS = -5.7   # cal/(mol·K)

TERMINAL_AT_DH = 2.3
TERMINAL_AT_DS = 4.1

SYMMETRY_DS = -1.4

KELVIN = 273.15

# Shorter oligos use the Wallace rule instead of nearest-neighbor
NN_MIN_LEN = 14
# Added to Bio.SeqUtils.MeltingTemp.Tm_Wallace
WALLACE_OFFSET = 5.0

_COMPLEMENT = str.maketrans("ACGT", "TGCA")

# NN_PARAMS in the layout Bio.SeqUtils.MeltingTemp expects ("AC/TG" -> (dH, dS)).
# Only the general initiation and the terminal A/T penalty are non-zero.
NN_TABLE: Dict[str, Tuple[float, float]] = {
    f"{pair}/{pair.translate(_COMPLEMENT)}": params for pair, params in NN_PARAMS.items()
}
NN_TABLE.update({
    "init": (INIT_DH, INIT_DS),
    "init_A/T": (TERMINAL_AT_DH, TERMINAL_AT_DS),
    "init_G/C": (0.0, 0.0),
    "init_oneG/C": (0.0, 0.0),
    "init_allA/T": (0.0, 0.0),
    "init_5T/A": (0.0, 0.0),
    "sym": (0.0, SYMMETRY_DS),
})

# Bio.SeqUtils.MeltingTemp.salt_correction method: 0.368*(N-1)*ln[Na_eq] added to dS
SALT_CORRECTION_METHOD = 5

# Reaction conditions (mM for salts, µM for primer, °C for temperature)
DEFAULT_NA_CONC = 50.0
DEFAULT_MG_CONC = 8.0
DEFAULT_PRIMER_CONC = 0.25
DEFAULT_DNTP_CONC = 0.8
DEFAULT_REACTION_TEMP = 65.0

# Design parameters accepted by the (future) optimizer
DEFAULT_TARGET_GC = 50
DEFAULT_TARGET_TM = 60.0
DEFAULT_LENGTH_ADJUSTMENT = 0

# F2 begins this many bases into the microRNA
F2_CUT_OFFSET = 2
# B2-derived BIP tail drops this many bases of the second microRNA
BIP_TAIL_OFFSET = 1

FIP_ADAPTER = "CGGAGAGGTCGCGATAGTCAT"
BIP_ADAPTER = "GATGACAGTGACATCCTGCCTA"

# Linker bases between template regions
LINKER_F1C = "C"
LINKER_B1C = "GT"
LINKER_LB = "G"
LINKER_BIP = "T"
