#!/usr/bin/env python3
"""Data constants and helper functions for regex patterns.

This module contains the data constants (unit vocabulary, prefixes, character
classes) used to build the scanning patterns. It is the foundation layer with
no regex pattern compilation.
"""

import re
from typing import Iterable, List, Optional, Tuple


# ==============================================================================
# UNIT VOCABULARY
# ==============================================================================

# (symbol, replacement) pairs. A replacement of None means the symbol is
# emitted as typed. Single capital letters that double as element symbols
# (K, C, N, W, V, F, H, S) are left out so that molecules are not mistaken
# for units; add them in the config file when needed.
DEFAULT_UNITS: List[Tuple[str, Optional[str]]] = [
    # Length
    ("m", None),
    ("km", None),
    ("cm", None),
    ("mm", None),
    ("um", "$\\mu$m"),
    ("mum", "$\\mu$m"),
    ("nm", None),
    ("Ang", "\\AA"),
    ("AU", None),
    ("au", None),
    ("pc", None),
    ("kpc", None),
    ("Mpc", None),
    ("Gpc", None),
    ("ly", None),
    # Time
    ("s", None),
    ("ms", None),
    ("mus", "$\\mu$s"),
    ("ns", None),
    ("min", None),
    ("h", None),
    ("hr", None),
    ("d", None),
    ("yr", None),
    ("Myr", None),
    ("Gyr", None),
    # Mass and amount
    ("g", None),
    ("kg", None),
    ("mg", None),
    ("mug", "$\\mu$g"),
    ("amu", None),
    ("Da", None),
    ("kDa", None),
    ("mol", None),
    ("mmol", None),
    ("Msun", "M$_\\odot$"),
    # Energy, power, force, pressure
    ("J", None),
    ("kJ", None),
    ("MJ", None),
    ("erg", None),
    ("eV", None),
    ("meV", None),
    ("keV", None),
    ("MeV", None),
    ("GeV", None),
    ("TeV", None),
    ("cal", None),
    ("kcal", None),
    ("kW", None),
    ("MW", None),
    ("mW", None),
    ("Lsun", "L$_\\odot$"),
    ("dyn", None),
    ("kN", None),
    ("kPa", None),
    ("hPa", None),
    ("MPa", None),
    ("GPa", None),
    ("bar", None),
    ("mbar", None),
    ("atm", None),
    ("Torr", None),
    # Electromagnetism
    ("A", None),
    ("mA", None),
    ("mV", None),
    ("kV", None),
    ("Ohm", "$\\Omega$"),
    ("ohm", "$\\Omega$"),
    ("T", None),
    ("mT", None),
    ("G", None),
    ("Wb", None),
    ("Jy", None),
    ("mJy", None),
    ("muJy", "$\\mu$Jy"),
    # Frequency, angle, temperature and friends
    ("Hz", None),
    ("kHz", None),
    ("MHz", None),
    ("GHz", None),
    ("THz", None),
    ("rad", None),
    ("sr", None),
    ("deg", "$^\\circ$"),
    ("degC", "$^\\circ$C"),
    ("degF", "$^\\circ$F"),
    ("arcmin", None),
    ("arcsec", None),
    ("mas", None),
    ("mK", None),
    ("dB", None),
    ("cd", None),
    ("lm", None),
    ("lx", None),
    ("Bq", None),
    ("Gy", None),
    ("Sv", None),
    ("L", None),
    ("mL", None),
    ("ppm", None),
    ("ppb", None),
]


# ==============================================================================
# MOLECULE SCANNING
# ==============================================================================

# Prefixes recognised only at the very start of a molecule. The trailing dash
# belongs to the prefix and is never read as a charge. Longest first.
ORTHO_PARA_PREFIXES = ["ortho-", "Ortho-", "para-", "Para-", "o-", "p-"]

CHARGE_CHARACTERS = "+-"

# Characters a conversion span may contain when scanning a host buffer.
SPAN_CHARACTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+-()/.*\\"
)

# Environments in which a LaTeX document is already typesetting math.
MATH_ENVIRONMENTS = [
    "equation",
    "align",
    "alignat",
    "gather",
    "multline",
    "flalign",
    "eqnarray",
    "math",
    "displaymath",
]


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def create_alternation_pattern(words: Iterable[str]) -> str:
    """Create an escaped regex alternation, longest words first.

    Python's regex alternation is ordered, so sorting by length makes the
    longest symbol win when one symbol is a prefix of another ("m" vs "mol").
    """
    unique = sorted(set(words), key=lambda w: (-len(w), w))
    return "|".join(re.escape(word) for word in unique)
