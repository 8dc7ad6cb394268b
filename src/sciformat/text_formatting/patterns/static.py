#!/usr/bin/env python3
"""Pre-compiled static regex patterns.

This module contains the pre-compiled regex patterns that do not depend on
the configured unit vocabulary. Patterns are organized by category.
"""

import re

from .components import CHARGE_CHARACTERS, MATH_ENVIRONMENTS, ORTHO_PARA_PREFIXES


# ==============================================================================
# CLASSIFICATION PATTERNS
# ==============================================================================

# A leading float ("2.") or exponential magnitude ("2e-13", "3x5") marks a unit
LEADING_NUMERIC_PATTERN = re.compile(
    r"""
    ^\d+                        # Integer part
    (?:
        \.                      # Decimal point
        |
        [ex][-+]?\d+            # Exponential suffix
    )
    """,
    re.VERBOSE,
)


# ==============================================================================
# MOLECULE PATTERNS
# ==============================================================================

ORTHO_PARA_PREFIX_PATTERN = re.compile("|".join(re.escape(prefix) for prefix in ORTHO_PARA_PREFIXES))

ELEMENT_RUN_PATTERN = re.compile(r"[A-Za-z]+")

CHARGE_RUN_PATTERN = re.compile(f"[{re.escape(CHARGE_CHARACTERS)}]+")

NUMBER_RUN_PATTERN = re.compile(r"[0-9]+")

# Back-to-back scripts leave an empty "$$" between them
EMPTY_MATH_PAIR_PATTERN = re.compile(r"\$\$")


# ==============================================================================
# UNIT PATTERNS
# ==============================================================================

MAGNITUDE_PATTERN = re.compile(
    r"""
    (?P<mantissa>[-+]?\d+(?:\.\d+)?)    # Signed integer or decimal
    (?:
        [ex]                            # Exponent marker
        (?P<exponent>[-+]?\d+)          # Signed exponent
    )?
    """,
    re.VERBOSE,
)

UNIT_TERM_PATTERN = re.compile(
    r"""
    (?P<separator>[./ ])?               # Optional separator
    (?P<symbol>[A-Za-z]+\*?)            # Unit symbol, optionally starred
    (?P<exponent>[-+]?\d+)?             # Optional signed exponent
    """,
    re.VERBOSE,
)

# Characters after a magnitude that already separate it from the first unit
MAGNITUDE_BOUNDARY_CHARACTERS = (".", "/", " ")


# ==============================================================================
# MATH MODE PATTERNS
# ==============================================================================

# A "$" closing a segment that was opened by a macro, e.g. "\mu$" or
# "\times10^{-13}$". Such dollars become "{}" so the macro does not swallow
# the following letter.
MACRO_CLOSING_DOLLAR_PATTERN = re.compile(r"(\\[A-Za-z]+[^$\s]*)\$")

DOLLAR_PATTERN = re.compile(r"\$")


# ==============================================================================
# HOST BUFFER PATTERNS
# ==============================================================================

_ENVIRONMENT_NAMES = "|".join(MATH_ENVIRONMENTS)

# Everything that opens or closes math in a LaTeX buffer, scanned in order
MATH_DELIMITER_PATTERN = re.compile(
    rf"""
    (?P<escaped>\\[$\\])                                    # \$ or \\ (not a delimiter)
    | (?P<display_dollar>\$\$)
    | (?P<dollar>\$)
    | (?P<open_paren>\\\()
    | (?P<close_paren>\\\))
    | (?P<open_bracket>\\\[)
    | (?P<close_bracket>\\\])
    | \\begin\{{(?P<begin_env>(?:{_ENVIRONMENT_NAMES})\*?)\}}
    | \\end\{{(?P<end_env>(?:{_ENVIRONMENT_NAMES})\*?)\}}
    """,
    re.VERBOSE,
)
