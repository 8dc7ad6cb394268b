#!/usr/bin/env python3
"""Vocabulary-aware pattern builders.

The unit vocabulary is configurable, so the pattern that spots unit symbols
is built per configuration snapshot rather than at import time.
"""

import re
from re import Pattern
from typing import Iterable, Optional

from .components import create_alternation_pattern


# ==============================================================================
# UNIT VOCABULARY PATTERN
# ==============================================================================

def build_unit_vocabulary_pattern(symbols: Iterable[str]) -> Optional[Pattern]:
    """Build a case-sensitive pattern matching any symbol as a whole letter run.

    A symbol only counts when it is not glued to further letters on either
    side: "m" matches in "m2s-2" and "5m" but not in "Hm" or "mol".

    Args:
        symbols: Unit symbols to recognize

    Returns:
        Compiled pattern, or None when the vocabulary is empty

    """
    alternation = create_alternation_pattern(symbol for symbol in symbols if symbol)
    if not alternation:
        return None

    return re.compile(
        rf"""
        (?<![A-Za-z])       # Not preceded by a letter
        (?:{alternation})   # Any vocabulary symbol, longest first
        (?![A-Za-z])        # Not followed by a letter
        """,
        re.VERBOSE,
    )
