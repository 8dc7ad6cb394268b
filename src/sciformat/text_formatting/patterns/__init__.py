#!/usr/bin/env python3
"""Public API for regex patterns.

This module provides the public interface for all regex patterns used in
scientific expression formatting. It re-exports everything from components,
static, and builders.
"""

# ==============================================================================
# COMPONENTS - Data constants and helpers
# ==============================================================================
from .components import (
    DEFAULT_UNITS,
    ORTHO_PARA_PREFIXES,
    CHARGE_CHARACTERS,
    SPAN_CHARACTERS,
    MATH_ENVIRONMENTS,
    create_alternation_pattern,
)

# ==============================================================================
# STATIC - Pre-compiled patterns
# ==============================================================================
from .static import (
    # Classification
    LEADING_NUMERIC_PATTERN,
    # Molecules
    ORTHO_PARA_PREFIX_PATTERN,
    ELEMENT_RUN_PATTERN,
    CHARGE_RUN_PATTERN,
    NUMBER_RUN_PATTERN,
    EMPTY_MATH_PAIR_PATTERN,
    # Units
    MAGNITUDE_PATTERN,
    UNIT_TERM_PATTERN,
    MAGNITUDE_BOUNDARY_CHARACTERS,
    # Math mode
    MACRO_CLOSING_DOLLAR_PATTERN,
    DOLLAR_PATTERN,
    # Host buffers
    MATH_DELIMITER_PATTERN,
)

# ==============================================================================
# BUILDERS - Vocabulary-dependent patterns
# ==============================================================================
from .builders import build_unit_vocabulary_pattern

__all__ = [
    "DEFAULT_UNITS",
    "ORTHO_PARA_PREFIXES",
    "CHARGE_CHARACTERS",
    "SPAN_CHARACTERS",
    "MATH_ENVIRONMENTS",
    "create_alternation_pattern",
    "LEADING_NUMERIC_PATTERN",
    "ORTHO_PARA_PREFIX_PATTERN",
    "ELEMENT_RUN_PATTERN",
    "CHARGE_RUN_PATTERN",
    "NUMBER_RUN_PATTERN",
    "EMPTY_MATH_PAIR_PATTERN",
    "MAGNITUDE_PATTERN",
    "UNIT_TERM_PATTERN",
    "MAGNITUDE_BOUNDARY_CHARACTERS",
    "MACRO_CLOSING_DOLLAR_PATTERN",
    "DOLLAR_PATTERN",
    "MATH_DELIMITER_PATTERN",
    "build_unit_vocabulary_pattern",
]
