#!/usr/bin/env python3
"""Formatting pipeline: math-mode adaptation and orchestration."""

from .formatter import ScientificFormatter, convert
from .math_mode import MathModeAdapter

__all__ = ["MathModeAdapter", "ScientificFormatter", "convert"]
