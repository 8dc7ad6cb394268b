#!/usr/bin/env python3
"""Converters turning classified expressions into ``$``-escaped LaTeX."""

from .molecule_converter import MoleculeConverter
from .unit_converter import UnitConverter

__all__ = ["MoleculeConverter", "UnitConverter"]
