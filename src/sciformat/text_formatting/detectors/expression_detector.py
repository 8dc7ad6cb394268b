#!/usr/bin/env python3
"""Decide whether an expression is a physical unit or a molecule."""

from ...core.config import FormatterConfig, setup_logging
from ..common import ExpressionKind
from ..patterns import LEADING_NUMERIC_PATTERN, build_unit_vocabulary_pattern

logger = setup_logging(__name__, log_filename="text_formatting.txt")


class ExpressionClassifier:
    """Classify raw expressions as units or molecules.

    Rules are tried in order and the first match wins:

    1. An exact exception-table key is always a molecule.
    2. A leading float or exponential magnitude ("2.5", "2e-13") is a unit.
    3. A vocabulary symbol standing as a whole letter run is a unit.
    4. Everything else is a molecule.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config
        # Built once per snapshot; the vocabulary never changes under us
        self.vocabulary_pattern = build_unit_vocabulary_pattern(unit.symbol for unit in config.vocabulary)

    def classify(self, raw: str) -> ExpressionKind:
        if raw in self.config.exceptions:
            logger.debug(f"'{raw}' is an exception entry, treating as molecule")
            return ExpressionKind.MOLECULE

        if LEADING_NUMERIC_PATTERN.match(raw):
            logger.debug(f"'{raw}' starts with a float or exponential magnitude")
            return ExpressionKind.UNIT

        if self.vocabulary_pattern is not None:
            match = self.vocabulary_pattern.search(raw)
            if match:
                logger.debug(f"'{raw}' contains unit symbol '{match.group(0)}'")
                return ExpressionKind.UNIT

        return ExpressionKind.MOLECULE

    def is_unit(self, raw: str) -> bool:
        return self.classify(raw) is ExpressionKind.UNIT
