#!/usr/bin/env python3
"""Tests for unit/molecule classification.

Covers the rule order of the classifier:
- Exception-table keys are always molecules
- Leading float or exponential magnitudes are units
- Whole-word vocabulary symbols are units
- Everything else is a molecule
"""

from sciformat.core.config import FormatterConfig
from sciformat.text_formatting.common import ExpressionKind
from sciformat.text_formatting.detectors import ExpressionClassifier


class TestDefaultVocabulary:
    """Classification with the built-in unit vocabulary."""

    def test_molecules(self, default_config):
        classifier = ExpressionClassifier(default_config)
        test_cases = ["H2O", "C18O", "H2.18O", "C18.H", "NaCl", "Fe2+", "Ca(OH)2", "13CO", "12", ""]

        for raw in test_cases:
            assert classifier.classify(raw) is ExpressionKind.MOLECULE, f"'{raw}' should be a molecule"

    def test_units(self, default_config):
        classifier = ExpressionClassifier(default_config)
        test_cases = ["m2s-2", "erg.cm-2s-1", "km/s", "5m", "mol", "um", "degC", "Hz"]

        for raw in test_cases:
            assert classifier.classify(raw) is ExpressionKind.UNIT, f"'{raw}' should be a unit"

    def test_leading_magnitude_is_unit_without_vocabulary(self):
        classifier = ExpressionClassifier(FormatterConfig(use_builtin_units=False))
        test_cases = ["2.74e-13", "2.", "3x5", "1e5", "6.6E"]

        for raw in test_cases:
            assert classifier.is_unit(raw), f"'{raw}' should be a unit by its leading number"

    def test_symbol_must_stand_alone(self, default_config):
        """A symbol glued to other letters does not count."""
        classifier = ExpressionClassifier(default_config)

        assert classifier.classify("Hm") is ExpressionKind.MOLECULE
        assert classifier.classify("Mg") is ExpressionKind.MOLECULE
        assert classifier.classify("m") is ExpressionKind.UNIT

    def test_vocabulary_is_case_sensitive(self, default_config):
        classifier = ExpressionClassifier(default_config)

        assert classifier.classify("hz") is ExpressionKind.MOLECULE
        assert classifier.classify("Hz") is ExpressionKind.UNIT


class TestConfiguredClassification:
    """Classification driven by user configuration."""

    def test_exception_entry_wins_over_vocabulary(self):
        config = FormatterConfig(exceptions={"m2": "m$_2$"})
        classifier = ExpressionClassifier(config)

        assert classifier.classify("m2") is ExpressionKind.MOLECULE
        assert classifier.classify("m3") is ExpressionKind.UNIT

    def test_exception_entry_wins_over_leading_number(self):
        classifier = ExpressionClassifier(FormatterConfig(exceptions={"2.5H": "x"}))

        assert classifier.classify("2.5H") is ExpressionKind.MOLECULE

    def test_user_units_only(self):
        config = FormatterConfig(units=("erg", "Jy"), use_builtin_units=False)
        classifier = ExpressionClassifier(config)

        assert classifier.classify("erg.cm-2") is ExpressionKind.UNIT
        assert classifier.classify("m2s-2") is ExpressionKind.MOLECULE

    def test_empty_vocabulary(self):
        classifier = ExpressionClassifier(FormatterConfig(use_builtin_units=False))

        assert classifier.vocabulary_pattern is None
        assert classifier.classify("m2") is ExpressionKind.MOLECULE
        assert classifier.classify("2.5m") is ExpressionKind.UNIT

    def test_added_capital_symbol(self):
        """Element-like capitals are opt-in."""
        assert ExpressionClassifier(FormatterConfig()).classify("K") is ExpressionKind.MOLECULE
        assert ExpressionClassifier(FormatterConfig(units=("K",))).classify("K") is ExpressionKind.UNIT
