#!/usr/bin/env python3
"""End-to-end tests for the scientific formatter.

Exercises the whole pipeline: classification, the molecule and unit
converters, math-context resolution and math-mode adaptation.
"""

import logging

from sciformat.core.config import FormatterConfig
from sciformat.text_formatting import ExpressionKind, MathOverride, ModeOverride, ScientificFormatter, convert


class TestReferenceConversions:
    """Reference conversions with the default configuration."""

    def test_reference_conversions(self, formatter):
        test_cases = [
            ("H2O", "H$_2$O", ExpressionKind.MOLECULE),
            ("C18O", "C$^{18}$O", ExpressionKind.MOLECULE),
            ("H2.18O", "H$_2${}$^{18}$O", ExpressionKind.MOLECULE),
            ("C18.H", "C$_{18}$H", ExpressionKind.MOLECULE),
            ("m2s-2", "m$^2$ s$^{-2}$", ExpressionKind.UNIT),
            ("2.74e-13", "$2.74\\times10^{-13}$", ExpressionKind.UNIT),
            ("erg.cm-2s-1", "erg cm$^{-2}$ s$^{-1}$", ExpressionKind.UNIT),
        ]

        for raw, expected_text, expected_kind in test_cases:
            result = formatter.convert(raw)
            assert result.text == expected_text, f"'{raw}' should format to '{expected_text}', got '{result.text}'"
            assert result.kind is expected_kind, f"'{raw}' should be a {expected_kind.value}"
            assert result.raw == raw
            assert result.in_math is False

    def test_empty_input(self, formatter):
        result = formatter.convert("")

        assert result.text == ""
        assert result.kind is ExpressionKind.MOLECULE

    def test_empty_input_in_math(self):
        assert ScientificFormatter(FormatterConfig()).convert("", math=MathOverride.MATH).text == ""
        assert ScientificFormatter(FormatterConfig(use_mathrm=True)).convert("").text == ""

    def test_long_digit_run_does_not_raise(self, formatter):
        result = formatter.convert("C" + "1" * 5000)

        assert result.text.startswith("C$^{1")
        assert result.kind is ExpressionKind.MOLECULE


class TestOverrides:
    """Caller-forced kinds and math mode."""

    def test_force_molecule(self, formatter):
        result = formatter.convert("m2", mode=ModeOverride.MOLECULE)

        assert result.text == "m$_2$"
        assert result.kind is ExpressionKind.MOLECULE

    def test_force_unit(self, formatter):
        result = formatter.convert("H2O", mode=ModeOverride.UNIT)

        assert result.text == "H$^2$ O"
        assert result.kind is ExpressionKind.UNIT

    def test_force_math(self, formatter):
        result = formatter.convert("H2O", math=MathOverride.MATH)

        assert result.text == "\\mathrm{H_2O}"
        assert result.in_math is True

    def test_force_math_wins_over_disabled_detection(self):
        formatter = ScientificFormatter(FormatterConfig(detect_math_context=False))

        assert formatter.convert("H2O", math=MathOverride.MATH).text == "\\mathrm{H_2O}"

    def test_exception_entry(self):
        formatter = ScientificFormatter(FormatterConfig(exceptions={"CH3OH": "methanol"}))

        result = formatter.convert("CH3OH")
        assert result.text == "methanol"
        assert result.kind is ExpressionKind.MOLECULE

        assert formatter.convert("CH3OH", math=MathOverride.MATH).text == "\\mathrm{methanol}"


class TestMathContextPredicate:
    """The host-supplied "is the caret inside math?" predicate."""

    def test_instance_predicate(self, default_config):
        formatter = ScientificFormatter(default_config, math_context=lambda: True)

        result = formatter.convert("um")
        assert result.text == "\\mathrm{\\mu{}m}"
        assert result.in_math is True

    def test_per_call_predicate_overrides_instance_predicate(self, default_config):
        formatter = ScientificFormatter(default_config, math_context=lambda: True)

        assert formatter.convert("H2O", math_context=lambda: False).text == "H$_2$O"

    def test_detection_disabled_ignores_predicate(self):
        formatter = ScientificFormatter(FormatterConfig(detect_math_context=False), math_context=lambda: True)

        result = formatter.convert("H2O")
        assert result.text == "H$_2$O"
        assert result.in_math is False

    def test_failing_predicate_falls_back_to_text_mode(self, default_config, caplog):
        def broken():
            raise RuntimeError("editor went away")

        formatter = ScientificFormatter(default_config, math_context=broken)
        with caplog.at_level(logging.WARNING):
            result = formatter.convert("H2O")

        assert result.text == "H$_2$O"
        assert result.in_math is False
        assert "editor went away" in caplog.text

    def test_mathrm_preference_outside_math(self):
        formatter = ScientificFormatter(FormatterConfig(use_mathrm=True))

        assert formatter.convert("H2O").text == "$\\mathrm{H_2O}$"


class TestModuleLevelConvert:
    def test_returns_text_and_kind(self, default_config):
        assert convert("H2O", config=default_config) == ("H$_2$O", ExpressionKind.MOLECULE)
        assert convert("m2s-2", config=default_config) == ("m$^2$ s$^{-2}$", ExpressionKind.UNIT)

    def test_uses_global_config_by_default(self):
        text, kind = convert("C18O")

        assert text == "C$^{18}$O"
        assert kind is ExpressionKind.MOLECULE

    def test_isotope_limit_snapshot(self):
        config = FormatterConfig(isotope_limit=20)

        assert convert("C18O", config=config) == ("C$_{18}$O", ExpressionKind.MOLECULE)
