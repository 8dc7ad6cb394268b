#!/usr/bin/env python3
"""Tests for math-mode vs. text-mode adaptation."""

from sciformat.core.config import FormatterConfig
from sciformat.text_formatting.pipeline import MathModeAdapter


class TestTextMode:
    def test_default_text_mode_is_untouched(self, default_config):
        adapter = MathModeAdapter(default_config)

        for formatted in ["H$_2$O", "m$^2$ s$^{-2}$", "$\\mu$m", ""]:
            assert adapter.adapt(formatted, in_math=False) == formatted

    def test_mathrm_preference_wraps_in_dollars(self):
        adapter = MathModeAdapter(FormatterConfig(use_mathrm=True))

        assert adapter.adapt("H$_2$O", in_math=False) == "$\\mathrm{H_2O}$"
        assert adapter.adapt("m$^2$ s$^{-2}$", in_math=False) == "$\\mathrm{m^2\\,s^{-2}}$"


class TestMathMode:
    def test_inside_math(self, default_config):
        adapter = MathModeAdapter(default_config)
        test_cases = [
            ("H$_2$O", "\\mathrm{H_2O}"),
            ("Fe$_2^+$", "\\mathrm{Fe_2^+}"),
            ("m$^2$ s$^{-2}$", "\\mathrm{m^2\\,s^{-2}}"),
            ("$\\mu$m", "\\mathrm{\\mu{}m}"),
            ("$^\\circ$C", "\\mathrm{^\\circ{}C}"),
            ("$2.74\\times10^{-13}$ erg", "\\mathrm{2.74\\times10^{-13}{}\\,erg}"),
        ]

        for formatted, expected in test_cases:
            result = adapter.adapt(formatted, in_math=True)
            assert result == expected, f"'{formatted}' should adapt to '{expected}', got '{result}'"

    def test_inside_math_ignores_mathrm_preference(self):
        adapter = MathModeAdapter(FormatterConfig(use_mathrm=True))

        assert adapter.adapt("H$_2$O", in_math=True) == "\\mathrm{H_2O}"

    def test_empty_input_stays_empty(self):
        assert MathModeAdapter(FormatterConfig()).adapt("", in_math=True) == ""
        assert MathModeAdapter(FormatterConfig(use_mathrm=True)).adapt("", in_math=False) == ""
        assert MathModeAdapter(FormatterConfig(use_mathrm=True)).adapt("", in_math=True) == ""

    def test_custom_math_space(self):
        adapter = MathModeAdapter(FormatterConfig(math_space="~"))

        assert adapter.adapt("erg cm$^{-2}$", in_math=True) == "\\mathrm{erg~cm^{-2}}"


class TestStripDelimiters:
    def test_macro_closing_dollar_becomes_braces(self, default_config):
        adapter = MathModeAdapter(default_config)

        assert adapter.strip_delimiters("$\\Omega$m") == "\\Omega{}m"
        assert adapter.strip_delimiters("M$_\\odot$") == "M_\\odot{}"
        assert adapter.strip_delimiters("H$_2$O") == "H_2O"
