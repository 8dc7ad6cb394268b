#!/usr/bin/env python3
"""Tests for host buffer helpers: span location, math detection, splicing."""

import pytest

from sciformat.core.config import FormatterConfig
from sciformat.text_formatting import ExpressionKind, MathOverride, ModeOverride
from sciformat.text_formatting.common import Span
from sciformat.text_formatting.context import convert_at, is_in_math_context, locate_conversion_span


class TestLocateConversionSpan:
    def test_spans(self):
        test_cases = [
            ("Water is H2O", 12, Span(9, 12)),
            ("Water is H2O and more", 12, Span(9, 12)),
            ("(H2O", 4, Span(1, 4)),
            ("Ca(OH)2", 7, Span(0, 7)),
            ("x = 2.74e-13erg.cm-2s-1", 23, Span(4, 23)),
            ("flux in W/m2", 12, Span(8, 12)),
            ("H2O", 99, Span(0, 3)),
            ("Hello ", 6, Span(6, 6)),
            ("", 0, Span(0, 0)),
        ]

        for text, position, expected in test_cases:
            result = locate_conversion_span(text, position)
            assert result == expected, f"Span in '{text}' at {position} should be {expected}, got {result}"

    def test_empty_span(self):
        assert locate_conversion_span("a, ", 3).is_empty
        assert not locate_conversion_span("a, H2O", 6).is_empty


class TestIsInMathContext:
    @pytest.mark.parametrize(
        "text",
        [
            "$x + H2O",
            "$$ a H2O",
            "\\(a + H2O",
            "\\[ H2O",
            "\\begin{equation} H2O",
            "\\begin{align*} x &= H2O",
            "$ a \\( b H2O",
        ],
    )
    def test_inside_math(self, text):
        assert is_in_math_context(text, len(text))

    @pytest.mark.parametrize(
        "text",
        [
            "plain H2O",
            "$H2O$ and H2O",
            "$$ a $$ H2O",
            "\\( a \\) H2O",
            "\\begin{align*} x \\end{align*} H2O",
            "costs \\$5 and H2O",
            "$ a \\( b $ H2O",
        ],
    )
    def test_outside_math(self, text):
        assert not is_in_math_context(text, len(text))

    def test_position_limits_the_scan(self):
        text = "H2O then $x$"

        assert not is_in_math_context(text, 3)
        assert is_in_math_context(text, 10)


class TestConvertAt:
    def test_splices_result(self, default_config):
        new_text, result, span = convert_at("Water is H2O and more", 12, config=default_config)

        assert new_text == "Water is H$_2$O and more"
        assert result.kind is ExpressionKind.MOLECULE
        assert span == Span(9, 12)

    def test_inside_math_uses_mathrm(self, default_config):
        new_text, result, _ = convert_at("$x + m2s-2", 10, config=default_config)

        assert new_text == "$x + \\mathrm{m^2\\,s^{-2}}"
        assert result.in_math is True
        assert result.kind is ExpressionKind.UNIT

    def test_detection_disabled(self):
        new_text, result, _ = convert_at("$x + H2O", 8, config=FormatterConfig(detect_math_context=False))

        assert new_text == "$x + H$_2$O"
        assert result.in_math is False

    def test_overrides_are_passed_through(self, default_config):
        new_text, result, _ = convert_at(
            "see m2", 6, config=default_config, mode=ModeOverride.MOLECULE, math=MathOverride.MATH
        )

        assert new_text == "see \\mathrm{m_2}"
        assert result.kind is ExpressionKind.MOLECULE

    def test_nothing_to_convert(self, default_config):
        new_text, result, span = convert_at("Hello, ", 7, config=default_config)

        assert new_text == "Hello, "
        assert result.text == ""
        assert span.is_empty

    def test_nothing_to_convert_leaves_math_buffers_alone(self, default_config):
        test_cases = [
            ("$x = $", 5, default_config, MathOverride.AUTO),
            ("Hello, ", 7, default_config, MathOverride.MATH),
            ("Hello, ", 7, FormatterConfig(use_mathrm=True), MathOverride.AUTO),
        ]

        for text, position, config, math in test_cases:
            new_text, result, span = convert_at(text, position, config=config, math=math)
            assert new_text == text, f"'{text}' at {position} should be unchanged, got '{new_text}'"
            assert result.text == ""
            assert span.is_empty
