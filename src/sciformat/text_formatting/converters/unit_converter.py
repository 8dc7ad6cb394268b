#!/usr/bin/env python3
"""Unit expression tokenizer and formatter.

A unit expression is an optional leading magnitude followed by a run of
``[separator]symbol[exponent]`` terms::

    2.74e-13erg.cm-2s-1  ->  $2.74\\times10^{-13}$ erg cm$^{-2}$ s$^{-1}$
"""

from typing import List

from ...core.config import FormatterConfig, setup_logging
from ..common import Magnitude, SeparatorKind, UnitTerm, UnitTokenization, superscript
from ..patterns import MAGNITUDE_BOUNDARY_CHARACTERS, MAGNITUDE_PATTERN, UNIT_TERM_PATTERN

logger = setup_logging(__name__, log_filename="text_formatting.txt")


class UnitConverter:
    """Format physical unit expressions."""

    def __init__(self, config: FormatterConfig):
        self.config = config
        self.replacements = config.replacements

    def tokenize(self, raw: str) -> UnitTokenization:
        """Split ``raw`` into a magnitude, unit terms and any unparsed remainder."""
        result = UnitTokenization()
        rest = raw

        match = MAGNITUDE_PATTERN.match(rest)
        if match:
            result.magnitude = Magnitude(match.group("mantissa"), match.group("exponent"))
            rest = rest[match.end() :]
            # Give the term loop a boundary to consume after the number
            if rest and not rest.startswith(MAGNITUDE_BOUNDARY_CHARACTERS):
                rest = "." + rest

        pos = 0
        while pos < len(rest):
            match = UNIT_TERM_PATTERN.match(rest, pos)
            if not match:
                break
            result.terms.append(
                UnitTerm(
                    separator=SeparatorKind.from_text(match.group("separator")),
                    symbol=match.group("symbol"),
                    exponent=match.group("exponent"),
                )
            )
            pos = match.end()

        result.remainder = rest[pos:]
        if result.remainder:
            logger.warning(f"Unit expression '{raw}' has unparsed trailing text '{result.remainder}'")

        return result

    def convert(self, raw: str) -> str:
        """Format ``raw`` into its ``$``-escaped form.

        Unparsed trailing text is kept verbatim at the end of the output so
        that no input characters disappear silently.
        """
        tokenization = self.tokenize(raw)
        pieces: List[str] = []

        if tokenization.magnitude is not None:
            pieces.append(self.render_magnitude(tokenization.magnitude))

        for term in tokenization.terms:
            if pieces:
                pieces.append(self.render_separator(term.separator))
            pieces.append(self.render_term(term))

        pieces.append(tokenization.remainder)
        result = "".join(pieces)
        logger.debug(f"Unit '{raw}' -> '{result}'")
        return result

    def render_magnitude(self, magnitude: Magnitude) -> str:
        if magnitude.is_exponential:
            return f"${magnitude.mantissa}\\times10^{{{magnitude.exponent}}}$"
        return magnitude.mantissa

    def render_separator(self, separator: SeparatorKind) -> str:
        if separator is SeparatorKind.SLASH:
            return "/"
        return self.config.space_string

    def render_term(self, term: UnitTerm) -> str:
        symbol = self.replacements.get(term.symbol, term.symbol)
        if term.exponent:
            return symbol + superscript(term.exponent)
        return symbol
