#!/usr/bin/env python3
"""Molecule tokenizer and formatter.

Digits inside a molecule are ambiguous: "H2O" wants a subscript, "C18O" an
isotope superscript. The scanner resolves this with the isotope limit and two
pieces of explicit state carried through the loop:

- ``previous_was_separator``: the last consumed token was a "." separator,
  which forces the next number up into a superscript;
- ``next_is_separator``: the character right after a number is ".", which
  forces that number down into a subscript.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ...core.config import FormatterConfig, setup_logging
from ..common import Token, TokenType, subscript, superscript
from ..patterns import (
    CHARGE_RUN_PATTERN,
    ELEMENT_RUN_PATTERN,
    EMPTY_MATH_PAIR_PATTERN,
    NUMBER_RUN_PATTERN,
    ORTHO_PARA_PREFIX_PATTERN,
)

logger = setup_logging(__name__, log_filename="text_formatting.txt")


@dataclass
class _ScanState:
    previous_was_separator: bool = False
    emitted: bool = False


Matcher = Callable[[str, int, _ScanState], Optional[Token]]


def _reaches_limit(digits: str, limit: int) -> bool:
    """``int(digits) >= limit`` without converting arbitrarily long runs."""
    significant = digits.lstrip("0") or "0"
    limit_digits = str(limit)
    if len(significant) != len(limit_digits):
        return len(significant) > len(limit_digits)
    return significant >= limit_digits


class MoleculeConverter:
    """Format chemical formulas with sub- and superscripts."""

    def __init__(self, config: FormatterConfig):
        self.config = config
        # Priority order matters: the first matcher that accepts a position wins
        self._matchers: List[Matcher] = [
            self._match_prefix,
            self._match_element_run,
            self._match_charge_run,
            self._match_number_run,
            self._match_space,
            self._match_dot,
            self._match_literal,
        ]

    def convert(self, raw: str) -> str:
        """Format ``raw`` into its ``$``-escaped form.

        Exception-table entries are returned verbatim.
        """
        if raw in self.config.exceptions:
            return self.config.exceptions[raw]

        tokens = self.tokenize(raw)
        assembled = "".join(token.rendered for token in tokens)
        result = EMPTY_MATH_PAIR_PATTERN.sub("", assembled)
        logger.debug(f"Molecule '{raw}' -> '{result}'")
        return result

    def tokenize(self, raw: str) -> List[Token]:
        """Split ``raw`` into rendered tokens, left to right."""
        tokens: List[Token] = []
        state = _ScanState()
        pos = 0

        while pos < len(raw):
            for matcher in self._matchers:
                token = matcher(raw, pos, state)
                if token is not None:
                    break

            # Spaces are invisible to the separator lookbehind
            if token.type == TokenType.DOT:
                state.previous_was_separator = True
            elif token.type != TokenType.SEPARATOR:
                state.previous_was_separator = False
            if token.rendered:
                state.emitted = True

            tokens.append(token)
            pos += len(token.text)

        return tokens

    # ------------------------------------------------------------------
    # Matchers
    # ------------------------------------------------------------------

    def _match_prefix(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        if pos != 0:
            return None
        match = ORTHO_PARA_PREFIX_PATTERN.match(raw)
        if not match:
            return None
        return Token(TokenType.ELEMENT_RUN, match.group(0), pos, rendered=match.group(0))

    def _match_element_run(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        match = ELEMENT_RUN_PATTERN.match(raw, pos)
        if not match:
            return None
        return Token(TokenType.ELEMENT_RUN, match.group(0), pos, rendered=match.group(0))

    def _match_charge_run(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        match = CHARGE_RUN_PATTERN.match(raw, pos)
        if not match:
            return None
        return Token(TokenType.CHARGE_RUN, match.group(0), pos, rendered=superscript(match.group(0)))

    def _match_number_run(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        match = NUMBER_RUN_PATTERN.match(raw, pos)
        if not match:
            return None

        text = match.group(0)
        token = Token(TokenType.NUMBER_RUN, text, pos)
        next_is_separator = raw.startswith(".", match.end())

        if not state.emitted:
            # Leading number: an isotope prefix such as "13CO"
            is_isotope = True
        elif next_is_separator:
            is_isotope = False
        else:
            is_isotope = state.previous_was_separator or _reaches_limit(text, self.config.isotope_limit)

        token.rendered = superscript(text) if is_isotope else subscript(text)
        return token

    def _match_space(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        if raw[pos] != " ":
            return None
        return Token(TokenType.SEPARATOR, " ", pos)

    def _match_dot(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        if raw[pos] != ".":
            return None
        # "{}" keeps two adjacent scripts apart; before a letter nothing is needed
        rendered = "{}" if NUMBER_RUN_PATTERN.match(raw, pos + 1) else ""
        return Token(TokenType.DOT, ".", pos, rendered=rendered)

    def _match_literal(self, raw: str, pos: int, state: _ScanState) -> Optional[Token]:
        return Token(TokenType.LITERAL, raw[pos], pos, rendered=raw[pos])
