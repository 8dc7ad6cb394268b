#!/usr/bin/env python3
"""Shared types for the scientific expression formatter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional


class ExpressionKind(Enum):
    """What an input expression was read as."""

    UNIT = "unit"
    MOLECULE = "molecule"


class ModeOverride(Enum):
    """Caller's choice between automatic classification and a forced kind."""

    AUTO = "auto"
    MOLECULE = "molecule"
    UNIT = "unit"

    @property
    def forced_kind(self) -> Optional[ExpressionKind]:
        if self is ModeOverride.MOLECULE:
            return ExpressionKind.MOLECULE
        if self is ModeOverride.UNIT:
            return ExpressionKind.UNIT
        return None


class MathOverride(Enum):
    """Caller's choice between detecting math context and forcing it on."""

    AUTO = "auto"
    MATH = "math"


class TokenType(Enum):
    """Token kinds produced by the molecule tokenizer."""

    ELEMENT_RUN = "element_run"
    CHARGE_RUN = "charge_run"
    NUMBER_RUN = "number_run"
    SEPARATOR = "separator"  # discarded space
    DOT = "dot"
    LITERAL = "literal"


@dataclass
class Token:
    """A molecule token with its rendered output.

    Tokens form a flat, insertion-ordered list; ``rendered`` is what the token
    contributes to the formatted string (empty for discarded tokens).
    """

    type: TokenType
    text: str
    start: int
    rendered: str = ""


class SeparatorKind(Enum):
    """Separator preceding a unit term."""

    NONE = "none"
    DOT = "."
    SLASH = "/"

    @classmethod
    def from_text(cls, text: Optional[str]) -> "SeparatorKind":
        if text == "/":
            return cls.SLASH
        if text in (".", " "):
            return cls.DOT
        return cls.NONE


@dataclass(frozen=True)
class UnitTerm:
    """One ``symbol[exponent]`` term of a unit expression."""

    separator: SeparatorKind
    symbol: str
    exponent: Optional[str] = None


@dataclass(frozen=True)
class Magnitude:
    """Leading numeric magnitude of a unit expression."""

    mantissa: str
    exponent: Optional[str] = None

    @property
    def is_exponential(self) -> bool:
        return self.exponent is not None


@dataclass
class UnitTokenization:
    """Result of scanning a unit expression.

    ``remainder`` holds trailing text no term pattern could consume; it is
    empty when the whole input was understood.
    """

    magnitude: Optional[Magnitude] = None
    terms: List[UnitTerm] = field(default_factory=list)
    remainder: str = ""

    @property
    def is_complete(self) -> bool:
        return not self.remainder


@dataclass
class ConversionResult:
    """Final output of one conversion call."""

    text: str
    kind: ExpressionKind
    in_math: bool = False
    raw: str = ""


class Span(NamedTuple):
    """Half-open ``[start, end)`` character range in a host buffer."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


def superscript(text: str) -> str:
    """Render ``text`` as a ``$^...$`` fragment, braced when longer than one char."""
    return f"$^{{{text}}}$" if len(text) > 1 else f"$^{text}$"


def subscript(text: str) -> str:
    """Render ``text`` as a ``$_...$`` fragment, braced when longer than one char."""
    return f"$_{{{text}}}$" if len(text) > 1 else f"$_{text}$"
