#!/usr/bin/env python3
"""Host buffer helpers: find the expression at the caret and detect math mode.

Editors hand us a whole buffer plus a caret offset. These helpers find the
expression that ends at the caret, tell whether that spot is already inside
LaTeX math, and splice the converted result back into the buffer.
"""

from typing import Optional, Tuple

from ..core.config import FormatterConfig, setup_logging
from .common import ConversionResult, MathOverride, ModeOverride, Span
from .patterns import MATH_DELIMITER_PATTERN, SPAN_CHARACTERS
from .pipeline import ScientificFormatter

logger = setup_logging(__name__, log_filename="text_formatting.txt")


def _clamp(position: int, text: str) -> int:
    return max(0, min(position, len(text)))


def locate_conversion_span(text: str, position: int) -> Span:
    """Find the expression ending at ``position``.

    Scans backwards over characters an expression may contain. Balanced
    parentheses are part of the expression ("Ca(OH)2"); an unmatched "(" is an
    enclosing bracket and ends the scan ("(H2O" yields "H2O").
    """
    end = _clamp(position, text)
    start = end
    depth = 0

    while start > 0:
        char = text[start - 1]
        if char not in SPAN_CHARACTERS:
            break
        if char == ")":
            depth += 1
        elif char == "(":
            if depth == 0:
                break
            depth -= 1
        start -= 1

    return Span(start, end)


def is_in_math_context(text: str, position: int) -> bool:
    """Tell whether ``position`` sits inside LaTeX math.

    Tracks ``$...$``, ``$$...$$``, ``\\(...\\)``, ``\\[...\\]`` and the usual
    display environments. Escaped dollars are ignored; delimiters of a
    different kind met while already in math are ignored too.
    """
    opened: Optional[str] = None

    for match in MATH_DELIMITER_PATTERN.finditer(text, 0, _clamp(position, text)):
        kind = match.lastgroup
        if kind == "escaped":
            continue

        if kind in ("dollar", "display_dollar"):
            delimiter = match.group(0)
            if opened is None:
                opened = delimiter
            elif opened == delimiter:
                opened = None
        elif kind == "open_paren" and opened is None:
            opened = "\\("
        elif kind == "close_paren" and opened == "\\(":
            opened = None
        elif kind == "open_bracket" and opened is None:
            opened = "\\["
        elif kind == "close_bracket" and opened == "\\[":
            opened = None
        elif kind == "begin_env" and opened is None:
            opened = "env:" + match.group("begin_env")
        elif kind == "end_env" and opened == "env:" + match.group("end_env"):
            opened = None

    return opened is not None


def convert_at(
    text: str,
    position: int,
    config: Optional[FormatterConfig] = None,
    mode: ModeOverride = ModeOverride.AUTO,
    math: MathOverride = MathOverride.AUTO,
) -> Tuple[str, ConversionResult, Span]:
    """Convert the expression ending at ``position`` and splice it back.

    Returns:
        Tuple of (new buffer text, conversion result, replaced span)

    """
    span = locate_conversion_span(text, position)
    raw = text[span.start : span.end]
    if span.is_empty:
        logger.info(f"No expression found before position {position}")

    formatter = ScientificFormatter(config, math_context=lambda: is_in_math_context(text, span.start))
    result = formatter.convert(raw, mode=mode, math=math)
    new_text = text[: span.start] + result.text + text[span.end :]
    return new_text, result, span
