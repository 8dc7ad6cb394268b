#!/usr/bin/env python3
"""Adapt formatted fragments to math-mode or text-mode typesetting."""

from ...core.config import FormatterConfig, setup_logging
from ..patterns import DOLLAR_PATTERN, MACRO_CLOSING_DOLLAR_PATTERN

logger = setup_logging(__name__, log_filename="text_formatting.txt")


class MathModeAdapter:
    """Turn per-segment ``$...$`` output into a single ``\\mathrm{}`` run when needed.

    In plain text with the default preferences the formatter's output already
    stands on its own and is returned untouched. Inside math, or when the
    ``use_mathrm`` preference is set, the dollars are dropped and the whole
    result is wrapped in ``\\mathrm{...}`` (and in one ``$...$`` pair when we
    are not already inside math).
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    def adapt(self, formatted: str, in_math: bool) -> str:
        # Nothing to typeset: an empty result never grows a \mathrm{} shell
        if not formatted or (not in_math and not self.config.use_mathrm):
            return formatted

        body = self.strip_delimiters(formatted)
        body = body.replace(" ", self.config.math_space)
        result = f"\\mathrm{{{body}}}"
        if not in_math:
            result = f"${result}$"

        logger.debug(f"Adapted '{formatted}' -> '{result}' (in_math={in_math})")
        return result

    def strip_delimiters(self, formatted: str) -> str:
        """Remove ``$`` delimiters; dollars closing a macro become ``{}``."""
        text = MACRO_CLOSING_DOLLAR_PATTERN.sub(r"\1{}", formatted)
        return DOLLAR_PATTERN.sub("", text)
