#!/usr/bin/env python3
"""Main scientific expression formatting orchestrator.

The pipeline processes one expression in this order:

1. Resolve the kind (forced by the caller, or classified)
2. Convert with the molecule or unit converter
3. Resolve the math context (forced, host predicate, or plain text)
4. Adapt the formatted fragment to that context
"""

from typing import Callable, Optional, Tuple

from ...core.config import FormatterConfig, get_config, setup_logging
from ..common import ConversionResult, ExpressionKind, MathOverride, ModeOverride
from ..converters import MoleculeConverter, UnitConverter
from ..detectors import ExpressionClassifier
from .math_mode import MathModeAdapter

logger = setup_logging(__name__, log_filename="text_formatting.txt")

MathContextPredicate = Callable[[], bool]


class ScientificFormatter:
    """Formatter bound to one configuration snapshot."""

    def __init__(self, config: Optional[FormatterConfig] = None, math_context: Optional[MathContextPredicate] = None):
        if config is None:
            config = get_config().formatter_config
        self.config = config
        self.math_context = math_context

        self.classifier = ExpressionClassifier(config)
        self.molecule_converter = MoleculeConverter(config)
        self.unit_converter = UnitConverter(config)
        self.math_adapter = MathModeAdapter(config)

    def convert(
        self,
        raw: str,
        mode: ModeOverride = ModeOverride.AUTO,
        math: MathOverride = MathOverride.AUTO,
        math_context: Optional[MathContextPredicate] = None,
    ) -> ConversionResult:
        """Convert one expression.

        Args:
            raw: Expression to convert, e.g. "H2O" or "2.74e-13erg"
            mode: Force molecule or unit handling instead of classifying
            math: Force math-mode output instead of asking the host
            math_context: Per-call predicate overriding the instance one

        Returns:
            ConversionResult with the adapted text and the kind used

        """
        kind = mode.forced_kind or self.classifier.classify(raw)
        logger.debug(f"Converting '{raw}' as {kind.value} (mode={mode.value})")

        if kind is ExpressionKind.UNIT:
            formatted = self.unit_converter.convert(raw)
        else:
            formatted = self.molecule_converter.convert(raw)

        in_math = self._resolve_math_context(math, math_context or self.math_context)
        text = self.math_adapter.adapt(formatted, in_math)

        logger.debug(f"Result for '{raw}': '{text}'")
        return ConversionResult(text=text, kind=kind, in_math=in_math, raw=raw)

    def _resolve_math_context(self, math: MathOverride, predicate: Optional[MathContextPredicate]) -> bool:
        if math is MathOverride.MATH:
            return True
        if not self.config.detect_math_context or predicate is None:
            return False
        try:
            return bool(predicate())
        except Exception as e:
            # An unusable host predicate means "not in math", never a failed conversion
            logger.warning(f"Math context detection failed, assuming text mode: {e}")
            return False


def convert(
    raw: str,
    mode: ModeOverride = ModeOverride.AUTO,
    math: MathOverride = MathOverride.AUTO,
    config: Optional[FormatterConfig] = None,
    math_context: Optional[MathContextPredicate] = None,
) -> Tuple[str, ExpressionKind]:
    """Convert ``raw`` and return ``(text, kind)``."""
    result = ScientificFormatter(config, math_context=math_context).convert(raw, mode=mode, math=math)
    return result.text, result.kind
