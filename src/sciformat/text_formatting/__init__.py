"""Scientific expression formatting: molecules and units to LaTeX."""

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .common import ConversionResult, ExpressionKind, MathOverride, ModeOverride
    from .context import convert_at, is_in_math_context, locate_conversion_span
    from .pipeline import ScientificFormatter, convert

__all__ = [
    "ConversionResult",
    "ExpressionKind",
    "MathOverride",
    "ModeOverride",
    "ScientificFormatter",
    "convert",
    "convert_at",
    "is_in_math_context",
    "locate_conversion_span",
]

# Lazy so that core.config can import pattern data without a cycle
_LAZY_EXPORTS = {
    "ConversionResult": (".common", "ConversionResult"),
    "ExpressionKind": (".common", "ExpressionKind"),
    "MathOverride": (".common", "MathOverride"),
    "ModeOverride": (".common", "ModeOverride"),
    "ScientificFormatter": (".pipeline", "ScientificFormatter"),
    "convert": (".pipeline", "convert"),
    "convert_at": (".context", "convert_at"),
    "is_in_math_context": (".context", "is_in_math_context"),
    "locate_conversion_span": (".context", "locate_conversion_span"),
}


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
