"""sciformat - Typeset molecules and physical units for LaTeX."""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("goobits-sciformat")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .core.config import ConfigLoader, FormatterConfig, get_config
    from .text_formatting.common import ConversionResult, ExpressionKind, MathOverride, ModeOverride
    from .text_formatting.context import convert_at
    from .text_formatting.pipeline import ScientificFormatter, convert

_LAZY_EXPORTS = {
    "ConfigLoader": (".core.config", "ConfigLoader"),
    "FormatterConfig": (".core.config", "FormatterConfig"),
    "get_config": (".core.config", "get_config"),
    "ConversionResult": (".text_formatting.common", "ConversionResult"),
    "ExpressionKind": (".text_formatting.common", "ExpressionKind"),
    "MathOverride": (".text_formatting.common", "MathOverride"),
    "ModeOverride": (".text_formatting.common", "ModeOverride"),
    "ScientificFormatter": (".text_formatting.pipeline", "ScientificFormatter"),
    "convert": (".text_formatting.pipeline", "convert"),
    "convert_at": (".text_formatting.context", "convert_at"),
}


def __getattr__(name):
    if name in {"core", "text_formatting", "service"}:
        module = import_module(f".{name}", __name__)
        globals()[name] = module
        return module

    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = [
    "ConfigLoader",
    "FormatterConfig",
    "get_config",
    "ConversionResult",
    "ExpressionKind",
    "MathOverride",
    "ModeOverride",
    "ScientificFormatter",
    "convert",
    "convert_at",
]
