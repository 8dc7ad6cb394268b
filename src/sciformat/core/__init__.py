"""Core package exports."""

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ConfigError, ConfigLoader, FormatterConfig, UnitSymbol, get_config

__all__ = ["ConfigError", "ConfigLoader", "FormatterConfig", "UnitSymbol", "get_config"]

_LAZY_EXPORTS = {
    "ConfigError": (".config", "ConfigError"),
    "ConfigLoader": (".config", "ConfigLoader"),
    "FormatterConfig": (".config", "FormatterConfig"),
    "UnitSymbol": (".config", "UnitSymbol"),
    "get_config": (".config", "get_config"),
}


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
