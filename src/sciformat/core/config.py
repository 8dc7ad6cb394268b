#!/usr/bin/env python3
"""Configuration loader that reads from config files.

Two layers live here:

- ``ConfigLoader`` reads ``~/.sciformat/config.toml`` (or ``$SCIFORMAT_CONFIG``)
  and exposes dotted-path access to the merged settings, like the rest of the
  goobits tools.
- ``FormatterConfig`` is the immutable snapshot the formatter works from. One
  conversion call reads exactly one snapshot; hosts swap snapshots between
  calls when a preference changes.
"""
import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

import tomllib

from ..text_formatting.patterns.components import DEFAULT_UNITS

DEFAULT_CONFIG: dict[str, Any] = {
    "formatting": {
        "isotope_limit": 10,
        "use_builtin_units": True,
        "units": [],
        "exceptions": {},
        "space_string": " ",
        "use_mathrm": False,
        "detect_math_context": True,
        "math_space": "\\,",
    },
    "server": {"host": "localhost", "port": 3214, "max_message_kb": 64},
    "logging": {"level": "INFO"},
}


class ConfigError(ValueError):
    """Raised when configuration values are malformed."""


class UnitSymbol(NamedTuple):
    """A vocabulary entry: the typed symbol and its optional replacement text."""

    symbol: str
    replacement: str | None = None


def _parse_unit_entry(entry: Any) -> UnitSymbol:
    """Accept ``"erg"``, ``["mum", "$\\mu$m"]`` or ``{symbol = .., replacement = ..}``."""
    if isinstance(entry, UnitSymbol):
        unit = entry
    elif isinstance(entry, str):
        unit = UnitSymbol(entry)
    elif isinstance(entry, dict):
        if "symbol" not in entry:
            raise ConfigError(f"Unit entry is missing 'symbol': {entry!r}")
        unit = UnitSymbol(entry["symbol"], entry.get("replacement"))
    elif isinstance(entry, (list, tuple)) and 1 <= len(entry) <= 2:
        unit = UnitSymbol(*entry)
    else:
        raise ConfigError(f"Unrecognized unit entry: {entry!r}")

    if not isinstance(unit.symbol, str) or not unit.symbol:
        raise ConfigError(f"Unit symbols must be non-empty strings, got {unit.symbol!r}")
    if unit.replacement is not None and not isinstance(unit.replacement, str):
        raise ConfigError(f"Replacement for unit {unit.symbol!r} must be a string")
    return unit


@dataclass(frozen=True)
class FormatterConfig:
    """Immutable formatter settings.

    Attributes:
        isotope_limit: Numbers at or above this value are isotope candidates.
        units: User unit vocabulary, in priority order.
        use_builtin_units: Union ``DEFAULT_UNITS`` into the vocabulary.
        exceptions: Exact raw input -> literal output overrides.
        space_string: Text inserted between adjacent unit terms.
        use_mathrm: Wrap results in ``\\mathrm{}`` even outside math.
        detect_math_context: Consult the host's math-context predicate.
        math_space: Replacement for literal spaces inside ``\\mathrm{}``.

    """

    isotope_limit: int = 10
    units: tuple[UnitSymbol, ...] = ()
    use_builtin_units: bool = True
    exceptions: Mapping[str, str] = field(default_factory=dict)
    space_string: str = " "
    use_mathrm: bool = False
    detect_math_context: bool = True
    math_space: str = "\\,"

    def __post_init__(self) -> None:
        if isinstance(self.isotope_limit, bool) or not isinstance(self.isotope_limit, int):
            raise ConfigError(f"isotope_limit must be an integer, got {self.isotope_limit!r}")
        if self.isotope_limit < 0:
            raise ConfigError(f"isotope_limit must not be negative, got {self.isotope_limit}")

        units = tuple(_parse_unit_entry(entry) for entry in self.units)

        exceptions = dict(self.exceptions)
        for key, value in exceptions.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigError(f"Exception entries must map strings to strings: {key!r} -> {value!r}")

        # Frozen dataclass: normalized values go in through object.__setattr__
        object.__setattr__(self, "units", units)
        object.__setattr__(self, "exceptions", MappingProxyType(exceptions))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatterConfig":
        """Build a config from a ``[formatting]`` table, ignoring unknown keys."""
        merged = {**DEFAULT_CONFIG["formatting"], **dict(data)}
        return cls(
            isotope_limit=merged["isotope_limit"],
            units=tuple(merged["units"]),
            use_builtin_units=bool(merged["use_builtin_units"]),
            exceptions=dict(merged["exceptions"]),
            space_string=str(merged["space_string"]),
            use_mathrm=bool(merged["use_mathrm"]),
            detect_math_context=bool(merged["detect_math_context"]),
            math_space=str(merged["math_space"]),
        )

    @property
    def vocabulary(self) -> tuple[UnitSymbol, ...]:
        """Effective vocabulary: user symbols first, then unshadowed built-ins."""
        entries = list(self.units)
        if self.use_builtin_units:
            seen = {unit.symbol for unit in entries}
            entries.extend(UnitSymbol(symbol, replacement) for symbol, replacement in DEFAULT_UNITS if symbol not in seen)
        return tuple(entries)

    @property
    def replacements(self) -> dict[str, str]:
        """Symbol -> replacement text for the vocabulary entries that have one."""
        return {unit.symbol: unit.replacement for unit in self.vocabulary if unit.replacement is not None}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    full_config = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
            sciformat_config = full_config.get("sciformat", {})
        else:
            sciformat_config = {}

        self._config = self._merge_dicts(copy.deepcopy(DEFAULT_CONFIG), sciformat_config)

        env_limit = os.environ.get("SCIFORMAT_ISOTOPE_LIMIT")
        if env_limit:
            try:
                self._config["formatting"]["isotope_limit"] = int(env_limit)
            except ValueError:
                get_logger(__name__).warning(f"Ignoring non-integer SCIFORMAT_ISOTOPE_LIMIT={env_limit!r}")

        self._formatter_config: FormatterConfig | None = None

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("SCIFORMAT_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".sciformat" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                # "exceptions" is a lookup table, not a nested section; replace it wholesale
                merged[key] = value if key == "exceptions" else self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'formatting.isotope_limit')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def formatter_config(self) -> FormatterConfig:
        """Snapshot of the ``[formatting]`` section, built once per loader."""
        if self._formatter_config is None:
            self._formatter_config = FormatterConfig.from_mapping(self.get("formatting", {}))
        return self._formatter_config

    @property
    def server_host(self) -> str:
        return str(self.get("server.host", "localhost"))

    @property
    def server_port(self) -> int:
        return int(self.get("server.port", 3214))

    @property
    def max_message_bytes(self) -> int:
        return int(self.get("server.max_message_kb", 64)) * 1024

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()


# Global singleton instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reload_config(config_path: str | Path | None = None) -> ConfigLoader:
    """Replace the global config loader with a freshly read one."""
    global _config_loader
    _config_loader = ConfigLoader(config_path)
    return _config_loader


# Re-export logging functions
from .logging import get_logger, setup_logging  # noqa: E402, F401
