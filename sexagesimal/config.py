from pathlib import Path
from typing import TYPE_CHECKING

from sexagesimal.units import (
    COMBINING_DOT_BELOW,
    DMS_UNITS,
    HMS_UNITS,
    Symbols,
    UnitSymbols,
    set_default_symbols,
)

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "sexagesimal" / "config.toml"


def _unit_symbols(value, default: UnitSymbols) -> UnitSymbols:
    if value is None:
        return default
    if isinstance(value, str) or len(value) != 3:
        raise ValueError(f"Expected three unit symbols, got {value!r}")
    return UnitSymbols(*(str(v) for v in value))


class Config:
    def __init__(self, data: dict):
        self._data = data

    @property
    def dms_units(self) -> UnitSymbols:
        return _unit_symbols(self._data.get("units", {}).get("dms", None), DMS_UNITS)

    @property
    def hms_units(self) -> UnitSymbols:
        return _unit_symbols(self._data.get("units", {}).get("hms", None), HMS_UNITS)

    @property
    def decimal_separator(self):
        return self._data.get("units", {}).get("decimal_separator", ".")

    @property
    def combining_mark(self):
        return self._data.get("units", {}).get("combining_mark", COMBINING_DOT_BELOW)

    @property
    def format_spec(self):
        return self._data.get("format", {}).get("spec", "")

    @property
    def symbols(self) -> Symbols:
        return Symbols(
            dms=self.dms_units,
            hms=self.hms_units,
            dec_sep=self.decimal_separator,
            dec_combine=self.combining_mark,
        )

    def apply(self) -> Symbols:
        """Install the configured symbols as the process default."""
        symbols = self.symbols
        set_default_symbols(symbols)
        return symbols


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Return default config if default file missing
        return Config({})

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Config(data)
