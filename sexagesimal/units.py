import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

COMBINING_DOT_BELOW = "̣"


@dataclass(frozen=True)
class UnitSymbols:
    first: str
    minute: str
    second: str


DMS_UNITS = UnitSymbols("°", "′", "″")
HMS_UNITS = UnitSymbols("ʰ", "ᵐ", "ˢ")
DMS_ASCII = UnitSymbols("d", "m", "s")
HMS_ASCII = UnitSymbols("h", "m", "s")


@dataclass(frozen=True)
class Symbols:
    """Unit and decimal indicators used when formatting.

    Multi-character and empty unit symbols are valid. dec_combine should be
    a nonspacing mark (Unicode category Mn).
    """

    dms: UnitSymbols = field(default=DMS_UNITS)
    hms: UnitSymbols = field(default=HMS_UNITS)
    dec_sep: str = "."
    dec_combine: str = COMBINING_DOT_BELOW


DEFAULT_SYMBOLS = Symbols()
ASCII_SYMBOLS = Symbols(dms=DMS_ASCII, hms=HMS_ASCII)

_default_symbols = DEFAULT_SYMBOLS


def get_default_symbols() -> Symbols:
    return _default_symbols


def set_default_symbols(symbols: Symbols | None) -> Symbols:
    """Replace the symbols used when none are passed explicitly.

    Meant to be called once at start up. Changing the default while other
    threads are formatting is not supported. Passing None restores
    DEFAULT_SYMBOLS. The previous default is returned.
    """
    global _default_symbols
    previous = _default_symbols
    _default_symbols = symbols if symbols is not None else DEFAULT_SYMBOLS
    logger.debug("Default symbols set to %r", _default_symbols)
    return previous


def insert_unit(d: str, unit: str, symbols: Symbols | None = None) -> str:
    """Insert a unit indicator into a formatted decimal number.

    The unit goes just before the first decimal separator, or at the end of
    d if there is no separator.
    """
    sep = (symbols or _default_symbols).dec_sep
    i = d.find(sep) if sep else -1
    if i < 0:
        return d + unit
    return d[:i] + unit + d[i:]


def combine_unit(d: str, unit: str, symbols: Symbols | None = None) -> str:
    """Insert a unit indicator, combining it with the decimal separator.

    The first decimal separator is replaced with the unit followed by the
    combining mark. Without a separator the unit is simply appended.
    """
    symbols = symbols or _default_symbols
    sep = symbols.dec_sep
    i = d.find(sep) if sep else -1
    if i < 0:
        return d + unit
    return d[:i] + unit + symbols.dec_combine + d[i + len(sep) :]


def strip_unit(d: str, unit: str, symbols: Symbols | None = None) -> str:
    """Reverse insert_unit or combine_unit.

    Removes the unit and restores a following combining mark to the decimal
    separator. Strings not in either form are returned unchanged.
    """
    symbols = symbols or _default_symbols
    if not unit:
        return d
    xu = d.find(unit)
    if xu < 0:
        return d
    xd = xu + len(unit)
    if xd == len(d):
        return d[:xu]
    if symbols.dec_sep and d.startswith(symbols.dec_sep, xd):
        return d[:xu] + d[xd:]
    if symbols.dec_combine and d.startswith(symbols.dec_combine, xd):
        return d[:xu] + symbols.dec_sep + d[xd + len(symbols.dec_combine) :]
    return d
