from .errors import (
    SexagesimalError,
    FormatSpecError,
    WidthError,
    InvalidPrecisionError,
    LossOfPrecisionError,
    DegreeOverflowError,
    HourOverflowError,
    PositiveInfinityError,
    NegativeInfinityError,
    NaNError,
)
from .split import split60, dms_to_deg, pmod
from .units import (
    UnitSymbols,
    Symbols,
    DMS_UNITS,
    HMS_UNITS,
    DMS_ASCII,
    HMS_ASCII,
    DEFAULT_SYMBOLS,
    ASCII_SYMBOLS,
    get_default_symbols,
    set_default_symbols,
    insert_unit,
    combine_unit,
    strip_unit,
)
from .spec import FormatSpec, Kind, parse_spec
from .formatter import format_sexagesimal
from .types import Angle, HourAngle, RA, Time, format_value

__version__ = "0.1.0"

__all__ = [
    "SexagesimalError",
    "FormatSpecError",
    "WidthError",
    "InvalidPrecisionError",
    "LossOfPrecisionError",
    "DegreeOverflowError",
    "HourOverflowError",
    "PositiveInfinityError",
    "NegativeInfinityError",
    "NaNError",
    "split60",
    "dms_to_deg",
    "pmod",
    "UnitSymbols",
    "Symbols",
    "DMS_UNITS",
    "HMS_UNITS",
    "DMS_ASCII",
    "HMS_ASCII",
    "DEFAULT_SYMBOLS",
    "ASCII_SYMBOLS",
    "get_default_symbols",
    "set_default_symbols",
    "insert_unit",
    "combine_unit",
    "strip_unit",
    "FormatSpec",
    "Kind",
    "parse_spec",
    "format_sexagesimal",
    "Angle",
    "HourAngle",
    "RA",
    "Time",
    "format_value",
]
