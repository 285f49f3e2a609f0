import math
from typing import Tuple

from sexagesimal.errors import (
    InvalidPrecisionError,
    LossOfPrecisionError,
    NaNError,
    NegativeInfinityError,
    PositiveInfinityError,
)

MAX_PRECISION = 15

# 52 mantissa bits in a float64
_MAX_EXACT = 1 << 52

# powers of ten exactly representable as float64
_TENF = tuple(10.0**p for p in range(MAX_PRECISION + 1))
_TENI = tuple(10**p for p in range(MAX_PRECISION + 1))


def pmod(x: float, y: float) -> float:
    r = x % y
    # tiny negative x rounds up to y itself
    if r == y:
        r = 0.0
    return r


def dms_to_deg(neg: bool, d: int, m: int, s: float) -> float:
    """Convert sign, degree, minute, second components to decimal degrees.

    Components are terms of a sum and are not range checked, so 90 minutes
    is the same as 1 degree 30 minutes.
    """
    x = ((d * 60 + m) * 60 + s) / 3600.0
    return -x if neg else x


def check_finite(x: float) -> None:
    if math.isnan(x):
        raise NaNError()
    if math.isinf(x):
        if x > 0:
            raise PositiveInfinityError()
        raise NegativeInfinityError()


def check_precision(prec: int) -> None:
    if prec < 0 or prec > MAX_PRECISION:
        raise InvalidPrecisionError()


def scaled_digits(x: float, prec: int) -> int:
    """Return the significant digits of non-negative x at a precision.

    The result is int(x * 10**prec + .5), as long as every digit of it is
    significant given float64 representation.
    """
    xs = x * _TENF[prec] + 0.5
    if not xs <= _MAX_EXACT:
        raise LossOfPrecisionError()
    return int(xs)


def decompose(x: float, prec: int) -> Tuple[bool, int, int]:
    """Split x into sign, a quotient of 60 and a remainder scaled by 10**prec."""
    neg = x < 0
    scaled = scaled_digits(abs(x), prec)
    p60 = 60 * _TENI[prec]
    return neg, scaled // p60, scaled % p60


def decimal_digits(value: int, prec: int, digits: int, dec_sep: str = ".") -> str:
    r = f"{value:0{digits}d}"
    if prec > 0:
        split = len(r) - prec
        r = r[:split] + dec_sep + r[split:]
    return r


def split60(x: float, prec: int, pad: bool = False) -> Tuple[bool, int, str]:
    """Split a decimal segment from a number to be formatted sexagesimally.

    Returns (neg, x60, seg). neg is True when x < 0; x60 and seg are then
    non-negative and x60 * 60 + seg == abs(x) to the requested precision.
    seg is a string in the range [0, 60) with prec digits after the
    decimal point and at least one digit before it, two when pad is set.

    seg is rounded for the precision. Converting it back to a float and
    continuing to compute with it risks results like 23′60″.

    Precision is limited to 15, and is only valid at 15 for magnitudes
    below about 4.5. The usable precision drops as the magnitude grows:
    one degree expressed in seconds allows 12 digits, 360 degrees allows 9.

    Raises NaNError, PositiveInfinityError, NegativeInfinityError,
    InvalidPrecisionError or LossOfPrecisionError.
    """
    check_finite(x)
    check_precision(prec)
    neg, x60, rem = decompose(x, prec)
    digits = prec + 2 if pad else prec + 1
    return neg, x60, decimal_digits(rem, prec, digits)
