"""Sexagesimal formatting engine.

Values are formatted from a float in the unit of their first segment,
degrees for angles and hours for everything else. Given a value equivalent
to 1.23 seconds of arc:

    s, v   1.23″     unit appended
    d      1″.23     unit inserted before the decimal point
    c      1″̣23      unit combined with the decimal point
    x      1.23      space separated segments, no units

m, n, o and h, i, j do the same with the decimal point in the minute or the
first segment. Flags are "+" (always sign), " " (space for sign), "#" (show
all segments), "0" (zero pad) and "-" (left justify within width). Width is
the digit count of the first segment. Precision is the number of decimal
places, 0 to 15. Since width counts digits only, "-" pads between the
digits and the unit symbol: "5  °" for width 3.

Right ascension never renders as 24 hours; a value that rounds up to 24
wraps to 0.

Specifier errors are written into the text, as "%!q(BADVERB)" or
"%!(BADPREC 16)". Values that cannot be represented come out as a run of
asterisks with the reason returned separately as a WidthError.
"""

import logging

from sexagesimal.errors import (
    DegreeOverflowError,
    HourOverflowError,
    WidthError,
)
from sexagesimal.spec import Convention, FormatSpec, Kind, Segment, as_spec
from sexagesimal.split import (
    MAX_PRECISION,
    check_finite,
    decompose,
    scaled_digits,
)
from sexagesimal.units import (
    Symbols,
    UnitSymbols,
    combine_unit,
    get_default_symbols,
    insert_unit,
)

logger = logging.getLogger(__name__)

PLAIN_UNITS = UnitSymbols(" ", " ", "")

# overflow width when even zero can not be formatted
_FALLBACK_WIDTH = 10


class _Formatter:
    def __init__(
        self,
        spec: FormatSpec,
        kind: Kind,
        segment: Segment,
        convention: Convention,
        symbols: Symbols,
    ):
        self.spec = spec
        self.kind = kind
        self.segment = segment
        self.convention = convention
        self.symbols = symbols
        self.prec = spec.prec
        self.width = spec.width
        # right ascension is never displayed with an explicit sign
        self.plus = spec.plus and kind is not Kind.RA
        self.space = spec.space and kind is not Kind.RA
        if convention is Convention.PLAIN:
            self.units = PLAIN_UNITS
        elif kind is Kind.ANGLE:
            self.units = symbols.dms
        else:
            self.units = symbols.hms

    def format(self, hr_deg: float) -> str:
        if self.segment is Segment.SECOND:
            return self._decimal_sec(hr_deg)
        if self.segment is Segment.MINUTE:
            return self._decimal_min(hr_deg)
        return self._decimal_hr_deg(hr_deg)

    def _overflow(self) -> WidthError:
        if self.kind is Kind.ANGLE:
            return DegreeOverflowError()
        return HourOverflowError()

    def _sign(self, neg: bool) -> str:
        if neg:
            return "-"
        if self.plus:
            return "+"
        if self.space:
            return " "
        return ""

    def _pad_first(self, digits: str) -> str:
        if self.spec.minus:
            return digits.ljust(self.width)
        if self.spec.zero:
            return digits.rjust(self.width, "0")
        return digits.rjust(self.width)

    def _fuse(self, r: str, unit: str) -> str:
        if self.convention is Convention.COMBINE:
            return combine_unit(r, unit, self.symbols)
        if self.convention is Convention.INSERT:
            return insert_unit(r, unit, self.symbols)
        return r + unit

    def _decimal_hr_deg(self, hr_deg: float) -> str:
        i = scaled_digits(abs(hr_deg), self.prec)
        if self.kind is Kind.RA:
            i %= 24 * 10**self.prec
        neg = hr_deg < 0
        # at least one place left of the decimal point
        digits = f"{i:0{self.prec + 1}d}"
        if self.width is None:
            r = self._sign(neg) + digits
        else:
            field = self.prec + self.width
            if len(digits) > field:
                raise self._overflow()
            sign = self._sign(neg)
            if not sign and self.kind is not Kind.RA:
                # fixed width keeps a column for the sign
                sign = " "
            if self.spec.minus:
                r = (sign + digits).ljust(field + len(sign))
            elif self.spec.zero:
                r = sign + digits.rjust(field, "0")
            else:
                r = (sign + digits).rjust(field + len(sign))
        if self.prec > 0:
            r = self._insert_decimal(r)
        return self._fuse(r, self.units.first)

    def _insert_decimal(self, r: str) -> str:
        # left justified padding trails the digits
        body = r.rstrip(" ")
        tail = r[len(body) :]
        split = len(body) - self.prec
        return body[:split] + self.symbols.dec_sep + body[split:] + tail

    def _decimal_min(self, hr_deg: float) -> str:
        neg, first, minutes = decompose(hr_deg * 60, self.prec)
        first = self._wrap_hours(first)
        r, elided = self._first_seg(first, neg)
        return r + self._last_seg(minutes, self.units.minute, elided)

    def _decimal_sec(self, hr_deg: float) -> str:
        neg, minutes, sec = decompose(hr_deg * 3600, self.prec)
        first, minute = divmod(minutes, 60)
        first = self._wrap_hours(first)
        r, first_elided = self._first_seg(first, neg)
        min_elided = False
        if self.spec.zero and not first_elided:
            r += f"{minute:02d}{self.units.minute}"
        elif self.width is not None:
            r += f"{minute:2d}{self.units.minute}"
        elif first_elided and minute == 0:
            min_elided = True
        else:
            r += f"{minute}{self.units.minute}"
        return r + self._last_seg(sec, self.units.second, min_elided)

    def _wrap_hours(self, first: int) -> int:
        if self.kind is Kind.RA:
            return first % 24
        return first

    def _first_seg(self, x: int, neg: bool) -> tuple[str, bool]:
        elided = False
        if self.width is not None:
            digits = str(x)
            if len(digits) > self.width:
                raise self._overflow()
            r = self._pad_first(digits) + self.units.first
        elif x > 0 or self.spec.sharp:
            r = f"{x}{self.units.first}"
        else:
            r = ""
            elided = True
        return self._sign(neg) + r, elided

    def _last_seg(self, x: int, unit: str, first: bool) -> str:
        digits = self.prec + 1
        if self.spec.zero and (self.width is not None or not first):
            digits += 1
        r = f"{x:0{digits}d}"
        if self.width is not None and len(r) < self.prec + 2:
            r = " " + r
        if self.prec > 0:
            split = len(r) - self.prec
            r = r[:split] + self.symbols.dec_sep + r[split:]
        return self._fuse(r, unit)


def format_sexagesimal(
    hr_deg: float,
    spec: FormatSpec | str | None = None,
    kind: Kind = Kind.ANGLE,
    symbols: Symbols | None = None,
) -> tuple[str, WidthError | None]:
    """Format hr_deg, a value in degrees or hours, sexagesimally.

    Returns the text and None, or a run of asterisks and the WidthError
    describing why the value could not be formatted. A malformed specifier
    string raises FormatSpecError; an unknown verb or bad precision is
    written into the text.
    """
    spec = as_spec(spec)
    resolved = spec.resolve_verb()
    if resolved is None:
        return f"%!{spec.verb}(BADVERB)", None
    if not 0 <= spec.prec <= MAX_PRECISION:
        return f"%!(BADPREC {spec.prec})", None

    segment, convention = resolved
    formatter = _Formatter(
        spec, kind, segment, convention, symbols or get_default_symbols()
    )
    try:
        check_finite(hr_deg)
        return formatter.format(hr_deg), None
    except WidthError as err:
        logger.debug("Cannot format %r with %r: %s", hr_deg, str(spec), err)
        return _stars(formatter), err


def _stars(formatter: _Formatter) -> str:
    # as many asterisks as a zero value takes under the same specifier
    try:
        mock = formatter.format(0.0)
    except WidthError:
        return "*" * _FALLBACK_WIDTH
    width = len(mock)
    if formatter.symbols.dec_combine:
        width -= mock.count(formatter.symbols.dec_combine)
    return "*" * width

