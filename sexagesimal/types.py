import logging
import math
from dataclasses import dataclass

from sexagesimal.errors import WidthError
from sexagesimal.formatter import format_sexagesimal
from sexagesimal.spec import FormatSpec, Kind
from sexagesimal.split import dms_to_deg, pmod
from sexagesimal.units import Symbols

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def _astropy_units():
    try:
        import astropy.units as u
    except ImportError as exc:
        raise ImportError(
            "astropy is required for Quantity conversion. "
            "Install with: pip install sexagesimal[astropy]"
        ) from exc
    return u


class _Sexagesimal:
    """Formatting shared by the value types.

    Subclasses set KIND and implement _hr_deg, the value in degrees or
    hours of their first segment.
    """

    KIND: Kind

    def _hr_deg(self) -> float:
        raise NotImplementedError

    def format(
        self, spec: FormatSpec | str | None = None, symbols: Symbols | None = None
    ) -> tuple[str, WidthError | None]:
        return format_sexagesimal(self._hr_deg(), spec, self.KIND, symbols)

    def __format__(self, format_spec: str) -> str:
        text, err = self.format(format_spec)
        if err is not None:
            logger.debug("%s formatted as overflow: %s", type(self).__name__, err)
        return text

    def __str__(self) -> str:
        return self.format()[0]

    def _same(self, other) -> bool:
        return type(other) is type(self)


@dataclass(frozen=True, order=True)
class Angle(_Sexagesimal):
    """A general purpose angle, in radians."""

    rad: float
    KIND = Kind.ANGLE

    @classmethod
    def from_dms(cls, neg: bool, d: int, m: int, s: float) -> "Angle":
        return cls(math.radians(dms_to_deg(neg, d, m, s)))

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        return cls(math.radians(deg))

    @classmethod
    def from_min(cls, m: float) -> "Angle":
        return cls(math.radians(m / 60))

    @classmethod
    def from_sec(cls, s: float) -> "Angle":
        return cls(math.radians(s / 3600))

    @classmethod
    def from_quantity(cls, q) -> "Angle":
        u = _astropy_units()
        return cls(float(q.to_value(u.rad)))

    @property
    def deg(self) -> float:
        return math.degrees(self.rad)

    @property
    def min(self) -> float:
        return math.degrees(self.rad) * 60

    @property
    def sec(self) -> float:
        return math.degrees(self.rad) * 3600

    def to_quantity(self):
        u = _astropy_units()
        return self.rad * u.rad

    def _hr_deg(self) -> float:
        return self.deg

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return Angle(self.rad + other.rad)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return Angle(self.rad - other.rad)

    def __neg__(self) -> "Angle":
        return Angle(-self.rad)


@dataclass(frozen=True, order=True)
class HourAngle(_Sexagesimal):
    """An angle of Earth rotation, in radians, formatted as hours."""

    rad: float
    KIND = Kind.HOUR_ANGLE

    @classmethod
    def from_hms(cls, neg: bool, h: int, m: int, s: float) -> "HourAngle":
        return cls(math.radians(dms_to_deg(neg, h, m, s) * 15))

    @classmethod
    def from_hours(cls, hours: float) -> "HourAngle":
        return cls(hours * math.pi / 12)

    @classmethod
    def from_min(cls, m: float) -> "HourAngle":
        return cls(m / 60 * math.pi / 12)

    @classmethod
    def from_sec(cls, s: float) -> "HourAngle":
        return cls(s / 3600 * math.pi / 12)

    @classmethod
    def from_quantity(cls, q) -> "HourAngle":
        u = _astropy_units()
        return cls(float(q.to_value(u.rad)))

    @property
    def hour(self) -> float:
        return self.rad * 12 / math.pi

    @property
    def min(self) -> float:
        return self.rad * 60 * 12 / math.pi

    @property
    def sec(self) -> float:
        return self.rad * 3600 * 12 / math.pi

    def to_quantity(self):
        u = _astropy_units()
        return self.hour * u.hourangle

    def _hr_deg(self) -> float:
        return self.hour

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return HourAngle(self.rad + other.rad)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return HourAngle(self.rad - other.rad)

    def __neg__(self) -> "HourAngle":
        return HourAngle(-self.rad)


@dataclass(frozen=True, order=True)
class RA(_Sexagesimal):
    """Right ascension, in radians, always in the range [0, 2π).

    Sign flags are ignored when formatting and there is no negation.
    An HourAngle may be added or subtracted, giving a new RA. The
    difference of two RAs is an HourAngle.
    """

    rad: float
    KIND = Kind.RA

    def __post_init__(self):
        # non-finite values are kept so formatting can report them
        if math.isfinite(self.rad):
            object.__setattr__(self, "rad", pmod(self.rad, TWO_PI))

    @classmethod
    def from_hms(cls, h: int, m: int, s: float) -> "RA":
        """Construct from components, wrapping to the range [0, 24) hours."""
        hours = pmod(dms_to_deg(False, h, m, s), 24)
        return cls(math.radians(hours * 15))

    @classmethod
    def from_deg(cls, deg: float) -> "RA":
        return cls(math.radians(deg))

    @classmethod
    def from_hours(cls, hours: float) -> "RA":
        return cls(hours * math.pi / 12)

    @classmethod
    def from_min(cls, m: float) -> "RA":
        return cls(m / 60 * math.pi / 12)

    @classmethod
    def from_sec(cls, s: float) -> "RA":
        return cls(s / 3600 * math.pi / 12)

    @classmethod
    def from_quantity(cls, q) -> "RA":
        u = _astropy_units()
        return cls(float(q.to_value(u.rad)))

    @property
    def deg(self) -> float:
        return math.degrees(self.rad)

    @property
    def hour(self) -> float:
        return self.rad * 12 / math.pi

    @property
    def min(self) -> float:
        return self.rad * 60 * 12 / math.pi

    @property
    def sec(self) -> float:
        return self.rad * 3600 * 12 / math.pi

    def to_quantity(self):
        u = _astropy_units()
        return self.hour * u.hourangle

    def _hr_deg(self) -> float:
        hour = self.hour
        if math.isfinite(hour):
            return pmod(hour, 24)
        return hour

    def __add__(self, other):
        if not isinstance(other, HourAngle):
            return NotImplemented
        return RA(self.rad + other.rad)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, HourAngle):
            return RA(self.rad - other.rad)
        if self._same(other):
            return HourAngle(self.rad - other.rad)
        return NotImplemented


@dataclass(frozen=True, order=True)
class Time(_Sexagesimal):
    """A duration or relative time, in seconds."""

    sec: float
    KIND = Kind.TIME

    @classmethod
    def from_hms(cls, neg: bool, h: int, m: int, s: float) -> "Time":
        t = s + (h * 60 + m) * 60
        return cls(-t if neg else t)

    @classmethod
    def from_min(cls, m: float) -> "Time":
        return cls(m * 60)

    @classmethod
    def from_hours(cls, hours: float) -> "Time":
        return cls(hours * 3600)

    @classmethod
    def from_days(cls, days: float) -> "Time":
        return cls(days * 86400)

    @classmethod
    def from_rad(cls, rad: float) -> "Time":
        """Time from an angle of rotation, 2π being one day."""
        return cls(rad * 12 * 3600 / math.pi)

    @classmethod
    def from_quantity(cls, q) -> "Time":
        u = _astropy_units()
        return cls(float(q.to_value(u.s)))

    @property
    def min(self) -> float:
        return self.sec / 60

    @property
    def hour(self) -> float:
        return self.sec / 3600

    @property
    def day(self) -> float:
        return self.sec / 86400

    @property
    def rad(self) -> float:
        """Time as an angle, one day being 2π."""
        return self.sec * math.pi / 12 / 3600

    def to_quantity(self):
        u = _astropy_units()
        return self.sec * u.s

    def _hr_deg(self) -> float:
        return self.hour

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return Time(self.sec + other.sec)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return Time(self.sec - other.sec)

    def __neg__(self) -> "Time":
        return Time(-self.sec)


def format_value(
    value: _Sexagesimal,
    spec: FormatSpec | str | None = None,
    symbols: Symbols | None = None,
) -> tuple[str, WidthError | None]:
    """Format any of the value types, returning text and overflow error."""
    return value.format(spec, symbols)
