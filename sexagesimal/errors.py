class SexagesimalError(Exception):
    """Base exception for sexagesimal errors."""


class FormatSpecError(SexagesimalError, ValueError):
    """Raised when a format specifier string cannot be parsed."""


class WidthError(SexagesimalError):
    """A value could not be formatted under an otherwise valid specifier.

    Formatters render these as a run of asterisks and report the instance
    out-of-band rather than raising it.
    """

    message = "Overflow"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidPrecisionError(WidthError):
    message = "Invalid precision"


class LossOfPrecisionError(WidthError):
    message = "Possible loss of precision"


class DegreeOverflowError(WidthError):
    message = "Degrees overflow width"


class HourOverflowError(WidthError):
    message = "Hours overflow width"


class PositiveInfinityError(WidthError):
    message = "+Inf"


class NegativeInfinityError(WidthError):
    message = "-Inf"


class NaNError(WidthError):
    message = "NaN"
