import enum
import re
from dataclasses import dataclass
from typing import Optional

from sexagesimal.errors import FormatSpecError


class Kind(enum.Enum):
    ANGLE = "angle"
    HOUR_ANGLE = "hour-angle"
    RA = "ra"
    TIME = "time"


class Segment(enum.Enum):
    """Which segment carries the decimal point."""

    SECOND = "second"
    MINUTE = "minute"
    FIRST = "first"


class Convention(enum.Enum):
    """How the unit symbol is placed on the decimal-bearing segment."""

    APPEND = "append"
    COMBINE = "combine"
    INSERT = "insert"
    PLAIN = "plain"


DEFAULT_VERB = "v"

VERBS: dict[str, tuple[Segment, Convention]] = {
    "v": (Segment.SECOND, Convention.APPEND),
    "s": (Segment.SECOND, Convention.APPEND),
    "c": (Segment.SECOND, Convention.COMBINE),
    "d": (Segment.SECOND, Convention.INSERT),
    "m": (Segment.MINUTE, Convention.APPEND),
    "n": (Segment.MINUTE, Convention.COMBINE),
    "o": (Segment.MINUTE, Convention.INSERT),
    "h": (Segment.FIRST, Convention.APPEND),
    "i": (Segment.FIRST, Convention.COMBINE),
    "j": (Segment.FIRST, Convention.INSERT),
    # space separated, no unit symbols
    "x": (Segment.SECOND, Convention.PLAIN),
}

_SPEC_RE = re.compile(
    r"(?P<flags>[-+ #0]*)(?P<width>[0-9]+)?(?:\.(?P<prec>[0-9]*))?(?P<verb>.)?",
    re.DOTALL,
)


@dataclass(frozen=True)
class FormatSpec:
    verb: str = DEFAULT_VERB
    precision: Optional[int] = None
    width: Optional[int] = None
    plus: bool = False
    space: bool = False
    sharp: bool = False
    zero: bool = False
    minus: bool = False

    @property
    def prec(self) -> int:
        return 0 if self.precision is None else self.precision

    def resolve_verb(self) -> tuple[Segment, Convention] | None:
        return VERBS.get(self.verb)

    def __str__(self) -> str:
        flags = "".join(
            c
            for c, on in (
                ("-", self.minus),
                ("+", self.plus),
                (" ", self.space),
                ("#", self.sharp),
                ("0", self.zero),
            )
            if on
        )
        width = "" if self.width is None else str(self.width)
        prec = "" if self.precision is None else f".{self.precision}"
        return f"{flags}{width}{prec}{self.verb}"


def parse_spec(text: str) -> FormatSpec:
    """Parse a specifier of the form [flags][width][.precision][verb].

    Only the syntax is checked here. An unknown verb or out of range
    precision parses fine and is reported by the formatter.
    """
    match = _SPEC_RE.fullmatch(text)
    if match is None:
        raise FormatSpecError(f"Invalid format specifier: {text!r}")
    flags = match.group("flags")
    width = match.group("width")
    prec = match.group("prec")
    return FormatSpec(
        verb=match.group("verb") or DEFAULT_VERB,
        precision=None if prec is None else int(prec or 0),
        width=None if width is None else int(width),
        plus="+" in flags,
        space=" " in flags,
        sharp="#" in flags,
        zero="0" in flags,
        minus="-" in flags,
    )


def as_spec(spec: "FormatSpec | str | None") -> FormatSpec:
    if spec is None:
        return FormatSpec()
    if isinstance(spec, FormatSpec):
        return spec
    return parse_spec(spec)
