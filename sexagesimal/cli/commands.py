import datetime
import json
import logging
import math
import sys
from pathlib import Path

from sexagesimal.config import load_config
from sexagesimal.errors import FormatSpecError, WidthError
from sexagesimal.spec import Kind
from sexagesimal.split import split60
from sexagesimal.types import RA, Angle, HourAngle, Time
from sexagesimal.units import ASCII_SYMBOLS, strip_unit

logger = logging.getLogger(__name__)


def _json_envelope(command: str, ok: bool, data=None, error=None) -> dict:
    return {
        "ok": ok,
        "command": command,
        "timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "data": data,
        "error": error,
    }


def _init_logging(level: str | None) -> None:
    if not level:
        return
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
    }
    logging.basicConfig(level=level_map.get(level, logging.INFO))


def _config_path_from_args(args) -> Path | None:
    if args is None:
        return None
    path = getattr(args, "config", None)
    return Path(path) if path else None


def _fail(command: str, args, code: str, message: str, exit_code: int) -> int:
    if getattr(args, "json", False):
        payload = _json_envelope(
            command=command,
            ok=False,
            data=None,
            error={"code": code, "message": message, "details": None},
        )
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(message, file=sys.stderr)
    return exit_code


def _parse_sexa(parts: list[str]) -> tuple[bool, int, int, float]:
    first, minute, second = parts
    neg = first.strip().startswith("-")
    return neg, abs(int(first)), int(minute), float(second)


def build_value(kind: Kind, args):
    """Build a value of the requested kind from parsed command line args."""
    if getattr(args, "sexa", None):
        neg, a, m, s = _parse_sexa(args.sexa)
        if kind is Kind.ANGLE:
            return Angle.from_dms(neg, a, m, s)
        if kind is Kind.HOUR_ANGLE:
            return HourAngle.from_hms(neg, a, m, s)
        if kind is Kind.TIME:
            return Time.from_hms(neg, a, m, s)
        if neg:
            raise ValueError("Right ascension can not be negative")
        return RA.from_hms(a, m, s)

    if getattr(args, "sec", None) is not None:
        if kind is not Kind.TIME:
            raise ValueError("--sec is only valid with --kind time")
        return Time(args.sec)

    if getattr(args, "deg", None) is not None:
        rad = math.radians(args.deg)
    elif getattr(args, "hours", None) is not None:
        rad = args.hours * math.pi / 12
    else:
        rad = args.rad

    if kind is Kind.ANGLE:
        return Angle(rad)
    if kind is Kind.HOUR_ANGLE:
        return HourAngle(rad)
    if kind is Kind.RA:
        return RA(rad)
    return Time.from_rad(rad)


def run_format(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    config = load_config(_config_path_from_args(args))
    symbols = ASCII_SYMBOLS if getattr(args, "ascii", False) else config.symbols
    spec = args.spec if args.spec is not None else config.format_spec
    kind = Kind(args.kind)

    try:
        value = build_value(kind, args)
        text, err = value.format(spec, symbols)
    except FormatSpecError as e:
        return _fail("format", args, "bad_spec", str(e), 2)
    except ValueError as e:
        return _fail("format", args, "bad_value", str(e), 2)

    if text.startswith("%!"):
        return _fail("format", args, "bad_spec", text, 2)

    logger.debug("Formatted %r with %r as %r", value, spec, text)
    if getattr(args, "json", False):
        payload = _json_envelope(
            command="format",
            ok=err is None,
            data={"kind": kind.value, "spec": spec, "text": text},
            error=None
            if err is None
            else {"code": type(err).__name__, "message": str(err), "details": None},
        )
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(text)
        if err is not None:
            print(f"Overflow: {err}", file=sys.stderr)
    return 0 if err is None else 1


def run_split(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    try:
        neg, x60, seg = split60(args.x, args.prec, args.pad)
    except WidthError as e:
        return _fail("split", args, type(e).__name__, str(e), 1)

    if getattr(args, "json", False):
        payload = _json_envelope(
            command="split",
            ok=True,
            data={"neg": neg, "x60": x60, "seg": seg},
            error=None,
        )
        print(json.dumps(payload, indent=2))
    else:
        sign = "-" if neg else ""
        print(f"{sign}{x60} {seg}")
    return 0


def run_strip(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    config = load_config(_config_path_from_args(args))
    stripped = strip_unit(args.text, args.unit, config.symbols)

    if getattr(args, "json", False):
        payload = _json_envelope(
            command="strip",
            ok=True,
            data={"text": args.text, "unit": args.unit, "stripped": stripped},
            error=None,
        )
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(stripped)
    return 0
