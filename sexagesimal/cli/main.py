import argparse
import sys

from sexagesimal import __version__
from sexagesimal.cli.commands import run_format, run_split, run_strip
from sexagesimal.spec import Kind


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to config TOML file")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "error"],
        help="Enable logging at the given level",
    )
    parser.add_argument("--json", action="store_true", help="Output result as JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sexagesimal")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command")

    format_parser = subparsers.add_parser("format", help="Format a value sexagesimally")
    format_parser.add_argument(
        "--kind",
        choices=[k.value for k in Kind],
        default=Kind.ANGLE.value,
        help="Value type (default: angle)",
    )
    value = format_parser.add_mutually_exclusive_group(required=True)
    value.add_argument("--rad", type=float, help="Value in radians")
    value.add_argument("--deg", type=float, help="Value in degrees")
    value.add_argument("--hours", type=float, help="Value in hours")
    value.add_argument("--sec", type=float, help="Time value in seconds")
    value.add_argument(
        "--sexa",
        nargs=3,
        metavar=("FIRST", "MIN", "SEC"),
        help="Sexagesimal components; a leading '-' on FIRST makes the value negative",
    )
    format_parser.add_argument(
        "--spec", default=None, help="Format specifier, e.g. '+0.2c' (default from config)"
    )
    format_parser.add_argument(
        "--ascii", action="store_true", help="Use ASCII unit symbols"
    )
    _add_common(format_parser)

    split_parser = subparsers.add_parser("split", help="Split a number into x60 and a decimal segment")
    split_parser.add_argument("x", type=float, help="Number to split")
    split_parser.add_argument("--prec", type=int, default=0, help="Decimal places (0-15)")
    split_parser.add_argument("--pad", action="store_true", help="Zero pad the segment to two digits")
    _add_common(split_parser)

    strip_parser = subparsers.add_parser("strip", help="Remove a unit symbol from a formatted number")
    strip_parser.add_argument("text", help="Formatted number, e.g. 1°.25")
    strip_parser.add_argument("--unit", required=True, help="Unit symbol to remove")
    _add_common(strip_parser)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"sexagesimal {__version__}")
        return 0

    if args.command == "format":
        return run_format(args)

    if args.command == "split":
        return run_split(args)

    if args.command == "strip":
        return run_strip(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
