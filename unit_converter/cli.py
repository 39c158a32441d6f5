"""Command-line interface for the unit converter."""

import argparse
import logging
import re
import sys

from unit_converter.config import BASE_UNIT_NAMES, DISPLAY_DECIMALS, LOG_FORMAT, LOG_LEVEL, UNIT_NAMES
from unit_converter.converter import factor, units_in
from unit_converter.form import submit
from unit_converter.models import Category, Unit

_NEGATIVE_NUMBER = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


def _unit_arg(name: str) -> Unit:
    try:
        return Unit.from_name(name, case_sensitive=False)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _precision_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid precision: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError("Precision must be zero or more")
    return value


def _category_arg(name: str) -> Category:
    for category in Category:
        if category.value.lower() == name.strip().lower():
            return category
    choices = ", ".join(c.value for c in Category)
    raise argparse.ArgumentTypeError(f"Unknown category: {name!r}. Choose from: {choices}")


def _quote_negative_values(argv):
    """Prefix numeric tokens such as -1e3 with a space so argparse keeps them positional."""
    quoted = []
    for token in argv:
        if _NEGATIVE_NUMBER.match(token):
            token = " " + token
        quoted.append(token)
    return quoted


# --- Command handlers ---

def cmd_convert(args):
    result = submit(args.value, args.source, args.destination, args.precision)
    if not result.ok:
        print(result.notification, file=sys.stderr)
        sys.exit(1)

    if args.raw:
        print(repr(result.value))
        return
    print(f"{args.value.strip()} {args.source.value} = {result.text} {args.destination.value}")


def cmd_units(args):
    categories = [args.category] if args.category else list(Category)
    for i, category in enumerate(categories):
        if i:
            print()
        base = BASE_UNIT_NAMES.get(category.value)
        header = f"{category.value} (base: {base})" if base else category.value
        print(header)
        print("-" * len(header))
        for unit in units_in(category):
            if base:
                print(f"  {unit.value:<12} {factor(unit):>12g} {base}")
            else:
                print(f"  {unit.value}")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert values between length, weight and temperature units",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert a value")
    convert_p.add_argument("value", help="Numeric value to convert (negative values allowed, e.g. -1e3)")
    convert_p.add_argument("source", type=_unit_arg,
                           help=f"Source unit ({', '.join(UNIT_NAMES)})")
    convert_p.add_argument("destination", type=_unit_arg, help="Destination unit")
    convert_p.add_argument("--precision", type=_precision_arg, default=DISPLAY_DECIMALS,
                           help=f"Decimal places to display (default: {DISPLAY_DECIMALS})")
    convert_p.add_argument("--raw", action="store_true",
                           help="Print the unrounded result")
    convert_p.set_defaults(func=cmd_convert)

    # --- units ---
    units_p = subparsers.add_parser("units", help="List available units")
    units_p.add_argument("--category", type=_category_arg,
                         help="Only list one category (Length, Weight, Temperature)")
    units_p.set_defaults(func=cmd_units)

    return parser


def main(argv=None):
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_quote_negative_values(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()
