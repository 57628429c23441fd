"""Main CLI entry point for ieeeio."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .. import __version__
from ..codec.decoder import unpack_float
from ..codec.encoder import pack_float
from ..exceptions import IeeeioError
from ..formats import FORMATS, ByteOrder, get_format
from .breakdown import describe_bits, parse_hex


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the ieeeio CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="ieeeio",
        description="ieeeio: Portable binary integer and IEEE-754 float I/O",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ieeeio --decode "40 09 21 fb 54 44 2d 18"          Decode a big-endian double
  ieeeio --encode -0.025 --format binary32 --order little
  ieeeio --inspect 00000001 --format binary32       Show the fields of a value
  ieeeio --version                                  Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--decode", metavar="HEX", type=str, help="Decode hex bytes to a number")
    action.add_argument("--encode", metavar="VALUE", type=str, help="Encode a number to hex bytes")
    action.add_argument(
        "--inspect",
        metavar="HEX",
        type=str,
        help="Show sign, exponent and significand fields of hex bytes",
    )

    parser.add_argument(
        "--format",
        choices=sorted(FORMATS),
        default="binary64",
        help="IEEE-754 layout (default: binary64)",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in ByteOrder],
        default=ByteOrder.BIG.value,
        help="Byte order (default: big)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"ieeeio {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    fmt = get_format(args.format)
    order = ByteOrder.coerce(args.order)

    try:
        if args.decode is not None:
            print(repr(unpack_float(parse_hex(args.decode), fmt, order)))
            return 0

        if args.encode is not None:
            try:
                value = float(args.encode)
            except ValueError:
                print(f"Error: Not a number: {args.encode!r}", file=sys.stderr)
                return 1
            print(pack_float(value, fmt, order).hex(" "))
            return 0

        if args.inspect is not None:
            print(describe_bits(parse_hex(args.inspect), fmt, order))
            return 0
    except IeeeioError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
