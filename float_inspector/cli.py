# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# COMMANDS:
# ---------
# 1. Inspect one number in a format:
#    python -m float_inspector.cli inspect 1.5 --format double
#
# 2. Inspect a raw bit pattern of any width (hex, most significant first):
#    python -m float_inspector.cli inspect-hex 3F800000 -e 8 -m 23
#
#    Both inspect commands accept --json to print the fields as JSON.
#
# 3. Collect statistics over several numbers:
#    python -m float_inspector.cli stats 0 1 -1 1e-40 --format single --save
#
# 4. List the known formats:
#    python -m float_inspector.cli formats
#
# Errors from the inspector are printed to stderr, exit status 1.
#
# ==============================================

import argparse
import json
import sys
from typing import List, Optional

from float_inspector.config import get_config
from float_inspector.errors import FloatInspectorError
from float_inspector.extraction import FieldInfo
from float_inspector.formats import FORMATS
from float_inspector.inspector import FloatInspector
from float_inspector.reporting import describe


def _parse_hex(text: str) -> bytes:
    """'0x3F80_0000' -> b'\\x00\\x00\\x80\\x3f' (LSB first)."""
    digits = text.strip().lower().replace("_", "")
    if digits.startswith("0x"):
        digits = digits[2:]
    if len(digits) % 2:
        digits = "0" + digits
    try:
        return bytes.fromhex(digits)[::-1]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a hex bit pattern: {text!r}") from e


def _show(info: FieldInfo, as_json: bool) -> None:
    if as_json:
        print(json.dumps(info.to_dict(), indent=2))
    else:
        print(describe(info), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="float-inspector",
        description="Decompose floating-point values into sign, exponent and mantissa.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_inspect = sub.add_parser("inspect", help="Inspect one number")
    p_inspect.add_argument("value", type=float)
    p_inspect.add_argument("--format", "-f", dest="fmt", default=None,
                           help="Format name (default: FLOAT_INSPECTOR_DEFAULT_FORMAT)")
    p_inspect.add_argument("--json", action="store_true", dest="as_json",
                           help="Print the fields as JSON")

    p_hex = sub.add_parser("inspect-hex", help="Inspect a raw bit pattern")
    p_hex.add_argument("pattern", type=_parse_hex,
                       help="Hex bit pattern, most significant byte first")
    p_hex.add_argument("--exponent-bits", "-e", type=int, required=True)
    p_hex.add_argument("--mantissa-bits", "-m", type=int, required=True)
    p_hex.add_argument("--json", action="store_true", dest="as_json",
                       help="Print the fields as JSON")

    p_stats = sub.add_parser("stats", help="Collect statistics over numbers")
    p_stats.add_argument("values", type=float, nargs="+")
    p_stats.add_argument("--format", "-f", dest="fmt", default=None)
    p_stats.add_argument("--save", action="store_true",
                         help="Write the profile to the stats directory")

    sub.add_parser("formats", help="List known formats")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "formats":
        for fmt in FORMATS.values():
            print(f"{fmt.name:<10} E={fmt.exponent_bit_width:<3} "
                  f"M={fmt.mantissa_bit_width:<3} bytes={fmt.byte_count}")
        return 0

    try:
        inspector = FloatInspector(get_config())

        if args.command == "inspect":
            _show(inspector.inspect(args.value, args.fmt), args.as_json)

        elif args.command == "inspect-hex":
            info = inspector.inspect_bytes(
                args.pattern, args.exponent_bits, args.mantissa_bits
            )
            _show(info, args.as_json)

        elif args.command == "stats":
            inspector.record_many(args.values, args.fmt)
            print(inspector.report(args.fmt), end="")
            if args.save:
                inspector.save()

    except FloatInspectorError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
