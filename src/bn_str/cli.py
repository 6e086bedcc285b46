# bn_str/cli.py
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Any, Callable, Iterable, Sequence

from . import ALIASES, arith, convert
from .__about__ import __version__

logger = logging.getLogger(__name__)

OPERATIONS: dict[str, Callable[..., Any]] = {
    name: getattr(arith, name)
    for name in (
        "expand", "add", "sub", "mul", "div", "idiv", "mod", "pow", "sqrt",
        "log", "ln", "exp", "neg", "abs", "int", "round", "sign",
        "eq", "ne", "gt", "gte", "lt", "lte", "cmp",
        "sum", "min", "max", "clamp", "split", "sd", "dp", "to_number",
    )
}
OPERATIONS.update(
    (name, getattr(convert, name))
    for name in ("to_hex", "to_octal", "to_binary", "to_bits", "to_buffer", "from_bits")
)

# trailing arguments that are counts (length, sd/dp digits), not numbers
COUNT_ARG_OPS = {"sd", "dp", "to_hex", "to_octal", "to_binary", "to_bits", "to_buffer"}

SUBCOMMANDS = ("number", "calc")

# argparse reads these as positionals, not options
NEGATIVE_NUMBER_RE = re.compile(r"-\d+|-\d*\.\d+")


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _as_hex_per_byte(data: bytes) -> list[str]:
    return [f"{b:02x}" for b in data]

def _resolve_op(name: str) -> tuple[str, Callable[..., Any]]:
    canonical = ALIASES.get(name, name)
    try:
        return canonical, OPERATIONS[canonical]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown operation: {name}") from None

def _call_args(op: str, args: list[str]) -> list[Any]:
    if op == "from_bits":
        return [[int(a) for a in args]]
    if op in COUNT_ARG_OPS and len(args) > 1:
        return [args[0]] + [int(a) for a in args[1:]]
    return list(args)


# ---------- subcommands ----------
def cmd_number(args: argparse.Namespace) -> int:
    value = args.value
    length = args.length

    # build every view first so a failure prints nothing
    # --length counts bytes here; the bit view gets 8 bits per byte
    data = convert.to_buffer(value, length)
    views = [
        ("Decimal", arith.expand(value)),
        ("Hex", convert.to_hex(value, length)),
        ("Octal", convert.to_octal(value, length)),
        ("Binary", convert.to_binary(value, length)),
        ("Bytes", _as_hex_per_byte(data)),
        ("Bits", [str(b) for b in convert.to_bits(value, length * 8 if length else None)]),
        ("Length", str(len(data))),
    ]
    for key, text in views:
        _print_kv(key, text)
    return 0


def cmd_calc(args: argparse.Namespace) -> int:
    op, func = _resolve_op(args.op)
    call_args = _call_args(op, args.args)
    logger.debug("calc %s%r", op, tuple(call_args))
    result = func(*call_args)

    if isinstance(result, arith.Parts):
        _print_kv("Sign", result.sign)
        _print_kv("Integer", result.integer)
        _print_kv("Fraction", result.fraction)
    elif isinstance(result, bytes):
        _print_kv("Bytes", _as_hex_per_byte(result))
    elif isinstance(result, list):
        _print_kv("Bits", [str(b) for b in result])
    else:
        print(result)
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bn-str",
        description="Big number strings ⇆ hex/octal/binary/bytes (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sp = p.add_subparsers(dest="cmd")

    # number
    pn = sp.add_parser("number", help="show one number in every base")
    pn.add_argument("value", help="number (dec, 1.5e3, 0x… / 0b… / 0…)")
    pn.add_argument(
        "--length", type=int, default=None,
        help="digits to keep/pad; negative keeps the high digits (bytes for the byte view)"
    )
    pn.set_defaults(func=cmd_number)

    # calc
    pc = sp.add_parser("calc", help="run an operation, e.g. `calc add 0x10 1.5`")
    pc.add_argument("op", help="operation name or alias (" + ", ".join(sorted(OPERATIONS)) + ")")
    pc.add_argument("args", nargs="*", help="operands")
    pc.set_defaults(func=cmd_calc)

    return p


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Convenience: `bn-str 0x8d75f7` behaves like `bn-str number 0x8d75f7`.
    positional = [
        i for i, a in enumerate(argv)
        if not a.startswith("-") or NEGATIVE_NUMBER_RE.fullmatch(a)
    ]
    if positional and argv[positional[0]] not in SUBCOMMANDS:
        argv.insert(positional[0], "number")

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    _setup_logging(args.verbose)
    try:
        return args.func(args)
    except (ValueError, TypeError, argparse.ArgumentTypeError) as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
