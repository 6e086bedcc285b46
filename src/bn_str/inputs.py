# bn_str/inputs.py

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, NamedTuple

from . import codec
from .errors import InvalidNumberError

HEX_RE = re.compile(r"0x([0-9a-f]*)", re.IGNORECASE)
BIN_RE = re.compile(r"0b([01]*)", re.IGNORECASE)
OCTAL_RE = re.compile(r"0([0-7]*)")
NUMERAL_RE = re.compile(r"[-+]?(\d+(\.\d*)?|\.\d+)(e[-+]?\d+)?", re.IGNORECASE | re.ASCII)

BYTE_TYPES = (bytes, bytearray, memoryview)

_ZERO = Decimal(0)


class Shape(Enum):
    CANONICAL = "canonical"
    BYTES = "bytes"
    BOOLEAN = "boolean"
    NATIVE_NUMBER = "native"
    HEX = "hex"
    BINARY = "binary"
    OCTAL = "octal"
    NUMERAL = "numeral"


class Classified(NamedTuple):
    shape: Shape
    body: Any


def identify(value: Any) -> Classified:
    """Tag ``value`` with its input shape without decoding it."""
    if value is None:
        raise InvalidNumberError("Cannot parse number None")
    if isinstance(value, Decimal):
        return Classified(Shape.CANONICAL, value)
    if isinstance(value, BYTE_TYPES):
        return Classified(Shape.BYTES, bytes(value))
    if isinstance(value, bool):
        return Classified(Shape.BOOLEAN, value)
    if isinstance(value, (int, float)):
        return Classified(Shape.NATIVE_NUMBER, value)
    if isinstance(value, str):
        for shape, pattern in ((Shape.HEX, HEX_RE), (Shape.BINARY, BIN_RE), (Shape.OCTAL, OCTAL_RE)):
            m = pattern.fullmatch(value)
            if m:
                return Classified(shape, m.group(1))
        if NUMERAL_RE.fullmatch(value):
            return Classified(Shape.NUMERAL, value)
        raise InvalidNumberError(f'Cannot parse number "{value}"')
    raise InvalidNumberError(f"Cannot parse number of type {type(value).__name__}")


# ---------------- Decoders, one per shape ----------------
def _from_canonical(value: Decimal) -> Decimal:
    if not value.is_finite():
        raise InvalidNumberError(f'Cannot parse number "{value}"')
    return value


def _from_native(value: int | float) -> Decimal:
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidNumberError(f'Cannot parse number "{value}"')
        # shortest repr, the digits a native number prints with
        return Decimal(repr(value))
    return Decimal(value)


_DECODERS: dict[Shape, Callable[[Any], Decimal]] = {
    Shape.CANONICAL: _from_canonical,
    Shape.BYTES: lambda body: codec.decode(body, codec.BYTES),
    Shape.BOOLEAN: lambda body: Decimal(1 if body else 0),
    Shape.NATIVE_NUMBER: _from_native,
    Shape.HEX: lambda body: codec.decode(body, codec.HEX),
    Shape.BINARY: lambda body: codec.decode(body, codec.BINARY),
    Shape.OCTAL: lambda body: codec.decode(body, codec.OCTAL),
    Shape.NUMERAL: Decimal,
}


def classify(value: Any) -> Decimal:
    """
    Normalize any supported input to a canonical Decimal.

    Accepts Decimal, bytes-like (big-endian), bool, int, float, and strings:
    "0x…", "0b…", "0…" (octal), or plain/exponential numerals. Prefixed
    strings are unsigned; a sign is only read by the numeral grammar. Zero
    always comes back unsigned.
    """
    tagged = identify(value)
    result = _DECODERS[tagged.shape](tagged.body)
    if result.is_zero():
        return _ZERO
    return result
