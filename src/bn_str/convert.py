# bn_str/convert.py

from __future__ import annotations

from typing import Any, Iterable

from . import codec
from .inputs import classify
from .engine import to_fixed
from .errors import InvalidNumberError


def to_hex(v: Any, length: int | None = None) -> str:
    """``"0x"`` + lower-case hex digits; ``length`` counts hex digits."""
    return "0x" + codec.encode_str(classify(v), codec.HEX, length)


def to_octal(v: Any, length: int | None = None) -> str:
    return "0" + codec.encode_str(classify(v), codec.OCTAL, length)


def to_binary(v: Any, length: int | None = None) -> str:
    return "0b" + codec.encode_str(classify(v), codec.BINARY, length)


def to_bits(v: Any, length: int | None = None) -> list[int]:
    """Big-endian list of 0/1 ints; ``length`` counts bits."""
    return codec.encode(classify(v), codec.BITS, length)


def to_buffer(v: Any, length: int | None = None) -> bytes:
    """Big-endian bytes; ``length`` counts bytes."""
    return bytes(codec.encode(classify(v), codec.BYTES, length))


def from_bits(bits: Iterable[int]) -> str:
    """Inverse of to_bits: read a big-endian 0/1 sequence as a numeral."""
    if bits is None:
        raise InvalidNumberError("Cannot parse bits None")
    return to_fixed(codec.decode(bits, codec.BITS))
