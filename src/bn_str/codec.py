# bn_str/codec.py

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Sequence

from .errors import EncodingDomainError, InvalidNumberError


# ---------------- Alphabets ----------------
class Alphabet:
    """Ordered digit symbols; a symbol's index is its digit value."""

    __slots__ = ("symbols", "fold_case", "_values")

    def __init__(self, symbols: Iterable[Any], *, fold_case: bool = False):
        self.symbols = tuple(symbols)
        self.fold_case = fold_case
        self._values = {sym: i for i, sym in enumerate(self.symbols)}
        if len(self._values) != len(self.symbols):
            raise ValueError("alphabet symbols must be distinct")

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> Any:
        return self.symbols[0]

    def value_of(self, symbol: Any) -> int:
        if self.fold_case and isinstance(symbol, str):
            symbol = symbol.lower()
        try:
            return self._values[symbol]
        except (KeyError, TypeError):
            raise InvalidNumberError(
                f"{symbol!r} is not a base-{self.base} digit"
            ) from None

    def __repr__(self) -> str:
        return f"Alphabet(base={self.base})"


HEX = Alphabet("0123456789abcdef", fold_case=True)
OCTAL = Alphabet("01234567")
BINARY = Alphabet("01")
BITS = Alphabet((0, 1))
BYTES = Alphabet(range(256))


# ---------------- Length policy ----------------
def check_length(length: int | None) -> int | None:
    if length is None:
        return None
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"length must be an integer, got {length!r}")
    return length


def apply_length(digits: Sequence[Any], length: int | None, zero: Any) -> list[Any]:
    """
    Truncate or pad a big-endian digit list to a requested length.

    - ``None`` or 0: natural length.
    - ``length > 0``: keep the ``length`` least-significant digits, left-pad
      with ``zero`` when short.
    - ``length < 0``: keep the ``-length`` most-significant digits, right-pad
      with ``zero`` when short.
    """
    length = check_length(length)
    if not length:
        return list(digits)

    width = abs(length)
    if length > 0:
        kept = list(digits[-width:])
        return [zero] * (width - len(kept)) + kept
    kept = list(digits[:width])
    return kept + [zero] * (width - len(kept))


# ---------------- Codec ----------------
def decode(digits: Iterable[Any], alphabet: Alphabet) -> Decimal:
    """Read big-endian ``digits`` over ``alphabet`` as a non-negative value."""
    base = alphabet.base
    result = 0
    for sym in digits:
        result = result * base + alphabet.value_of(sym)
    return Decimal(result)


def _magnitude(value: Decimal | int) -> int:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingDomainError(f"Cannot base-encode {value}")
        if value < 0 or value != value.to_integral_value():
            raise EncodingDomainError(
                f"Can only base-encode non-negative integers, got {value}"
            )
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise EncodingDomainError(
                f"Can only base-encode non-negative integers, got {value}"
            )
        return value
    raise EncodingDomainError(f"Cannot base-encode {value!r}")


def encode(value: Decimal | int, alphabet: Alphabet, length: int | None = None) -> list[Any]:
    """
    Write a non-negative integer as big-endian symbols of ``alphabet``.

    Zero encodes to the single zero symbol before ``length`` is applied.
    """
    length = check_length(length)
    n = _magnitude(value)
    base = alphabet.base
    symbols = alphabet.symbols

    out: list[Any] = []
    while True:
        # only the low `length` digits survive a positive length
        if length and length > 0 and len(out) >= length:
            break
        n, r = divmod(n, base)
        out.append(symbols[r])
        if n == 0:
            break
    out.reverse()
    return apply_length(out, length, alphabet.zero)


def encode_str(value: Decimal | int, alphabet: Alphabet, length: int | None = None) -> str:
    return "".join(encode(value, alphabet, length))
