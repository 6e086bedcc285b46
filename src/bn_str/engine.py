# bn_str/engine.py

from __future__ import annotations

import decimal
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator

from .errors import DivisionByZeroError, DomainError

PRECISION = 80

# Built once at import and never mutated. Operations pass it explicitly so the
# thread-local decimal context is never consulted.
CONTEXT = decimal.Context(
    prec=PRECISION,
    rounding=decimal.ROUND_DOWN,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


def to_fixed(value: Decimal) -> str:
    """Format as a plain numeral: no exponent, no trailing zeros, no ``-0``."""
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def wide_context(*values: Decimal) -> decimal.Context:
    """
    Return a copy of CONTEXT with room for an exact integer quotient or a
    quantized result of the given operands.
    """
    width = 0
    for v in values:
        # digits in the fixed-point rendering of v
        width += max(v.adjusted() + 1, 0) + max(-v.as_tuple().exponent, 0)
    ctx = CONTEXT.copy()
    ctx.prec = max(PRECISION, width + 2)
    return ctx


@contextmanager
def translate_errors(what: str) -> Iterator[None]:
    """Re-raise decimal signals as bn_str errors."""
    try:
        yield
    except decimal.DivisionByZero as exc:
        raise DivisionByZeroError(f"{what}: division by zero") from exc
    except decimal.Overflow as exc:
        raise DomainError(f"{what}: result out of range") from exc
    except decimal.InvalidOperation as exc:
        raise DomainError(f"{what}: result is not a real number") from exc
