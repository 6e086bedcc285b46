# bn_str/arith.py
#
# Operation names follow the numeral API (abs, int, round, sum, min, max, pow)
# and shadow builtins inside this module; the builtins themselves are
# reached as ``builtins.<name>``.

from __future__ import annotations

import builtins
import decimal
import re
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Iterator, NamedTuple

from .inputs import classify
from .engine import CONTEXT, PRECISION, to_fixed, translate_errors, wide_context
from .errors import DivisionByZeroError, DomainError

_SPLIT_RE = re.compile(r"(-?)(\d+)(?:\.(\d+))?")
_TEN = Decimal(10)
_HALF = Decimal("0.5")

# extra digits carried through ln, log and exp before truncating
_GUARD = 10

_NEAREST = CONTEXT.copy()
_NEAREST.rounding = ROUND_HALF_EVEN


class Parts(NamedTuple):
    sign: str       # "" or "-"
    integer: str
    fraction: str   # "" for integers


def expand(v: Any) -> str:
    """Classify ``v`` and format it as a fixed-point numeral."""
    return to_fixed(classify(v))


# ---------------- Binary operations ----------------
def add(a: Any, b: Any) -> str:
    x, y = classify(a), classify(b)
    with translate_errors("add"):
        return to_fixed(CONTEXT.add(x, y))


def sub(a: Any, b: Any) -> str:
    x, y = classify(a), classify(b)
    with translate_errors("sub"):
        return to_fixed(CONTEXT.subtract(x, y))


def mul(a: Any, b: Any) -> str:
    x, y = classify(a), classify(b)
    with translate_errors("mul"):
        return to_fixed(CONTEXT.multiply(x, y))


def _divisor(b: Any, what: str) -> Decimal:
    d = classify(b)
    if d.is_zero():
        raise DivisionByZeroError(f"{what}: division by zero")
    return d


def div(a: Any, b: Any) -> str:
    """Quotient truncated to the working precision."""
    x = classify(a)
    y = _divisor(b, "div")
    with translate_errors("div"):
        return to_fixed(CONTEXT.divide(x, y))


def idiv(a: Any, b: Any) -> str:
    """Integer part of ``a / b`` (truncated toward zero)."""
    x = classify(a)
    y = _divisor(b, "idiv")
    with translate_errors("idiv"):
        return to_fixed(wide_context(x, y).divide_int(x, y))


def mod(a: Any, b: Any) -> str:
    """Remainder of ``a / b``; carries the sign of the dividend ``a``."""
    x = classify(a)
    y = _divisor(b, "mod")
    with translate_errors("mod"):
        return to_fixed(wide_context(x, y).remainder(x, y))


def pow(x: Any, y: Any) -> str:
    base = classify(x)
    exponent = classify(y)
    if exponent.is_zero():
        return "1"
    if base < 0 and exponent != exponent.to_integral_value(context=CONTEXT):
        raise DomainError(f"pow: {to_fixed(base)} ** {to_fixed(exponent)} is not real")
    if base.is_zero() and exponent < 0:
        raise DivisionByZeroError("pow: zero raised to a negative power")
    with translate_errors("pow"):
        return to_fixed(CONTEXT.power(base, exponent))


def sqrt(x: Any) -> str:
    return pow(x, _HALF)


def _guarded() -> decimal.Context:
    ctx = CONTEXT.copy()
    ctx.prec += _GUARD
    return ctx


def ln(v: Any) -> str:
    x = classify(v)
    if x <= 0:
        raise DomainError(f"ln: {to_fixed(x)} is not positive")
    with translate_errors("ln"):
        return to_fixed(CONTEXT.plus(_guarded().ln(x)))


def log(v: Any, base: Any = None) -> str:
    """Logarithm of ``v`` in ``base``; natural logarithm when no base is given."""
    if base is None:
        return ln(v)
    x = classify(v)
    b = classify(base)
    if x <= 0:
        raise DomainError(f"log: {to_fixed(x)} is not positive")
    if b <= 0 or b == 1:
        raise DomainError(f"log: invalid base {to_fixed(b)}")

    with translate_errors("log"):
        ctx = _guarded()
        if b == _TEN:
            # exact for powers of ten
            return to_fixed(CONTEXT.plus(ctx.log10(x)))
        result = ctx.divide(ctx.ln(x), ctx.ln(b))
        # a short nearest value means the quotient was exact (log(8, 2) == 3)
        nearest = _NEAREST.plus(result)
        if len(_significand(nearest)) < PRECISION - _GUARD:
            return to_fixed(nearest)
        return to_fixed(CONTEXT.plus(result))


def exp(v: Any) -> str:
    x = classify(v)
    with translate_errors("exp"):
        return to_fixed(CONTEXT.plus(_guarded().exp(x)))


# ---------------- Unary operations ----------------
def neg(v: Any) -> str:
    return to_fixed(classify(v).copy_negate())


def abs(v: Any) -> str:
    return to_fixed(classify(v).copy_abs())


def int(v: Any) -> str:
    """Drop the fractional part (truncate toward zero)."""
    return to_fixed(classify(v).to_integral_value(rounding=ROUND_DOWN, context=CONTEXT))


def round(v: Any) -> str:
    """Round to an integer, halves away from zero."""
    return to_fixed(classify(v).to_integral_value(rounding=ROUND_HALF_UP, context=CONTEXT))


def sign(v: Any) -> builtins.int:
    """-1 for negative values, 1 otherwise (zero included)."""
    return -1 if classify(v) < 0 else 1


# ---------------- Comparisons ----------------
def eq(a: Any, b: Any) -> bool:
    return classify(a) == classify(b)


def ne(a: Any, b: Any) -> bool:
    return not eq(a, b)


def gt(a: Any, b: Any) -> bool:
    return classify(a) > classify(b)


def gte(a: Any, b: Any) -> bool:
    return classify(a) >= classify(b)


def lt(a: Any, b: Any) -> bool:
    return classify(a) < classify(b)


def lte(a: Any, b: Any) -> bool:
    return classify(a) <= classify(b)


def cmp(a: Any, b: Any) -> builtins.int:
    x = classify(a)
    y = classify(b)
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


# ---------------- Aggregates ----------------
def _flatten(values: Iterable[Any]) -> Iterator[Any]:
    for v in values:
        if isinstance(v, (list, tuple)):
            yield from v
        else:
            yield v


def sum(*values: Any) -> str:
    """Sum of all arguments; list/tuple arguments are expanded."""
    total = Decimal(0)
    for v in _flatten(values):
        x = classify(v)
        with translate_errors("sum"):
            total = CONTEXT.add(total, x)
    return to_fixed(total)


def _extremes(values: tuple, what: str) -> list[Decimal]:
    items = [classify(v) for v in _flatten(values)]
    if not items:
        raise ValueError(f"{what}() requires at least one value")
    return items


def min(*values: Any) -> str:
    return to_fixed(builtins.min(_extremes(values, "min")))


def max(*values: Any) -> str:
    return to_fixed(builtins.max(_extremes(values, "max")))


def clamp(v: Any, lo: Any, hi: Any) -> str:
    """``lo`` if ``v < lo``, ``hi`` if ``v > hi``, else ``v`` (checked in that order)."""
    x = classify(v)
    low = classify(lo)
    high = classify(hi)
    if x < low:
        return to_fixed(low)
    if x > high:
        return to_fixed(high)
    return to_fixed(x)


# ---------------- Introspection ----------------
def split(v: Any) -> Parts:
    m = _SPLIT_RE.fullmatch(expand(v))
    return Parts(m.group(1), m.group(2), m.group(3) or "")


def _count_arg(n: Any, what: str, minimum: builtins.int) -> builtins.int:
    if isinstance(n, bool) or not isinstance(n, builtins.int) or n < minimum:
        raise ValueError(f"{what} expects an integer >= {minimum}, got {n!r}")
    return n


def _significand(x: Decimal) -> str:
    return "".join(str(d) for d in x.as_tuple().digits).rstrip("0")


def sd(v: Any, n: builtins.int | None = None) -> builtins.int | str:
    """
    Significant digits.

    Without ``n``: count them (trailing zeros of the integer part are not
    significant, zero has one). With ``n``: round ``v`` to ``n`` significant
    digits, halves away from zero.
    """
    x = classify(v)
    if n is None:
        return len(_significand(x)) or 1
    ctx = CONTEXT.copy()
    ctx.prec = _count_arg(n, "sd", 1)
    ctx.rounding = ROUND_HALF_UP
    return to_fixed(ctx.plus(x))


def dp(v: Any, n: builtins.int | None = None) -> builtins.int | str:
    """
    Decimal places.

    Without ``n``: count them. With ``n``: round ``v`` to ``n`` decimal
    places, halves away from zero.
    """
    x = classify(v)
    if n is None:
        if x.is_zero():
            return 0
        digits = x.as_tuple().digits
        trailing = len(digits) - len(_significand(x))
        return builtins.max(0, -(x.as_tuple().exponent + trailing))
    quantum = Decimal((0, (1,), -_count_arg(n, "dp", 0)))
    with translate_errors("dp"):
        return to_fixed(x.quantize(quantum, rounding=ROUND_HALF_UP, context=wide_context(x, quantum)))


def to_number(v: Any) -> float:
    """Nearest native float; precision beyond a double is lost."""
    return float(classify(v))
