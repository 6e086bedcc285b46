import decimal
from decimal import Decimal

import pytest

from bn_str.errors import DivisionByZeroError, DomainError, NumberError


def test_context_is_fixed(engine):
    assert engine.PRECISION == 80
    assert engine.CONTEXT.prec == 80
    assert engine.CONTEXT.rounding == decimal.ROUND_DOWN
    assert engine.CONTEXT.Emax == decimal.MAX_EMAX
    assert engine.CONTEXT.Emin == decimal.MIN_EMIN


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1E+3"), "1000"),
        (Decimal("1.44E3"), "1440"),
        (Decimal("-0"), "0"),
        (Decimal("0.000"), "0"),
        (Decimal("1.500"), "1.5"),
        (Decimal("-2.50"), "-2.5"),
        (Decimal("1E-5"), "0.00001"),
        (Decimal("120"), "120"),
    ],
)
def test_to_fixed(engine, value, expected):
    assert engine.to_fixed(value) == expected


def test_wide_context_leaves_shared_context_alone(engine):
    ctx = engine.wide_context(Decimal("1" + "0" * 200), Decimal("0.001"))
    assert ctx.prec >= 204
    assert ctx is not engine.CONTEXT
    assert engine.CONTEXT.prec == 80


def test_wide_context_never_below_precision(engine):
    assert engine.wide_context(Decimal(1)).prec == 80


@pytest.mark.parametrize(
    "signal,expected",
    [
        (decimal.DivisionByZero, DivisionByZeroError),
        (decimal.Overflow, DomainError),
        (decimal.InvalidOperation, DomainError),
    ],
)
def test_translate_errors(engine, signal, expected):
    with pytest.raises(expected) as info:
        with engine.translate_errors("op"):
            raise signal()
    assert isinstance(info.value, NumberError)
    assert str(info.value).startswith("op: ")


def test_translate_errors_passes_other_exceptions(engine):
    with pytest.raises(KeyError):
        with engine.translate_errors("op"):
            raise KeyError("x")
