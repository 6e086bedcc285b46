# bn_str/errors.py

from __future__ import annotations


class NumberError(ValueError):
    """Base class for every error raised by bn_str."""


class InvalidNumberError(NumberError):
    """Input could not be read as a number."""


class EncodingDomainError(NumberError):
    """Only non-negative integers can be base-encoded."""


class DivisionByZeroError(NumberError, ZeroDivisionError):
    """Division or modulo by zero, or zero raised to a negative power."""


class DomainError(NumberError):
    """The result is not a real, representable number."""
