# bn_str/__init__.py

"""bn-str package.

Re-exports the numeral operations and conversions, plus the alias names
callers know them by.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .errors import (
    NumberError,
    InvalidNumberError,
    EncodingDomainError,
    DivisionByZeroError,
    DomainError,
)

from .engine import PRECISION
from .inputs import classify
from .arith import (
    Parts,
    expand,
    add, sub, mul, div, idiv, mod, pow, sqrt, log, ln, exp,
    neg, abs, int, round, sign,
    eq, ne, gt, gte, lt, lte, cmp,
    sum, min, max, clamp,
    split, sd, dp, to_number,
)
from .convert import (
    to_hex,
    to_octal,
    to_binary,
    to_bits,
    to_buffer,
    from_bits,
)

# Aliases: same function objects under their other names.
parse = expand
plus = add
minus = sub
times = mul
over = div
negate = neg
raise_to = pow
to_hexadecimal = to_hex

ALIASES = {
    "parse": "expand",
    "plus": "add",
    "minus": "sub",
    "times": "mul",
    "over": "div",
    "negate": "neg",
    "raise_to": "pow",
    "to_hexadecimal": "to_hex",
}

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Errors
    "NumberError", "InvalidNumberError", "EncodingDomainError",
    "DivisionByZeroError", "DomainError",
    # Core
    "PRECISION", "classify", "Parts",
    "expand", "add", "sub", "mul", "div", "idiv", "mod", "pow", "sqrt",
    "log", "ln", "exp", "neg", "abs", "int", "round", "sign",
    "eq", "ne", "gt", "gte", "lt", "lte", "cmp",
    "sum", "min", "max", "clamp", "split", "sd", "dp", "to_number",
    "to_hex", "to_octal", "to_binary", "to_bits", "to_buffer", "from_bits",
    # Aliases
    "parse", "plus", "minus", "times", "over", "negate", "raise_to",
    "to_hexadecimal",
]
