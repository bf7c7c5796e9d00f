"""
zeta Core
=========

Unified exports for the value-type primitives:
  - FixedDecimal: exact fixed-point decimal backed by a scaled 64-bit integer.
  - Integer / I8 / I16 / I32 / I64: fixed-width signed integers that trap on overflow.
  - Optional: a one-value-or-empty container.

All arithmetic is integer-domain. Decimal helpers are provided *only* for
I/O formatting.
"""

# NOTE:
#   The three value types are independent of one another. `fmt` is the only
#   module that knows about more than one of them, and only for display.

# Integer-domain constants
from .constants import (
    FIXED_BITS,
    FIXED_MIN,
    FIXED_MAX,
    DEFAULT_SCALE,
    MAX_SCALE,
    INTEGER_WIDTHS,
    DEFAULT_INTEGER_BITS,
    ROUND_HALF_AWAY,
    ROUND_DOWN,
    ROUND_UP,
    ROUNDING_MODES,
)

# Value types
from .fixdec import FixedDecimal, fixed_decimal
from .integer import Integer, I8, I16, I32, I64
from .optional import Optional

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    fmt_dec,
    fmt_fixed,
    quantize_half_away,
    fixed_to_decimal,
    integer_to_decimal,
)

# Core exceptions
from .exc import ArithmeticOverflow, DivisionByZero, EmptyAccess, DecimalDomainError

__all__ = [
    # constants
    "FIXED_BITS",
    "FIXED_MIN",
    "FIXED_MAX",
    "DEFAULT_SCALE",
    "MAX_SCALE",
    "INTEGER_WIDTHS",
    "DEFAULT_INTEGER_BITS",
    "ROUND_HALF_AWAY",
    "ROUND_DOWN",
    "ROUND_UP",
    "ROUNDING_MODES",
    # fixed decimal
    "FixedDecimal",
    "fixed_decimal",
    # integers
    "Integer",
    "I8",
    "I16",
    "I32",
    "I64",
    # optional
    "Optional",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "fmt_fixed",
    "quantize_half_away",
    "fixed_to_decimal",
    "integer_to_decimal",
    # exceptions
    "ArithmeticOverflow",
    "DivisionByZero",
    "EmptyAccess",
    "DecimalDomainError",
]
