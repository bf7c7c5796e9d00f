# Top-level API for zeta (value-type core).
"""
Top-level API for zeta.

Exposes the stable value types:
  - FixedDecimal / fixed_decimal: exact fixed-point decimal arithmetic
  - Integer, I8, I16, I32, I64: fixed-width integers that trap on overflow
  - Optional: one value or nothing, with map / value_or

Display helpers (Decimal views, string formatting) stay under `zeta.core.fmt`
and are not re-exported here.
"""

from __future__ import annotations

from .core import (
    FixedDecimal,
    fixed_decimal,
    Integer,
    I8,
    I16,
    I32,
    I64,
    Optional,
    ArithmeticOverflow,
    DivisionByZero,
    EmptyAccess,
    DecimalDomainError,
)

__version__ = "0.1.0"

__all__ = [
    # value types
    "FixedDecimal",
    "fixed_decimal",
    "Integer",
    "I8",
    "I16",
    "I32",
    "I64",
    "Optional",
    # errors
    "ArithmeticOverflow",
    "DivisionByZero",
    "EmptyAccess",
    "DecimalDomainError",
]
