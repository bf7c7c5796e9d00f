"""
zeta Core Constants (integer domain)
====================================

Only integer-domain constants live here. Decimal display settings live in
`fmt.py`.
"""

# NOTE: FIXED_* bounds apply to FixedDecimal.value (the scaled integer); never to the real value.

from typing import Final

# ---------------------------------------------------------------------------
# FixedDecimal backing store and scale
# ---------------------------------------------------------------------------

#: Width of the signed backing integer of FixedDecimal.
FIXED_BITS: Final[int] = 64
FIXED_MIN: Final[int] = -(2 ** (FIXED_BITS - 1))      # -9223372036854775808
FIXED_MAX: Final[int] = (2 ** (FIXED_BITS - 1)) - 1   #  9223372036854775807

#: Number of fractional decimal digits used when no scale is given.
DEFAULT_SCALE: Final[int] = 6

#: Largest scale whose unit (10**scale) still fits the backing store.
MAX_SCALE: Final[int] = 18


# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

#: Widths (in bits) available as Integer variants.
INTEGER_WIDTHS: Final[tuple] = (8, 16, 32, 64)

#: Width of the plain `Integer` type.
DEFAULT_INTEGER_BITS: Final[int] = 32


# ---------------------------------------------------------------------------
# Rounding modes
# ---------------------------------------------------------------------------

#: Nearest, ties away from zero. Used at every lossy boundary by default.
ROUND_HALF_AWAY: Final[str] = "half_away"
#: Toward zero (truncate).
ROUND_DOWN: Final[str] = "down"
#: Away from zero.
ROUND_UP: Final[str] = "up"

ROUNDING_MODES: Final[tuple] = (ROUND_HALF_AWAY, ROUND_DOWN, ROUND_UP)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
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
]
