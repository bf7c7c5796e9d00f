"""
Formatting helpers and Decimal views (non-core arithmetic).

Core arithmetic uses scaled integers. Decimal here is only for formatting
and convenience (e.g., tests, logs, display).
"""

import os
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional

from .exc import DecimalDomainError
from .constants import MAX_SCALE
from .fixdec import FixedDecimal
from .integer import Integer

# Debug printing control (formatting layer)
DEBUG_FMT = bool(int(os.environ.get("ZETA_DEBUG_FMT", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Precision (significant digits) of the local context used for Decimal-based
#: formatting. The caller's global decimal context is left untouched.
DEFAULT_DECIMAL_PRECISION: int = 28
_FMT_CONTEXT = Context(prec=DEFAULT_DECIMAL_PRECISION)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('8.25')     -> '8.250000000000000000E+0'
    """
    return format(x, f".{places}E")


def fmt_fixed(x: FixedDecimal, places: Optional[int] = None) -> str:
    """Plain fixed notation. Defaults to the value's own scale (exact).

    With `places` below the scale, the display is rounded half away from zero;
    the value itself is untouched.
    """
    if not isinstance(x, FixedDecimal):
        raise DecimalDomainError("fmt_fixed(): expected FixedDecimal")
    if places is None or places == x.scale:
        return str(x)
    if places < 0 or places > MAX_SCALE:
        raise DecimalDomainError(f"fmt_fixed(): places must be within [0, {MAX_SCALE}]")
    _dbg(f"fmt_fixed: value={x.value}, scale={x.scale}, places={places}")
    return str(x.rescale(places))


# ---------------------------------------------------------------------------
# Decimal quantisation helpers (I/O only)
# ---------------------------------------------------------------------------

def quantize_half_away(x: Decimal, places: int) -> Decimal:
    """Quantise to `places` fractional digits, ties away from zero.

    Decimal's ROUND_HALF_UP is the half-away-from-zero rule used by FixedDecimal.
    """
    if not x.is_finite():
        raise DecimalDomainError("quantize_half_away(): non-finite input")
    if places < 0:
        raise DecimalDomainError("quantize_half_away(): places must be >= 0")
    return x.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=_FMT_CONTEXT)


# ---------------------------------------------------------------------------
# Logging/display conversion helpers
# ---------------------------------------------------------------------------

def fixed_to_decimal(x: FixedDecimal) -> Decimal:
    """Convert a FixedDecimal into a Decimal for logging/printing only."""
    if x is None:
        raise DecimalDomainError("fixed_to_decimal(): received None")
    if not isinstance(x, FixedDecimal):
        raise DecimalDomainError("fixed_to_decimal(): unsupported type")
    _dbg(f"fixed_to_decimal: value={x.value}, scale={x.scale}")
    return x.to_decimal()


def integer_to_decimal(n: Integer) -> Decimal:
    """Convert an Integer into a Decimal for logging/printing only."""
    if not isinstance(n, Integer):
        raise DecimalDomainError("integer_to_decimal(): expected Integer")
    return Decimal(n.value)


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "fmt_fixed",
    "quantize_half_away",
    "fixed_to_decimal",
    "integer_to_decimal",
]
