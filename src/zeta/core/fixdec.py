"""
FixedDecimal: exact fixed-point decimal stored as a scaled integer.

- value: signed integer, bounded to the FIXED_BITS backing store.
- scale: number of fractional decimal digits; real value = value / 10^scale.
- Add/sub are exact. Rounding happens only at well-defined boundaries:
  construction from float/Decimal/str, rescaling down, multiplication and division.
- One rounding policy everywhere by default: nearest, ties away from zero
  ("half_away"). Directional "down" (toward zero) and "up" (away from zero)
  are available through the `rounding=` keyword.

# Alignment notes:
# - All rounding is computed in the integer domain on exact numerator/denominator
#   pairs (float.as_integer_ratio / Decimal.as_integer_ratio); there are no float
#   or Decimal round-trips inside arithmetic.
# - as_double() is a display/debug conversion only.
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Tuple, Union

from .constants import (
    FIXED_BITS,
    FIXED_MIN,
    FIXED_MAX,
    DEFAULT_SCALE,
    MAX_SCALE,
    ROUND_HALF_AWAY,
    ROUND_UP,
    ROUNDING_MODES,
)

# Import core exceptions
from .exc import ArithmeticOverflow, DivisionByZero, DecimalDomainError

# Debug printing control
DEBUG_FIXDEC = bool(int(os.environ.get("ZETA_DEBUG_FIXDEC", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_FIXDEC:
        print(msg)


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def _check_rounding(rounding: str) -> str:
    if rounding not in ROUNDING_MODES:
        raise DecimalDomainError(f"unknown rounding mode: {rounding!r} (expected one of {ROUNDING_MODES})")
    return rounding


def _div_round(n: int, d: int, rounding: str = ROUND_HALF_AWAY) -> int:
    """Integer quotient n/d rounded per `rounding`, symmetric around zero."""
    _check_rounding(rounding)
    if d == 0:
        raise DivisionByZero("division by zero")
    negative = (n < 0) != (d < 0)
    q, r = divmod(abs(n), abs(d))
    if r != 0:
        if rounding == ROUND_UP:
            q += 1
        elif rounding == ROUND_HALF_AWAY and 2 * r >= abs(d):
            q += 1
    return -q if negative else q


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def _check_scale(scale: int) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise DecimalDomainError(f"scale must be int, got {type(scale).__name__}")
    if scale < 0 or scale > MAX_SCALE:
        raise DecimalDomainError(f"scale must be within [0, {MAX_SCALE}], got {scale}")
    return scale


def _check_range(v: int, what: str) -> int:
    if v < FIXED_MIN or v > FIXED_MAX:
        raise ArithmeticOverflow(
            f"FixedDecimal {what} overflow: scaled value {v} exceeds {FIXED_BITS}-bit range",
            result=v,
            bits=FIXED_BITS,
        )
    return v


def _rescale_value(v: int, from_scale: int, to_scale: int, rounding: str) -> int:
    """Move a scaled integer between scales; only scaling down can round."""
    if to_scale >= from_scale:
        return v * _ten_pow(to_scale - from_scale)
    return _div_round(v, _ten_pow(from_scale - to_scale), rounding)


def _from_ratio(n: int, d: int, scale: int, rounding: str) -> int:
    """Scaled integer nearest to n/d at `scale`."""
    q = _div_round(n * _ten_pow(scale), d, rounding)
    _dbg(f"from_ratio: n={n}, d={d}, scale={scale}, q={q}")
    return q


# Plain literal: optional sign, digits with optional fraction. No exponent, no grouping.
_LITERAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


# ----------------------------
# FixedDecimal
# ----------------------------

Operand = Union["FixedDecimal", int]


@dataclass(frozen=True, eq=False)
class FixedDecimal:
    """Fixed-point decimal: value * 10^-scale, backed by a signed 64-bit integer.

    `FixedDecimal(575, 2)` stores the scaled integer exactly (5.75).
    `FixedDecimal(5.75)` treats a float as the real value and rounds it onto
    the 10^-scale grid, ties away from zero, exactly like `from_float`.
    """
    value: int
    scale: int = DEFAULT_SCALE

    def __post_init__(self):
        _check_scale(self.scale)
        v = self.value
        if isinstance(v, float):
            if math.isnan(v) or math.isinf(v):
                raise DecimalDomainError(f"cannot represent {v} as FixedDecimal")
            n, d = v.as_integer_ratio()
            object.__setattr__(self, "value", _from_ratio(n, d, self.scale, ROUND_HALF_AWAY))
        elif isinstance(v, bool) or not isinstance(v, int):
            raise DecimalDomainError(
                f"value must be a scaled int or a float, got {type(v).__name__}; use from_decimal/from_str"
            )
        _check_range(self.value, "construction")

    # ------------- constructors -------------

    @classmethod
    def zero(cls, scale: int = DEFAULT_SCALE) -> "FixedDecimal":
        return cls(0, scale)

    @classmethod
    def from_scaled(cls, value: int, scale: int = DEFAULT_SCALE) -> "FixedDecimal":
        """Exact construction from an already-scaled integer (no rounding)."""
        return cls(value, scale)

    @classmethod
    def from_int(cls, n: int, scale: int = DEFAULT_SCALE) -> "FixedDecimal":
        if isinstance(n, bool) or not isinstance(n, int):
            raise DecimalDomainError(f"from_int expects int, got {type(n).__name__}")
        _check_scale(scale)
        return cls(n * _ten_pow(scale), scale)

    @classmethod
    def from_float(
        cls, x: float, scale: int = DEFAULT_SCALE, rounding: str = ROUND_HALF_AWAY
    ) -> "FixedDecimal":
        """Round the exact binary value of `x` to the nearest multiple of 10^-scale.

        Ties go away from zero. Note the input is the float actually stored, so a
        literal like 2.675 (binary 2.67499999...) rounds to 2.67 at scale 2.
        """
        if isinstance(x, bool) or not isinstance(x, (float, int)):
            raise DecimalDomainError(f"from_float expects float, got {type(x).__name__}")
        x = float(x)
        if math.isnan(x) or math.isinf(x):
            raise DecimalDomainError(f"cannot represent {x} as FixedDecimal")
        _check_scale(scale)
        n, d = x.as_integer_ratio()
        return cls(_from_ratio(n, d, scale, rounding), scale)

    @classmethod
    def from_decimal(
        cls, x: Decimal, scale: int = DEFAULT_SCALE, rounding: str = ROUND_HALF_AWAY
    ) -> "FixedDecimal":
        """Bridge from Decimal; exact when x has at most `scale` fractional digits."""
        if not isinstance(x, Decimal):
            raise DecimalDomainError(f"from_decimal expects Decimal, got {type(x).__name__}")
        if not x.is_finite():
            raise DecimalDomainError(f"cannot represent {x} as FixedDecimal")
        _check_scale(scale)
        n, d = x.as_integer_ratio()
        return cls(_from_ratio(n, d, scale, rounding), scale)

    @classmethod
    def from_str(
        cls, s: str, scale: int = DEFAULT_SCALE, rounding: str = ROUND_HALF_AWAY
    ) -> "FixedDecimal":
        """Parse a plain decimal literal such as '-12.50' (no exponent, no grouping)."""
        if not isinstance(s, str):
            raise DecimalDomainError(f"from_str expects str, got {type(s).__name__}")
        text = s.strip()
        if not _LITERAL_RE.fullmatch(text):
            raise DecimalDomainError(f"invalid decimal literal: {s!r}")
        return cls.from_decimal(Decimal(text), scale, rounding)

    # ------------- conversions -------------

    def as_double(self) -> float:
        """value / 10^scale as a float, for display/debug only.

        Lossy for values that binary floating point cannot hold exactly;
        never used for arithmetic.
        """
        return self.value / _ten_pow(self.scale)

    def __float__(self) -> float:
        return self.as_double()

    def to_decimal(self) -> Decimal:
        """Exact Decimal of the stored value (independent of the decimal context)."""
        return Decimal(str(self))

    def as_fraction(self) -> Fraction:
        return Fraction(self.value, _ten_pow(self.scale))

    def rescale(self, scale: int, rounding: str = ROUND_HALF_AWAY) -> "FixedDecimal":
        """Same number at another scale; rounds only when scale decreases."""
        _check_rounding(rounding)
        _check_scale(scale)
        if scale == self.scale:
            return self
        v = _rescale_value(self.value, self.scale, scale, rounding)
        return FixedDecimal(_check_range(v, "rescale"), scale)

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else ""
        whole, frac = divmod(abs(self.value), _ten_pow(self.scale))
        if self.scale == 0:
            return f"{sign}{whole}"
        return f"{sign}{whole}.{frac:0{self.scale}d}"

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def sign(self) -> int:
        return (self.value > 0) - (self.value < 0)

    def __bool__(self) -> bool:
        return self.value != 0

    # ------------- comparisons (integer domain) -------------

    def _cmp_core(self, other: object) -> Optional[int]:
        p = _parts(other)
        if p is None:
            return None
        v1, v2, _ = _align(self.value, self.scale, *p)
        return (v1 > v2) - (v1 < v2)

    def __eq__(self, other: object) -> bool:
        c = self._cmp_core(other)
        if c is None:
            return NotImplemented
        return c == 0

    def __lt__(self, other: Operand) -> bool:
        c = self._cmp_core(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: Operand) -> bool:
        c = self._cmp_core(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: Operand) -> bool:
        c = self._cmp_core(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: Operand) -> bool:
        c = self._cmp_core(other)
        if c is None:
            return NotImplemented
        return c >= 0

    def __hash__(self) -> int:
        # Equal values hash equal across scales and with int/Fraction/Decimal.
        return hash(self.as_fraction())

    # ------------- arithmetic (integer domain) -------------

    @staticmethod
    def _require(other: object) -> Tuple[int, int]:
        p = _parts(other)
        if p is None:
            raise DecimalDomainError(
                f"FixedDecimal arithmetic requires FixedDecimal or int operands, got {type(other).__name__}"
            )
        return p

    def add(self, other: Operand) -> "FixedDecimal":
        v1, v2, s = _align(self.value, self.scale, *self._require(other))
        return FixedDecimal(_check_range(v1 + v2, "addition"), s)

    def subtract(self, other: Operand) -> "FixedDecimal":
        v1, v2, s = _align(self.value, self.scale, *self._require(other))
        return FixedDecimal(_check_range(v1 - v2, "subtraction"), s)

    def multiply(
        self, other: Operand, scale: Optional[int] = None, rounding: str = ROUND_HALF_AWAY
    ) -> "FixedDecimal":
        """Product rounded to `scale` (default: the larger operand scale).

        The exact product lives at scale self.scale + other.scale in an
        unbounded intermediate; only the final rescale may round.
        """
        _check_rounding(rounding)
        v2, s2 = self._require(other)
        target = max(self.scale, s2) if scale is None else _check_scale(scale)
        product = self.value * v2
        full_scale = self.scale + s2
        v = _rescale_value(product, full_scale, target, rounding)
        _dbg(f"mul: product={product}@{full_scale} -> {v}@{target} ({rounding})")
        return FixedDecimal(_check_range(v, "multiplication"), target)

    def divide(
        self, other: Operand, scale: Optional[int] = None, rounding: str = ROUND_HALF_AWAY
    ) -> "FixedDecimal":
        """Quotient rounded to `scale` (default: the larger operand scale).

        May lose information even for exactly representable operands (1/3).
        """
        _check_rounding(rounding)
        v2, s2 = self._require(other)
        target = max(self.scale, s2) if scale is None else _check_scale(scale)
        q = _divide_parts(self.value, self.scale, v2, s2, target, rounding)
        return FixedDecimal(_check_range(q, "division"), target)

    def mul_by_scalar(self, k: int) -> "FixedDecimal":
        """Multiply by an integer scalar (exact, range-checked)."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise DecimalDomainError(f"scalar must be int, got {type(k).__name__}")
        return FixedDecimal(_check_range(self.value * k, "multiplication"), self.scale)

    def div_by_scalar(self, k: int, rounding: str = ROUND_HALF_AWAY) -> "FixedDecimal":
        """Divide by an integer scalar, keeping the scale."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise DecimalDomainError(f"scalar must be int, got {type(k).__name__}")
        if k == 0:
            raise DivisionByZero("division by zero scalar")
        return FixedDecimal(_check_range(_div_round(self.value, k, rounding), "division"), self.scale)

    def __add__(self, other: Operand) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> "FixedDecimal":
        p = _parts(other)
        if p is None:
            return NotImplemented
        v1, v2, s = _align(*p, self.value, self.scale)
        return FixedDecimal(_check_range(v1 - v2, "subtraction"), s)

    def __mul__(self, other: Operand) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Operand) -> "FixedDecimal":
        if _parts(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: int) -> "FixedDecimal":
        p = _parts(other)
        if p is None:
            return NotImplemented
        v1, s1 = p
        target = max(s1, self.scale)
        q = _divide_parts(v1, s1, self.value, self.scale, target, ROUND_HALF_AWAY)
        return FixedDecimal(_check_range(q, "division"), target)

    def __neg__(self) -> "FixedDecimal":
        return FixedDecimal(_check_range(-self.value, "negation"), self.scale)

    def __pos__(self) -> "FixedDecimal":
        return self

    def __abs__(self) -> "FixedDecimal":
        return -self if self.value < 0 else self


# ----------------------------
# Operand helpers (raw (value, scale) pairs, unbounded)
# ----------------------------

def _parts(other: object) -> Optional[Tuple[int, int]]:
    """(scaled value, scale) of an operand; a native int is (n, 0) and is never range-checked."""
    if isinstance(other, FixedDecimal):
        return other.value, other.scale
    if isinstance(other, int) and not isinstance(other, bool):
        return other, 0
    return None


def _align(v1: int, s1: int, v2: int, s2: int) -> Tuple[int, int, int]:
    """Rescale both operands up to the larger scale (exact)."""
    s = max(s1, s2)
    return v1 * _ten_pow(s - s1), v2 * _ten_pow(s - s2), s


def _divide_parts(v1: int, s1: int, v2: int, s2: int, target: int, rounding: str) -> int:
    """Scaled quotient (v1@s1) / (v2@s2) at `target`."""
    if v2 == 0:
        raise DivisionByZero("FixedDecimal division by zero")
    # q * 10^target = (v1 / 10^s1) / (v2 / 10^s2) * 10^target
    k = s2 + target - s1
    if k >= 0:
        num, den = v1 * _ten_pow(k), v2
    else:
        num, den = v1, v2 * _ten_pow(-k)
    q = _div_round(num, den, rounding)
    _dbg(f"div: num={num}, den={den}, q={q}@{target} ({rounding})")
    return q


def fixed_decimal(
    x: Union[float, int, str, Decimal, FixedDecimal],
    scale: int = DEFAULT_SCALE,
    rounding: str = ROUND_HALF_AWAY,
) -> FixedDecimal:
    """Build a FixedDecimal from a real-valued literal of any supported kind.

    Note an int here is a whole number (5 -> 5.000000), not a scaled value;
    use FixedDecimal(value, scale) for the latter.
    """
    if isinstance(x, FixedDecimal):
        return x.rescale(scale, rounding)
    if isinstance(x, bool):
        raise DecimalDomainError("bool is not a decimal value")
    if isinstance(x, int):
        return FixedDecimal.from_int(x, scale)
    if isinstance(x, float):
        return FixedDecimal.from_float(x, scale, rounding)
    if isinstance(x, Decimal):
        return FixedDecimal.from_decimal(x, scale, rounding)
    if isinstance(x, str):
        return FixedDecimal.from_str(x, scale, rounding)
    raise DecimalDomainError(f"unsupported input type for fixed_decimal: {type(x).__name__}")


__all__ = [
    "FixedDecimal",
    "fixed_decimal",
]
