"""
Fixed-width signed integers: Integer (32-bit), I8, I16, I32, I64.

- Width is part of the type (BITS); every value satisfies MIN <= value <= MAX.
- Overflow traps: any result outside the width raises ArithmeticOverflow.
  Explicit two's-complement truncation is available only through `wrap()`.
- Division follows native `int` floor semantics (`//`, `%`, `divmod`).
  True division (`/`) is not defined; it would leave the integer domain.
- Layout: SIZE == BITS // 8 bytes, little-endian two's complement, no padding.

Every operation is a pure function of immutable operands, so module-level
constants such as `A: Final = Integer(5)` are computed once at import, and an
out-of-range constant fails at import rather than at first use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Type, Union

from .constants import DEFAULT_INTEGER_BITS, INTEGER_WIDTHS
from .exc import ArithmeticOverflow, DivisionByZero

# Debug printing control
DEBUG_INTEGER = bool(int(os.environ.get("ZETA_DEBUG_INTEGER", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_INTEGER:
        print(msg)


def _bounds(bits: int) -> Tuple[int, int]:
    """Two's-complement signed range for a given width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


@dataclass(frozen=True, eq=False)
class Integer:
    """Signed integer of width BITS (32 for the plain type)."""
    value: int = 0

    BITS: ClassVar[int] = DEFAULT_INTEGER_BITS
    MIN: ClassVar[int] = _bounds(DEFAULT_INTEGER_BITS)[0]
    MAX: ClassVar[int] = _bounds(DEFAULT_INTEGER_BITS)[1]
    SIZE: ClassVar[int] = DEFAULT_INTEGER_BITS // 8

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.BITS not in INTEGER_WIDTHS:
            raise ValueError(f"{cls.__name__}.BITS must be one of {INTEGER_WIDTHS}, got {cls.BITS}")
        cls.MIN, cls.MAX = _bounds(cls.BITS)
        cls.SIZE = cls.BITS // 8

    def __post_init__(self):
        v = self.value
        if isinstance(v, Integer):
            v = v.value
        elif isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{type(self).__name__} requires an int value, got {type(v).__name__}")
        if v < self.MIN or v > self.MAX:
            raise ArithmeticOverflow(
                f"{type(self).__name__} overflow: {v} outside [{self.MIN}, {self.MAX}]",
                result=v,
                bits=self.BITS,
            )
        object.__setattr__(self, "value", v)

    # ------------- constructors / conversions -------------

    @classmethod
    def wrap(cls, n: int) -> "Integer":
        """Truncate an arbitrary int to this width (two's complement). Never raises on range."""
        if isinstance(n, Integer):
            n = n.value
        mask = (1 << cls.BITS) - 1
        v = n & mask
        if v > cls.MAX:
            v -= 1 << cls.BITS
        _dbg(f"wrap: {n} -> {v} ({cls.__name__})")
        return cls(v)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Integer":
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__}.from_bytes expects {cls.SIZE} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little", signed=True))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.SIZE, "little", signed=True)

    def cast(self, target: Type["Integer"]) -> "Integer":
        """Checked conversion to another width; raises ArithmeticOverflow if it does not fit."""
        return target(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    # ------------- comparisons -------------

    @staticmethod
    def _raw(other: object) -> Optional[int]:
        if isinstance(other, Integer):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        o = Integer._raw(other)
        if o is None:
            return NotImplemented
        return self.value == o

    def __lt__(self, other: Union["Integer", int]) -> bool:
        o = Integer._raw(other)
        if o is None:
            return NotImplemented
        return self.value < o

    def __le__(self, other: Union["Integer", int]) -> bool:
        o = Integer._raw(other)
        if o is None:
            return NotImplemented
        return self.value <= o

    def __gt__(self, other: Union["Integer", int]) -> bool:
        o = Integer._raw(other)
        if o is None:
            return NotImplemented
        return self.value > o

    def __ge__(self, other: Union["Integer", int]) -> bool:
        o = Integer._raw(other)
        if o is None:
            return NotImplemented
        return self.value >= o

    def __hash__(self) -> int:
        return hash(self.value)

    # ------------- arithmetic (trapping) -------------

    def _operands(self, other: object) -> Optional[Tuple[Type["Integer"], int]]:
        """Result type and raw value of `other`; wider width wins, ties keep self's type."""
        if isinstance(other, Integer):
            cls = type(other) if other.BITS > self.BITS else type(self)
            return cls, other.value
        if isinstance(other, int) and not isinstance(other, bool):
            # A native int adopts this operand's width and must fit it.
            return type(self), type(self)(other).value
        return None

    @staticmethod
    def _make(cls: Type["Integer"], v: int, what: str) -> "Integer":
        if v < cls.MIN or v > cls.MAX:
            _dbg(f"{what}: {v} traps for {cls.__name__}")
            raise ArithmeticOverflow(
                f"{cls.__name__} {what} overflow: {v} outside [{cls.MIN}, {cls.MAX}]",
                result=v,
                bits=cls.BITS,
            )
        return cls(v)

    def __add__(self, other: Union["Integer", int]) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return Integer._make(cls, self.value + o, "addition")

    def __radd__(self, other: int) -> "Integer":
        return self.__add__(other)

    def __sub__(self, other: Union["Integer", int]) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return Integer._make(cls, self.value - o, "subtraction")

    def __rsub__(self, other: int) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return Integer._make(cls, o - self.value, "subtraction")

    def __mul__(self, other: Union["Integer", int]) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return Integer._make(cls, self.value * o, "multiplication")

    def __rmul__(self, other: int) -> "Integer":
        return self.__mul__(other)

    def _divmod(self, n: int, d: int, cls: Type["Integer"]) -> Tuple["Integer", "Integer"]:
        if d == 0:
            raise DivisionByZero(f"{cls.__name__} division by zero")
        q, r = divmod(n, d)
        return Integer._make(cls, q, "division"), Integer._make(cls, r, "division")

    def __floordiv__(self, other: Union["Integer", int]) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return self._divmod(self.value, o, cls)[0]

    def __rfloordiv__(self, other: int) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return self._divmod(o, self.value, cls)[0]

    def _mod(self, n: int, d: int, cls: Type["Integer"]) -> "Integer":
        # The remainder alone: it always fits even when the quotient (MIN // -1) does not.
        if d == 0:
            raise DivisionByZero(f"{cls.__name__} division by zero")
        return Integer._make(cls, n % d, "modulo")

    def __mod__(self, other: Union["Integer", int]) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return self._mod(self.value, o, cls)

    def __rmod__(self, other: int) -> "Integer":
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return self._mod(o, self.value, cls)

    def __divmod__(self, other: Union["Integer", int]) -> Tuple["Integer", "Integer"]:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        cls, o = ops
        return self._divmod(self.value, o, cls)

    def __neg__(self) -> "Integer":
        return Integer._make(type(self), -self.value, "negation")

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        return Integer._make(type(self), abs(self.value), "abs")


class I8(Integer):
    BITS = 8


class I16(Integer):
    BITS = 16


class I32(Integer):
    BITS = 32


class I64(Integer):
    BITS = 64


__all__ = [
    "Integer",
    "I8",
    "I16",
    "I32",
    "I64",
]
