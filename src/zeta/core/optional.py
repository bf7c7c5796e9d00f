"""
Optional: a container holding either one value or nothing.

Unlike a bare `None`, an Optional can hold `None` as a value, and reading an
empty one without a fallback is an error (EmptyAccess), never a silent default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .exc import EmptyAccess

T = TypeVar("T")
U = TypeVar("U")


class _Missing:
    """Sentinel type for the empty state."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


@dataclass(frozen=True)
class Optional(Generic[T]):
    """Either holds one value (`Optional(42)`) or is empty (`Optional()`)."""
    _value: T = field(default=_MISSING)

    @classmethod
    def empty(cls) -> "Optional[T]":
        return cls()

    @classmethod
    def from_nullable(cls, x: Any) -> "Optional[Any]":
        """`None` becomes empty; anything else is held."""
        return cls() if x is None else cls(x)

    def has_value(self) -> bool:
        return self._value is not _MISSING

    def __bool__(self) -> bool:
        return self.has_value()

    def value(self) -> T:
        if self._value is _MISSING:
            raise EmptyAccess("value() called on an empty Optional")
        return self._value

    def value_or(self, default: U) -> "T | U":
        return self._value if self._value is not _MISSING else default

    def map(self, fn: Callable[[T], U]) -> "Optional[U]":
        """Apply `fn` once to the held value; an empty source stays empty and `fn` is not called."""
        if self._value is _MISSING:
            return Optional()
        return Optional(fn(self._value))

    def and_then(self, fn: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        if self._value is _MISSING:
            return Optional()
        result = fn(self._value)
        if not isinstance(result, Optional):
            raise TypeError(f"and_then() callback must return Optional, got {type(result).__name__}")
        return result

    def or_else(self, fn: Callable[[], "Optional[T]"]) -> "Optional[T]":
        if self._value is not _MISSING:
            return self
        result = fn()
        if not isinstance(result, Optional):
            raise TypeError(f"or_else() callback must return Optional, got {type(result).__name__}")
        return result

    def __repr__(self) -> str:
        if self._value is _MISSING:
            return "Optional()"
        return f"Optional({self._value!r})"


__all__ = [
    "Optional",
]
