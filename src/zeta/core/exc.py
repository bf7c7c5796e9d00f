"""
Core exception types for zeta.core.

These are dependency-free and may be imported by all core modules.
Each one also derives from the matching builtin so callers can catch
either form.
"""

__all__ = [
    "ArithmeticOverflow",
    "DivisionByZero",
    "EmptyAccess",
    "DecimalDomainError",
]


class ArithmeticOverflow(OverflowError):
    """Raised when a result exceeds the representable range of its backing integer.

    Attributes
    ----------
    result : int | None
        The true (unbounded) integer result that did not fit, for context.
    bits : int | None
        Width of the backing store that rejected it.
    """

    def __init__(self, message, *, result=None, bits=None):
        super().__init__(message)
        self.result = result
        self.bits = bits


class DivisionByZero(ZeroDivisionError):
    """Raised when the divisor is the zero value."""
    pass


class EmptyAccess(LookupError):
    """Raised when the value of an empty Optional is accessed without a fallback."""
    pass


class DecimalDomainError(ValueError):
    """Raised when inputs violate FixedDecimal preconditions (NaN/inf, bad scale, bad literal)."""
    pass
