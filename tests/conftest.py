from __future__ import annotations

from typing import Any, List

import pytest

# Import project primitives
from zeta.core import FixedDecimal, fixed_decimal


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


class CallCounter:
    """Callable stub that records every argument it is invoked with.

    - fn: the function actually applied to the argument.
    """

    def __init__(self, fn=lambda v: v) -> None:
        self.fn = fn
        self.calls: List[Any] = []

    def __call__(self, v):
        self.calls.append(v)
        return self.fn(v)

    @property
    def count(self) -> int:
        return len(self.calls)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def demo_pair() -> tuple:
    """The operands used by the fixed-decimal demonstration: a=5.75, b=2.5."""
    return fixed_decimal(5.75), fixed_decimal(2.5)


@pytest.fixture()
def doubler() -> CallCounter:
    return CallCounter(lambda v: v * 2)


@pytest.fixture()
def one_third() -> FixedDecimal:
    return FixedDecimal.from_int(1) / FixedDecimal.from_int(3)


@pytest.fixture()
def make_counter():
    """Factory for CallCounter stubs wrapping a given function."""
    return CallCounter
