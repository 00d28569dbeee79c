"""
Scalar helpers.

Small ordered-value helpers shared by the vector and polygon routines. They
accept Python numbers and numpy scalars alike (float64, int32, uint16, ...)
and return a value of the same type as the selected input.
"""
from __future__ import annotations

import math
from typing import Tuple, TypeVar

T = TypeVar("T")


def dt_swap(a: T, b: T) -> Tuple[T, T]:
    """Return ``(b, a)``; use as ``a, b = dt_swap(a, b)``."""
    return b, a


def dt_min(a: T, b: T) -> T:
    return a if a < b else b


def dt_max(a: T, b: T) -> T:
    return a if a > b else b


def dt_abs(a: T) -> T:
    return -a if a < 0 else a


def dt_sqr(a: T) -> T:
    # Quantized (uint16) inputs keep numpy's wrap-around semantics.
    return a * a


def dt_clamp(v: T, mn: T, mx: T) -> T:
    """Clamp ``v`` to ``[mn, mx]``.

    ``mn`` is checked first, so an inverted range returns ``mn`` for values
    below it and ``mx`` otherwise.
    """
    if v < mn:
        return mn
    if v > mx:
        return mx
    return v


def dt_sqrt(x: float) -> float:
    return math.sqrt(x)
