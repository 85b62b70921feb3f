"""Number utilities."""

import math
import random


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp `value` into the range [`lo`, `hi`]."""
    return min(max(value, lo), hi)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points with cartesian coordinates."""
    return math.hypot(x2 - x1, y2 - y1)


def mod(dividend: float, divisor: float) -> float:
    """Modulo whose result has the sign of the divisor.

    Python's ``%`` already floors toward the divisor; this helper adds an
    explicit error for a zero divisor.

    Raises:
        ZeroDivisionError: If `divisor` is zero.

    Example:
        ```python
        >>> mod(-5, 2)
        1
        ```
    """
    if divisor == 0:
        raise ZeroDivisionError("divisor cannot be zero")
    return dividend % divisor


def quantize(value: float, step: float) -> float:
    """Snap `value` to the nearest multiple of `step`, rounding halves up.

    Raises:
        ValueError: If `step` is not positive.

    Example:
        ```python
        >>> quantize(31, 5), quantize(31, 2)
        (30, 32)
        ```
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step!r}")
    return math.floor(value / step + 0.5) * step


def random_float(lo: float, hi: float | None = None) -> float:
    """Random float in [`lo`, `hi`), or in [0, `lo`) when `hi` is omitted."""
    if hi is None:
        lo, hi = 0, lo
    return lo + random.random() * (hi - lo)


def random_int(lo: int, hi: int | None = None) -> int:
    """Random integer in [`lo`, `hi`), or in [0, `lo`) when `hi` is omitted."""
    return math.floor(random_float(lo, hi))
