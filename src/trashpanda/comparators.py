"""Three-way comparators for sorting.

Each comparator returns a negative number, zero or a positive number, and can
be used with `functools.cmp_to_key` or `trashpanda.array.sort_by`:

    ```python
    >>> sorted([3, None, 1], key=cmp_to_key(compare_numbers_asc))
    [1, 3, None]
    ```

Empty values (``None``, and ``""`` for strings) always sort last, in both
ascending and descending order. Natural string ordering, where digit runs
compare by numeric value, is provided by `natsort`.
"""

from datetime import date, datetime, timezone
from typing import Any

from natsort import natsort_keygen

_natural_key = natsort_keygen()


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _empty_last(a_empty: bool, b_empty: bool) -> int | None:
    """Order empties after values; ``None`` when both are non-empty."""
    if a_empty:
        return 0 if b_empty else 1
    if b_empty:
        return -1
    return None


def compare_booleans_asc(a: bool | None, b: bool | None) -> int:
    """Sort ``False`` before ``True``."""
    if (result := _empty_last(a is None, b is None)) is not None:
        return result
    return _cmp(a, b)


def compare_booleans_desc(a: bool | None, b: bool | None) -> int:
    """Sort ``True`` before ``False``."""
    if (result := _empty_last(a is None, b is None)) is not None:
        return result
    return _cmp(b, a)


def compare_numbers_asc(a: float | None, b: float | None) -> float:
    """Sort numbers in ascending order."""
    if (result := _empty_last(a is None, b is None)) is not None:
        return result
    return a - b  # type: ignore[operator]


def compare_numbers_desc(a: float | None, b: float | None) -> float:
    """Sort numbers in descending order."""
    if (result := _empty_last(a is None, b is None)) is not None:
        return result
    return b - a  # type: ignore[operator]


def _epoch(value: date | None) -> float | None:
    """Seconds since the epoch; naive datetimes and plain dates are taken as UTC."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def compare_dates_asc(a: date | None, b: date | None) -> float:
    """Sort dates and datetimes earliest first."""
    return compare_numbers_asc(_epoch(a), _epoch(b))


def compare_dates_desc(a: date | None, b: date | None) -> float:
    """Sort dates and datetimes latest first."""
    return compare_numbers_desc(_epoch(a), _epoch(b))


def compare_strings(a: str | None, b: str | None) -> int:
    """Alphabetic order: case-insensitive first, then by code point.

    For strings containing numbers see `compare_strings_natural`.
    """
    if (result := _empty_last(not a, not b)) is not None:
        return result
    return _cmp(a.casefold(), b.casefold()) or _cmp(a, b)  # type: ignore[union-attr]


def compare_strings_reversed(a: str | None, b: str | None) -> int:
    """Reverse alphabetic order; empties still sort last."""
    if (result := _empty_last(not a, not b)) is not None:
        return result
    return compare_strings(b, a)


def compare_strings_natural(a: str | None, b: str | None) -> int:
    """Natural order, so ``"2 Dogs"`` sorts before ``"10 Dogs"``."""
    if (result := _empty_last(not a, not b)) is not None:
        return result
    return _cmp(_natural_key(a), _natural_key(b))


def compare_strings_natural_reversed(a: str | None, b: str | None) -> int:
    """Reverse natural order, so ``"1000 bottles"`` sorts before ``"999 bottles"``."""
    if (result := _empty_last(not a, not b)) is not None:
        return result
    return _cmp(_natural_key(b), _natural_key(a))
