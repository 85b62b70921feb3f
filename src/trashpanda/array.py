"""Array (sequence) utilities.

Every helper returns a new list and leaves its input untouched.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, Sequence
from functools import cmp_to_key
from typing import Any, Final, TypeVar

from trashpanda.function import identity

T = TypeVar("T")
S = TypeVar("S")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Continue:
    """Type of the `CONTINUE` sentinel."""

    _instance: _Continue | None = None

    def __new__(cls) -> _Continue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE: Final = _Continue()
"""Sentinel returned from a `find_value` callback to keep searching."""


def chunk_every(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """Break `items` into slices of `size` elements.

    The last chunk may be shorter. Works on any sliceable sequence, so a string
    yields a list of substrings.

    Raises:
        ValueError: If `size` is not a positive integer.

    Example:
        ```python
        >>> chunk_every([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        ```
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"chunk size must be a positive integer, got {size!r}")
    return [items[i : i + size] for i in range(0, len(items), size)]


def find_value(items: Iterable[T], fn: Callable[[T], S | _Continue]) -> S | None:
    """Like a find, but return the callback's result rather than the element.

    A result counts as found when `fn` returns anything other than `CONTINUE`.

    Example:
        ```python
        >>> find_value([2, 3, 4], lambda x: x * x if x > 2 else CONTINUE)
        9
        ```
    """
    for item in items:
        value = fn(item)
        if value is not CONTINUE:
            return value  # type: ignore[return-value]
    return None


def group_by(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    value_fn: Callable[[T], Any] = identity,
) -> dict[K, list[Any]]:
    """Split `items` into groups keyed by `key_fn`.

    Groups appear in first-seen order and keep the original element order.

    Example:
        ```python
        >>> group_by(["one", "two", "three", "four", "five"], len)
        {3: ['one', 'two'], 5: ['three'], 4: ['four', 'five']}
        ```
    """
    groups: dict[K, list[Any]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(value_fn(item))
    return groups


def shuffle(items: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of `items` (Durstenfeld's Fisher-Yates).

    Args:
        items: Elements to shuffle.
        rng: Random source; defaults to the `random` module's global instance.
    """
    rand = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rand.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def sort_by(
    items: Iterable[T],
    map_fn: Callable[[T], V],
    compare_fn: Callable[[V, V], float],
) -> list[T]:
    """Stable sort on mapped values (decorate-sort-undecorate).

    Args:
        items: Elements to sort.
        map_fn: Computes the sort value once per element.
        compare_fn: Three-way comparator over mapped values (negative, zero or
            positive), such as those in `trashpanda.comparators`.

    Example:
        ```python
        >>> sort_by([-3, -1, 2], abs, lambda a, b: a - b)
        [-1, 2, -3]
        ```
    """
    decorated = [(map_fn(item), item) for item in items]
    key = cmp_to_key(lambda a, b: compare_fn(a[0], b[0]))
    return [item for _, item in sorted(decorated, key=key)]


def times(n: int, map_fn: Callable[[int], T] = identity) -> list[T]:  # type: ignore[assignment]
    """Return ``[map_fn(0), ..., map_fn(n - 1)]``."""
    return [map_fn(i) for i in range(n)]


def uniq(items: Iterable[K]) -> list[K]:
    """Drop duplicated elements, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def uniq_by(items: Iterable[T], uniq_fn: Callable[[T], Hashable]) -> list[T]:
    """Drop elements whose `uniq_fn` value was already seen.

    Example:
        ```python
        >>> uniq_by(["cat", "dog", "raccoon", "meow", "woof"], len)
        ['cat', 'raccoon', 'meow']
        ```
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        value = uniq_fn(item)
        if value not in seen:
            seen.add(value)
            result.append(item)
    return result
