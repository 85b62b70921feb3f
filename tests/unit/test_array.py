"""Unit tests for trashpanda.array."""

import random

import pytest

from trashpanda.array import (
    CONTINUE,
    chunk_every,
    find_value,
    group_by,
    shuffle,
    sort_by,
    times,
    uniq,
    uniq_by,
)

# pylint: disable=magic-value-comparison


class TestChunkEvery:
    """chunk_every on lists."""

    @staticmethod
    def test_chunks() -> None:
        """Elements are grouped and the tail chunk may be short."""
        assert chunk_every([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    @staticmethod
    def test_empty() -> None:
        """An empty list gives no chunks."""
        assert chunk_every([], 3) == []

    @staticmethod
    @pytest.mark.parametrize("size", [0, -2, 1.5, True])
    def test_invalid_size(size) -> None:
        """Only positive integers are accepted."""
        with pytest.raises(ValueError, match="positive integer"):
            chunk_every([1, 2], size)


class TestFindValue:
    """find_value returns callback results."""

    @staticmethod
    def test_found() -> None:
        """The first non-CONTINUE result is returned."""
        assert find_value([2, 3, 4], lambda x: x * x if x > 2 else CONTINUE) == 9

    @staticmethod
    def test_not_found() -> None:
        """None when every call returns CONTINUE."""
        assert find_value([1, 2], lambda x: CONTINUE) is None

    @staticmethod
    def test_falsy_result_counts() -> None:
        """Falsy results other than CONTINUE are found values."""
        assert find_value([1, 2], lambda x: 0) == 0

    @staticmethod
    def test_stops_early() -> None:
        """The callback is not invoked after a value is found."""
        seen = []

        def probe(x):
            seen.append(x)
            return x if x == 2 else CONTINUE

        find_value([1, 2, 3], probe)
        assert seen == [1, 2]

    @staticmethod
    def test_sentinel_repr() -> None:
        """The sentinel is a singleton with a readable repr."""
        assert repr(CONTINUE) == "CONTINUE"
        assert type(CONTINUE)() is CONTINUE


def test_group_by():
    """Groups keep first-seen key order and element order."""
    words = ["one", "two", "three", "four", "five"]
    assert group_by(words, len) == {3: ["one", "two"], 5: ["three"], 4: ["four", "five"]}


def test_group_by_with_value_fn():
    """value_fn transforms grouped elements."""
    words = ["one", "two", "three"]
    assert group_by(words, len, str.upper) == {3: ["ONE", "TWO"], 5: ["THREE"]}


class TestShuffle:
    """shuffle returns a permutation without touching the input."""

    @staticmethod
    def test_permutation() -> None:
        """Same elements, input untouched."""
        items = list(range(20))
        result = shuffle(items)
        assert sorted(result) == items
        assert items == list(range(20))
        assert result is not items

    @staticmethod
    def test_seeded_rng_is_deterministic() -> None:
        """A seeded Random gives a repeatable order."""
        first = shuffle(range(10), random.Random(42))
        second = shuffle(range(10), random.Random(42))
        assert first == second

    @staticmethod
    def test_short_inputs() -> None:
        """Empty and single-element inputs are returned as lists."""
        assert shuffle([]) == []
        assert shuffle((7,)) == [7]


class TestSortBy:
    """sort_by sorts on mapped values."""

    @staticmethod
    def test_by_absolute_value() -> None:
        """Documented example."""
        assert sort_by([-3, -1, 2], abs, lambda a, b: a - b) == [-1, 2, -3]

    @staticmethod
    def test_stable() -> None:
        """Equal mapped values keep their original order."""
        words = ["bb", "a", "cc", "d", "ee"]
        assert sort_by(words, len, lambda a, b: a - b) == ["a", "d", "bb", "cc", "ee"]

    @staticmethod
    def test_map_fn_called_once_per_element() -> None:
        """The mapping function runs exactly once per element."""
        calls = []

        def key(x):
            calls.append(x)
            return x

        sort_by([3, 1, 2], key, lambda a, b: a - b)
        assert sorted(calls) == [1, 2, 3]


def test_times():
    """times builds n values from their indices."""
    assert times(3) == [0, 1, 2]
    assert times(3, lambda i: i * i) == [0, 1, 4]
    assert times(0) == []


def test_uniq():
    """Duplicates are dropped, first occurrence kept."""
    assert uniq([1, 2, 3, 4, 3, 2, 1]) == [1, 2, 3, 4]
    assert uniq(["b", "a", "b"]) == ["b", "a"]


def test_uniq_by():
    """Elements are unique by the derived value."""
    words = ["cat", "dog", "raccoon", "meow", "woof"]
    assert uniq_by(words, len) == ["cat", "raccoon", "meow"]
