"""Object (mapping) utilities, including dot-notation access into nested data.

A dot path such as ``"a.0.b"`` walks mappings by key and lists by index. Path
segments made only of ASCII digits are indices; everything else is a key.
"""

from collections.abc import Callable, Hashable, Mapping, MutableMapping, Sequence
from typing import Any, TypeVar

from trashpanda.errors import PathError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
K2 = TypeVar("K2", bound=Hashable)
V2 = TypeVar("V2")


def get_in(obj: Mapping[str, Any] | Sequence[Any], path: str) -> Any:
    """Get a value from a nested structure via dot notation.

    Returns ``None`` when any segment of the path does not exist.

    Example:
        ```python
        >>> get_in({"a": {"b": [10, {"c": 42}]}}, "a.b.1.c")
        42
        ```
    """
    current: Any = obj
    for key in path.split("."):
        if isinstance(current, Mapping):
            if key not in current:
                return None
            current = current[key]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not _is_index(key) or int(key) >= len(current):
                return None
            current = current[int(key)]
        else:
            return None
    return current


def _is_index(key: str) -> bool:
    return key.isascii() and key.isdigit()


def _assign(container: Any, key: str, value: Any) -> Any:
    if isinstance(container, list):
        index = int(key)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    else:
        container[key] = value
    return value


def put_in(obj: MutableMapping[str, Any] | list[Any], path: str, value: Any) -> None:
    """Put `value` into a nested structure via dot notation (mutates `obj`).

    Missing intermediate containers are created: a list when the next segment
    is an index, otherwise a dict. Lists are padded with ``None`` when an index
    lies past the end. An empty path does nothing.

    Raises:
        PathError: If a list is addressed by key, a mapping by index, or the
            path runs into a value that is neither.

    Example:
        ```python
        >>> y = {"a": [{"c": 42}]}
        >>> put_in(y, "a.1", {"c": 100})
        >>> y
        {'a': [{'c': 42}, {'c': 100}]}
        ```
    """
    if path == "":
        return
    keys = path.split(".")
    current: Any = obj
    for position, key in enumerate(keys):
        is_index = _is_index(key)
        if isinstance(current, list):
            if not is_index:
                raise PathError(path, f"attempting to access list with key {key!r}")
        elif isinstance(current, MutableMapping):
            if is_index:
                raise PathError(
                    path, f"attempting to access mapping with numeric index {key}"
                )
        else:
            raise PathError(path, "encountered a non-list, non-mapping value")

        if position == len(keys) - 1:
            _assign(current, key, value)
            return

        if is_index:
            index = int(key)
            child = current[index] if index < len(current) else None
        else:
            child = current.get(key)
        if child is None:
            empty = [] if _is_index(keys[position + 1]) else {}
            child = _assign(current, key, empty)
        current = child


def map_object(
    obj: Mapping[K, V], key_value_fn: Callable[[tuple[K, V]], tuple[K2, V2]]
) -> dict[K2, V2]:
    """Map each ``(key, value)`` entry to a new entry; later duplicates win.

    Example:
        ```python
        >>> map_object({"a": "alpha", "b": "beta"}, lambda kv: (kv[0], kv[1].upper()))
        {'a': 'ALPHA', 'b': 'BETA'}
        ```
    """
    return dict(key_value_fn(entry) for entry in obj.items())


def invert_object(obj: Mapping[K, K2]) -> dict[K2, K]:
    """Swap keys and values; for duplicated values the last key wins."""
    return map_object(obj, lambda entry: (entry[1], entry[0]))
