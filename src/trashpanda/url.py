"""URL helpers: query-parameter merging, hostnames and RFC 3986 encoding.

The centerpiece is `merge_url_params`, which merges any number of parameter
sources into the query string of a base URL:

    ```python
    >>> merge_url_params("/search?limit=200&foo=bar", {"foo": None, "limit": 50})
    '/search?limit=50'
    >>> merge_url_params("/page#section1", {"q": "test"})
    '/page?q=test#section1'
    ```

A *parameter source* is any of:

- a mapping of key to primitive value (insertion order is kept);
- an iterable of ``(key, value)`` pairs;
- pre-encoded query text, with or without a leading ``?``;
- a `QueryParams` collection;
- ``None``, which contributes nothing.

Sources are applied in argument order. ``None`` as a value removes the key;
any other value replaces the previous one. A key keeps the position where it
was first seen, so the last write wins without reordering the query.

All parsing and encoding goes through `urllib.parse`. Query text is serialized
as ``application/x-www-form-urlencoded`` (space becomes ``+``).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias
from urllib.parse import (
    ParseResult,
    SplitResult,
    parse_qsl,
    quote,
    urlencode,
    urljoin,
    urlsplit,
    urlunsplit,
)

from trashpanda.config import ABSOLUTE_URL_PATTERN, PLACEHOLDER_BASE
from trashpanda.errors import InvalidUrlError

logger = logging.getLogger(__name__)

Primitive: TypeAlias = bool | int | float | str | None
ParsedUrl: TypeAlias = SplitResult | ParseResult

# JavaScript switches to exponent notation at this magnitude; integral floats
# below it render without a fractional part.
_MAX_PLAIN_FLOAT = 1e21

_RFC3986_SUBDELIMS = re.compile(r"[!'()*]")


def _to_text(value: Primitive) -> str:
    """Coerce a non-null primitive to its query-string text.

    Booleans render as ``true``/``false``. Integral floats drop the fractional
    part (``2.0`` -> ``"2"``); other floats use the shortest round-trip
    ``repr`` (``98.6`` -> ``"98.6"``, ``1e-07`` -> ``"1e-07"``, NaN -> ``"nan"``,
    infinity -> ``"inf"``).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return str(int(value))
        return repr(value)
    return str(value)


class QueryParams:
    """An ordered multi-map of query parameters.

    Mirrors the semantics of the WHATWG ``URLSearchParams`` type: duplicates
    are allowed, `set` collapses them onto the first occurrence, and `str`
    gives the form-encoded query without a leading ``?``.

    Args:
        init: Initial entries; any parameter source accepted by
            `merge_url_params`. Entries are appended as-is, so duplicate keys
            in query text are preserved. ``None`` values are skipped.
    """

    __slots__ = ("_pairs",)

    def __init__(self, init: ParameterSource = None) -> None:
        self._pairs: list[tuple[str, str]] = [
            (key, _to_text(value))
            for key, value in iter_source(init)
            if value is not None
        ]

    def append(self, key: str, value: Primitive) -> None:
        """Add an entry at the end, keeping any existing entries for `key`."""
        if value is not None:
            self._pairs.append((key, _to_text(value)))

    def set(self, key: str, value: Primitive) -> None:
        """Set `key` to `value`, or delete it when `value` is ``None``.

        The first entry for `key` is updated in place and later duplicates are
        dropped; a new key is appended at the end.
        """
        if value is None:
            self.delete(key)
            return
        text = _to_text(value)
        pairs: list[tuple[str, str]] = []
        found = False
        for k, v in self._pairs:
            if k != key:
                pairs.append((k, v))
            elif not found:
                pairs.append((k, text))
                found = True
        if not found:
            pairs.append((key, text))
        self._pairs = pairs

    def delete(self, key: str) -> None:
        """Remove every entry for `key`."""
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def get(self, key: str) -> str | None:
        """Return the first value for `key`, or ``None``."""
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> list[str]:
        """Return every value for `key`, in order."""
        return [v for k, v in self._pairs if k == key]

    def items(self) -> list[tuple[str, str]]:
        """Return a copy of the entries as ``(key, value)`` pairs."""
        return list(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


ParameterSource: TypeAlias = (
    QueryParams
    | Mapping[str, Primitive | list[Primitive] | tuple[Primitive, ...]]
    | Iterable[tuple[str, Primitive]]
    | str
    | None
)


def iter_source(source: ParameterSource) -> Iterator[tuple[str, Primitive]]:
    """Normalize a parameter source into ordered ``(key, value)`` pairs.

    A mapping value that is a list or tuple (the shape returned by
    `urllib.parse.parse_qs`) yields one pair per element, so the last element
    wins when the pairs are applied; an empty list yields a removal.

    Args:
        source: Any accepted parameter source.

    Yields:
        ``(key, value)`` pairs, where a ``None`` value marks a removal.

    Raises:
        TypeError: If `source` is not iterable as pairs.
    """
    if source is None:
        return
    if isinstance(source, QueryParams):
        yield from source
    elif isinstance(source, str):
        yield from parse_qsl(source.removeprefix("?"), keep_blank_values=True)
    elif isinstance(source, Mapping):
        for key, value in source.items():
            if isinstance(value, (list, tuple)):
                if not value:
                    yield key, None
                for item in value:
                    yield key, item
            else:
                yield key, value
    else:
        for key, value in source:
            yield key, value


def _parse_absolute(url: str) -> SplitResult:
    try:
        parts = urlsplit(url)
        _ = parts.port  # urlsplit defers port validation to attribute access
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e
    if not parts.hostname:
        raise InvalidUrlError(url, "missing host")
    return parts


def _split_base(base: str | ParsedUrl) -> tuple[SplitResult, bool]:
    """Split `base` into URL parts and report whether it is absolute."""
    if isinstance(base, (SplitResult, ParseResult)):
        return urlsplit(base.geturl()), True
    if ABSOLUTE_URL_PATTERN.match(base):
        return _parse_absolute(base), True
    return urlsplit(urljoin(PLACEHOLDER_BASE, base)), False


def merge_url_params(base: str | ParsedUrl, *sources: ParameterSource) -> str:
    """Merge parameter sources into the query string of `base`.

    Args:
        base: An absolute ``http(s)://`` URL, a relative URL such as
            ``/search?limit=200``, or a parsed `SplitResult`/`ParseResult`.
        *sources: Parameter sources applied in order (see module docs).

    Returns:
        The merged URL. Absolute input keeps its scheme, authority and path;
        relative input returns only ``path[?query][#fragment]``. The fragment
        is preserved and always follows the query.

    Raises:
        InvalidUrlError: If `base` starts with ``http://``/``https://`` but
            cannot be parsed (missing host, bad IPv6 literal, bad port).

    Examples:
        ```python
        >>> merge_url_params("/search", {"a": None, "limit": 200, "query": "foo bar"})
        '/search?limit=200&query=foo+bar'
        >>> merge_url_params("https://google.com/?q=foo", {"q": "bar"})
        'https://google.com/?q=bar'
        ```
    """
    parts, absolute = _split_base(base)
    params = QueryParams(parts.query)
    for source in sources:
        for key, value in iter_source(source):
            params.set(key, value)

    query = str(params)
    if absolute:
        merged = urlunsplit(parts._replace(query=query))
    else:
        merged = urlunsplit(("", "", parts.path, query, parts.fragment))
    logger.debug(
        "Merged %d parameter source(s) into %r -> %r", len(sources), base, merged
    )
    return merged


def hostname(url: str | ParsedUrl | None) -> str:
    """Return the lowercased hostname of `url`, without port.

    Returns ``""`` for ``None``, empty input, relative URLs and anything that
    cannot be parsed.

    Example:
        ```python
        >>> hostname("https://subdomain.example.org:8080/path?query=value")
        'subdomain.example.org'
        ```
    """
    if not url:
        return ""
    if isinstance(url, (SplitResult, ParseResult)):
        return url.hostname or ""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def encode_rfc3986(text: str) -> str:
    """Percent-encode `text` so only RFC 3986 unreserved characters remain.

    Like JavaScript's ``encodeURIComponent`` plus ``!'()*``, which are encoded
    with lowercase hex digits.

    Example:
        ```python
        >>> encode_rfc3986("interrobang?!")
        'interrobang%3F%21'
        ```
    """
    encoded = quote(text, safe="!'()*")
    return _RFC3986_SUBDELIMS.sub(lambda m: f"%{ord(m.group()):x}", encoded)
