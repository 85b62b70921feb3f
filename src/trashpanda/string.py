"""String utilities: casing, pluralizing, base-64, hashing and CSS rendering."""

import base64
import re
from collections.abc import Mapping

from trashpanda import array

_CAMEL_HUMP = re.compile(r"[A-Z]")
_NAME_PREFIX = re.compile(r"^(the|a|an) ", re.IGNORECASE)


def capitalize(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Unlike `str.capitalize`, the remaining characters keep their case.
    """
    return text[:1].upper() + text[1:]


def chunk_every(text: str, size: int) -> list[str]:
    """Split `text` into chunks of `size` characters.

    Raises:
        ValueError: If `size` is not a positive integer.
    """
    return array.chunk_every(text, size)  # type: ignore[return-value]


def countable(count: int, singular: str, plural: str | None = None) -> str:
    """Count something in English.

    Example:
        ```python
        >>> countable(1, "item"), countable(0, "item"), countable(2, "person", "people")
        ('1 item', '0 items', '2 people')
        ```
    """
    if count == 1:
        return f"1 {singular}"
    return f"{count} {plural if plural is not None else singular + 's'}"


def _pad64(data: str) -> str:
    return data + "=" * (-len(data) % 4)


def encode64(data: str, padding: bool = False) -> str:
    """Base-64 encode the UTF-8 bytes of `data`, unpadded unless requested.

    Example:
        ```python
        >>> encode64("a"), encode64("a", True)
        ('YQ', 'YQ==')
        ```
    """
    encoded = base64.b64encode(data.encode()).decode("ascii")
    return encoded if padding else encoded.rstrip("=")


def decode64(data: str) -> str:
    """Decode base-64 text produced by `encode64`; padding is optional.

    Raises:
        binascii.Error: If `data` is not valid base-64.
    """
    return base64.b64decode(_pad64(data)).decode()


def url_encode64(data: str, padding: bool = False) -> str:
    """Base-64 encode with the URL and filename safe alphabet (``-`` and ``_``)."""
    encoded = base64.urlsafe_b64encode(data.encode()).decode("ascii")
    return encoded if padding else encoded.rstrip("=")


def url_decode64(data: str) -> str:
    """Decode URL-safe base-64 text; padding is optional."""
    return base64.urlsafe_b64decode(_pad64(data)).decode()


def hash_code(text: str) -> int:
    """DJBX33A (times 33 with addition), wrapped to a signed 32-bit integer.

    The hash runs over UTF-16 code units, so characters outside the Basic
    Multilingual Plane contribute their two surrogate halves.

    Example:
        ```python
        >>> hash_code("abc")
        108966
        ```
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = int.from_bytes(data[i : i + 2], "little")
        h = (h * 33 + unit) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def style_to_string(styles: Mapping[str, str | int | float | None]) -> str:
    """Render a CSS style mapping as an inline style string.

    camelCase keys become kebab-case and ``None`` values are skipped.

    Example:
        ```python
        >>> style_to_string({"backgroundColor": "#000", "position": "absolute"})
        'background-color:#000;position:absolute'
        ```
    """
    return ";".join(
        f"{_CAMEL_HUMP.sub(lambda m: '-' + m.group().lower(), key)}:{value}"
        for key, value in styles.items()
        if value is not None
    )


def unprefix_name(name: str) -> str:
    """Remove a leading "the", "a" or "an" for a more natural sort order.

    Example:
        ```python
        >>> unprefix_name("The Odor"), unprefix_name("Theodore")
        ('Odor', 'Theodore')
        ```
    """
    return _NAME_PREFIX.sub("", name, count=1)
