"""Function utilities."""

import asyncio
from typing import Any, TypeVar

T = TypeVar("T")


def identity(value: T) -> T:
    """Return `value` unchanged."""
    return value


def noop(*args: Any, **kwargs: Any) -> None:  # pylint: disable=unused-argument
    """Ignore all arguments and return ``None``."""


async def sleep(ms: float) -> None:
    """Suspend the current coroutine for `ms` milliseconds.

    Example:
        ```python
        await sleep(1000)
        ```
    """
    await asyncio.sleep(ms / 1000)
