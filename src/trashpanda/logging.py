"""Logging helpers used by the TRASHPANDA command line.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached by the CLI through `config_console_handler`, which renders records on
stderr with Rich. Records from other packages get a short ``[name]`` prefix so
they stand out from the project's own messages.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "trashpanda"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[package]"`` for non-project loggers.

    Project records get an empty prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # e.g. "natsort.utils" -> "[natsort]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a RichHandler writing to stderr.

    Args:
        level: Minimum level shown (forced to DEBUG in `debug_mode`).
        debug_mode: Show timestamps, logger names and source paths.
        color: Disable to honour ``--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def log_startup(
    logger: Logger, *, app_version: str, level: int, handlers: list[logging.Handler]
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    Args:
        logger: Logger used to emit the messages.
        app_version: Version string of the package.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
    """
    logger.info(
        "TRASHPANDA %s (console=%s)", app_version, logging.getLevelName(level)
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
