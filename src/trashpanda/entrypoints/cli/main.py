"""TRASHPANDA CLI entry point.

Defines the top-level ``trashpanda`` command (via Click-Extra) and registers
its subcommands.

Currently available groups
- ``trashpanda url`` — merge query parameters, extract hostnames, encode text.

Notes
- The CLI version is sourced from `trashpanda.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The base console level is WARNING, or ``TRASHPANDA_LOG_LEVEL`` when set;
  each ``-v`` lowers it and each ``-q`` raises it by one step.

Examples
    $ trashpanda --version
    $ trashpanda -vv url merge /api "limit=10" -p page=2
"""

import logging

import click
import click_extra as clickx

from trashpanda import __version__, config
from trashpanda.logging import config_console_handler, log_startup

from .url import url as url_group

logger = logging.getLogger(__name__)


HELP = """TRASHPANDA command-line interface.

    Small, stateless helpers from the trashpanda library, exposed for shell
    scripts: merge query parameters into URLs, extract hostnames and
    percent-encode text.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the console log level by one step per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the console log level by one step per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@clickx.pass_context
def trashpanda(
    ctx: click.Context, verbose_count: int, quiet_count: int, debug: bool
) -> None:
    """TRASHPANDA command-line interface."""

    # 0) compute effective verbosity
    try:
        base_level = config.get_log_level()
    except config.InvalidLogLevelError as e:
        raise click.ClickException(str(e)) from e
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler and the root logger
    use_color = ctx.color is not False  # None or True => allow color
    handler = config_console_handler(level=level, debug_mode=debug, color=use_color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    # 2) log startup info
    log_startup(logger, app_version=__version__, level=level, handlers=[handler])

    ctx.call_on_close(logging.shutdown)


trashpanda.add_command(url_group)
