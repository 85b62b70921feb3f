"""TRASHPANDA URL CLI: merge query parameters, extract hostnames, encode text.

Results are written to **stdout**, one line per invocation; warnings go to
**stderr**.

Failure modes
- An absolute ``BASE`` that cannot be parsed → ``ClickException`` (exit 1).
- A malformed ``--param`` → ``BadParameter`` (exit 2).
"""

import logging

import click
import click_extra as clickx

from trashpanda.errors import InvalidUrlError
from trashpanda.url import encode_rfc3986, hostname, merge_url_params

from .helpers import parse_param_pairs, warn

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def url() -> None:
    """URL query-string helpers."""


@url.command()
@click.argument("base")
@click.argument("queries", metavar="[QUERY]...", nargs=-1)
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    callback=parse_param_pairs,
    help="Set a parameter. Repeatable; applied after every QUERY.",
)
@click.option(
    "--drop",
    "-d",
    "drops",
    multiple=True,
    metavar="KEY",
    help="Remove a parameter. Repeatable; applied last.",
)
def merge(
    base: str,
    queries: tuple[str, ...],
    params: list[tuple[str, str]],
    drops: tuple[str, ...],
) -> None:
    """Merge query parameters into BASE and print the resulting URL.

    Each QUERY is pre-encoded query text such as 'limit=20&page=2' and is
    applied in order. Later values win; a key keeps its first position.

    \b
    Example:
      $ trashpanda url merge "/search?limit=200" "page=2" -p query="foo bar"
      /search?limit=200&page=2&query=foo+bar
    """
    sources = [*queries, params, {key: None for key in drops}]
    logger.debug("Merging %d source(s) into %s", len(sources), base)
    try:
        merged = merge_url_params(base, *sources)
    except InvalidUrlError as e:
        raise click.ClickException(str(e)) from e
    click.echo(merged)


@url.command(name="hostname")
@click.argument("target", metavar="URL")
def hostname_cmd(target: str) -> None:
    """Print the hostname of URL (an empty line when it has none)."""
    if not (host := hostname(target)):
        warn(f"No hostname found in {target!r}.")
    click.echo(host)


@url.command()
@click.argument("text")
def encode(text: str) -> None:
    """Print TEXT percent-encoded per RFC 3986."""
    click.echo(encode_rfc3986(text))
