"""Parsing of ``KEY=VALUE`` query-parameter options.

Values are taken verbatim: everything after the first ``=`` belongs to the
value, so ``-p expr=a=b`` sets ``expr`` to ``a=b``. An empty value is allowed
(``-p flag=``); use ``--drop`` to remove a key instead.
"""

import click


def parse_param_pairs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[tuple[str, str]]:
    """Click callback turning repeated ``KEY=VALUE`` options into pairs.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: Raw option values, in command-line order.

    Returns:
        list[tuple[str, str]]: ``(key, value)`` pairs in the order given.

    Raises:
        click.BadParameter: If an item has no ``=`` or an empty key.
    """
    pairs: list[tuple[str, str]] = []
    for item in value:
        key, sep, text = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        if not (key := key.strip()):
            raise click.BadParameter(f"Missing key in {item!r}")
        pairs.append((key, text))
    return pairs
