"""Helpers for parsing logger-level CLI options.

Options take NAME=LEVEL items, repeated or comma/space-separated. Items are
flattened and the level names converted to numeric logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"inflect": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or a sequence of strings into non-empty items.

    Args:
        value: The option value from Click: a plain string (e.g. from an
            environment variable) or a tuple from a repeatable option.

    Returns:
        list[str]: Items split on commas and whitespace.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    The result starts from DEFAULT_LIB_LEVELS; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, separator, level_str = item.partition("=")
        if not separator or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
