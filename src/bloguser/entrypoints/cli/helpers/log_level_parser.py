"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL, given repeatedly or as one
comma/space-separated string, into a mapping of logger names to numeric
logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS: dict[str, int] = {}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split the raw option value(s) on commas and whitespace, dropping empties."""
    raw = [value] if isinstance(value, str) else list(value)
    return [s for v in raw for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS and applies each override in order. LEVEL
    must be a standard logging level name (DEBUG, INFO, WARNING, ...), in any
    case.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
