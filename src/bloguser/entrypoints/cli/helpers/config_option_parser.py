"""Click callbacks for the registry settings of the ``bloguser`` group.

Each callback defers to the matching parser in `bloguser.config`, so a value
means the same thing on the command line, in the option's environment
variable, and in `config_from_env`.
"""

from __future__ import annotations

import click

from bloguser.config import IdScheme, InvalidConfigError, parse_id_scheme, parse_role
from bloguser.domain.model import Role


def parse_id_scheme_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str,
) -> IdScheme:
    """Click callback normalizing ``--id-scheme``.

    Raises:
        click.BadParameter: If the scheme is unknown.
    """
    try:
        return parse_id_scheme(value)
    except InvalidConfigError as e:
        raise click.BadParameter(str(e)) from e


def parse_role_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str,
) -> Role:
    """Click callback turning ``--default-role`` into a `Role`."""
    try:
        return parse_role(value)
    except InvalidConfigError as e:
        raise click.BadParameter(str(e)) from e
