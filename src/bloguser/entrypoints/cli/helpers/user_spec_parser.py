"""Parse ``NAME[:ROLE]`` arguments given to the user commands."""

from __future__ import annotations

import click

from bloguser.domain.model import Role


def parse_user_spec(item: str) -> tuple[str, Role | None]:
    """Split ``NAME[:ROLE]`` into a name and an optional role.

    Only the last colon separates the role, so ``"Ann: the Great:writer"``
    names ``"Ann: the Great"``. An item without a colon carries no role.

    Raises:
        click.BadParameter: If the name is empty or the role is unknown.
    """
    name, sep, role_text = item.rpartition(":")
    if not sep:
        name, role_text = item, ""
    if not name.strip():
        raise click.BadParameter(f"Expected NAME[:ROLE], got {item!r}")
    if not sep:
        return name, None
    try:
        return name, Role.parse(role_text)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def parse_user_specs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[tuple[str, Role | None]]:
    """Click callback applying `parse_user_spec` to each value."""
    return [parse_user_spec(item) for item in value]
