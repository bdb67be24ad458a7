"""BLOGUSER user commands.

Each invocation works on a fresh in-memory registry built by the top-level
``bloguser`` group, so nothing outlives the command. Results go to **stdout**;
notices and errors go to **stderr**.

Commands
- ``bloguser new NAME`` prints a freshly created user as JSON (not stored).
- ``bloguser register NAME[:ROLE]...`` adds users and lists them back.
- ``bloguser lookup ID --seed NAME[:ROLE]...`` looks up one id in a seeded
  session; exits with status 1 when it is missing.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from bloguser.domain.model import BlogUser, Role
from bloguser.interfaces.user_registry import UserRegistryError

from .helpers import error, parse_user_specs, success

if TYPE_CHECKING:
    from bloguser.bootstrap import AppContainer

logger = logging.getLogger(__name__)

ROLE_CHOICES = [role.value for role in Role]


def _register_all(
    app: AppContainer, specs: list[tuple[str, Role | None]]
) -> list[BlogUser]:
    service = app.service
    users = []
    for name, role in specs:
        user = service.create_user(
            name, role if role is not None else app.config.default_role
        )
        service.add_user(user.id, user)
        users.append(user)
    return users


def _render_users(users: list[BlogUser]) -> None:
    table = Table("ID", "Name", "Role")
    for user in users:
        table.add_row(user.id, user.name, user.role.value)
    Console().print(table)


@click.command()
@click.argument("name")
@click.option(
    "--role",
    type=click.Choice(ROLE_CHOICES, case_sensitive=False),
    default=None,
    help="Role of the new user (defaults to the configured default role).",
)
@click.pass_obj
def new(app: AppContainer, name: str, role: str | None) -> None:
    """Create a user and print it as JSON (the user is not stored)."""
    chosen = Role.parse(role) if role else app.config.default_role
    user = app.service.create_user(name, chosen)
    click.echo(json.dumps(user.to_dict()))


@click.command()
@click.argument("specs", nargs=-1, required=True, callback=parse_user_specs)
@click.pass_obj
def register(app: AppContainer, specs: list[tuple[str, Role | None]]) -> None:
    """Add users given as NAME[:ROLE] and list them back from the registry."""
    try:
        users = _register_all(app, specs)
        stored = [app.service.get_user(user.id) for user in users]
    except UserRegistryError as e:
        error(str(e))
        raise SystemExit(1) from e
    _render_users(stored)
    success(f"Registered {len(stored)} user(s).")


@click.command()
@click.argument("user_id")
@click.option(
    "--seed",
    "seeds",
    multiple=True,
    callback=parse_user_specs,
    help="User to add before the lookup, as NAME[:ROLE]. Repeatable.",
)
@click.pass_obj
def lookup(
    app: AppContainer, user_id: str, seeds: list[tuple[str, Role | None]]
) -> None:
    """Look up USER_ID after adding the --seed users."""
    seeded = _register_all(app, seeds)
    logger.info("Seeded %d user(s)", len(seeded))
    try:
        user = app.service.get_user(user_id)
    except UserRegistryError as e:
        error(str(e))
        raise SystemExit(1) from e
    click.echo(json.dumps(user.to_dict()))
