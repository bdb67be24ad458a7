"""Configuration utilities for BLOGUSER.

This module centralizes the settings used to assemble a user service and the
environment variables they can be read from.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias, cast

import click

from bloguser.domain.model import Role

IdScheme: TypeAlias = Literal["uuid4", "ulid", "simple"]

ID_SCHEMES: tuple[IdScheme, ...] = ("uuid4", "ulid", "simple")

ID_SCHEME_ENV = "BLOGUSER_ID_SCHEME"  # pragma: no mutate
DEFAULT_ROLE_ENV = "BLOGUSER_DEFAULT_ROLE"  # pragma: no mutate
STRICT_IDS_ENV = "BLOGUSER_STRICT_IDS"  # pragma: no mutate


class InvalidConfigError(Exception):
    """Raised when a configuration value cannot be understood.

    Attributes:
        name: The setting (environment variable) at fault.
        value: The rejected value.
    """

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class RegistryConfig:
    """Settings for a user service.

    Attributes:
        id_scheme: Which ID generator to use for new users.
        default_role: Role given to users created without an explicit one.
        enforce_matching_ids: Reject adds whose key differs from the record id.
    """

    id_scheme: IdScheme = "uuid4"
    default_role: Role = Role.READER
    enforce_matching_ids: bool = False


def parse_id_scheme(value: str) -> IdScheme:
    """Validate and normalize an ID scheme name.

    Raises:
        InvalidConfigError: If ``value`` is not one of `ID_SCHEMES`.
    """
    scheme = value.strip().lower()
    if scheme not in ID_SCHEMES:
        raise InvalidConfigError(
            ID_SCHEME_ENV, value, f"expected one of {', '.join(ID_SCHEMES)}"
        )
    return cast(IdScheme, scheme)


def parse_role(value: str) -> Role:
    """Parse a role name or value, case-insensitively.

    Raises:
        InvalidConfigError: If ``value`` names no role.
    """
    try:
        return Role.parse(value)
    except ValueError as e:
        raise InvalidConfigError(DEFAULT_ROLE_ENV, value, str(e)) from e


def parse_flag(value: str) -> bool:
    """Parse the strict-ids switch the way Click parses boolean options.

    Accepts ``1/0``, ``true/false``, ``t/f``, ``yes/no``, ``y/n`` and
    ``on/off`` in any case.

    Raises:
        InvalidConfigError: If ``value`` is not a recognised boolean.
    """
    try:
        return click.BOOL.convert(value, None, None)
    except click.BadParameter as e:
        raise InvalidConfigError(
            STRICT_IDS_ENV, value, "expected a boolean such as true/false, 1/0, yes/no"
        ) from e


def config_from_env(environ: Mapping[str, str] | None = None) -> RegistryConfig:
    """Build a `RegistryConfig` from environment variables.

    Reads:
    - `BLOGUSER_ID_SCHEME` → ``id_scheme`` (``uuid4``, ``ulid`` or ``simple``)
    - `BLOGUSER_DEFAULT_ROLE` → ``default_role`` (``reader`` or ``writer``)
    - `BLOGUSER_STRICT_IDS` → ``enforce_matching_ids`` (see `parse_flag`)

    Unset or empty variables keep the `RegistryConfig` defaults. Values are
    parsed exactly as the matching ``bloguser`` CLI options parse them.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`.

    Returns:
        The resulting configuration.

    Raises:
        InvalidConfigError: If a variable holds an unknown scheme, role or
            boolean.
    """
    env = os.environ if environ is None else environ
    defaults = RegistryConfig()

    id_scheme = defaults.id_scheme
    if scheme := env.get(ID_SCHEME_ENV):
        id_scheme = parse_id_scheme(scheme)

    default_role = defaults.default_role
    if role := env.get(DEFAULT_ROLE_ENV):
        default_role = parse_role(role)

    strict_ids = defaults.enforce_matching_ids
    if flag := env.get(STRICT_IDS_ENV):
        strict_ids = parse_flag(flag)

    return RegistryConfig(
        id_scheme=id_scheme,
        default_role=default_role,
        enforce_matching_ids=strict_ids,
    )
