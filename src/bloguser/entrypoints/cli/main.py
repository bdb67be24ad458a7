"""BLOGUSER CLI entry point.

Defines the top-level ``bloguser`` command (via Click-Extra), configures
logging, assembles the application and registers the user subcommands.

Notes
- The CLI version is sourced from `bloguser.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The assembled `AppContainer` is stored as the Click context object.

Examples
    $ bloguser --version
    $ bloguser new "John Doe" --role writer
    $ bloguser --id-scheme simple register alice bob:writer
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from bloguser import __version__
from bloguser.bootstrap import bootstrap
from bloguser.config import ID_SCHEMES, IdScheme, RegistryConfig
from bloguser.domain.model import Role
from bloguser.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers import parse_id_scheme_option, parse_log_level, parse_role_option
from .users import lookup, new, register

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """BLOGUSER command-line interface.

    Create blog users with generated ids, add them to an in-memory registry,
    and read them back. Every invocation starts from an empty registry.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=Path(user_log_dir("bloguser", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="BLOGUSER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING or ERROR occurs."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L bloguser.service_layer=INFO)."
    ),
    default=(),
    show_envvar=True,
)
@click.option(
    "--id-scheme",
    metavar=f"[{'|'.join(ID_SCHEMES)}]",
    callback=parse_id_scheme_option,
    default="uuid4",
    envvar="BLOGUSER_ID_SCHEME",
    show_default=True,
    show_envvar=True,
    help="How ids of new users are generated.",
)
@click.option(
    "--default-role",
    metavar=f"[{'|'.join(role.value for role in Role)}]",
    callback=parse_role_option,
    default=Role.READER.value,
    envvar="BLOGUSER_DEFAULT_ROLE",
    show_default=True,
    show_envvar=True,
    help="Role given to users created without an explicit one.",
)
@click.option(
    "--strict-ids/--no-strict-ids",
    default=False,
    envvar="BLOGUSER_STRICT_IDS",
    show_envvar=True,
    help="Require the registry key to match the user's own id.",
)
@clickx.pass_context
def bloguser(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    logger_levels: dict[str, int],
    id_scheme: IdScheme,
    default_role: Role,
    strict_ids: bool,
) -> None:
    """BLOGUSER command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler, plus the optional flight recorder
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(config_flight_recorder(path=log_path))

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 2) assemble the application
    cfg = RegistryConfig(
        id_scheme=id_scheme,
        default_role=default_role,
        enforce_matching_ids=strict_ids,
    )
    ctx.obj = bootstrap(cfg)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        id_scheme=cfg.id_scheme,
        strict_ids=cfg.enforce_matching_ids,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


bloguser.add_command(new)
bloguser.add_command(register)
bloguser.add_command(lookup)
