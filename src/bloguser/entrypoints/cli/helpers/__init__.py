"""CLI helpers for BLOGUSER.

Utilities used by the command-line interface: parsers for repeatable options
and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .config_option_parser import parse_id_scheme_option, parse_role_option
from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .user_spec_parser import parse_user_specs

__all__ = [
    "parse_id_scheme_option",
    "parse_log_level",
    "parse_role_option",
    "parse_user_specs",
    "error",
    "success",
    "warn",
]
