"""Domain layer for BLOGUSER.

Contains the user record and its role enumeration. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `bloguser.adapters` or `bloguser.entrypoints`.
"""

from .model import BlogUser, Role

__all__ = ["BlogUser", "Role"]
