"""Service layer for BLOGUSER.

Implements the application use-cases (create, add and get users) on top of the
ports defined in `bloguser.interfaces`.

Dependency rule: may import `bloguser.domain` and `bloguser.interfaces`, but
not `bloguser.adapters` or `bloguser.entrypoints`.
"""

from .user_service import BlogUserService

__all__ = ["BlogUserService"]
