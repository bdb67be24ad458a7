"""Bootstrap (composition root) for BLOGUSER.

Assembles the application at runtime: picks the concrete ID generator, creates
a fresh in-memory registry, and hands both to the user service.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `bloguser.adapters`, `bloguser.service_layer`,
  `bloguser.interfaces`, `bloguser.domain`, and `bloguser.config`.
- Inner layers must not import `bloguser.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
