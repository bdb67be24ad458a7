"""Adapters (infrastructure) for BLOGUSER.

Provide concrete implementations of the ports in `bloguser.interfaces`
(ID generators, user registries).

Dependency rule: may import `bloguser.domain` and `bloguser.interfaces`; the
domain must not import this package.
"""
