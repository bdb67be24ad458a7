"""Interfaces (application boundary) for BLOGUSER.

Defines framework-free application contracts: ABCs and the errors they raise,
shared by the service layer and adapters (ID generators, user registries).
Business rules stay out of this package.

Dependency rule: this package may import `bloguser.domain` only. It may be
imported by `bloguser.service_layer`, `bloguser.adapters`, and
`bloguser.bootstrap`.
"""
