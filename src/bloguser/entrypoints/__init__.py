"""Entrypoints (inbound adapters) for BLOGUSER.

Expose the application to the outside world through the CLI. Parse inputs,
call the service built by `bloguser.bootstrap`, and present results.

Dependency rule: may import `bloguser.bootstrap` and `bloguser.service_layer`;
avoid importing `bloguser.adapters` directly.
"""
