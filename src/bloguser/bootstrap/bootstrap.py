"""Bootstrap a user service from configuration."""

from __future__ import annotations

from dataclasses import dataclass

from bloguser import config
from bloguser.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from bloguser.adapters.user_registry import InMemoryUserRegistry
from bloguser.interfaces.id_generator import IdGenerator
from bloguser.service_layer.user_service import BlogUserService


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    config: config.RegistryConfig
    service: BlogUserService


def build_id_generator(scheme: str) -> IdGenerator:
    """Build the ID generator for the named scheme.

    Raises:
        ValueError: If ``scheme`` is not a known ID scheme.
    """
    match scheme:
        case "uuid4":
            return UUIDv4Generator()
        case "ulid":
            return ULIDGenerator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id scheme: {scheme}")


def build_service(cfg: config.RegistryConfig) -> BlogUserService:
    """Build a user service backed by a fresh in-memory registry."""
    return BlogUserService(
        InMemoryUserRegistry(),
        build_id_generator(cfg.id_scheme),
        enforce_matching_ids=cfg.enforce_matching_ids,
    )


def bootstrap(cfg: config.RegistryConfig | None = None) -> AppContainer:
    """Assemble the application.

    Args:
        cfg: Configuration to use. When None, it is read from the environment
            with `config.config_from_env`.
    """
    if cfg is None:
        cfg = config.config_from_env()
    return AppContainer(config=cfg, service=build_service(cfg))
