"""Test the bootstrap function."""

import pytest

from bloguser.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from bloguser.adapters.user_registry import InMemoryUserRegistry
from bloguser.bootstrap import AppContainer, bootstrap
from bloguser.bootstrap.bootstrap import build_id_generator, build_service
from bloguser.config import RegistryConfig
from bloguser.domain.model import Role
from bloguser.interfaces.user_registry import UserIdMismatchError


class TestBuildIdGenerator:
    """Tests for the build_id_generator function."""

    @staticmethod
    @pytest.mark.parametrize(
        "scheme, expected",
        [("uuid4", UUIDv4Generator), ("ulid", ULIDGenerator), ("simple", SimpleIdGenerator)],
    )
    def test_known_schemes(scheme, expected):
        """Each scheme maps onto its generator."""
        assert isinstance(build_id_generator(scheme), expected)

    @staticmethod
    def test_unknown_scheme_raises():
        """Unknown schemes are rejected."""
        with pytest.raises(ValueError, match="unknown id scheme: snowflake"):
            build_id_generator("snowflake")


class TestBuildService:
    """Tests for the build_service function."""

    @staticmethod
    def test_uses_fresh_in_memory_registry():
        """Every service gets its own empty registry."""
        first = build_service(RegistryConfig())
        second = build_service(RegistryConfig())
        assert isinstance(first.registry, InMemoryUserRegistry)
        assert first.registry is not second.registry
        assert len(first.registry) == 0

    @staticmethod
    def test_strict_ids_are_wired():
        """enforce_matching_ids reaches the service."""
        service = build_service(RegistryConfig(enforce_matching_ids=True))
        user = service.create_user("John Doe")
        with pytest.raises(UserIdMismatchError):
            service.add_user("other", user)


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_returns_app_container_with_given_config():
        """The given config is kept on the container."""
        cfg = RegistryConfig(id_scheme="simple", default_role=Role.WRITER)
        app = bootstrap(cfg)
        assert isinstance(app, AppContainer)
        assert app.config is cfg
        assert app.service.create_user("x").id == "00000001"

    @staticmethod
    def test_reads_config_from_environment(monkeypatch):
        """Without a config, the environment decides."""
        monkeypatch.setenv("BLOGUSER_ID_SCHEME", "ulid")
        monkeypatch.setenv("BLOGUSER_DEFAULT_ROLE", "writer")
        monkeypatch.delenv("BLOGUSER_STRICT_IDS", raising=False)
        app = bootstrap()
        assert app.config == RegistryConfig(id_scheme="ulid", default_role=Role.WRITER)
        assert len(app.service.create_user("x").id) == 26
