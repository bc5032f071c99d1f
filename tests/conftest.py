"""Pytest fixtures for Pipeguard tests."""

from __future__ import annotations

import pytest

from pipeguard.domain.entities import Directive, Policy, Role, SecurityConfig


# --- Fake provider ---


class FakeSecurityConfigProvider:
    """Provider returning a fixed snapshot and counting reads."""

    def __init__(self, config: SecurityConfig) -> None:
        self.config = config
        self.reads = 0

    async def snapshot(self) -> SecurityConfig:
        self.reads += 1
        return self.config


# --- Fixtures ---


@pytest.fixture
def env_viewer() -> Role:
    """Role that may view env_1 only."""
    return Role.named(
        "env_viewer",
        users=["alice"],
        policy=Policy.of(Directive.allow("view", "environment", "env_1")),
    )


@pytest.fixture
def env_admin() -> Role:
    """Role that may view every environment and administer env_2."""
    return Role.named(
        "env_admin",
        users=["bob"],
        policy=Policy.of(
            Directive.allow("view", "environment", "*"),
            Directive.allow("administer", "environment", "env_2"),
        ),
    )


@pytest.fixture
def security_config(env_viewer: Role, env_admin: Role) -> SecurityConfig:
    return SecurityConfig.of(env_viewer, env_admin)


@pytest.fixture
def fake_provider(security_config: SecurityConfig) -> FakeSecurityConfigProvider:
    return FakeSecurityConfigProvider(security_config)
