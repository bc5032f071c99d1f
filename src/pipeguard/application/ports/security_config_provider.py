"""Security configuration provider port - source of role snapshots."""

from typing import Protocol

from pipeguard.domain.entities import SecurityConfig


class SecurityConfigProvider(Protocol):
    """Port returning a consistent, read-only snapshot of all roles."""

    async def snapshot(self) -> SecurityConfig: ...
