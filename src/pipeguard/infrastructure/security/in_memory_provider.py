"""In-memory security configuration provider."""

import logging
import threading

from pipeguard.domain.entities import SecurityConfig

logger = logging.getLogger(__name__)


class InMemorySecurityConfigProvider:
    """Holds the current snapshot; edits replace it wholesale."""

    def __init__(self, config: SecurityConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._config = config or SecurityConfig()

    async def snapshot(self) -> SecurityConfig:
        with self._lock:
            return self._config

    def replace(self, config: SecurityConfig) -> None:
        with self._lock:
            self._config = config
        logger.info("Security configuration replaced (%d roles)", len(config.roles))
