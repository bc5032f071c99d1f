"""Permission checker implementation - checks against the security configuration snapshot."""

import logging

from pipeguard.application.ports import SecurityConfigProvider
from pipeguard.domain.services import authorization_filter

logger = logging.getLogger(__name__)


class SnapshotPermissionChecker:
    """Checks user permissions against the policies of the user's roles."""

    def __init__(self, security_config_provider: SecurityConfigProvider) -> None:
        self._provider = security_config_provider

    async def check(
        self, user_id: str, action: str, entity_type: str, entity_name: str
    ) -> bool:
        """Check if user has action on the named entity."""
        config = await self._provider.snapshot()
        roles = config.roles_for(user_id)
        allowed = bool(roles) and authorization_filter.has_permission(
            roles, action, entity_type, entity_name
        )
        if not allowed:
            logger.debug(
                "Permission denied",
                extra={
                    "user_id": user_id,
                    "action": action,
                    "entity_type": entity_type,
                    "entity_name": entity_name,
                },
            )
        return allowed
