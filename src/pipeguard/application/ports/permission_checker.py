"""Permission checker port - RBAC authorization."""

from typing import Protocol


class PermissionChecker(Protocol):
    """Port for checking user permissions on named entities."""

    async def check(
        self, user_id: str, action: str, entity_type: str, entity_name: str
    ) -> bool: ...
