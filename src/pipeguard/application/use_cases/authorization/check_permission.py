"""Check permission use case."""

from pipeguard.application.ports import PermissionChecker
from pipeguard.domain.exceptions import PermissionDenied


class CheckPermissionUseCase:
    """Guard an operation on a named entity."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def execute(
        self, user_id: str, action: str, entity_type: str, entity_name: str
    ) -> None:
        """Return if allowed, raise PermissionDenied otherwise."""
        allowed = await self._permission_checker.check(
            user_id, action, entity_type, entity_name
        )
        if not allowed:
            raise PermissionDenied(
                f"User does not have {action} access to {entity_type} '{entity_name}'"
            )
