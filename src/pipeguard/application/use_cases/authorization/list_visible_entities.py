"""List visible entities use case."""

from collections.abc import Sequence

from pipeguard.application.ports import SecurityConfigProvider
from pipeguard.domain.services import authorization_filter
from pipeguard.domain.value_objects import EntityRef, SupportedAction, VisibleEntity


class ListVisibleEntitiesUseCase:
    """Filter candidates down to those a user may see, flagging administrable ones."""

    def __init__(self, security_config_provider: SecurityConfigProvider) -> None:
        self._provider = security_config_provider

    async def execute(
        self,
        user_id: str,
        candidates: Sequence[EntityRef],
        action: str = SupportedAction.VIEW,
    ) -> list[VisibleEntity]:
        config = await self._provider.snapshot()
        roles = config.roles_for(user_id)
        return authorization_filter.annotate(candidates, roles, action)
