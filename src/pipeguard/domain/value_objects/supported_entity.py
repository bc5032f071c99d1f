"""Entity kinds a directive can be scoped to."""

from enum import StrEnum

from pipeguard.domain.value_objects.supported_action import SupportedAction


class SupportedEntity(StrEnum):
    """Control plane entity kinds and the actions each one supports."""

    ENVIRONMENT = "environment"
    CONFIG_REPO = "config_repo"
    PIPELINE = "pipeline"
    PIPELINE_GROUP = "pipeline_group"
    CLUSTER_PROFILE = "cluster_profile"
    ELASTIC_AGENT_PROFILE = "elastic_agent_profile"

    def supported_actions(self) -> tuple[SupportedAction, ...]:
        return _ACTIONS_BY_ENTITY[self]

    def supports(self, action: str) -> bool:
        return action in {a.value for a in self.supported_actions()}

    @classmethod
    def from_type(cls, value: str) -> "SupportedEntity":
        """Parse an entity type token. Raises ValueError for unknown tokens."""
        for entity in cls:
            if entity.value == value:
                return entity
        raise ValueError(f"Unsupported entity type '{value}'")


_ACTIONS_BY_ENTITY: dict[SupportedEntity, tuple[SupportedAction, ...]] = {
    entity: (SupportedAction.VIEW, SupportedAction.ADMINISTER) for entity in SupportedEntity
}
