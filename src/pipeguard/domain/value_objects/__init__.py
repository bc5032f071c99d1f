"""Domain value objects."""

from pipeguard.domain.value_objects.config_errors import ConfigErrors
from pipeguard.domain.value_objects.effect import Effect
from pipeguard.domain.value_objects.entity_ref import EntityRef, VisibleEntity
from pipeguard.domain.value_objects.role_identity import RoleIdentity
from pipeguard.domain.value_objects.supported_action import SupportedAction
from pipeguard.domain.value_objects.supported_entity import SupportedEntity

__all__ = [
    "ConfigErrors",
    "Effect",
    "EntityRef",
    "RoleIdentity",
    "SupportedAction",
    "SupportedEntity",
    "VisibleEntity",
]
