"""Directive entity - a single policy rule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pipeguard.domain.exceptions import InvalidDirective
from pipeguard.domain.services import entity_name_matcher
from pipeguard.domain.value_objects import ConfigErrors, Effect, SupportedEntity


@dataclass(frozen=True)
class Directive:
    """Allow or deny one action on entities of one type whose name matches a pattern."""

    effect: Effect
    action: str
    entity_type: str
    resource: str

    def __post_init__(self) -> None:
        errors = Directive.validate_fields(
            self.effect, self.action, self.entity_type, self.resource
        )
        if errors:
            raise InvalidDirective(errors)

    @classmethod
    def allow(cls, action: str, entity_type: str, resource: str) -> Directive:
        return cls(Effect.ALLOW, action, entity_type, resource)

    @classmethod
    def deny(cls, action: str, entity_type: str, resource: str) -> Directive:
        return cls(Effect.DENY, action, entity_type, resource)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Directive:
        """Build from parsed configuration with keys effect, action, type, resource."""
        effect = data.get("effect")
        errors = cls.validate_fields(
            effect, data.get("action"), data.get("type"), data.get("resource")
        )
        if errors:
            raise InvalidDirective(errors)
        return cls(Effect(effect), data["action"], data["type"], data["resource"])

    @staticmethod
    def validate_fields(
        effect: Any, action: Any, entity_type: Any, resource: Any
    ) -> ConfigErrors:
        """Collect field errors for raw directive data without raising."""
        errors = ConfigErrors()
        if not isinstance(effect, str) or effect not in {e.value for e in Effect}:
            errors.add("effect", f"Effect must be one of [{_join(e.value for e in Effect)}].")

        try:
            entity = SupportedEntity.from_type(entity_type)
        except ValueError:
            entity = None
            errors.add(
                "type",
                f"Resource type must be one of [{_join(e.value for e in SupportedEntity)}].",
            )

        if entity is not None and (not isinstance(action, str) or not entity.supports(action)):
            errors.add(
                "action",
                f"Invalid action, must be one of [{_join(a.value for a in entity.supported_actions())}].",
            )

        if not isinstance(resource, str) or not resource.strip():
            errors.add("resource", "Resource name must not be blank.")
        return errors

    def applies_to(self, action: str, entity_type: str, entity_name: str) -> bool:
        return (
            self.action == action
            and self.entity_type == entity_type
            and entity_name_matcher.matches(self.resource, entity_name)
        )


def _join(values) -> str:
    return ", ".join(values)
