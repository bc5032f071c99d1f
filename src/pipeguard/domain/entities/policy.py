"""Policy entity - ordered directives owned by one role."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pipeguard.domain.entities.directive import Directive
from pipeguard.domain.value_objects import ConfigErrors, Effect


@dataclass(frozen=True)
class Policy:
    """Immutable, insertion-ordered sequence of directives.

    Evaluation: any applicable deny wins, otherwise any applicable allow
    grants, otherwise the answer is no.
    """

    directives: tuple[Directive, ...] = ()

    @classmethod
    def of(cls, *directives: Directive) -> Policy:
        return cls(tuple(directives))

    @classmethod
    def from_iterable(cls, directives: Iterable[Directive]) -> Policy:
        return cls(tuple(directives))

    @classmethod
    def from_mappings(cls, items: Iterable[Mapping[str, Any]]) -> tuple[Policy, ConfigErrors]:
        """Build from parsed directive data, collecting errors instead of raising.

        Invalid entries are left out of the policy; their errors are keyed
        by position, e.g. ``policy[2].action``.
        """
        directives = []
        errors = ConfigErrors()
        for index, item in enumerate(items):
            item_errors = Directive.validate_fields(
                item.get("effect"), item.get("action"), item.get("type"), item.get("resource")
            )
            if item_errors:
                errors.merge(item_errors, prefix=f"policy[{index}].")
                continue
            directives.append(Directive.from_mapping(item))
        return cls(tuple(directives)), errors

    def add(self, directive: Directive) -> Policy:
        return Policy(self.directives + (directive,))

    def matching(self, action: str, entity_type: str, entity_name: str) -> tuple[Directive, ...]:
        return tuple(d for d in self.directives if d.applies_to(action, entity_type, entity_name))

    def evaluate(self, action: str, entity_type: str, entity_name: str) -> Effect | None:
        """Decisive effect for the query, or None when no directive applies."""
        decision = None
        for directive in self.matching(action, entity_type, entity_name):
            if directive.effect == Effect.DENY:
                return Effect.DENY
            decision = Effect.ALLOW
        return decision

    def allows(self, action: str, entity_type: str, entity_name: str) -> bool:
        return self.evaluate(action, entity_type, entity_name) == Effect.ALLOW

    def __iter__(self) -> Iterator[Directive]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)
