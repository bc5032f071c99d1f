"""Applies role policies to single queries and candidate collections.

Every permission question asked of a set of roles goes through this module so
matching semantics live in one place. All functions are pure: roles and
candidates are never mutated, and candidates keep their input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pipeguard.domain.entities.role import Role
from pipeguard.domain.value_objects import (
    EntityRef,
    SupportedAction,
    SupportedEntity,
    VisibleEntity,
)

logger = logging.getLogger(__name__)


def has_permission(
    roles: Iterable[Role], action: str, entity_type: str, entity_name: str
) -> bool:
    """True if any role grants the action on the named entity."""
    for role in roles:
        if role.has_permission_for(action, entity_type, entity_name):
            return True
    logger.debug(
        "No role grants %s on %s '%s'", action, entity_type, entity_name
    )
    return False


def filter_visible(
    candidates: Iterable[tuple[str, str]], roles: Iterable[Role], action: str
) -> list[tuple[str, str]]:
    """Candidates on which any role grants the action.

    Candidates are ``(entity_type, name)`` pairs; plain tuples and
    ``EntityRef`` both work and are returned as given.
    """
    roles = tuple(roles)
    visible = []
    for candidate in candidates:
        entity_type, name = candidate
        if has_permission(roles, action, entity_type, name):
            visible.append(candidate)
    return visible


def can_administer(
    entity_name: str,
    roles: Iterable[Role],
    entity_type: str = SupportedEntity.ENVIRONMENT,
) -> bool:
    return has_permission(roles, SupportedAction.ADMINISTER, entity_type, entity_name)


def annotate(
    candidates: Iterable[tuple[str, str]], roles: Iterable[Role], action: str
) -> list[VisibleEntity]:
    """Visible candidates, each flagged with whether the roles may administer it."""
    roles = tuple(roles)
    annotated = []
    for candidate in filter_visible(candidates, roles, action):
        entity_type, name = candidate
        annotated.append(
            VisibleEntity(
                entity=EntityRef(entity_type, name),
                can_administer=can_administer(name, roles, entity_type),
            )
        )
    return annotated
