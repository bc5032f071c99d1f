"""Security configuration snapshot - all roles known to the control plane."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pipeguard.domain.entities.policy import Policy
from pipeguard.domain.entities.role import Role
from pipeguard.domain.value_objects import ConfigErrors

USERS = "users"
INVALID_USERS_MESSAGE = "Users must be a list of user names."


@dataclass(frozen=True)
class SecurityConfig:
    """Read-only set of roles, handed to evaluation as one consistent snapshot."""

    roles: tuple[Role, ...] = ()

    @classmethod
    def of(cls, *roles: Role) -> SecurityConfig:
        return cls(tuple(roles))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> tuple[SecurityConfig, dict[str, ConfigErrors]]:
        """Build a snapshot from parsed configuration.

        Expects ``{"roles": [{"name": ..., "users": [...], "policy": [...]}]}``.
        Directive and user list errors are collected per role rather than
        raised. A malformed user list leaves the role without users.
        """
        roles = []
        errors: dict[str, ConfigErrors] = {}
        for index, item in enumerate(data.get("roles", [])):
            policy, role_errors = Policy.from_mappings(item.get("policy", []))
            users = item.get("users", [])
            if not _is_user_list(users):
                role_errors.add(USERS, INVALID_USERS_MESSAGE)
                users = ()
            role = Role.named(item.get("name"), users, policy)
            if role_errors:
                errors[_error_key(role, index)] = role_errors
            roles.append(role)
        return cls(tuple(roles)), errors

    def with_role(self, role: Role) -> SecurityConfig:
        return SecurityConfig(self.roles + (role,))

    def find(self, name: str | None) -> Role | None:
        """Case-insensitive lookup by role name. Unset names never match."""
        if not isinstance(name, str):
            return None
        wanted = name.casefold()
        for role in self.roles:
            if isinstance(role.name, str) and role.name.casefold() == wanted:
                return role
        return None

    def roles_for(self, principal: str) -> tuple[Role, ...]:
        return tuple(r for r in self.roles if r.has_member(principal))

    def validate_tree(self) -> dict[str, ConfigErrors]:
        """Run standalone and cross-reference checks on every role.

        All roles are checked. The cross-reference check runs only for roles
        that pass the standalone one. Roles without errors are left out.
        """
        result: dict[str, ConfigErrors] = {}
        for index, role in enumerate(self.roles):
            errors = role.validate()
            if not errors:
                errors = role.validate_tree(self.roles)
            if errors:
                result[_error_key(role, index)] = errors
        return result


def _is_user_list(users: Any) -> bool:
    return isinstance(users, (list, tuple)) and all(
        isinstance(user, str) and user for user in users
    )


def _error_key(role: Role, index: int) -> str:
    return f"roles[{index}]:{role.identity}"

