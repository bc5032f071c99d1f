"""Role entity for RBAC."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pipeguard.domain.entities.policy import Policy
from pipeguard.domain.value_objects import ConfigErrors, RoleIdentity


@dataclass(frozen=True, eq=False)
class Role:
    """Named bundle of a policy and the principals assigned to it."""

    identity: RoleIdentity
    users: tuple[str, ...] = ()
    policy: Policy = field(default_factory=Policy)

    def __post_init__(self) -> None:
        if isinstance(self.users, str):
            raise TypeError("users must be a collection of user names, not a string")
        # dict keeps first-seen order while dropping duplicates
        object.__setattr__(self, "users", tuple(dict.fromkeys(self.users)))

    @classmethod
    def named(
        cls,
        name: str | None,
        users: Iterable[str] = (),
        policy: Policy | None = None,
    ) -> Role:
        if isinstance(users, str):
            raise TypeError("users must be a collection of user names, not a string")
        return cls(RoleIdentity(name), tuple(users), policy or Policy())

    @property
    def name(self) -> str | None:
        return self.identity.name

    def has_member(self, principal: str) -> bool:
        return principal in self.users

    def has_permission_for(self, action: str, entity_type: str, entity_name: str) -> bool:
        return self.policy.allows(action, entity_type, entity_name)

    def validate(self) -> ConfigErrors:
        return self.identity.validate()

    def validate_tree(self, siblings: Iterable[Role]) -> ConfigErrors:
        """Validate against the other roles of the enclosing security configuration."""
        return self.identity.validate_against(r.identity for r in siblings)
