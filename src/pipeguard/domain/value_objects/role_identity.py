"""Role name value object with format and uniqueness rules."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from pipeguard.domain.value_objects.config_errors import ConfigErrors

NAME = "name"
MAX_LENGTH = 255

_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_][a-zA-Z0-9_.]*")

INVALID_NAME_MESSAGE = (
    "Invalid role name name '{}'. This must be alphanumeric and can contain "
    "underscores and periods (however, it cannot start with a period). "
    "The maximum allowed length is 255 characters."
)
DUPLICATE_NAME_MESSAGE = "Role names should be unique. Role with the same name exists."


def is_valid_name(name: object) -> bool:
    """True if name is a non-empty string in the role name alphabet within the length limit."""
    if not isinstance(name, str) or not name or len(name) > MAX_LENGTH:
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


@dataclass(frozen=True, eq=False)
class RoleIdentity:
    """Name of a role.

    Names compare case-insensitively through same_name_as. Equality is object
    identity, so two identities with the same name stay distinct.
    """

    name: str | None = None

    def same_name_as(self, other: "RoleIdentity") -> bool:
        if not isinstance(self.name, str) or not isinstance(other.name, str):
            return False
        return self.name.casefold() == other.name.casefold()

    def validate(self) -> ConfigErrors:
        """Format check only."""
        errors = ConfigErrors()
        if not is_valid_name(self.name):
            errors.add(NAME, INVALID_NAME_MESSAGE.format("null" if self.name is None else self.name))
        return errors

    def validate_against(self, siblings: Iterable["RoleIdentity"]) -> ConfigErrors:
        """Format check, then uniqueness among sibling identities.

        At most one ``name`` error is reported: uniqueness is only checked once
        the format is valid. Only siblings listed before this identity count,
        so the first of a set of duplicates stays valid and each later one
        gets the error. An identity not among the siblings is checked
        against all of them.
        """
        errors = self.validate()
        if not errors.is_empty():
            return errors
        for other in siblings:
            if other is self:
                break
            if self.same_name_as(other):
                errors.add(NAME, DUPLICATE_NAME_MESSAGE)
                break
        return errors

    def __str__(self) -> str:
        return "null" if self.name is None else str(self.name)
