"""Reference to a named entity instance."""

from dataclasses import dataclass
from typing import NamedTuple


class EntityRef(NamedTuple):
    """Entity type and name of a candidate resource, e.g. ("environment", "prod")."""

    entity_type: str
    name: str


@dataclass(frozen=True)
class VisibleEntity:
    """A visible entity with its administer capability flag."""

    entity: EntityRef
    can_administer: bool
