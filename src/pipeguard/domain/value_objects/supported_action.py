"""Actions that directives can grant or deny."""

from enum import StrEnum


class SupportedAction(StrEnum):
    """Actions that can be performed on control plane entities."""

    VIEW = "view"
    ADMINISTER = "administer"
