"""Directive effect."""

from enum import StrEnum


class Effect(StrEnum):
    """Outcome a directive carries when it applies."""

    ALLOW = "allow"
    DENY = "deny"
