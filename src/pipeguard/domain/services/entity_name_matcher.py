"""Matches resource names against directive name patterns."""

WILDCARD = "*"


def matches(pattern: str | None, candidate: str) -> bool:
    """True if pattern is the wildcard or equals candidate exactly.

    A blank pattern never matches. The wildcard has meaning only as a pattern;
    a candidate of ``*`` is compared literally.
    """
    if not pattern:
        return False
    if pattern == WILDCARD:
        return True
    return pattern == candidate
