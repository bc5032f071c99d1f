"""Domain exceptions."""


class PipeguardError(Exception):
    """Base exception for Pipeguard."""

    pass


class PermissionDenied(PipeguardError):
    """Actor does not have permission for the requested action."""

    pass


class ValidationError(PipeguardError):
    """Validation failed for input data."""

    pass


class InvalidDirective(ValidationError):
    """Directive uses an action or entity type outside the supported vocabulary."""

    def __init__(self, errors) -> None:
        self.errors = errors
        super().__init__(f"Invalid directive: {errors}")
