"""Unit tests for domain exceptions."""

import pytest

from pipeguard.domain.exceptions import (
    InvalidDirective,
    PermissionDenied,
    PipeguardError,
    ValidationError,
)
from pipeguard.domain.value_objects import ConfigErrors


def test_permission_denied_inherits_pipeguard_error() -> None:
    """PermissionDenied is a subclass of PipeguardError."""
    assert issubclass(PermissionDenied, PipeguardError)


def test_invalid_directive_is_validation_error() -> None:
    """InvalidDirective is a ValidationError and a PipeguardError."""
    assert issubclass(InvalidDirective, ValidationError)
    assert issubclass(ValidationError, PipeguardError)


def test_invalid_directive_carries_errors() -> None:
    errors = ConfigErrors()
    errors.add("type", "Resource type must be one of [environment].")
    exc = InvalidDirective(errors)
    assert exc.errors is errors
    assert "type" in str(exc)


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "User does not have view access"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
