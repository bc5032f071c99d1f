"""Application ports - interfaces for external adapters."""

from pipeguard.application.ports.permission_checker import PermissionChecker
from pipeguard.application.ports.security_config_provider import SecurityConfigProvider

__all__ = [
    "PermissionChecker",
    "SecurityConfigProvider",
]
