"""Domain entities."""

from pipeguard.domain.entities.directive import Directive
from pipeguard.domain.entities.policy import Policy
from pipeguard.domain.entities.role import Role
from pipeguard.domain.entities.security_config import SecurityConfig

__all__ = [
    "Directive",
    "Policy",
    "Role",
    "SecurityConfig",
]
