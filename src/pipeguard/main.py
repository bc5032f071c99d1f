"""Application entry point and composition root."""

from dataclasses import dataclass

from pipeguard import __version__
from pipeguard.application.use_cases.authorization.check_permission import CheckPermissionUseCase
from pipeguard.application.use_cases.authorization.list_visible_entities import (
    ListVisibleEntitiesUseCase,
)
from pipeguard.application.use_cases.authorization.validate_security_config import (
    ValidateSecurityConfigUseCase,
)
from pipeguard.config import get_settings
from pipeguard.domain.entities import SecurityConfig
from pipeguard.infrastructure.logging import configure_logging
from pipeguard.infrastructure.permission.permission_checker import SnapshotPermissionChecker
from pipeguard.infrastructure.security.in_memory_provider import InMemorySecurityConfigProvider


@dataclass
class Services:
    """Wired authorization services for a calling layer."""

    provider: InMemorySecurityConfigProvider
    permission_checker: SnapshotPermissionChecker
    check_permission: CheckPermissionUseCase
    list_visible_entities: ListVisibleEntitiesUseCase
    validate_security_config: ValidateSecurityConfigUseCase


def main() -> None:
    """CLI entry point."""
    print(f"Pipeguard v{__version__}")


def create_services(config: SecurityConfig | None = None) -> Services:
    """Composition root - build authorization services over one snapshot provider."""
    settings = get_settings()
    configure_logging(settings.effective_log_level(), json_format=settings.log_json)

    provider = InMemorySecurityConfigProvider(config)
    permission_checker = SnapshotPermissionChecker(provider)

    return Services(
        provider=provider,
        permission_checker=permission_checker,
        check_permission=CheckPermissionUseCase(permission_checker),
        list_visible_entities=ListVisibleEntitiesUseCase(provider),
        validate_security_config=ValidateSecurityConfigUseCase(provider),
    )
