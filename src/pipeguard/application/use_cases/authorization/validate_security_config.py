"""Validate security configuration use case."""

import logging

from pipeguard.application.dto.validation_report import ValidationReport
from pipeguard.application.ports import SecurityConfigProvider

logger = logging.getLogger(__name__)


class ValidateSecurityConfigUseCase:
    """Run name validation over every role of the current snapshot."""

    def __init__(self, security_config_provider: SecurityConfigProvider) -> None:
        self._provider = security_config_provider

    async def execute(self) -> ValidationReport:
        config = await self._provider.snapshot()
        errors = config.validate_tree()
        if errors:
            logger.info("Security configuration has %d invalid role(s)", len(errors))
        return ValidationReport(
            errors={key: role_errors.to_dict() for key, role_errors in errors.items()}
        )
