"""Validation report DTO."""

from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Field errors per role, keyed ``roles[<index>]:<name>``."""

    errors: dict[str, dict[str, list[str]]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors

    def messages_for(self, role_key: str, field_name: str) -> list[str]:
        return list(self.errors.get(role_key, {}).get(field_name, []))
