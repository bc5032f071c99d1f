"""Field-keyed validation messages."""

from collections.abc import Iterator


class ConfigErrors:
    """Ordered mapping of field name to validation messages.

    Validation never raises; checks add messages here and callers decide how
    to report them.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    def get(self, field: str) -> list[str]:
        return list(self._errors.get(field, []))

    def merge(self, other: "ConfigErrors", prefix: str = "") -> None:
        for field, messages in other.items():
            for message in messages:
                self.add(f"{prefix}{field}", message)

    def items(self) -> Iterator[tuple[str, list[str]]]:
        for field, messages in self._errors.items():
            yield field, list(messages)

    def size(self) -> int:
        """Number of fields carrying at least one message."""
        return len(self._errors)

    def is_empty(self) -> bool:
        return not self._errors

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"ConfigErrors({self._errors!r})"
