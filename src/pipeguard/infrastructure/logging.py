"""Centralized logging for Pipeguard components."""

import json
import logging
import sys
from datetime import UTC, datetime

# Authorization context passed through ``extra=`` on log calls.
CONTEXT_FIELDS = ("user_id", "action", "entity_type", "entity_name", "role")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with any authorization context attached."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_entry[name] = str(value)
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: int | str = logging.INFO, json_format: bool = False) -> None:
    """Install a single stderr handler on the ``pipeguard`` logger.

    Args:
        level: Logging level name or number.
        json_format: Emit one JSON object per line instead of plain text.
    """
    root = logging.getLogger("pipeguard")
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
