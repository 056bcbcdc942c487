"""Logging setup for the API process.

JSON lines in production, human-readable lines in development. Configured
once at startup by the application factory.
"""

import json
import logging
from datetime import datetime, timezone

# Extra fields surfaced in JSON logs when present on the record
_EXTRA_KEYS = ("path", "method", "status_code", "user_id", "permission", "error_type")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger.

    Calling it again replaces the handler installed by a previous call
    instead of stacking a second one.

    Args:
        level: Log level name (DEBUG, INFO, WARNING...)
        fmt: "json" for structured output, anything else for plain text
    """
    handler = logging.StreamHandler()
    handler.set_name("itsm_api")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "itsm_api":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
