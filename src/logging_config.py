"""Logging setup for the add-in CLI."""

import json
import logging
import os
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("openai", "httpx", "httpcore", "googleapiclient", "google.auth", "urllib3")


class JSONFormatter(logging.Formatter):
    """One JSON object per line (NDJSON).

    Fields: timestamp, level, logger, message, plus `action` when the
    record was logged from a taskpane action and `exception` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        action = getattr(record, "action", None)
        if action:
            entry["action"] = action
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level_override: str | None = None) -> None:
    """Configure the root logger from the environment.

    Args:
        level_override: Takes precedence over LOG_LEVEL when set.

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Defaults to INFO.
        LOG_FORMAT: "json" for NDJSON, anything else for text. Defaults to text.
    """
    level_name = (level_override or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if os.getenv("LOG_FORMAT", "text").lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
