#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

from __future__ import annotations

import json
import logging as logthings

from . import __version__
from .settings import LOG_LEVEL


class SimpleJsonFormatter(logthings.Formatter):
    """Simple JSON formatter that always includes essential fields."""

    def format(self, record: logthings.LogRecord) -> str:
        # Sanitize the message before processing
        from irsacheck.sanitizer import sanitize_string

        sanitized_message = sanitize_string(record.getMessage())

        data = {
            "timestamp": record.created,
            "levelname": record.levelname,
            "message": sanitized_message,
            "name": record.name.split(".")[0],
        }

        if record.levelname == "INFO":
            if __version__ and __version__ not in ("unknown", "development", "none"):
                data["irsacheck.version"] = __version__

        # Strategy context, passed with extra={"strategy": ...}
        if hasattr(record, "strategy") and record.strategy:
            data["strategy"] = record.strategy

        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            data["exception"] = sanitize_string(exception_text)
        elif record.exc_text:
            data["exception"] = sanitize_string(record.exc_text)

        return json.dumps(data, separators=(",", ":"), default=str)


def setup_logging():
    """Setup simple JSON logging on stderr, away from the report on stdout."""
    formatter = SimpleJsonFormatter()

    handler = logthings.StreamHandler()
    handler.setFormatter(formatter)

    logger = logthings.getLogger("irsacheck")
    logger.handlers = []
    logger.addHandler(handler)
    logger.setLevel(getattr(logthings, LOG_LEVEL.upper(), logthings.WARNING))
    logger.propagate = False

    return logger


# Create logger instance
LOG = setup_logging()
