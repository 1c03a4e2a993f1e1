"""Structured JSON logging for the batch harness and arithmetic core."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional

# Standard LogRecord attributes that are not user-supplied extras.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - logging override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Extras passed via logger.info(..., extra={...}).
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Route package logs through a single JSON handler (stderr by default)."""

    package_logger = logging.getLogger("bigint_rsa")
    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False
