"""
Logging configuration for jwtkit.

jwtkit modules log through ``logging.getLogger(__name__)`` and attach
context with ``extra={...}`` (algorithm, error kind, claim names; never
keys or tokens). The library does not touch logging configuration on
import; applications that want jwtkit's format call ``configure_logging``.

Output formats:
    JSON (default): one object per line via python-json-logger, e.g.
        {"message": "Token verification failed", "timestamp": "...",
         "level": "WARNING", "logger": "jwtkit.services.token_service",
         "service": "jwtkit", "error_kind": "token_expired", "alg": "HS256"}
    Text: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""

import logging
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

from jwtkit.core.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Standard LogRecord attributes that should not be treated as extra fields
RESERVED_LOG_ATTRS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
    "service",
})


class StructuredJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that adds level, logger name, service name and every
    field passed via ``extra={...}``.
    """

    def __init__(self, *args: Any, service_name: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs, timestamp=True)
        self.service_name = service_name or settings.SERVICE_NAME

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the JSON log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = self.service_name

        for key, value in record.__dict__.items():
            if key not in RESERVED_LOG_ATTRS and not key.startswith("_"):
                if key not in log_record:
                    log_record[key] = value


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configure the root logger for jwtkit output.

    Args:
        level: Log level name (uses config LOG_LEVEL if not provided)
        json_logs: JSON vs text output (uses config LOG_JSON if not provided)
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    handler = logging.StreamHandler()
    handler.setLevel(level_name)
    if use_json:
        handler.setFormatter(StructuredJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    # Remove any existing handlers and add our configured one
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
