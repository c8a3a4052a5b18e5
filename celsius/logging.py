"""Structured logging for the SDK.

The library only emits records under the ``celsius`` logger; it never
installs handlers unless the application calls ``configure_logging``.

Usage:
    from celsius.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Dispatching request", method="GET", path="/kyc")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Mapping

ROOT_LOGGER_NAME = "celsius"

# Substrings of field names whose values are masked
SENSITIVE_FIELDS = {
    "partner", "token", "api-key", "api_key", "apikey", "secret", "key",
    "signature", "authorization", "password", "credential", "cookie",
}


def mask_sensitive(data: Mapping[str, Any]) -> dict[str, Any]:
    """Mask credential values in a mapping, such as request headers."""
    masked = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(s in key_lower for s in SENSITIVE_FIELDS):
            if isinstance(value, str) and len(value) > 8:
                masked[key] = f"{value[:4]}...{value[-4:]}"
            else:
                masked[key] = "[REDACTED]"
        elif isinstance(value, Mapping):
            masked[key] = mask_sensitive(value)
        else:
            masked[key] = value
    return masked


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_entry.update(mask_sensitive(record.extra_fields))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable log formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        extra_str = ""
        if getattr(record, "extra_fields", None):
            masked = mask_sensitive(record.extra_fields)
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in masked.items())

        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        message = (
            f"{timestamp} {record.levelname[:4]} "
            f"[{record.name}] {record.getMessage()}{extra_str}"
        )

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class StructuredLogger(logging.Logger):
    """Logger that accepts structured fields as keyword arguments."""

    def _log_with_extra(
        self,
        level: int,
        msg: str,
        args: tuple,
        exc_info: Any = None,
        **kwargs,
    ):
        extra = {"extra_fields": kwargs} if kwargs else {}
        super()._log(level, msg, args, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.DEBUG):
            self._log_with_extra(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.INFO):
            self._log_with_extra(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.WARNING):
            self._log_with_extra(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: str, *args, exc_info: Any = None, **kwargs):
        if self.isEnabledFor(logging.ERROR):
            self._log_with_extra(logging.ERROR, msg, args, exc_info=exc_info, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module."""
    logging.setLoggerClass(StructuredLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)
    return logger


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """Attach a stream handler to the SDK logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Use JSON format instead of the human format

    Returns:
        The configured ``celsius`` logger
    """
    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    sdk_logger.setLevel(getattr(logging, level.upper()))

    for handler in sdk_logger.handlers[:]:
        sdk_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if json_output else HumanFormatter())
    sdk_logger.addHandler(handler)

    return sdk_logger


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
