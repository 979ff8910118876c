"""Logging helpers for sqlfluent.

Library loggers live under the ``sqlfluent`` namespace. Compiled statements are
logged with structured fields (``sql``, ``parameter_count``) that
:class:`StatementFormatter` writes out as one JSON object per record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "StatementFormatter",
    "get_logger",
    "log_with_context",
)

ROOT_LOGGER_NAME = "sqlfluent"

_json_encoder = msgspec.json.Encoder(enc_hook=repr)


class StatementFormatter(logging.Formatter):
    """JSON formatter for builder log records.

    Structured fields attached through :func:`log_with_context` are merged into the
    top level of the entry, so a compiled statement record looks like::

        {"level": "DEBUG", "logger": "sqlfluent.builder", "message": "Compiled SELECT statement",
         "sql": "SELECT * FROM users WHERE id = ?", "parameter_count": 1}
    """

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return _json_encoder.encode(log_entry).decode("utf-8")


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqlfluent`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlfluent logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured extra fields.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields, stored on the record as ``extra_fields``
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields}, stacklevel=2)
