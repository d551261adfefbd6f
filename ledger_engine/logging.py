"""Logging setup for ledger-engine.

Engine and store modules log through ``logging.getLogger(__name__)`` and
attach the records they act on with ``extra=``, e.g.
``extra={"journal_id": 7, "amount": Decimal("120.00")}``. Both formatters
pick up the fields in :data:`CONTEXT_FIELDS`: the JSON formatter as
top-level keys, the text formatter as ``key=value`` pairs after the
message. Amounts are written as exact decimal strings.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from ledger_engine.exceptions import ConfigurationError

CONTEXT_FIELDS = (
    "company_id",
    "journal_id",
    "reference_id",
    "entry_id",
    "account_id",
    "bank_line_id",
    "amount",
    "reason",
)

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING
QUIET_LOGGERS = ("confluent_kafka", "faker")


def ledger_context(record: logging.LogRecord) -> dict[str, Any]:
    """Ledger fields attached to ``record``, in :data:`CONTEXT_FIELDS` order."""
    context: dict[str, Any] = {}
    for name in CONTEXT_FIELDS:
        value = getattr(record, name, None)
        if value is None:
            continue
        if isinstance(value, Decimal):
            value = str(value)
        elif isinstance(value, Enum):
            value = value.value
        context[name] = value
    return context


class TextFormatter(logging.Formatter):
    """Pipe-separated text lines followed by the ledger context."""

    def __init__(self) -> None:
        super().__init__(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = ledger_context(record)
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the ledger context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(ledger_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


FORMATTERS: dict[str, type[logging.Formatter]] = {
    "standard": TextFormatter,
    "json": JsonFormatter,
}


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Route ledger-engine logs to stdout.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names
        fall back to INFO.
    format_type : str
        "standard" for text lines or "json" for one object per line.

    Raises
    ------
    ConfigurationError
        If ``format_type`` is not a known format.
    """
    formatter_class = FORMATTERS.get(format_type)
    if formatter_class is None:
        raise ConfigurationError(
            f"Unknown log format {format_type!r}; expected one of {sorted(FORMATTERS)}"
        )
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter_class())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("ledger_engine").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
