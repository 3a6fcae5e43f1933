"""Logging setup for stringcalc.

Library code only asks for loggers via ``get_logger``; handlers are attached
by ``setup_logging`` when an application opts in.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from stringcalc.core.config import LoggingConfig

ROOT_LOGGER = "stringcalc"

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

_logging_configured = False


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # extra= fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(config: LoggingConfig | None = None, *, force: bool = False) -> logging.Logger:
    """Attach handlers to the ``stringcalc`` logger.

    Repeated calls are no-ops unless ``force`` is set.
    """
    global _logging_configured

    root_logger = logging.getLogger(ROOT_LOGGER)
    if _logging_configured and not force:
        return root_logger

    if config is None:
        config = LoggingConfig()

    if config.json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root_logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``stringcalc`` namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
