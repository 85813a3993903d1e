"""
Structured logging configuration.

Nothing here runs at import time: applications call ``setup_logging()``
to attach handlers to the ``fmatrix`` logger.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, get_settings

ROOT_LOGGER_NAME = "fmatrix"


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure the ``fmatrix`` logger from settings and return it"""
    settings = settings or get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers: list[logging.Handler] = [console_handler]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)

    logger.info(
        "Logging configured for %s %s",
        settings.APP_NAME,
        settings.APP_VERSION,
        extra={"extra_data": {"app": settings.APP_NAME, "version": settings.APP_VERSION}},
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Enhanced logger with structured context"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Add context to log messages"""
        extra_data = kwargs.pop("extra_data", {})

        if "extra" not in kwargs:
            kwargs["extra"] = {}

        kwargs["extra"]["extra_data"] = {
            **self.extra,
            **extra_data
        }

        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    logger = get_logger(name)
    return LoggerAdapter(logger, context)
