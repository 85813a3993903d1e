"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    MatrixError,
    InvalidShapeError,
    InvalidInputError,
    OutOfBoundsError,
    UnsupportedOperationError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "MatrixError",
    "InvalidShapeError",
    "InvalidInputError",
    "OutOfBoundsError",
    "UnsupportedOperationError",
]
