"""Core module exports."""

from treetrap.core.errors import (
    ConfigError,
    ErrorCode,
    ExtractionError,
    InternalError,
    SchemaError,
    TreeTrapError,
)
from treetrap.core.logging import configure_logging, get_logger
from treetrap.core.progress import pluralize, progress, status

__all__ = [
    # Errors
    "TreeTrapError",
    "ConfigError",
    "ErrorCode",
    "ExtractionError",
    "InternalError",
    "SchemaError",
    # Logging
    "configure_logging",
    "get_logger",
    # Progress
    "pluralize",
    "progress",
    "status",
]
