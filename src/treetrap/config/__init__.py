"""Config module exports."""

from treetrap.config.loader import load_config
from treetrap.config.models import (
    ExtractorConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    TreeTrapConfig,
)

__all__ = [
    "load_config",
    "TreeTrapConfig",
    "ExtractorConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
]
