"""Core helpers shared by the watcher and its entry point."""

from .logging_config import LOG_DATEFMT, LOG_FORMAT, configure_logging
from .logging_utils import StructuredLogger, ensure_structured_logger, get_module_logger

__all__ = [
    "LOG_DATEFMT",
    "LOG_FORMAT",
    "StructuredLogger",
    "configure_logging",
    "ensure_structured_logger",
    "get_module_logger",
]
