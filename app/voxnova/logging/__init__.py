"""Structured logging for Voxnova using structlog.

Public API:
    - configure_logging(): (Re)initialize logging
    - get_module_logger(): Get a logger for the calling (or a named) module
"""

from voxnova.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
