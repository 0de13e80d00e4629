"""Structlog configuration for Voxnova.

The library logs through structlog with snake_case event names and keyword
context. Output is silent under pytest, human readable in development and
JSON in production.

Usage:
    from voxnova.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translator_created", locale="en")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from voxnova.configuration import Settings
from voxnova.configuration import settings as default_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; selects JSON
            rather than console rendering.
        settings: Settings to read defaults from (the module singleton if
            omitted).

    Returns:
        A logger bound to the new configuration.
    """
    settings = settings or default_settings

    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
    else:
        prod_mode = settings.is_production if is_production is None else is_production
        processors = _build_processors(prod_mode)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger carrying ``component`` and ``module_path`` context.

    Args:
        name: Dotted module name. Defaults to the calling module.

    Example:
        # In voxnova/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "voxnova.i18n.translator"}
    """
    if name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        module = inspect.getmodule(caller) if caller is not None else None
        name = module.__name__ if module is not None else "unknown"

    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
