"""
declension/logging_setup.py
---------------------------

Central logging configuration for the declension engine.

Modules log through structlog:

    import structlog

    logger = structlog.get_logger()
    logger.info("noun_missing_form", noun=name, form=form.key)

Applications (or test sessions) call `init_logging()` once to route those
events through the standard library `logging` handlers with a consistent
format and level.

Level is taken from `settings.LOG_LEVEL`, which reads the
DECLENSION_LOG_LEVEL environment variable.

Implementation notes
====================

- `init_logging` is idempotent; calling it multiple times is safe.
- Validation diagnostics map onto levels as follows: missing required
  values are INFO, fill-in and fallback details are DEBUG.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from declension.config import settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def init_logging(level: Optional[int] = None, *, force: bool = False) -> None:
    """
    Initialize stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            settings.LOG_LEVEL, defaulting to INFO.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    level = _resolve_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a named structlog logger, ensuring logging is initialized.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
