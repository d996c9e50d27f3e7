"""
Earning Templates — logging configuration.

Call ``configure_logging()`` once at application startup (before any
``logging.getLogger`` calls) to install the shared handler configuration.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional


_CONFIGURED = False

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or ``LOG_LEVEL``) to a logging constant, default INFO."""
    name = level if level else os.environ.get("LOG_LEVEL", "INFO")
    return _LEVEL_MAP.get(name.strip().upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
) -> None:
    """Configure the root logger exactly once.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, …).  Falls back to the
        ``LOG_LEVEL`` environment variable, then ``INFO``.
    fmt:
        Log format string.
    datefmt:
        Date format string for the formatter.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    # uvicorn / gunicorn may already have installed their own handlers.
    if not root.handlers:
        root.addHandler(handler)

    # request_logging_middleware already emits one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _CONFIGURED = True
