# asyncontract/logging/logger.py
"""
Unified logging setup for asyncontract.

All modules use:
    from asyncontract.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint, through configure_logging().
Library code never installs handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; handler duplication is prevented.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
