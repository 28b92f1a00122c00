"""Logging configuration.

All modules log through ``logging.getLogger(__name__)``; this module
attaches a single console handler to the ``catalog`` parent logger.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("catalog")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False
    return logger
