"""Logging setup shared by the web app and the scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger.

    Safe to call more than once (e.g. one app per test).
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    logger = logging.getLogger("claim_system")
    logger.setLevel(numeric_level)
    if not any(getattr(h, "_claim_system", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._claim_system = True
        logger.addHandler(handler)
    return logger
