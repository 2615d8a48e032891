"""
Logging setup for the analyzer service.

Modules log through `logging.getLogger(__name__)`; this only installs the
handler and the threshold, once, at startup.
"""

import logging

LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """Map a configured level name to a logging level (unknown -> INFO)"""
    return LEVELS.get((level or "").lower(), logging.INFO)


def configure_logging(level: str = "info") -> int:
    """Install the root handler; returns the numeric threshold applied"""
    numeric_level = resolve_level(level)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)
    return numeric_level
