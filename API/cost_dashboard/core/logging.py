"""
Logging setup shared by the API and the services.

Usage:
    from cost_dashboard.core.logging import get_logger
    logger = get_logger(__name__)
    logger.warning("[STATS ERROR] %s: %s", container_id, exc)
"""
import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"
_ROOT = "cost_dashboard"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger. Safe to call twice."""
    global _configured

    logger = logging.getLogger(_ROOT)
    logger.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
