"""
Logging Module
==============

Structured logging with structlog.

Usage:
    from shared.logging import get_logger

    logger = get_logger(__name__)
    logger.warning("verification_perform_rejected", error_code=107)
"""

from shared.logging.logger import censor_sensitive, get_logger, setup_logging


__all__ = [
    "censor_sensitive",
    "get_logger",
    "setup_logging",
]
