"""
BIOVERIFY Shared Library
========================

Common utilities, configurations, and abstractions shared by the
verification registry.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - ledger: Ledger interface (mock/testnet/mainnet)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Bioverify Team"

from shared.config import settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
