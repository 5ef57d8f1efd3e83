"""
Configuration Module
====================

Centralized configuration management using Pydantic Settings.
Loads from environment variables with type validation and defaults.

Usage:
    from shared.config import settings

    print(settings.environment)
    print(settings.registry.verification_fee)
"""

from shared.config.settings import (
    Settings,
    get_settings,
    Environment,
    LogLevel,
    LedgerMode,
    LedgerSettings,
    RegistrySettings,
)


# Global settings instance (singleton)
settings = get_settings()

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "Environment",
    "LogLevel",
    "LedgerMode",
    "LedgerSettings",
    "RegistrySettings",
]
