"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LedgerMode(str, Enum):
    """Ledger operation mode."""

    MOCK = "mock"
    TESTNET = "testnet"
    MAINNET = "mainnet"


class LedgerSettings(BaseSettings):
    """Ledger integration configuration."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    mode: LedgerMode = LedgerMode.MOCK

    # Burn address; can never be configured as the fee authority
    null_principal: str = "SP000000000000000000002Q6VF78"

    # Mock ledger only
    genesis_height: int = Field(default=0, ge=0)
    default_balance: int = Field(default=1_000_000, ge=0)


class RegistrySettings(BaseSettings):
    """Verification registry configuration."""

    model_config = SettingsConfigDict(env_prefix="REGISTRY_")

    max_verifications: int = Field(default=10_000, ge=0)
    verification_fee: int = Field(default=500, ge=0)

    # When false, any caller may change the fee and ceiling once an
    # authority exists.
    restrict_config_to_authority: bool = False


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables with sensible defaults.
    Use the global `settings` singleton or call `get_settings()`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    service_name: str = "bioverify"

    ledger: LedgerSettings = Field(default_factory=LedgerSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
