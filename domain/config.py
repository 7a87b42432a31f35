"""
Configuration module for the contact book storage layer.

All configuration values are loaded from environment variables with sensible defaults.
See .env.example for all available configuration options.
"""
import os
from dataclasses import dataclass, field


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.getenv(key, default)


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable ("1", "true", "yes", "on" are true)."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class StorageConfig:
    """Address book file location and load policy."""

    address_book_file: str = field(
        default_factory=lambda: _get_str("ADDRESS_BOOK_FILE", os.path.join("data", "addressbook.json"))
    )
    # When False a single bad plan record aborts the whole load
    skip_invalid_plans: bool = field(default_factory=lambda: _get_bool("SKIP_INVALID_PLANS", False))


@dataclass
class LoggingConfig:
    log_level: str = field(default_factory=lambda: _get_str("LOG_LEVEL", "INFO").upper())


# Global config instances (lazy loaded)
_storage_config = None
_logging_config = None


def get_storage_config() -> StorageConfig:
    """Get storage configuration."""
    global _storage_config
    if _storage_config is None:
        _storage_config = StorageConfig()
    return _storage_config


def get_logging_config() -> LoggingConfig:
    """Get logging configuration."""
    global _logging_config
    if _logging_config is None:
        _logging_config = LoggingConfig()
    return _logging_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _storage_config, _logging_config
    _storage_config = StorageConfig()
    _logging_config = LoggingConfig()
