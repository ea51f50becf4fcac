"""
Configuration Package

Settings, configuration lookup and logging setup for secutil.

Features:
- Environment-driven settings with a secret pepper and password cost overrides
- Dotted-key configuration providers injectable into the hashing helpers
- Structured logging pipeline built on structlog
"""

from .settings import (
    Settings,
    LogLevel,
    SecuritySettings,
    PasswordSettings,
    get_settings,
    reload_settings
)

from .provider import (
    PEPPER_KEY,
    ConfigProvider,
    SettingsConfigProvider,
    DictConfigProvider
)

from .logging_setup import configure_logging

__all__ = [
    # Settings classes
    "Settings",
    "LogLevel",
    "SecuritySettings",
    "PasswordSettings",

    # Settings functions
    "get_settings",
    "reload_settings",

    # Configuration providers
    "PEPPER_KEY",
    "ConfigProvider",
    "SettingsConfigProvider",
    "DictConfigProvider",

    # Logging
    "configure_logging"
]
