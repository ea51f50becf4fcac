"""
Pytest configuration and shared fixtures for secutil

This module provides:
- Isolation of the settings singleton and SECUTIL_* environment variables
- Settings with cheap Argon2 parameters for fast password tests
- Key material for the encryption tests
"""

import os

import pytest

import secutil.config.settings as settings_module
from secutil.config.settings import Settings, PasswordSettings, SecuritySettings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test from a clean environment and no cached settings."""
    for name in list(os.environ):
        if name.upper().startswith("SECUTIL_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "settings", None)
    yield


@pytest.fixture(scope="function")
def fast_settings():
    """Create settings with the cheapest valid Argon2 parameters."""
    return Settings(
        password=PasswordSettings(
            argon2_time_cost=1,
            argon2_memory_cost=1024,
            argon2_parallelism=1,
        ),
    )


@pytest.fixture(scope="function")
def peppered_settings():
    """Create settings carrying a pepper."""
    return Settings(security=SecuritySettings(pepper="configured-pepper"))


@pytest.fixture(scope="function")
def raw_key():
    """A 32 byte key given as a string, as applications usually store it."""
    return "0123456789abcdef0123456789abcdef"
