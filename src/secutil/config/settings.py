"""
Configuration Management

This module loads the library configuration from the environment:
- Environment-based configuration loading (``SECUTIL_`` prefix, ``__`` nesting)
- Secret handling for the hashing pepper
- Optional password hashing cost overrides
- Logging level selection
"""

from typing import Optional
from enum import Enum

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SecuritySettings(BaseModel):
    """Secrets consumed by the generic hashing helpers"""

    # Read through the ``Security.pepper`` configuration key
    pepper: Optional[SecretStr] = Field(
        default=None,
        description="Secret prepended to input by hash_string(pepper=True)"
    )


class PasswordSettings(BaseModel):
    """Password hashing settings.

    The Argon2 cost parameters are owned by argon2-cffi; leave them unset to
    track the library's recommended profile across upgrades.
    """

    argon2_time_cost: Optional[int] = Field(default=None, ge=1, description="Argon2 time cost override")
    argon2_memory_cost: Optional[int] = Field(default=None, ge=1024, description="Argon2 memory cost override in KiB")
    argon2_parallelism: Optional[int] = Field(default=None, ge=1, description="Argon2 parallelism override")

    verify_legacy_bcrypt: bool = Field(
        default=True,
        description="Accept bcrypt ($2a$/$2b$/$2y$) hashes in verify_password"
    )


class Settings(BaseSettings):
    """Main library settings"""

    model_config = SettingsConfigDict(
        env_prefix="SECUTIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    security: SecuritySettings = Field(default_factory=SecuritySettings)
    password: PasswordSettings = Field(default_factory=PasswordSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get library settings singleton"""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from the environment"""
    global settings
    settings = Settings()
    return settings
