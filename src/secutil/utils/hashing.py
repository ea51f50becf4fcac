"""
Hashing Utilities

This module provides:
- Generic (non-password) string hashing with an optional pepper
- Password hashing with Argon2id and verification of legacy bcrypt hashes
- Constant-time comparison of secrets
"""

import asyncio
import hashlib
from functools import lru_cache
from typing import Optional, Union, FrozenSet

import bcrypt
import structlog
from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError
from cryptography.hazmat.primitives import constant_time

from ..config.provider import PEPPER_KEY, ConfigProvider, SettingsConfigProvider
from ..config.settings import Settings, get_settings
from ..exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)

ARGON2_PREFIX = "$argon2"
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")

# Variable-length digests need an explicit output size, so hexdigest() cannot be used
_VARIABLE_LENGTH_DIGESTS = frozenset({"shake_128", "shake_256"})


def to_bytes(value: Union[str, bytes]) -> bytes:
    """UTF-8 encode text, passing lone surrogates through so every str has a byte form"""
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogatepass")


def supported_algorithms() -> FrozenSet[str]:
    """Return the lowercase digest names accepted by hash_string"""
    return frozenset(
        name.lower() for name in hashlib.algorithms_available
    ) - _VARIABLE_LENGTH_DIGESTS


def _resolve_pepper(pepper: Union[bool, str], config: Optional[ConfigProvider]) -> str:
    if pepper is True:
        config = config or SettingsConfigProvider()
        value = config.read(PEPPER_KEY)
        if not value:
            logger.warning("Pepper requested but not configured", key=PEPPER_KEY)
            return ""
        return str(value)
    if not pepper:
        return ""
    return pepper


def hash_string(
    value: str,
    pepper: Union[bool, str] = False,
    algorithm: str = "sha256",
    config: Optional[ConfigProvider] = None
) -> str:
    """
    Hash a string. This is not for passwords, see hash_password.

    Args:
        value: The string to hash
        pepper: ``True`` to use the configured ``Security.pepper``, a string
            to use that pepper directly, or ``False`` for none
        algorithm: Any name from supported_algorithms(), case-insensitive
        config: Configuration provider used to resolve ``pepper=True``

    Returns:
        Lowercase hex digest
    """
    name = algorithm.lower()
    if name not in supported_algorithms():
        raise InvalidArgumentError(f"Invalid hashing algorithm: {algorithm}")

    try:
        digest = hashlib.new(name)
    except ValueError as e:
        # Advertised by algorithms_available but unavailable in the loaded OpenSSL provider
        raise InvalidArgumentError(f"Invalid hashing algorithm: {algorithm}") from e

    digest.update(to_bytes(_resolve_pepper(pepper, config) + value))
    return digest.hexdigest()


def compare(known: Union[str, bytes, None], candidate: Union[str, bytes, None]) -> bool:
    """
    Compare two secrets in constant time.

    Returns False immediately if either value is missing or not a string; only
    the lengths of the inputs are observable otherwise.
    """
    if not isinstance(known, (str, bytes)) or not isinstance(candidate, (str, bytes)):
        return False
    return constant_time.bytes_eq(to_bytes(known), to_bytes(candidate))


@lru_cache(maxsize=8)
def _build_hasher(
    time_cost: Optional[int],
    memory_cost: Optional[int],
    parallelism: Optional[int]
) -> PasswordHasher:
    overrides = {
        "time_cost": time_cost,
        "memory_cost": memory_cost,
        "parallelism": parallelism,
    }
    return PasswordHasher(**{k: v for k, v in overrides.items() if v is not None})


def get_password_hasher(settings: Optional[Settings] = None) -> PasswordHasher:
    """Get the Argon2id hasher for the given (or global) settings"""
    password_settings = (settings or get_settings()).password
    return _build_hasher(
        password_settings.argon2_time_cost,
        password_settings.argon2_memory_cost,
        password_settings.argon2_parallelism,
    )


def hash_password(password: str, settings: Optional[Settings] = None) -> str:
    """Hash a password using Argon2id.

    The result is a self-describing PHC string carrying the algorithm,
    parameters and salt, to be checked later with verify_password.
    """
    try:
        return get_password_hasher(settings).hash(to_bytes(password))
    except HashingError as e:
        logger.error("Password hashing failed", error=str(e))
        raise


def verify_password(password: str, hashed: str, settings: Optional[Settings] = None) -> bool:
    """Verify a password against a hash created by hash_password.

    Legacy bcrypt hashes are accepted unless disabled in the password settings.
    Malformed hashes verify as False rather than raising.
    """
    if not isinstance(password, str) or not isinstance(hashed, str):
        return False

    settings = settings or get_settings()

    if hashed.startswith(ARGON2_PREFIX):
        try:
            return get_password_hasher(settings).verify(to_bytes(hashed), to_bytes(password))
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError) as e:
            logger.debug("Password hash could not be verified", error=str(e))
            return False

    if hashed.startswith(BCRYPT_PREFIXES):
        if not settings.password.verify_legacy_bcrypt:
            logger.debug("Legacy bcrypt hash rejected by configuration")
            return False
        try:
            return bcrypt.checkpw(to_bytes(password), to_bytes(hashed))
        except ValueError as e:
            logger.debug("Malformed bcrypt hash", error=str(e))
            return False

    return False


def password_needs_rehash(hashed: str, settings: Optional[Settings] = None) -> bool:
    """Check whether a stored hash should be recomputed with the current hasher"""
    if not isinstance(hashed, str) or not hashed.startswith(ARGON2_PREFIX):
        return True
    try:
        return get_password_hasher(settings).check_needs_rehash(hashed)
    except InvalidHashError:
        return True


async def hash_password_async(password: str, settings: Optional[Settings] = None) -> str:
    """hash_password, run in the default executor to keep the event loop free"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hash_password, password, settings)


async def verify_password_async(password: str, hashed: str, settings: Optional[Settings] = None) -> bool:
    """verify_password, run in the default executor to keep the event loop free"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, verify_password, password, hashed, settings)
