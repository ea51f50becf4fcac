"""
secutil

Cryptographic primitives with good defaults: string hashing, password
hashing, constant-time comparison, authenticated encryption and random
identifiers.
"""

__version__ = "0.1.0"
__description__ = "Cryptographic primitives with good defaults"

from .exceptions import SecurityUtilityError, InvalidArgumentError

from .utils import (
    supported_algorithms,
    hash_string,
    compare,
    hash_password,
    verify_password,
    password_needs_rehash,
    hash_password_async,
    verify_password_async,
    generate_key,
    decode_key,
    encrypt,
    decrypt,
    SecureRandom,
    random_string,
    uid,
    generate_uuid
)

__all__ = [
    "SecurityUtilityError",
    "InvalidArgumentError",
    "supported_algorithms",
    "hash_string",
    "compare",
    "hash_password",
    "verify_password",
    "password_needs_rehash",
    "hash_password_async",
    "verify_password_async",
    "generate_key",
    "decode_key",
    "encrypt",
    "decrypt",
    "SecureRandom",
    "random_string",
    "uid",
    "generate_uuid"
]
