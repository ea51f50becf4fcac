"""
Utilities Package

The cryptographic primitives exposed by secutil.

Security Utilities:
- Generic string hashing with an optional pepper
- Argon2id password hashing with legacy bcrypt verification
- Constant-time comparison
- AES-256-CBC + HMAC-SHA256 authenticated encryption
- CSPRNG backed tokens, uids and UUIDs
"""

from .hashing import (
    supported_algorithms,
    hash_string,
    compare,
    get_password_hasher,
    hash_password,
    verify_password,
    password_needs_rehash,
    hash_password_async,
    verify_password_async
)

from .encryption import (
    generate_key,
    decode_key,
    encrypt,
    decrypt
)

from .tokens import (
    SecureRandom,
    random_string,
    uid,
    generate_uuid
)

__all__ = [
    # Hashing functions
    "supported_algorithms",
    "hash_string",
    "compare",
    "get_password_hasher",
    "hash_password",
    "verify_password",
    "password_needs_rehash",
    "hash_password_async",
    "verify_password_async",

    # Encryption functions
    "generate_key",
    "decode_key",
    "encrypt",
    "decrypt",

    # Random generation
    "SecureRandom",
    "random_string",
    "uid",
    "generate_uuid"
]
