"""
Random identifiers

Every value produced here comes from the ``secrets`` CSPRNG:
- Hex tokens of an exact length
- Short alphanumeric uids
- Version 4 UUIDs
"""

import secrets
import string
import uuid as _uuid

from ..exceptions import InvalidArgumentError

UID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class SecureRandom:
    """Cryptographically secure random number generator"""

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        """Generate cryptographically secure random bytes"""
        return secrets.token_bytes(length)

    @staticmethod
    def generate_int(minimum: int, maximum: int) -> int:
        """Generate a uniformly distributed integer in [minimum, maximum]"""
        if maximum < minimum:
            raise InvalidArgumentError("maximum must be greater than or equal to minimum")
        return minimum + secrets.randbelow(maximum - minimum + 1)


def _check_length(length: int) -> None:
    if length < 0:
        raise InvalidArgumentError(f"Length must not be negative, got {length}")


def random_string(length: int = 18) -> str:
    """Generate a random lowercase hex string of exactly ``length`` characters"""
    _check_length(length)
    return SecureRandom.generate_bytes((length + 1) // 2).hex()[:length]


def uid(length: int = 15, prefix: str = "") -> str:
    """
    Generate a short random identifier.

    Characters are drawn with replacement from ``A-Z a-z 0-9``. Uniqueness is
    probabilistic (birthday bound over 62**length), which at the default length
    is enough to skip a database lookup but is not a cryptographic guarantee.
    """
    _check_length(length)
    last = len(UID_ALPHABET) - 1
    return prefix + "".join(
        UID_ALPHABET[SecureRandom.generate_int(0, last)] for _ in range(length)
    )


def generate_uuid() -> str:
    """Generate a random (version 4) UUID in canonical lowercase form"""
    return str(_uuid.UUID(bytes=SecureRandom.generate_bytes(16), version=4))
