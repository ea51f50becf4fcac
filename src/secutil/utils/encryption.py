"""
Symmetric Encryption Utilities

AES-256-CBC with an HMAC-SHA256 tag (encrypt-then-MAC):
- Envelope layout: base64(IV (16 bytes) || tag (32 bytes) || ciphertext)
- Tag verified in constant time before any decryption is attempted
- Authentication failure reported as ``None``, never as an exception
- Key generation from the CSPRNG
"""

import base64
import binascii
from typing import Optional, Union

import structlog
from cryptography.hazmat.primitives import hashes, hmac, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import InvalidArgumentError
from .hashing import compare, to_bytes
from .tokens import SecureRandom

logger = structlog.get_logger(__name__)

CIPHER = "AES-256-CBC"
KEY_LENGTH = 32
IV_LENGTH = algorithms.AES.block_size // 8
TAG_LENGTH = hashes.SHA256.digest_size


def generate_key() -> str:
    """
    Generate a secure 256 bit key, hex encoded (64 characters).

    encrypt/decrypt take the raw 32 bytes; convert with decode_key().
    """
    return SecureRandom.generate_bytes(KEY_LENGTH).hex()


def decode_key(hex_key: str) -> bytes:
    """Decode a key produced by generate_key into raw key material"""
    try:
        key = bytes.fromhex(hex_key)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("Invalid key. Expected a hex encoded key") from e
    if len(key) != KEY_LENGTH:
        raise InvalidArgumentError("Invalid key. Key must be 256 bits (32 bytes)")
    return key


def _key_bytes(key: Union[str, bytes]) -> bytes:
    if isinstance(key, str):
        key = to_bytes(key)
    if not isinstance(key, bytes) or len(key) != KEY_LENGTH:
        raise InvalidArgumentError("Invalid key. Key must be 256 bits (32 bytes)")
    return key


def _sign(key: bytes, iv: bytes, raw: bytes, legacy: bool) -> bytes:
    mac = hmac.HMAC(key, hashes.SHA256())
    if not legacy:
        mac.update(iv)
    mac.update(raw)
    return mac.finalize()


def encrypt(plaintext: str, key: Union[str, bytes], legacy: bool = False) -> str:
    """
    Encrypt a string with AES-256-CBC and authenticate it with HMAC-SHA256.

    Args:
        plaintext: Text to encrypt
        key: 32 bytes of key material (``str`` keys are UTF-8 encoded)
        legacy: Authenticate the ciphertext only, without the IV, producing
            envelopes readable by older deployments

    Returns:
        Base64 encoded envelope
    """
    key = _key_bytes(key)
    iv = SecureRandom.generate_bytes(IV_LENGTH)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(to_bytes(plaintext)) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    raw = encryptor.update(padded) + encryptor.finalize()

    tag = _sign(key, iv, raw, legacy)
    return base64.b64encode(iv + tag + raw).decode("ascii")


def decrypt(envelope: str, key: Union[str, bytes], legacy: bool = False) -> Optional[str]:
    """
    Decrypt an envelope produced by encrypt.

    Returns None when the envelope is malformed or fails authentication
    (tampered data or wrong key).
    """
    key = _key_bytes(key)

    try:
        data = base64.b64decode(envelope, validate=True)
    except (binascii.Error, TypeError, ValueError):
        logger.warning("Envelope is not valid base64")
        return None

    if len(data) < IV_LENGTH + TAG_LENGTH:
        logger.warning("Envelope too short", length=len(data))
        return None

    iv = data[:IV_LENGTH]
    tag = data[IV_LENGTH:IV_LENGTH + TAG_LENGTH]
    raw = data[IV_LENGTH + TAG_LENGTH:]

    if not compare(_sign(key, iv, raw, legacy), tag):
        logger.warning("Envelope authentication failed", cipher=CIPHER)
        return None

    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(raw) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return (unpadder.update(padded) + unpadder.finalize()).decode("utf-8", "surrogatepass")
    except ValueError as e:
        # Only reachable when the tag was produced with this key over bad data
        logger.error("Decryption failed after authentication", cipher=CIPHER, error=str(e))
        return None
