"""
Unit tests for password hashing and verification
"""

import bcrypt
import pytest

from secutil.config.settings import Settings, PasswordSettings
from secutil.utils.hashing import (
    get_password_hasher,
    hash_password,
    hash_password_async,
    password_needs_rehash,
    verify_password,
    verify_password_async,
)


class TestPasswordHashing:
    """Test Argon2id hashing round trips"""

    @pytest.mark.parametrize("password", ["", "hunter2", "correct horse battery staple", "pässwörd", "x" * 200])
    def test_round_trip(self, fast_settings, password):
        hashed = hash_password(password, fast_settings)

        assert hashed.startswith("$argon2id$")
        assert verify_password(password, hashed, fast_settings) is True

    def test_wrong_password(self, fast_settings):
        hashed = hash_password("hunter2", fast_settings)

        assert verify_password("hunter3", hashed, fast_settings) is False
        assert verify_password("", hashed, fast_settings) is False

    def test_hashes_are_salted(self, fast_settings):
        assert hash_password("hunter2", fast_settings) != hash_password("hunter2", fast_settings)

    def test_default_settings_hash(self):
        """Hashing works with the library-owned default parameters"""
        hashed = hash_password("hunter2")

        assert verify_password("hunter2", hashed) is True

    def test_overrides_are_applied(self, fast_settings):
        hasher = get_password_hasher(fast_settings)

        assert hasher.time_cost == 1
        assert hasher.memory_cost == 1024
        assert hasher.parallelism == 1

    def test_hasher_is_cached(self, fast_settings):
        assert get_password_hasher(fast_settings) is get_password_hasher(fast_settings)


class TestPasswordVerification:
    """Test verification edge cases"""

    @pytest.mark.parametrize("hashed", [
        "",
        "not-a-hash",
        "$argon2id$garbage",
        "$argon2id$v=19$m=1024,t=1,p=1$c2FsdA$",
        "$2b$12$short",
        "$1$md5crypt$",
    ])
    def test_malformed_hash_returns_false(self, fast_settings, hashed):
        assert verify_password("hunter2", hashed, fast_settings) is False

    @pytest.mark.parametrize("password,hashed", [
        (None, "$argon2id$x"),
        ("hunter2", None),
        (123, "$argon2id$x"),
    ])
    def test_non_string_returns_false(self, fast_settings, password, hashed):
        assert verify_password(password, hashed, fast_settings) is False

    def test_lone_surrogate_password(self, fast_settings):
        hashed = hash_password("x", fast_settings)

        assert verify_password("\ud800", hashed, fast_settings) is False
        assert verify_password("x\ud800", hashed, fast_settings) is False

    def test_lone_surrogate_round_trip(self, fast_settings):
        hashed = hash_password("pass\ud800word", fast_settings)

        assert verify_password("pass\ud800word", hashed, fast_settings) is True
        assert verify_password("password", hashed, fast_settings) is False

    def test_lone_surrogate_in_hash(self, fast_settings):
        assert verify_password("x", "$argon2id$\ud800", fast_settings) is False
        assert verify_password("x", "$2b$12$\ud800", fast_settings) is False

    def test_lone_surrogate_legacy_bcrypt(self, fast_settings):
        hashed = bcrypt.hashpw(b"hunter2", bcrypt.gensalt(rounds=4)).decode()

        assert verify_password("hunter2\ud800", hashed, fast_settings) is False

    def test_legacy_bcrypt_hash(self, fast_settings):
        hashed = bcrypt.hashpw(b"hunter2", bcrypt.gensalt(rounds=4)).decode()

        assert verify_password("hunter2", hashed, fast_settings) is True
        assert verify_password("hunter3", hashed, fast_settings) is False

    def test_legacy_bcrypt_2y_prefix(self, fast_settings):
        """Hashes written by PHP's password_hash carry the $2y$ prefix"""
        hashed = bcrypt.hashpw(b"hunter2", bcrypt.gensalt(rounds=4)).decode()
        hashed = "$2y$" + hashed[4:]

        assert verify_password("hunter2", hashed, fast_settings) is True

    def test_legacy_bcrypt_disabled(self):
        settings = Settings(password=PasswordSettings(verify_legacy_bcrypt=False))
        hashed = bcrypt.hashpw(b"hunter2", bcrypt.gensalt(rounds=4)).decode()

        assert verify_password("hunter2", hashed, settings) is False


class TestNeedsRehash:
    """Test detection of outdated hashes"""

    def test_current_parameters(self, fast_settings):
        hashed = hash_password("hunter2", fast_settings)

        assert password_needs_rehash(hashed, fast_settings) is False

    def test_changed_parameters(self, fast_settings):
        hashed = hash_password("hunter2", fast_settings)
        stronger = Settings(password=PasswordSettings(argon2_time_cost=2, argon2_memory_cost=2048, argon2_parallelism=1))

        assert password_needs_rehash(hashed, stronger) is True

    def test_bcrypt_needs_rehash(self, fast_settings):
        hashed = bcrypt.hashpw(b"hunter2", bcrypt.gensalt(rounds=4)).decode()

        assert password_needs_rehash(hashed, fast_settings) is True

    @pytest.mark.parametrize("hashed", ["", "garbage", "$argon2id$garbage", None])
    def test_invalid_needs_rehash(self, fast_settings, hashed):
        assert password_needs_rehash(hashed, fast_settings) is True


class TestAsyncPasswords:
    """Test executor-backed async wrappers"""

    @pytest.mark.asyncio
    async def test_async_round_trip(self, fast_settings):
        hashed = await hash_password_async("hunter2", fast_settings)

        assert await verify_password_async("hunter2", hashed, fast_settings) is True
        assert await verify_password_async("hunter3", hashed, fast_settings) is False
