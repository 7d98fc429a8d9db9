# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for password hashing of family portal accounts."""

import os
from unittest.mock import patch

import pytest

from schooldesk.domains.auth.password import PasswordHasher, get_password_hasher


@pytest.fixture
def hasher() -> PasswordHasher:
    """Low-cost hasher so the suite stays fast."""
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    """Tests for PasswordHasher class."""

    def test_hash_password_returns_bcrypt_hash(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("family-secret")

        assert hashed.startswith("$2b$04$")
        assert len(hashed) == 60

    def test_hash_produces_different_hashes_for_same_password(self, hasher: PasswordHasher) -> None:
        """Salting makes every hash unique."""
        assert hasher.hash("family-secret") != hasher.hash("family-secret")

    def test_verify_correct_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("correct_password")

        assert hasher.verify("correct_password", hashed) is True

    def test_verify_incorrect_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("correct_password")

        assert hasher.verify("wrong_password", hashed) is False

    def test_verify_empty_inputs_return_false(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("valid_password")

        assert hasher.verify("", hashed) is False
        assert hasher.verify("password", "") is False
        assert hasher.verify("password", None) is False

    def test_verify_invalid_hash_returns_false(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("password", "not_a_valid_bcrypt_hash") is False

    def test_hash_empty_password_raises_error(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="Password cannot be empty"):
            hasher.hash("")

    def test_hash_rejects_password_over_72_bytes(self, hasher: PasswordHasher) -> None:
        """bcrypt ignores bytes past 72, so longer passwords are refused."""
        with pytest.raises(ValueError, match="72 bytes"):
            hasher.hash("a" * 73)

    def test_multibyte_password_counts_bytes(self, hasher: PasswordHasher) -> None:
        # 25 characters, 75 bytes in UTF-8
        with pytest.raises(ValueError):
            hasher.hash("密" * 25)

    def test_unicode_password(self, hasher: PasswordHasher) -> None:
        password = "şifre_parola_密码"

        assert hasher.verify(password, hasher.hash(password)) is True


class TestGetPasswordHasher:
    """Tests for the settings-driven factory."""

    def test_uses_configured_rounds(self) -> None:
        with patch.dict(os.environ, {"AUTH_PASSWORD_HASH_ROUNDS": "5"}):
            hasher = get_password_hasher()

        assert hasher.rounds == 5
