# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Password hashing for family portal accounts.

Example:
    >>> hasher = PasswordHasher(rounds=4)
    >>> hashed = hasher.hash("family-secret")
    >>> hasher.verify("family-secret", hashed)
    True
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """bcrypt hasher with a configurable cost factor.

    Attributes:
        rounds: bcrypt log2 cost factor.
    """

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plain text password.

        Args:
            password: Plain text password.

        Returns:
            Encoded bcrypt hash with embedded salt.

        Raises:
            ValueError: If the password is empty or longer than 72 bytes.
        """
        if not password:
            raise ValueError("Password cannot be empty")

        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError("Password is longer than 72 bytes")

        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Check a password against a stored hash.

        Malformed hashes are logged and treated as a mismatch.
        """
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning("Stored password hash is invalid: %s", str(e))
            return False


def get_password_hasher() -> PasswordHasher:
    """Build a hasher using the configured cost factor."""
    from schooldesk.core.config import get_settings

    return PasswordHasher(rounds=get_settings().auth.password_hash_rounds)
