# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication domain: session lookup and password hashing."""

from schooldesk.domains.auth.password import PasswordHasher, get_password_hasher
from schooldesk.domains.auth.session import CurrentUser, SessionService, parse_session_token

__all__ = [
    "CurrentUser",
    "PasswordHasher",
    "SessionService",
    "get_password_hasher",
    "parse_session_token",
]
