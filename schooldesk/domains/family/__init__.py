# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Family domain package."""

from schooldesk.domains.family.service import (
    EmailAlreadyUsedError,
    FamilyNotFoundError,
    FamilyService,
    FamilyServiceError,
    InvalidPasswordError,
)

__all__ = [
    "EmailAlreadyUsedError",
    "FamilyNotFoundError",
    "FamilyService",
    "FamilyServiceError",
    "InvalidPasswordError",
]
