# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student domain package."""

from schooldesk.domains.student.service import (
    FamilyNotFoundError,
    StudentNotFoundError,
    StudentService,
    StudentServiceError,
)

__all__ = [
    "FamilyNotFoundError",
    "StudentNotFoundError",
    "StudentService",
    "StudentServiceError",
]
