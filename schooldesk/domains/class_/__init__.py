# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class domain package."""

from schooldesk.domains.class_.service import (
    ClassNotFoundError,
    ClassService,
    ClassServiceError,
    LocationNotFoundError,
    TeacherNotFoundError,
    TermNotFoundError,
)

__all__ = [
    "ClassNotFoundError",
    "ClassService",
    "ClassServiceError",
    "LocationNotFoundError",
    "TeacherNotFoundError",
    "TermNotFoundError",
]
