# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment domain package."""

from schooldesk.domains.enrollment.service import (
    ClassNotFoundError,
    EnrollmentNotFoundError,
    EnrollmentService,
    EnrollmentServiceError,
    InvalidEnrollmentPeriodError,
    StudentNotFoundError,
    TermNotFoundError,
)

__all__ = [
    "ClassNotFoundError",
    "EnrollmentNotFoundError",
    "EnrollmentService",
    "EnrollmentServiceError",
    "InvalidEnrollmentPeriodError",
    "StudentNotFoundError",
    "TermNotFoundError",
]
