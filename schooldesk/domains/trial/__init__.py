# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trial domain package."""

from schooldesk.domains.trial.service import (
    ClassNotFoundError,
    LessonNotFoundError,
    StudentNotFoundError,
    TermNotFoundError,
    TrialNotFoundError,
    TrialService,
    TrialServiceError,
)

__all__ = [
    "ClassNotFoundError",
    "LessonNotFoundError",
    "StudentNotFoundError",
    "TermNotFoundError",
    "TrialNotFoundError",
    "TrialService",
    "TrialServiceError",
]
