# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lesson domain package."""

from schooldesk.domains.lesson.service import (
    ClassNotFoundError,
    LessonNotFoundError,
    LessonService,
    LessonServiceError,
)

__all__ = ["ClassNotFoundError", "LessonNotFoundError", "LessonService", "LessonServiceError"]
