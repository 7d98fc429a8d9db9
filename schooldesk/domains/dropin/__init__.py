# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in domain package: drop-in classes, lessons and bookings."""

from schooldesk.domains.dropin.service import (
    DropInBookingNotFoundError,
    DropInBookingService,
    DropInClassNotFoundError,
    DropInClassService,
    DropInLessonNotFoundError,
    DropInLessonService,
    DropInServiceError,
    LocationNotFoundError,
    StudentNotFoundError,
    TeacherNotFoundError,
)

__all__ = [
    "DropInBookingNotFoundError",
    "DropInBookingService",
    "DropInClassNotFoundError",
    "DropInClassService",
    "DropInLessonNotFoundError",
    "DropInLessonService",
    "DropInServiceError",
    "LocationNotFoundError",
    "StudentNotFoundError",
    "TeacherNotFoundError",
]
