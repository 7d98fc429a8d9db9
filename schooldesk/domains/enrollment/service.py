# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment service: students booked into ongoing classes."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Class, ClassBooking, Term
from schooldesk.models.enrollment import EnrollmentResponse
from schooldesk.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


class EnrollmentServiceError(Exception):
    """Base exception for enrollment service errors."""

    pass


class EnrollmentNotFoundError(EnrollmentServiceError):
    """Raised when an enrollment is not found."""

    pass


class ClassNotFoundError(EnrollmentServiceError):
    """Raised when the enrolled class is not found."""

    pass


class StudentNotFoundError(EnrollmentServiceError):
    """Raised when the enrolled student is not found."""

    pass


class TermNotFoundError(EnrollmentServiceError):
    """Raised when the referenced term is not found."""

    pass


class InvalidEnrollmentPeriodError(EnrollmentServiceError):
    """Raised when an enrollment would end before it starts."""

    pass


class EnrollmentService(OwnedResourceService[ClassBooking, EnrollmentResponse]):
    """Owner-scoped CRUD for class enrollments."""

    model = ClassBooking
    response_model = EnrollmentResponse
    not_found_error = EnrollmentNotFoundError

    def _load_options(self) -> list[Any]:
        return [selectinload(ClassBooking.class_), selectinload(ClassBooking.student)]

    async def list_by_class(self, owner_id: str, class_id: int) -> list[EnrollmentResponse]:
        """List enrollments of a class.

        Raises:
            ClassNotFoundError: If the class does not belong to owner_id.
        """
        await self._ensure_owned(Class, class_id, owner_id, ClassNotFoundError)
        return await self.list(owner_id, class_id=class_id)

    async def _check_references(self, owner_id: str, values: dict[str, Any]) -> None:
        await self._ensure_owned(Class, values.get("class_id"), owner_id, ClassNotFoundError)
        await self._ensure_owned(Term, values.get("term_id"), owner_id, TermNotFoundError)
        await self._ensure_student_owned(values.get("student_id"), owner_id, StudentNotFoundError)

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: ClassBooking,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)

        start = ensure_utc(values.get("enrollment_start_date") or row.enrollment_start_date)
        end = ensure_utc(values.get("enrollment_end_date") or row.enrollment_end_date)
        if end < start:
            raise InvalidEnrollmentPeriodError(
                "enrollment_end_date must not be before enrollment_start_date"
            )

        return values
