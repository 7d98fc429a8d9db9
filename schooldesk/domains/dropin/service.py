# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in services: pay-per-visit classes, their lessons and bookings.

This module provides:
- DropInClassService for drop-in class CRUD
- DropInLessonService for sessions of a drop-in class
- DropInBookingService for students booked into a drop-in class
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import (
    DropInClass,
    DropInClassBooking,
    DropInLesson,
    Location,
    Teacher,
)
from schooldesk.models.dropin import (
    DropInBookingResponse,
    DropInClassDetailResponse,
    DropInClassResponse,
    DropInLessonResponse,
)
from schooldesk.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class DropInServiceError(Exception):
    """Base exception for drop-in service errors."""

    pass


class DropInClassNotFoundError(DropInServiceError):
    """Raised when a drop-in class is not found."""

    pass


class DropInLessonNotFoundError(DropInServiceError):
    """Raised when a drop-in lesson is not found."""

    pass


class DropInBookingNotFoundError(DropInServiceError):
    """Raised when a drop-in booking is not found."""

    pass


class StudentNotFoundError(DropInServiceError):
    """Raised when the booked student is not found."""

    pass


class LocationNotFoundError(DropInServiceError):
    """Raised when the referenced location is not found."""

    pass


class TeacherNotFoundError(DropInServiceError):
    """Raised when the referenced teacher is not found."""

    pass


class DropInClassService(OwnedResourceService[DropInClass, DropInClassResponse]):
    """Owner-scoped CRUD for drop-in classes."""

    model = DropInClass
    response_model = DropInClassResponse
    not_found_error = DropInClassNotFoundError

    def _load_options(self) -> list[Any]:
        return [selectinload(DropInClass.location), selectinload(DropInClass.teacher)]

    async def get(self, owner_id: str, item_id: int) -> DropInClassDetailResponse:
        """Get a drop-in class with its lessons in date order."""
        query = (
            self._base_query(owner_id)
            .where(DropInClass.id == item_id)
            .options(*self._load_options(), selectinload(DropInClass.lessons))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        dropin_class = result.scalar_one_or_none()

        if dropin_class is None:
            raise DropInClassNotFoundError(f"DropInClass {item_id} not found")

        return DropInClassDetailResponse.model_validate(dropin_class)

    async def _check_references(self, owner_id: str, values: dict[str, Any]) -> None:
        await self._ensure_owned(
            Location, values.get("location_id"), owner_id, LocationNotFoundError
        )
        await self._ensure_owned(
            Teacher, values.get("teacher_id"), owner_id, TeacherNotFoundError
        )

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: DropInClass,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values


class DropInLessonService(OwnedResourceService[DropInLesson, DropInLessonResponse]):
    """CRUD for drop-in lessons, scoped through the drop-in class."""

    model = DropInLesson
    response_model = DropInLessonResponse
    not_found_error = DropInLessonNotFoundError

    def _base_query(self, owner_id: str) -> Select:
        return (
            select(DropInLesson)
            .join(DropInLesson.dropin_class)
            .where(DropInClass.user_id == owner_id)
        )

    def _load_options(self) -> list[Any]:
        return [selectinload(DropInLesson.dropin_class)]

    def _order_by(self) -> list[Any]:
        return [DropInLesson.date.asc(), DropInLesson.id.asc()]

    def _new_row(self, owner_id: str, values: dict[str, Any]) -> DropInLesson:
        return DropInLesson(**values)

    async def list_by_class(
        self,
        owner_id: str,
        dropin_class_id: int,
    ) -> list[DropInLessonResponse]:
        """List the lessons of a drop-in class in date order."""
        await self._ensure_owned(
            DropInClass, dropin_class_id, owner_id, DropInClassNotFoundError
        )
        return await self.list(owner_id, dropin_class_id=dropin_class_id)

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._ensure_owned(
            DropInClass, values["dropin_class_id"], owner_id, DropInClassNotFoundError
        )
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: DropInLesson,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._ensure_owned(
            DropInClass, values.get("dropin_class_id"), owner_id, DropInClassNotFoundError
        )
        return values


class DropInBookingService(OwnedResourceService[DropInClassBooking, DropInBookingResponse]):
    """Owner-scoped CRUD for drop-in bookings."""

    model = DropInClassBooking
    response_model = DropInBookingResponse
    not_found_error = DropInBookingNotFoundError

    def _load_options(self) -> list[Any]:
        return [
            selectinload(DropInClassBooking.dropin_class),
            selectinload(DropInClassBooking.student),
        ]

    async def list_by_class(
        self,
        owner_id: str,
        dropin_class_id: int,
    ) -> list[DropInBookingResponse]:
        """List bookings of one drop-in class."""
        await self._ensure_owned(
            DropInClass, dropin_class_id, owner_id, DropInClassNotFoundError
        )
        return await self.list(owner_id, dropin_class_id=dropin_class_id)

    async def _check_references(self, owner_id: str, values: dict[str, Any]) -> None:
        await self._ensure_owned(
            DropInClass, values.get("dropin_class_id"), owner_id, DropInClassNotFoundError
        )
        await self._ensure_student_owned(values.get("student_id"), owner_id, StudentNotFoundError)

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        if values.get("enrollment_date") is None:
            values["enrollment_date"] = utc_now()
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: DropInClassBooking,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values
