# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lesson service.

Lessons carry no owner column of their own; they belong to whoever owns
their class, so every query joins through Class.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Class, Lesson
from schooldesk.models.lesson import LessonDetailResponse, LessonResponse

logger = logging.getLogger(__name__)


class LessonServiceError(Exception):
    """Base exception for lesson service errors."""

    pass


class LessonNotFoundError(LessonServiceError):
    """Raised when a lesson is not found."""

    pass


class ClassNotFoundError(LessonServiceError):
    """Raised when the lesson's class is not found."""

    pass


class LessonService(OwnedResourceService[Lesson, LessonResponse]):
    """CRUD for lessons, scoped through the owning class."""

    model = Lesson
    response_model = LessonResponse
    not_found_error = LessonNotFoundError

    def _base_query(self, owner_id: str) -> Select:
        return select(Lesson).join(Lesson.class_).where(Class.user_id == owner_id)

    def _load_options(self) -> list[Any]:
        return [selectinload(Lesson.class_)]

    def _order_by(self) -> list[Any]:
        return [Lesson.date.asc(), Lesson.id.asc()]

    def _new_row(self, owner_id: str, values: dict[str, Any]) -> Lesson:
        return Lesson(**values)

    async def get(self, owner_id: str, item_id: int) -> LessonDetailResponse:
        """Get a lesson with its trial bookings.

        Raises:
            LessonNotFoundError: If not found or the class belongs to someone else.
        """
        query = (
            self._base_query(owner_id)
            .where(Lesson.id == item_id)
            .options(*self._load_options(), selectinload(Lesson.trials))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        lesson = result.scalar_one_or_none()

        if lesson is None:
            raise LessonNotFoundError(f"Lesson {item_id} not found")

        return LessonDetailResponse.model_validate(lesson)

    async def list_by_class(self, owner_id: str, class_id: int) -> list[LessonResponse]:
        """List a class's lessons in date order.

        Raises:
            ClassNotFoundError: If the class does not belong to owner_id.
        """
        await self._ensure_owned(Class, class_id, owner_id, ClassNotFoundError)
        return await self.list(owner_id, class_id=class_id)

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._ensure_owned(Class, values["class_id"], owner_id, ClassNotFoundError)
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: Lesson,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._ensure_owned(Class, values.get("class_id"), owner_id, ClassNotFoundError)
        return values
