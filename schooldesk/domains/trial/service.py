# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trial service: one-off trial lessons for prospective students."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Class, Lesson, Term, Trial
from schooldesk.models.trial import TrialResponse

logger = logging.getLogger(__name__)


class TrialServiceError(Exception):
    """Base exception for trial service errors."""

    pass


class TrialNotFoundError(TrialServiceError):
    """Raised when a trial is not found."""

    pass


class ClassNotFoundError(TrialServiceError):
    """Raised when the trial's class is not found."""

    pass


class StudentNotFoundError(TrialServiceError):
    """Raised when the trial's student is not found."""

    pass


class TermNotFoundError(TrialServiceError):
    """Raised when the referenced term is not found."""

    pass


class LessonNotFoundError(TrialServiceError):
    """Raised when the referenced lesson is not found."""

    pass


class TrialService(OwnedResourceService[Trial, TrialResponse]):
    """Owner-scoped CRUD for trials."""

    model = Trial
    response_model = TrialResponse
    not_found_error = TrialNotFoundError

    def _load_options(self) -> list[Any]:
        return [selectinload(Trial.class_), selectinload(Trial.student)]

    async def list_by_class(self, owner_id: str, class_id: int) -> list[TrialResponse]:
        """List trials booked for a class.

        Raises:
            ClassNotFoundError: If the class does not belong to owner_id.
        """
        await self._ensure_owned(Class, class_id, owner_id, ClassNotFoundError)
        return await self.list(owner_id, class_id=class_id)

    async def _check_references(self, owner_id: str, values: dict[str, Any]) -> None:
        await self._ensure_owned(Class, values.get("class_id"), owner_id, ClassNotFoundError)
        await self._ensure_owned(Term, values.get("term_id"), owner_id, TermNotFoundError)
        await self._ensure_student_owned(values.get("student_id"), owner_id, StudentNotFoundError)

        lesson_id = values.get("lesson_id")
        if lesson_id is not None:
            query = (
                select(Lesson.id)
                .join(Lesson.class_)
                .where(Lesson.id == lesson_id, Class.user_id == owner_id)
            )
            result = await self.db.execute(query)
            if result.scalar_one_or_none() is None:
                raise LessonNotFoundError(f"Lesson {lesson_id} not found")

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values

    async def _prepare_update(
        self,
        owner_id: str,
        row: Trial,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values
