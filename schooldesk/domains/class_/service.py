# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class service for ongoing classes.

This module provides the ClassService class for:
- Class CRUD scoped to the owning organization
- Listing the classes of a term
- Checking that referenced terms, locations and teachers belong to the
  same organization
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Class, Location, Teacher, Term
from schooldesk.models.class_ import ClassDetailResponse, ClassResponse

logger = logging.getLogger(__name__)


class ClassServiceError(Exception):
    """Base exception for class service errors."""

    pass


class ClassNotFoundError(ClassServiceError):
    """Raised when class is not found."""

    pass


class TermNotFoundError(ClassServiceError):
    """Raised when the referenced term is not found."""

    pass


class LocationNotFoundError(ClassServiceError):
    """Raised when the referenced location is not found."""

    pass


class TeacherNotFoundError(ClassServiceError):
    """Raised when the referenced teacher is not found."""

    pass


class ClassService(OwnedResourceService[Class, ClassResponse]):
    """Service for managing classes.

    Attributes:
        db: Async database session.
    """

    model = Class
    response_model = ClassResponse
    not_found_error = ClassNotFoundError

    def _load_options(self) -> list[Any]:
        return [
            selectinload(Class.location),
            selectinload(Class.teacher),
            selectinload(Class.term),
        ]

    async def get(self, owner_id: str, item_id: int) -> ClassDetailResponse:
        """Get class details including its lessons in date order.

        Args:
            owner_id: Organization id.
            item_id: Class identifier.

        Returns:
            Class details.

        Raises:
            ClassNotFoundError: If class not found.
        """
        query = (
            self._base_query(owner_id)
            .where(Class.id == item_id)
            .options(*self._load_options(), selectinload(Class.lessons))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        class_ = result.scalar_one_or_none()

        if class_ is None:
            raise ClassNotFoundError(f"Class {item_id} not found")

        return ClassDetailResponse.model_validate(class_)

    async def list_by_term(self, owner_id: str, term_id: int) -> list[ClassResponse]:
        """List classes attached to a term.

        Raises:
            TermNotFoundError: If the term does not belong to owner_id.
        """
        await self._ensure_owned(Term, term_id, owner_id, TermNotFoundError)
        return await self.list(owner_id, term_id=term_id)

    async def _check_references(self, owner_id: str, values: dict[str, Any]) -> None:
        await self._ensure_owned(Term, values.get("term_id"), owner_id, TermNotFoundError)
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
        row: Class,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values
