# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service.

Students belong to a family, and through it to the family's organization.
All access is scoped by ``Family.organization_id``.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, select

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Family, Student
from schooldesk.models.student import StudentCreateRequest, StudentResponse

logger = logging.getLogger(__name__)


class StudentServiceError(Exception):
    """Base exception for student service errors."""

    pass


class StudentNotFoundError(StudentServiceError):
    """Raised when a student is not found."""

    pass


class FamilyNotFoundError(StudentServiceError):
    """Raised when the student's family is not found."""

    pass


class StudentService(OwnedResourceService[Student, StudentResponse]):
    """Read, update and delete students; create them through their family."""

    model = Student
    response_model = StudentResponse
    not_found_error = StudentNotFoundError

    def _base_query(self, owner_id: str) -> Select:
        return select(Student).join(Student.family).where(Family.organization_id == owner_id)

    async def list_by_family(self, owner_id: str, family_id: int) -> list[StudentResponse]:
        """List the students of one family.

        Raises:
            FamilyNotFoundError: If the family belongs to another organization.
        """
        await self._ensure_family_owned(owner_id, family_id)
        return await self.list(owner_id, family_id=family_id)

    async def create_for_family(
        self,
        owner_id: str,
        family_id: int,
        request: StudentCreateRequest,
    ) -> StudentResponse:
        """Add a student to a family.

        Args:
            owner_id: Organization id.
            family_id: Family the student joins.
            request: Student data.

        Returns:
            Created student.

        Raises:
            FamilyNotFoundError: If the family belongs to another organization.
        """
        await self._ensure_family_owned(owner_id, family_id)

        student = Student(family_id=family_id, **request.model_dump())
        self.db.add(student)
        await self.db.commit()

        logger.info("Created student %s in family %s", student.id, family_id)

        return self._to_response(await self._get_row(owner_id, student.id))

    async def create(self, owner_id: str, request: Any) -> StudentResponse:
        raise StudentServiceError("Students are created through their family")

    async def _ensure_family_owned(self, owner_id: str, family_id: int) -> None:
        query = select(Family.id).where(
            Family.id == family_id,
            Family.organization_id == owner_id,
        )
        result = await self.db.execute(query)

        if result.scalar_one_or_none() is None:
            raise FamilyNotFoundError(f"Family {family_id} not found")
