# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist service.

An entry may point at a class, a term or both.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Class, Term, WaitlistEntry
from schooldesk.models.waitlist import WaitlistResponse

logger = logging.getLogger(__name__)


class WaitlistServiceError(Exception):
    """Base exception for waitlist service errors."""

    pass


class WaitlistEntryNotFoundError(WaitlistServiceError):
    """Raised when a waitlist entry is not found."""

    pass


class ClassNotFoundError(WaitlistServiceError):
    """Raised when the referenced class is not found."""

    pass


class StudentNotFoundError(WaitlistServiceError):
    """Raised when the waitlisted student is not found."""

    pass


class TermNotFoundError(WaitlistServiceError):
    """Raised when the referenced term is not found."""

    pass


class WaitlistService(OwnedResourceService[WaitlistEntry, WaitlistResponse]):
    """Owner-scoped CRUD for waitlist entries."""

    model = WaitlistEntry
    response_model = WaitlistResponse
    not_found_error = WaitlistEntryNotFoundError

    def _load_options(self) -> list[Any]:
        return [selectinload(WaitlistEntry.class_), selectinload(WaitlistEntry.student)]

    async def list_by_class(self, owner_id: str, class_id: int) -> list[WaitlistResponse]:
        """List the waitlist of a class, newest first."""
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
        row: WaitlistEntry,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        await self._check_references(owner_id, values)
        return values
