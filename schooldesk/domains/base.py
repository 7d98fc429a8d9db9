# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared CRUD service for resources owned by an organization.

Most resources are plain rows with a ``user_id`` column pointing at the
business owner. They share the same lifecycle: list newest first, fetch one,
create, patch the fields present in the request and delete. A row owned by
someone else is reported exactly like a missing one.

Subclasses bind the ORM model, the response schema and the not-found
exception, and may hook into create/update to check referenced rows.

Example:
    class LocationService(OwnedResourceService[Location, LocationResponse]):
        model = Location
        response_model = LocationResponse
        not_found_error = LocationNotFoundError
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.infrastructure.database.models import Base, Family, Student

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class OwnedResourceService(Generic[ModelT, ResponseT]):
    """CRUD over rows scoped by ``model.user_id``.

    Attributes:
        db: Async database session.
    """

    model: ClassVar[type[Base]]
    response_model: ClassVar[type[BaseModel]]
    not_found_error: ClassVar[type[Exception]]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def resource_name(self) -> str:
        return self.model.__name__

    # ------------------------------------------------------------------
    # Query hooks
    # ------------------------------------------------------------------

    def _base_query(self, owner_id: str) -> Select:
        """Select statement restricted to rows the owner can see."""
        return select(self.model).where(self.model.user_id == owner_id)

    def _load_options(self) -> list[Any]:
        """Loader options applied whenever rows are fetched."""
        return []

    def _order_by(self) -> list[Any]:
        return [self.model.created_at.desc(), self.model.id.desc()]

    def _filters(self, **filters: Any) -> list[Any]:
        """Extra WHERE clauses for list(). Unknown keys are ignored."""
        return [
            getattr(self.model, key) == value
            for key, value in filters.items()
            if value is not None and hasattr(self.model, key)
        ]

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        """Validate or rewrite values before a row is created."""
        return values

    def _new_row(self, owner_id: str, values: dict[str, Any]) -> ModelT:
        return self.model(user_id=owner_id, **values)

    async def _prepare_update(
        self,
        owner_id: str,
        row: ModelT,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        """Validate or rewrite values before they are applied to a row."""
        return values

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list(self, owner_id: str, **filters: Any) -> list[ResponseT]:
        """List the owner's rows.

        Args:
            owner_id: Organization (business owner user) id.
            **filters: Equality filters on model columns; None is skipped.

        Returns:
            Response DTOs in listing order.
        """
        query = (
            self._base_query(owner_id)
            .where(*self._filters(**filters))
            .options(*self._load_options())
            .order_by(*self._order_by())
        )
        result = await self.db.execute(query)
        return [self._to_response(row) for row in result.scalars().all()]

    async def get(self, owner_id: str, item_id: int) -> ResponseT:
        """Get one row.

        Raises:
            not_found_error: If the row is missing or owned by someone else.
        """
        return self._to_response(await self._get_row(owner_id, item_id))

    async def create(self, owner_id: str, request: BaseModel) -> ResponseT:
        """Create a row owned by owner_id."""
        values = await self._prepare_create(owner_id, request.model_dump())
        row = self._new_row(owner_id, values)

        self.db.add(row)
        await self.db.commit()

        logger.info("Created %s %s for %s", self.resource_name, row.id, owner_id)

        return self._to_response(await self._get_row(owner_id, row.id))

    async def update(self, owner_id: str, item_id: int, request: BaseModel) -> ResponseT:
        """Apply the fields present in request.

        Raises:
            not_found_error: If the row is missing or owned by someone else.
        """
        row = await self._get_row(owner_id, item_id)
        values = {
            field: value
            for field, value in request.model_dump(exclude_unset=True).items()
            if value is not None or self._is_nullable(field)
        }
        values = await self._prepare_update(owner_id, row, values)

        for field, value in values.items():
            setattr(row, field, value)

        await self.db.commit()

        logger.info("Updated %s %s", self.resource_name, item_id)

        return self._to_response(await self._get_row(owner_id, item_id))

    async def delete(self, owner_id: str, item_id: int) -> int:
        """Delete a row. Dependent rows go with it through FK cascades.

        Returns:
            The deleted id.

        Raises:
            not_found_error: If the row is missing or owned by someone else.
        """
        row = await self._get_row(owner_id, item_id)

        await self.db.delete(row)
        await self.db.commit()

        logger.info("Deleted %s %s", self.resource_name, item_id)

        return item_id

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _get_row(self, owner_id: str, item_id: int) -> ModelT:
        query = (
            self._base_query(owner_id)
            .where(self.model.id == item_id)
            .options(*self._load_options())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        row = result.scalar_one_or_none()

        if row is None:
            raise self.not_found_error(f"{self.resource_name} {item_id} not found")

        return row

    def _is_nullable(self, field: str) -> bool:
        """Whether an explicit null may be written to field.

        Fields that are not plain columns are passed through to the hooks.
        """
        column = self.model.__table__.columns.get(field)
        return column is None or column.nullable

    def _to_response(self, row: ModelT) -> ResponseT:
        return self.response_model.model_validate(row)

    async def _ensure_owned(
        self,
        model: type[Base],
        item_id: int | None,
        owner_id: str,
        error: type[Exception],
    ) -> None:
        """Check that a referenced row exists and belongs to owner_id.

        None means "no reference" and always passes.

        Raises:
            error: If the referenced row is missing or owned by someone else.
        """
        if item_id is None:
            return

        query = select(model.id).where(model.id == item_id, model.user_id == owner_id)
        result = await self.db.execute(query)

        if result.scalar_one_or_none() is None:
            raise error(f"{model.__name__} {item_id} not found")

    async def _ensure_student_owned(
        self,
        student_id: int | None,
        owner_id: str,
        error: type[Exception],
    ) -> None:
        """Check that a student belongs to a family of owner_id.

        Raises:
            error: If the student is missing or belongs to another organization.
        """
        if student_id is None:
            return

        query = (
            select(Student.id)
            .join(Student.family)
            .where(Student.id == student_id, Family.organization_id == owner_id)
        )
        result = await self.db.execute(query)

        if result.scalar_one_or_none() is None:
            raise error(f"Student {student_id} not found")
