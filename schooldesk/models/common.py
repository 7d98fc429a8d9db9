# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Response envelope and shared schema building blocks.

Every endpoint answers with ``{"message", "success", "data"}``; paginated
listings add a ``pagination`` block.
"""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class ORMModel(BaseModel):
    """Base for response schemas built from ORM rows."""

    model_config = ConfigDict(from_attributes=True)


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard success envelope."""

    message: str
    success: bool = True
    data: DataT | None = None


class Pagination(BaseModel):
    """Page metadata for paginated listings."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Build pagination metadata with total_pages = ceil(total / limit)."""
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        )


class PaginatedResponse(BaseModel, Generic[DataT]):
    """Envelope for paginated listings."""

    message: str
    success: bool = True
    data: list[DataT] = Field(default_factory=list)
    pagination: Pagination


class ErrorResponse(BaseModel):
    """Body returned for handled and unhandled errors."""

    message: str
    success: bool = False


class DeletedResponse(BaseModel):
    """Result of a successful delete."""

    id: int
    deleted: bool = True
