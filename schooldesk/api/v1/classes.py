# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class management API endpoints.

This module provides endpoints for ongoing classes:
- POST / - Create a new class
- GET / - List classes
- GET /term/{term_id} - List classes of a term
- GET /{class_id} - Get class details with lessons
- PATCH /{class_id} - Update class
- DELETE /{class_id} - Delete class with its lessons and bookings

Referenced terms, locations and teachers must belong to the current
organization; otherwise the request fails with 404.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.class_.service import (
    ClassNotFoundError,
    ClassService,
    LocationNotFoundError,
    TeacherNotFoundError,
    TermNotFoundError,
)
from schooldesk.models.class_ import (
    ClassCreateRequest,
    ClassDetailResponse,
    ClassResponse,
    ClassUpdateRequest,
)
from schooldesk.models.common import ApiResponse, DeletedResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (TermNotFoundError, LocationNotFoundError, TeacherNotFoundError)


def _get_service(db: AsyncSession) -> ClassService:
    """Get class service instance.

    Args:
        db: Database session.

    Returns:
        Configured ClassService instance.
    """
    return ClassService(db=db)


@router.post(
    "",
    response_model=ApiResponse[ClassResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create class",
)
async def create_class(
    data: ClassCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[ClassResponse]:
    """Create a new class.

    Args:
        data: Class creation request.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Created class.

    Raises:
        HTTPException: If a referenced term, location or teacher is not found.
    """
    logger.info("Creating class %r for %s", data.title, current_user.id)

    with service_errors(not_found=_REFERENCE_ERRORS):
        class_ = await _get_service(db).create(current_user.id, data)

    return ApiResponse(message="Class created successfully", data=class_)


@router.get(
    "",
    response_model=ApiResponse[list[ClassResponse]],
    summary="List classes",
)
async def list_classes(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[ClassResponse]]:
    """List the organization's classes, newest first."""
    classes = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Classes retrieved successfully", data=classes)


@router.get(
    "/term/{term_id}",
    response_model=ApiResponse[list[ClassResponse]],
    summary="List classes of a term",
)
async def list_classes_by_term(
    term_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[ClassResponse]]:
    """List classes attached to a term."""
    with service_errors(not_found=(TermNotFoundError,)):
        classes = await _get_service(db).list_by_term(current_user.id, term_id)
    return ApiResponse(message="Classes retrieved successfully", data=classes)


@router.get(
    "/{class_id}",
    response_model=ApiResponse[ClassDetailResponse],
    summary="Get class",
)
async def get_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[ClassDetailResponse]:
    """Get class details.

    The response embeds the location, teacher, term and lessons.
    """
    with service_errors(not_found=(ClassNotFoundError,)):
        class_ = await _get_service(db).get(current_user.id, class_id)
    return ApiResponse(message="Class retrieved successfully", data=class_)


@router.patch(
    "/{class_id}",
    response_model=ApiResponse[ClassResponse],
    summary="Update class",
)
async def update_class(
    class_id: int,
    data: ClassUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[ClassResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(ClassNotFoundError, *_REFERENCE_ERRORS)):
        class_ = await _get_service(db).update(current_user.id, class_id, data)
    return ApiResponse(message="Class updated successfully", data=class_)


@router.delete(
    "/{class_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete class",
)
async def delete_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    """Delete a class. Lessons, enrollments, trials and waitlist entries go with it."""
    with service_errors(not_found=(ClassNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, class_id)
    return ApiResponse(message="Class deleted successfully", data=DeletedResponse(id=deleted_id))
