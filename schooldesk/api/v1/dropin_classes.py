# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in class API endpoints.

Drop-in classes are booked and paid per visit instead of per term.

- POST / - Create a drop-in class
- GET / - List drop-in classes
- GET /{dropin_class_id} - Get drop-in class details with lessons
- PATCH /{dropin_class_id} - Update drop-in class
- DELETE /{dropin_class_id} - Delete drop-in class
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.dropin.service import (
    DropInClassNotFoundError,
    DropInClassService,
    LocationNotFoundError,
    TeacherNotFoundError,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.dropin import (
    DropInClassCreateRequest,
    DropInClassDetailResponse,
    DropInClassResponse,
    DropInClassUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (LocationNotFoundError, TeacherNotFoundError)


def _get_service(db: AsyncSession) -> DropInClassService:
    return DropInClassService(db=db)


@router.post(
    "",
    response_model=ApiResponse[DropInClassResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create drop-in class",
)
async def create_dropin_class(
    data: DropInClassCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInClassResponse]:
    """Create a drop-in class.

    Raises:
        HTTPException: If the location or teacher is not found.
    """
    with service_errors(not_found=_REFERENCE_ERRORS):
        dropin_class = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Drop-in class created successfully", data=dropin_class)


@router.get(
    "",
    response_model=ApiResponse[list[DropInClassResponse]],
    summary="List drop-in classes",
)
async def list_dropin_classes(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DropInClassResponse]]:
    dropin_classes = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Drop-in classes retrieved successfully", data=dropin_classes)


@router.get(
    "/{dropin_class_id}",
    response_model=ApiResponse[DropInClassDetailResponse],
    summary="Get drop-in class",
)
async def get_dropin_class(
    dropin_class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInClassDetailResponse]:
    """Get drop-in class details including its lessons in date order."""
    with service_errors(not_found=(DropInClassNotFoundError,)):
        dropin_class = await _get_service(db).get(current_user.id, dropin_class_id)
    return ApiResponse(message="Drop-in class retrieved successfully", data=dropin_class)


@router.patch(
    "/{dropin_class_id}",
    response_model=ApiResponse[DropInClassResponse],
    summary="Update drop-in class",
)
async def update_dropin_class(
    dropin_class_id: int,
    data: DropInClassUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInClassResponse]:
    with service_errors(not_found=(DropInClassNotFoundError, *_REFERENCE_ERRORS)):
        dropin_class = await _get_service(db).update(current_user.id, dropin_class_id, data)
    return ApiResponse(message="Drop-in class updated successfully", data=dropin_class)


@router.delete(
    "/{dropin_class_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete drop-in class",
)
async def delete_dropin_class(
    dropin_class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    """Delete a drop-in class with its lessons and bookings."""
    with service_errors(not_found=(DropInClassNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, dropin_class_id)
    return ApiResponse(
        message="Drop-in class deleted successfully",
        data=DeletedResponse(id=deleted_id),
    )
