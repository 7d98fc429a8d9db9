# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in lesson API endpoints.

- POST / - Create a drop-in lesson
- GET / - List drop-in lessons
- GET /class/{dropin_class_id} - List lessons of a drop-in class
- GET /{lesson_id} - Get drop-in lesson
- PATCH /{lesson_id} - Update drop-in lesson
- DELETE /{lesson_id} - Delete drop-in lesson
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.dropin.service import (
    DropInClassNotFoundError,
    DropInLessonNotFoundError,
    DropInLessonService,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.dropin import (
    DropInLessonCreateRequest,
    DropInLessonResponse,
    DropInLessonUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> DropInLessonService:
    return DropInLessonService(db=db)


@router.post(
    "",
    response_model=ApiResponse[DropInLessonResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create drop-in lesson",
)
async def create_dropin_lesson(
    data: DropInLessonCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInLessonResponse]:
    with service_errors(not_found=(DropInClassNotFoundError,)):
        lesson = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Drop-in lesson created successfully", data=lesson)


@router.get(
    "",
    response_model=ApiResponse[list[DropInLessonResponse]],
    summary="List drop-in lessons",
)
async def list_dropin_lessons(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DropInLessonResponse]]:
    """List drop-in lessons across all drop-in classes in date order."""
    lessons = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Drop-in lessons retrieved successfully", data=lessons)


@router.get(
    "/class/{dropin_class_id}",
    response_model=ApiResponse[list[DropInLessonResponse]],
    summary="List lessons of a drop-in class",
)
async def list_dropin_lessons_by_class(
    dropin_class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DropInLessonResponse]]:
    with service_errors(not_found=(DropInClassNotFoundError,)):
        lessons = await _get_service(db).list_by_class(current_user.id, dropin_class_id)
    return ApiResponse(message="Drop-in lessons retrieved successfully", data=lessons)


@router.get(
    "/{lesson_id}",
    response_model=ApiResponse[DropInLessonResponse],
    summary="Get drop-in lesson",
)
async def get_dropin_lesson(
    lesson_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInLessonResponse]:
    with service_errors(not_found=(DropInLessonNotFoundError,)):
        lesson = await _get_service(db).get(current_user.id, lesson_id)
    return ApiResponse(message="Drop-in lesson retrieved successfully", data=lesson)


@router.patch(
    "/{lesson_id}",
    response_model=ApiResponse[DropInLessonResponse],
    summary="Update drop-in lesson",
)
async def update_dropin_lesson(
    lesson_id: int,
    data: DropInLessonUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInLessonResponse]:
    with service_errors(not_found=(DropInLessonNotFoundError, DropInClassNotFoundError)):
        lesson = await _get_service(db).update(current_user.id, lesson_id, data)
    return ApiResponse(message="Drop-in lesson updated successfully", data=lesson)


@router.delete(
    "/{lesson_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete drop-in lesson",
)
async def delete_dropin_lesson(
    lesson_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(DropInLessonNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, lesson_id)
    return ApiResponse(
        message="Drop-in lesson deleted successfully",
        data=DeletedResponse(id=deleted_id),
    )
