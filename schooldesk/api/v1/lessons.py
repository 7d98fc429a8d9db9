# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lesson API endpoints.

Lessons are the dated sessions of a class and are scoped through it.

- POST / - Create a lesson
- GET / - List lessons
- GET /class/{class_id} - List lessons of a class
- GET /{lesson_id} - Get lesson details with trials
- PATCH /{lesson_id} - Update lesson
- DELETE /{lesson_id} - Delete lesson
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.lesson.service import (
    ClassNotFoundError,
    LessonNotFoundError,
    LessonService,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.lesson import (
    LessonCreateRequest,
    LessonDetailResponse,
    LessonResponse,
    LessonUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> LessonService:
    return LessonService(db=db)


@router.post(
    "",
    response_model=ApiResponse[LessonResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create lesson",
)
async def create_lesson(
    data: LessonCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LessonResponse]:
    """Create a lesson for one of the organization's classes."""
    with service_errors(not_found=(ClassNotFoundError,)):
        lesson = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Lesson created successfully", data=lesson)


@router.get(
    "",
    response_model=ApiResponse[list[LessonResponse]],
    summary="List lessons",
)
async def list_lessons(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[LessonResponse]]:
    """List lessons across all classes in date order."""
    lessons = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Lessons retrieved successfully", data=lessons)


@router.get(
    "/class/{class_id}",
    response_model=ApiResponse[list[LessonResponse]],
    summary="List lessons of a class",
)
async def list_lessons_by_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[LessonResponse]]:
    with service_errors(not_found=(ClassNotFoundError,)):
        lessons = await _get_service(db).list_by_class(current_user.id, class_id)
    return ApiResponse(message="Lessons retrieved successfully", data=lessons)


@router.get(
    "/{lesson_id}",
    response_model=ApiResponse[LessonDetailResponse],
    summary="Get lesson",
)
async def get_lesson(
    lesson_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LessonDetailResponse]:
    """Get lesson details including the trials booked on it."""
    with service_errors(not_found=(LessonNotFoundError,)):
        lesson = await _get_service(db).get(current_user.id, lesson_id)
    return ApiResponse(message="Lesson retrieved successfully", data=lesson)


@router.patch(
    "/{lesson_id}",
    response_model=ApiResponse[LessonResponse],
    summary="Update lesson",
)
async def update_lesson(
    lesson_id: int,
    data: LessonUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LessonResponse]:
    """Update the fields present in the request body.

    Moving a lesson to another class requires that class to be owned too.
    """
    with service_errors(not_found=(LessonNotFoundError, ClassNotFoundError)):
        lesson = await _get_service(db).update(current_user.id, lesson_id, data)
    return ApiResponse(message="Lesson updated successfully", data=lesson)


@router.delete(
    "/{lesson_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete lesson",
)
async def delete_lesson(
    lesson_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(LessonNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, lesson_id)
    return ApiResponse(message="Lesson deleted successfully", data=DeletedResponse(id=deleted_id))
