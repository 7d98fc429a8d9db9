# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API endpoints.

Students are created through their family (POST /families/{id}/students).

- GET / - List students of the organization
- GET /family/{family_id} - List students of a family
- GET /{student_id} - Get student details
- PATCH /{student_id} - Update student
- DELETE /{student_id} - Delete student with their bookings
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.student.service import (
    FamilyNotFoundError,
    StudentNotFoundError,
    StudentService,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.student import StudentResponse, StudentUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> StudentService:
    return StudentService(db=db)


@router.get(
    "",
    response_model=ApiResponse[list[StudentResponse]],
    summary="List students",
)
async def list_students(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[StudentResponse]]:
    """List students of every family registered with the organization."""
    students = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Students retrieved successfully", data=students)


@router.get(
    "/family/{family_id}",
    response_model=ApiResponse[list[StudentResponse]],
    summary="List students of a family",
)
async def list_students_by_family(
    family_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[StudentResponse]]:
    with service_errors(not_found=(FamilyNotFoundError,)):
        students = await _get_service(db).list_by_family(current_user.id, family_id)
    return ApiResponse(message="Students retrieved successfully", data=students)


@router.get(
    "/{student_id}",
    response_model=ApiResponse[StudentResponse],
    summary="Get student",
)
async def get_student(
    student_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[StudentResponse]:
    with service_errors(not_found=(StudentNotFoundError,)):
        student = await _get_service(db).get(current_user.id, student_id)
    return ApiResponse(message="Student retrieved successfully", data=student)


@router.patch(
    "/{student_id}",
    response_model=ApiResponse[StudentResponse],
    summary="Update student",
)
async def update_student(
    student_id: int,
    data: StudentUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[StudentResponse]:
    """Update the fields present in the request body, e.g. uniform sizes."""
    with service_errors(not_found=(StudentNotFoundError,)):
        student = await _get_service(db).update(current_user.id, student_id, data)
    return ApiResponse(message="Student updated successfully", data=student)


@router.delete(
    "/{student_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete student",
)
async def delete_student(
    student_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(StudentNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, student_id)
    return ApiResponse(message="Student deleted successfully", data=DeletedResponse(id=deleted_id))
