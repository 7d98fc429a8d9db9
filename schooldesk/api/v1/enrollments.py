# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment API endpoints.

An enrollment books a student into an ongoing class for a period.

- POST / - Enroll a student
- GET / - List enrollments
- GET /class/{class_id} - List enrollments of a class
- GET /{enrollment_id} - Get enrollment details
- PATCH /{enrollment_id} - Update enrollment
- DELETE /{enrollment_id} - Remove enrollment
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.enrollment.service import (
    ClassNotFoundError,
    EnrollmentNotFoundError,
    EnrollmentService,
    InvalidEnrollmentPeriodError,
    StudentNotFoundError,
    TermNotFoundError,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.enrollment import (
    EnrollmentCreateRequest,
    EnrollmentResponse,
    EnrollmentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (ClassNotFoundError, StudentNotFoundError, TermNotFoundError)


def _get_service(db: AsyncSession) -> EnrollmentService:
    return EnrollmentService(db=db)


@router.post(
    "",
    response_model=ApiResponse[EnrollmentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Enroll student",
)
async def create_enrollment(
    data: EnrollmentCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[EnrollmentResponse]:
    """Enroll a student into a class.

    Args:
        data: Enrollment request.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Created enrollment with class and student summaries.

    Raises:
        HTTPException: If the class, term or student is not found.
    """
    logger.info(
        "Enrolling student %s into class %s", data.student_id, data.class_id
    )

    with service_errors(not_found=_REFERENCE_ERRORS):
        enrollment = await _get_service(db).create(current_user.id, data)

    return ApiResponse(message="Enrollment created successfully", data=enrollment)


@router.get(
    "",
    response_model=ApiResponse[list[EnrollmentResponse]],
    summary="List enrollments",
)
async def list_enrollments(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[EnrollmentResponse]]:
    enrollments = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Enrollments retrieved successfully", data=enrollments)


@router.get(
    "/class/{class_id}",
    response_model=ApiResponse[list[EnrollmentResponse]],
    summary="List enrollments of a class",
)
async def list_enrollments_by_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[EnrollmentResponse]]:
    """List the students enrolled in a class."""
    with service_errors(not_found=(ClassNotFoundError,)):
        enrollments = await _get_service(db).list_by_class(current_user.id, class_id)
    return ApiResponse(message="Enrollments retrieved successfully", data=enrollments)


@router.get(
    "/{enrollment_id}",
    response_model=ApiResponse[EnrollmentResponse],
    summary="Get enrollment",
)
async def get_enrollment(
    enrollment_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[EnrollmentResponse]:
    with service_errors(not_found=(EnrollmentNotFoundError,)):
        enrollment = await _get_service(db).get(current_user.id, enrollment_id)
    return ApiResponse(message="Enrollment retrieved successfully", data=enrollment)


@router.patch(
    "/{enrollment_id}",
    response_model=ApiResponse[EnrollmentResponse],
    summary="Update enrollment",
)
async def update_enrollment(
    enrollment_id: int,
    data: EnrollmentUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[EnrollmentResponse]:
    """Update the fields present in the request body.

    Raises:
        HTTPException: 404 if the enrollment or a new reference is not
            found, 400 if the period would end before it starts.
    """
    with service_errors(
        not_found=(EnrollmentNotFoundError, *_REFERENCE_ERRORS),
        bad_request=(InvalidEnrollmentPeriodError,),
    ):
        enrollment = await _get_service(db).update(current_user.id, enrollment_id, data)
    return ApiResponse(message="Enrollment updated successfully", data=enrollment)


@router.delete(
    "/{enrollment_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete enrollment",
)
async def delete_enrollment(
    enrollment_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(EnrollmentNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, enrollment_id)
    return ApiResponse(
        message="Enrollment deleted successfully",
        data=DeletedResponse(id=deleted_id),
    )
