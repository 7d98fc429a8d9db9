# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trial lesson API endpoints.

- POST / - Book a trial
- GET / - List trials
- GET /class/{class_id} - List trials of a class
- GET /{trial_id} - Get trial details
- PATCH /{trial_id} - Update trial
- DELETE /{trial_id} - Delete trial
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.trial.service import (
    ClassNotFoundError,
    LessonNotFoundError,
    StudentNotFoundError,
    TermNotFoundError,
    TrialNotFoundError,
    TrialService,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.trial import TrialCreateRequest, TrialResponse, TrialUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (
    ClassNotFoundError,
    StudentNotFoundError,
    TermNotFoundError,
    LessonNotFoundError,
)


def _get_service(db: AsyncSession) -> TrialService:
    return TrialService(db=db)


@router.post(
    "",
    response_model=ApiResponse[TrialResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Book trial",
)
async def create_trial(
    data: TrialCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TrialResponse]:
    """Book a trial lesson for a student.

    The class, student and optional term and lesson must belong to the
    current organization.
    """
    with service_errors(not_found=_REFERENCE_ERRORS):
        trial = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Trial created successfully", data=trial)


@router.get(
    "",
    response_model=ApiResponse[list[TrialResponse]],
    summary="List trials",
)
async def list_trials(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[TrialResponse]]:
    trials = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Trials retrieved successfully", data=trials)


@router.get(
    "/class/{class_id}",
    response_model=ApiResponse[list[TrialResponse]],
    summary="List trials of a class",
)
async def list_trials_by_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[TrialResponse]]:
    with service_errors(not_found=(ClassNotFoundError,)):
        trials = await _get_service(db).list_by_class(current_user.id, class_id)
    return ApiResponse(message="Trials retrieved successfully", data=trials)


@router.get(
    "/{trial_id}",
    response_model=ApiResponse[TrialResponse],
    summary="Get trial",
)
async def get_trial(
    trial_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TrialResponse]:
    with service_errors(not_found=(TrialNotFoundError,)):
        trial = await _get_service(db).get(current_user.id, trial_id)
    return ApiResponse(message="Trial retrieved successfully", data=trial)


@router.patch(
    "/{trial_id}",
    response_model=ApiResponse[TrialResponse],
    summary="Update trial",
)
async def update_trial(
    trial_id: int,
    data: TrialUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TrialResponse]:
    """Update the fields present in the request body, e.g. the trial status."""
    with service_errors(not_found=(TrialNotFoundError, *_REFERENCE_ERRORS)):
        trial = await _get_service(db).update(current_user.id, trial_id, data)
    return ApiResponse(message="Trial updated successfully", data=trial)


@router.delete(
    "/{trial_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete trial",
)
async def delete_trial(
    trial_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(TrialNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, trial_id)
    return ApiResponse(message="Trial deleted successfully", data=DeletedResponse(id=deleted_id))
