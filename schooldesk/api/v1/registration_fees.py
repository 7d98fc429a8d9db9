# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Registration fee API endpoints.

- POST / - Create a registration fee
- GET / - List registration fees
- GET /{fee_id} - Get registration fee details
- PATCH /{fee_id} - Update registration fee
- DELETE /{fee_id} - Delete registration fee
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.registration_fee.service import RegistrationFeeNotFoundError, RegistrationFeeService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.registration_fee import (
    RegistrationFeeCreateRequest,
    RegistrationFeeResponse,
    RegistrationFeeUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> RegistrationFeeService:
    return RegistrationFeeService(db=db)


@router.post(
    "",
    response_model=ApiResponse[RegistrationFeeResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create registration fee",
)
async def create_registration_fee(
    data: RegistrationFeeCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[RegistrationFeeResponse]:
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Registration fee created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[RegistrationFeeResponse]],
    summary="List registration fees",
)
async def list_registration_fees(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[RegistrationFeeResponse]]:
    """List registration fees, newest first."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Registration fees retrieved successfully", data=items)


@router.get(
    "/{fee_id}",
    response_model=ApiResponse[RegistrationFeeResponse],
    summary="Get registration fee",
)
async def get_registration_fee(
    fee_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[RegistrationFeeResponse]:
    with service_errors(not_found=(RegistrationFeeNotFoundError,)):
        item = await _get_service(db).get(current_user.id, fee_id)
    return ApiResponse(message="Registration fee retrieved successfully", data=item)


@router.patch(
    "/{fee_id}",
    response_model=ApiResponse[RegistrationFeeResponse],
    summary="Update registration fee",
)
async def update_registration_fee(
    fee_id: int,
    data: RegistrationFeeUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[RegistrationFeeResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(RegistrationFeeNotFoundError,)):
        item = await _get_service(db).update(current_user.id, fee_id, data)
    return ApiResponse(message="Registration fee updated successfully", data=item)


@router.delete(
    "/{fee_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete registration fee",
)
async def delete_registration_fee(
    fee_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    """Delete a fee. Existing orders keep their amounts."""
    with service_errors(not_found=(RegistrationFeeNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, fee_id)
    return ApiResponse(message="Registration fee deleted successfully", data=DeletedResponse(id=deleted_id))
