# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Holiday API endpoints.

- POST / - Create a holiday
- GET / - List holidays
- GET /{holiday_id} - Get holiday details
- PATCH /{holiday_id} - Update holiday
- DELETE /{holiday_id} - Delete holiday
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.holiday.service import (
    HolidayNotFoundError,
    HolidayService,
    InvalidHolidayRangeError,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.holiday import (
    HolidayCreateRequest,
    HolidayResponse,
    HolidayUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> HolidayService:
    return HolidayService(db=db)


@router.post(
    "",
    response_model=ApiResponse[HolidayResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create holiday",
)
async def create_holiday(
    data: HolidayCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[HolidayResponse]:
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Holiday created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[HolidayResponse]],
    summary="List holidays",
)
async def list_holidays(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[HolidayResponse]]:
    """List holidays ordered by start date."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Holidays retrieved successfully", data=items)


@router.get(
    "/{holiday_id}",
    response_model=ApiResponse[HolidayResponse],
    summary="Get holiday",
)
async def get_holiday(
    holiday_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[HolidayResponse]:
    with service_errors(not_found=(HolidayNotFoundError,)):
        item = await _get_service(db).get(current_user.id, holiday_id)
    return ApiResponse(message="Holiday retrieved successfully", data=item)


@router.patch(
    "/{holiday_id}",
    response_model=ApiResponse[HolidayResponse],
    summary="Update holiday",
)
async def update_holiday(
    holiday_id: int,
    data: HolidayUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[HolidayResponse]:
    """Update a holiday.

    The resulting range must still end on or after its start date.
    """
    with service_errors(
        not_found=(HolidayNotFoundError,),
        bad_request=(InvalidHolidayRangeError,),
    ):
        item = await _get_service(db).update(current_user.id, holiday_id, data)
    return ApiResponse(message="Holiday updated successfully", data=item)


@router.delete(
    "/{holiday_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete holiday",
)
async def delete_holiday(
    holiday_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(HolidayNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, holiday_id)
    return ApiResponse(message="Holiday deleted successfully", data=DeletedResponse(id=deleted_id))
