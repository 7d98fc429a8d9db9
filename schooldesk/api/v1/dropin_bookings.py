# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in booking API endpoints.

- POST / - Book a student into a drop-in class
- GET / - List drop-in bookings
- GET /class/{dropin_class_id} - List bookings of a drop-in class
- GET /{booking_id} - Get booking
- PATCH /{booking_id} - Update booking
- DELETE /{booking_id} - Delete booking
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.dropin.service import (
    DropInBookingNotFoundError,
    DropInBookingService,
    DropInClassNotFoundError,
    StudentNotFoundError,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.dropin import (
    DropInBookingCreateRequest,
    DropInBookingResponse,
    DropInBookingUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (DropInClassNotFoundError, StudentNotFoundError)


def _get_service(db: AsyncSession) -> DropInBookingService:
    return DropInBookingService(db=db)


@router.post(
    "",
    response_model=ApiResponse[DropInBookingResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create drop-in booking",
)
async def create_dropin_booking(
    data: DropInBookingCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInBookingResponse]:
    """Book a student into a drop-in class.

    The enrollment date defaults to now when omitted.
    """
    with service_errors(not_found=_REFERENCE_ERRORS):
        booking = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Drop-in booking created successfully", data=booking)


@router.get(
    "",
    response_model=ApiResponse[list[DropInBookingResponse]],
    summary="List drop-in bookings",
)
async def list_dropin_bookings(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DropInBookingResponse]]:
    bookings = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Drop-in bookings retrieved successfully", data=bookings)


@router.get(
    "/class/{dropin_class_id}",
    response_model=ApiResponse[list[DropInBookingResponse]],
    summary="List bookings of a drop-in class",
)
async def list_dropin_bookings_by_class(
    dropin_class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DropInBookingResponse]]:
    with service_errors(not_found=(DropInClassNotFoundError,)):
        bookings = await _get_service(db).list_by_class(current_user.id, dropin_class_id)
    return ApiResponse(message="Drop-in bookings retrieved successfully", data=bookings)


@router.get(
    "/{booking_id}",
    response_model=ApiResponse[DropInBookingResponse],
    summary="Get drop-in booking",
)
async def get_dropin_booking(
    booking_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInBookingResponse]:
    with service_errors(not_found=(DropInBookingNotFoundError,)):
        booking = await _get_service(db).get(current_user.id, booking_id)
    return ApiResponse(message="Drop-in booking retrieved successfully", data=booking)


@router.patch(
    "/{booking_id}",
    response_model=ApiResponse[DropInBookingResponse],
    summary="Update drop-in booking",
)
async def update_dropin_booking(
    booking_id: int,
    data: DropInBookingUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DropInBookingResponse]:
    """Update the fields present in the request body, e.g. cancel a booking."""
    with service_errors(not_found=(DropInBookingNotFoundError, *_REFERENCE_ERRORS)):
        booking = await _get_service(db).update(current_user.id, booking_id, data)
    return ApiResponse(message="Drop-in booking updated successfully", data=booking)


@router.delete(
    "/{booking_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete drop-in booking",
)
async def delete_dropin_booking(
    booking_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(DropInBookingNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, booking_id)
    return ApiResponse(
        message="Drop-in booking deleted successfully",
        data=DeletedResponse(id=deleted_id),
    )
