# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist API endpoints.

- POST / - Add a student to a waitlist
- GET / - List waitlist entries
- GET /class/{class_id} - List the waitlist of a class
- GET /{entry_id} - Get waitlist entry
- PATCH /{entry_id} - Update waitlist entry
- DELETE /{entry_id} - Remove waitlist entry
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.waitlist.service import (
    ClassNotFoundError,
    StudentNotFoundError,
    TermNotFoundError,
    WaitlistEntryNotFoundError,
    WaitlistService,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.waitlist import (
    WaitlistCreateRequest,
    WaitlistResponse,
    WaitlistUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_REFERENCE_ERRORS = (ClassNotFoundError, StudentNotFoundError, TermNotFoundError)


def _get_service(db: AsyncSession) -> WaitlistService:
    return WaitlistService(db=db)


@router.post(
    "",
    response_model=ApiResponse[WaitlistResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add to waitlist",
)
async def create_waitlist_entry(
    data: WaitlistCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaitlistResponse]:
    with service_errors(not_found=_REFERENCE_ERRORS):
        entry = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Waitlist entry created successfully", data=entry)


@router.get(
    "",
    response_model=ApiResponse[list[WaitlistResponse]],
    summary="List waitlist entries",
)
async def list_waitlist_entries(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[WaitlistResponse]]:
    """List waitlist entries, most recent first."""
    entries = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Waitlist retrieved successfully", data=entries)


@router.get(
    "/class/{class_id}",
    response_model=ApiResponse[list[WaitlistResponse]],
    summary="List the waitlist of a class",
)
async def list_waitlist_by_class(
    class_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[WaitlistResponse]]:
    with service_errors(not_found=(ClassNotFoundError,)):
        entries = await _get_service(db).list_by_class(current_user.id, class_id)
    return ApiResponse(message="Waitlist retrieved successfully", data=entries)


@router.get(
    "/{entry_id}",
    response_model=ApiResponse[WaitlistResponse],
    summary="Get waitlist entry",
)
async def get_waitlist_entry(
    entry_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaitlistResponse]:
    with service_errors(not_found=(WaitlistEntryNotFoundError,)):
        entry = await _get_service(db).get(current_user.id, entry_id)
    return ApiResponse(message="Waitlist entry retrieved successfully", data=entry)


@router.patch(
    "/{entry_id}",
    response_model=ApiResponse[WaitlistResponse],
    summary="Update waitlist entry",
)
async def update_waitlist_entry(
    entry_id: int,
    data: WaitlistUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaitlistResponse]:
    with service_errors(not_found=(WaitlistEntryNotFoundError, *_REFERENCE_ERRORS)):
        entry = await _get_service(db).update(current_user.id, entry_id, data)
    return ApiResponse(message="Waitlist entry updated successfully", data=entry)


@router.delete(
    "/{entry_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Remove waitlist entry",
)
async def delete_waitlist_entry(
    entry_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(WaitlistEntryNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, entry_id)
    return ApiResponse(
        message="Waitlist entry deleted successfully",
        data=DeletedResponse(id=deleted_id),
    )
