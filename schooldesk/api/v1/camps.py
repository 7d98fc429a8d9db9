# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Camp API endpoints.

- POST / - Create a camp
- GET / - List camps
- GET /{camp_id} - Get camp details
- PATCH /{camp_id} - Update camp
- DELETE /{camp_id} - Delete camp
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.camp.service import CampNotFoundError, CampService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.camp import (
    CampCreateRequest,
    CampResponse,
    CampUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> CampService:
    return CampService(db=db)


@router.post(
    "",
    response_model=ApiResponse[CampResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create camp",
)
async def create_camp(
    data: CampCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CampResponse]:
    """Create a camp with its drop-off and pick-up options."""
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Camp created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[CampResponse]],
    summary="List camps",
)
async def list_camps(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[CampResponse]]:
    """List the organization's camps, newest first."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Camps retrieved successfully", data=items)


@router.get(
    "/{camp_id}",
    response_model=ApiResponse[CampResponse],
    summary="Get camp",
)
async def get_camp(
    camp_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CampResponse]:
    with service_errors(not_found=(CampNotFoundError,)):
        item = await _get_service(db).get(current_user.id, camp_id)
    return ApiResponse(message="Camp retrieved successfully", data=item)


@router.patch(
    "/{camp_id}",
    response_model=ApiResponse[CampResponse],
    summary="Update camp",
)
async def update_camp(
    camp_id: int,
    data: CampUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CampResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(CampNotFoundError,)):
        item = await _get_service(db).update(current_user.id, camp_id, data)
    return ApiResponse(message="Camp updated successfully", data=item)


@router.delete(
    "/{camp_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete camp",
)
async def delete_camp(
    camp_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(CampNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, camp_id)
    return ApiResponse(message="Camp deleted successfully", data=DeletedResponse(id=deleted_id))
