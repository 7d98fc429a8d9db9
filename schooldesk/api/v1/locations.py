# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Location API endpoints.

- POST / - Create a location
- GET / - List locations
- GET /{location_id} - Get location details
- PATCH /{location_id} - Update location
- DELETE /{location_id} - Delete location
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.location.service import LocationNotFoundError, LocationService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.location import (
    LocationCreateRequest,
    LocationResponse,
    LocationUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> LocationService:
    return LocationService(db=db)


@router.post(
    "",
    response_model=ApiResponse[LocationResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create location",
)
async def create_location(
    data: LocationCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LocationResponse]:
    """Create a location owned by the current organization."""
    location = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Location created successfully", data=location)


@router.get(
    "",
    response_model=ApiResponse[list[LocationResponse]],
    summary="List locations",
)
async def list_locations(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[LocationResponse]]:
    """List the organization's locations, newest first."""
    locations = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Locations retrieved successfully", data=locations)


@router.get(
    "/{location_id}",
    response_model=ApiResponse[LocationResponse],
    summary="Get location",
)
async def get_location(
    location_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LocationResponse]:
    """Get location details."""
    with service_errors(not_found=(LocationNotFoundError,)):
        location = await _get_service(db).get(current_user.id, location_id)
    return ApiResponse(message="Location retrieved successfully", data=location)


@router.patch(
    "/{location_id}",
    response_model=ApiResponse[LocationResponse],
    summary="Update location",
)
async def update_location(
    location_id: int,
    data: LocationUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[LocationResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(LocationNotFoundError,)):
        location = await _get_service(db).update(current_user.id, location_id, data)
    return ApiResponse(message="Location updated successfully", data=location)


@router.delete(
    "/{location_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete location",
)
async def delete_location(
    location_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    """Delete a location. Classes keep running without a location."""
    with service_errors(not_found=(LocationNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, location_id)
    return ApiResponse(message="Location deleted successfully", data=DeletedResponse(id=deleted_id))
