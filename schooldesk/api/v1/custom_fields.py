# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom field API endpoints.

- POST / - Create a custom field
- GET / - List custom fields
- GET /{custom_field_id} - Get custom field details
- PATCH /{custom_field_id} - Update custom field
- DELETE /{custom_field_id} - Delete custom field
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.custom_field.service import CustomFieldNotFoundError, CustomFieldService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.custom_field import (
    CustomFieldCreateRequest,
    CustomFieldResponse,
    CustomFieldUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> CustomFieldService:
    return CustomFieldService(db=db)


@router.post(
    "",
    response_model=ApiResponse[CustomFieldResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create custom field",
)
async def create_custom_field(
    data: CustomFieldCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CustomFieldResponse]:
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Custom field created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[CustomFieldResponse]],
    summary="List custom fields",
)
async def list_custom_fields(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[CustomFieldResponse]]:
    """List registration form custom fields."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Custom fields retrieved successfully", data=items)


@router.get(
    "/{custom_field_id}",
    response_model=ApiResponse[CustomFieldResponse],
    summary="Get custom field",
)
async def get_custom_field(
    custom_field_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CustomFieldResponse]:
    """Get a custom field definition."""
    with service_errors(not_found=(CustomFieldNotFoundError,)):
        item = await _get_service(db).get(current_user.id, custom_field_id)
    return ApiResponse(message="Custom field retrieved successfully", data=item)


@router.patch(
    "/{custom_field_id}",
    response_model=ApiResponse[CustomFieldResponse],
    summary="Update custom field",
)
async def update_custom_field(
    custom_field_id: int,
    data: CustomFieldUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CustomFieldResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(CustomFieldNotFoundError,)):
        item = await _get_service(db).update(current_user.id, custom_field_id, data)
    return ApiResponse(message="Custom field updated successfully", data=item)


@router.delete(
    "/{custom_field_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete custom field",
)
async def delete_custom_field(
    custom_field_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(CustomFieldNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, custom_field_id)
    return ApiResponse(message="Custom field deleted successfully", data=DeletedResponse(id=deleted_id))
