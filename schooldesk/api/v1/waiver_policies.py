# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waiver policy API endpoints.

- POST / - Create a waiver policy
- GET / - List waiver policies
- GET /{policy_id} - Get waiver policy details
- PATCH /{policy_id} - Update waiver policy
- DELETE /{policy_id} - Delete waiver policy
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.waiver_policy.service import WaiverPolicyNotFoundError, WaiverPolicyService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.waiver_policy import (
    WaiverPolicyCreateRequest,
    WaiverPolicyResponse,
    WaiverPolicyUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> WaiverPolicyService:
    return WaiverPolicyService(db=db)


@router.post(
    "",
    response_model=ApiResponse[WaiverPolicyResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create waiver policy",
)
async def create_waiver_policy(
    data: WaiverPolicyCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaiverPolicyResponse]:
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Waiver policy created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[WaiverPolicyResponse]],
    summary="List waiver policies",
)
async def list_waiver_policies(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[WaiverPolicyResponse]]:
    """List waiver policies families must accept."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Waiver policies retrieved successfully", data=items)


@router.get(
    "/{policy_id}",
    response_model=ApiResponse[WaiverPolicyResponse],
    summary="Get waiver policy",
)
async def get_waiver_policy(
    policy_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaiverPolicyResponse]:
    with service_errors(not_found=(WaiverPolicyNotFoundError,)):
        item = await _get_service(db).get(current_user.id, policy_id)
    return ApiResponse(message="Waiver policy retrieved successfully", data=item)


@router.patch(
    "/{policy_id}",
    response_model=ApiResponse[WaiverPolicyResponse],
    summary="Update waiver policy",
)
async def update_waiver_policy(
    policy_id: int,
    data: WaiverPolicyUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[WaiverPolicyResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(WaiverPolicyNotFoundError,)):
        item = await _get_service(db).update(current_user.id, policy_id, data)
    return ApiResponse(message="Waiver policy updated successfully", data=item)


@router.delete(
    "/{policy_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete waiver policy",
)
async def delete_waiver_policy(
    policy_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(WaiverPolicyNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, policy_id)
    return ApiResponse(message="Waiver policy deleted successfully", data=DeletedResponse(id=deleted_id))
