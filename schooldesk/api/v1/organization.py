# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization profile API endpoints for the signed-in business owner.

- GET / - Get the owner's organization
- PATCH / - Name the organization during onboarding
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.organization import OrganizationService, UserNotFoundError
from schooldesk.models.common import ApiResponse
from schooldesk.models.organization import (
    OrganizationResponse,
    OrganizationUpdateRequest,
    OrganizationUpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[OrganizationResponse],
    summary="Get organization",
)
async def get_organization(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[OrganizationResponse]:
    """Get the organization owned by the current user.

    The organization is null until onboarding names it.
    """
    organization = await OrganizationService(db=db).get_organization(current_user.id)
    return ApiResponse(message="Organization retrieved successfully", data=organization)


@router.patch(
    "",
    response_model=ApiResponse[OrganizationUpdateResponse],
    summary="Update organization",
)
async def update_organization(
    data: OrganizationUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[OrganizationUpdateResponse]:
    """Save the onboarding organization step.

    Args:
        data: Phone number, organization name, industry and size.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Updated user and organization summaries.

    Raises:
        HTTPException: 404 if the user no longer exists.
    """
    logger.info("Updating organization profile of %s", current_user.id)

    with service_errors(not_found=(UserNotFoundError,)):
        result = await OrganizationService(db=db).update_profile(current_user.id, data)

    return ApiResponse(message="Organization updated successfully", data=result)
