# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Business administration API endpoints.

Platform administrators manage the schools using the platform. Every
route requires the admin role.

- GET / - List businesses (search, pagination)
- POST / - Create a business with its owner account
- GET /{business_id} - Get business details with statistics
- PATCH /{business_id} - Update business
- PATCH /{business_id}/commission - Replace the business commission
- PATCH /{business_id}/status - Activate or deactivate a business
- GET /{business_id}/students - List the business's students
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_admin
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.business import (
    BusinessNotFoundError,
    BusinessService,
    EmailAlreadyUsedError,
)
from schooldesk.models.business import (
    BusinessCommission,
    BusinessCommissionUpdateRequest,
    BusinessCreatedResponse,
    BusinessCreateRequest,
    BusinessDetailResponse,
    BusinessListItem,
    BusinessStatusRequest,
    BusinessStatusResponse,
    BusinessStudentItem,
    BusinessUpdatedResponse,
    BusinessUpdateRequest,
)
from schooldesk.models.common import ApiResponse, PaginatedResponse, Pagination

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> BusinessService:
    return BusinessService(db=db)


@router.get(
    "",
    response_model=PaginatedResponse[BusinessListItem],
    summary="List businesses",
)
async def list_businesses(
    search: Annotated[
        str | None, Query(description="Match on school name, owner email or phone")
    ] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[BusinessListItem]:
    """List registered businesses, newest first."""
    businesses, total = await _get_service(db).list_businesses(
        search=search, page=page, limit=limit
    )

    return PaginatedResponse(
        message="Businesses retrieved successfully",
        data=businesses,
        pagination=Pagination.build(page, limit, total),
    )


@router.post(
    "",
    response_model=ApiResponse[BusinessCreatedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create business",
)
async def create_business(
    data: BusinessCreateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[BusinessCreatedResponse]:
    """Create a business, its owner account and optionally a commission.

    Args:
        data: School and owner details.
        current_user: Authenticated administrator.
        db: Database session.

    Returns:
        Created business with owner and commission.

    Raises:
        HTTPException: 409 if the owner email is already used.
    """
    logger.info("Admin %s creating business %r", current_user.id, data.school_name)

    with service_errors(conflict=(EmailAlreadyUsedError,)):
        business = await _get_service(db).create_business(data)

    return ApiResponse(message="Business created successfully", data=business)


@router.get(
    "/{business_id}",
    response_model=ApiResponse[BusinessDetailResponse],
    summary="Get business",
)
async def get_business(
    business_id: int,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[BusinessDetailResponse]:
    """Get business details.

    Statistics count students, running classes, family revenue and the
    commission earned on it under the applicable rule.
    """
    with service_errors(not_found=(BusinessNotFoundError,)):
        business = await _get_service(db).get_business(business_id)
    return ApiResponse(message="Business retrieved successfully", data=business)


@router.patch(
    "/{business_id}",
    response_model=ApiResponse[BusinessUpdatedResponse],
    summary="Update business",
)
async def update_business(
    business_id: int,
    data: BusinessUpdateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[BusinessUpdatedResponse]:
    with service_errors(
        not_found=(BusinessNotFoundError,),
        conflict=(EmailAlreadyUsedError,),
    ):
        business = await _get_service(db).update_business(business_id, data)
    return ApiResponse(message="Business updated successfully", data=business)


@router.patch(
    "/{business_id}/commission",
    response_model=ApiResponse[BusinessCommission],
    summary="Update business commission",
)
async def update_business_commission(
    business_id: int,
    data: BusinessCommissionUpdateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[BusinessCommission]:
    """Replace the business commission.

    Active rules of the business are deactivated and a new rule is
    created in the same transaction.
    """
    with service_errors(not_found=(BusinessNotFoundError,)):
        commission = await _get_service(db).update_commission(business_id, data)
    return ApiResponse(message="Commission updated successfully", data=commission)


@router.patch(
    "/{business_id}/status",
    response_model=ApiResponse[BusinessStatusResponse],
    summary="Set business status",
)
async def set_business_status(
    business_id: int,
    data: BusinessStatusRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[BusinessStatusResponse]:
    with service_errors(not_found=(BusinessNotFoundError,)):
        result = await _get_service(db).set_status(business_id, data.status)
    return ApiResponse(message="Business status updated successfully", data=result)


@router.get(
    "/{business_id}/students",
    response_model=PaginatedResponse[BusinessStudentItem],
    summary="List business students",
)
async def list_business_students(
    business_id: int,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[BusinessStudentItem]:
    with service_errors(not_found=(BusinessNotFoundError,)):
        students, total = await _get_service(db).list_students(
            business_id, page=page, limit=limit
        )

    return PaginatedResponse(
        message="Students retrieved successfully",
        data=students,
        pagination=Pagination.build(page, limit, total),
    )
