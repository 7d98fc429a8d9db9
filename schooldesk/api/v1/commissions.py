# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Commission rule API endpoints (admin only).

- GET / - List rules (business and active filters, pagination)
- POST /global - Create the global rule for a country and currency
- POST /organization - Create the rule of one business
- GET /business/{business_id}/effective - Resolve the rule for a business
- GET /{commission_id} - Get rule
- PATCH /{commission_id} - Update rule
- DELETE /{commission_id} - Delete rule
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_admin
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.commission import (
    BusinessNotFoundError,
    CommissionNotFoundError,
    CommissionService,
)
from schooldesk.domains.commission.service import DEFAULT_COUNTRY, DEFAULT_CURRENCY
from schooldesk.models.commission import (
    CommissionResponse,
    CommissionUpdateRequest,
    EffectiveCommissionResponse,
    GlobalCommissionCreateRequest,
    OrganizationCommissionCreateRequest,
)
from schooldesk.models.common import (
    ApiResponse,
    DeletedResponse,
    PaginatedResponse,
    Pagination,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> CommissionService:
    return CommissionService(db=db)


@router.get(
    "",
    response_model=PaginatedResponse[CommissionResponse],
    summary="List commissions",
)
async def list_commissions(
    business_id: Annotated[int | None, Query(description="Filter by business")] = None,
    is_active: Annotated[bool | None, Query(description="Filter by active flag")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[CommissionResponse]:
    """List commission rules. Global rules come first."""
    commissions, total = await _get_service(db).list_commissions(
        business_id=business_id,
        is_active=is_active,
        page=page,
        limit=limit,
    )

    return PaginatedResponse(
        message="Commissions retrieved successfully",
        data=commissions,
        pagination=Pagination.build(page, limit, total),
    )


@router.post(
    "/global",
    response_model=ApiResponse[CommissionResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create global commission",
)
async def create_global_commission(
    data: GlobalCommissionCreateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CommissionResponse]:
    """Create the active global rule.

    The previous global rule for the same country and currency is
    deactivated.
    """
    commission = await _get_service(db).create_global(data)
    return ApiResponse(message="Global commission created successfully", data=commission)


@router.post(
    "/organization",
    response_model=ApiResponse[CommissionResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create organization commission",
)
async def create_organization_commission(
    data: OrganizationCommissionCreateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CommissionResponse]:
    with service_errors(not_found=(BusinessNotFoundError,)):
        commission = await _get_service(db).create_organization(data)
    return ApiResponse(message="Organization commission created successfully", data=commission)


@router.get(
    "/business/{business_id}/effective",
    response_model=ApiResponse[EffectiveCommissionResponse],
    summary="Get effective commission of a business",
)
async def get_effective_commission(
    business_id: int,
    country: Annotated[str, Query(max_length=3)] = DEFAULT_COUNTRY,
    currency: Annotated[str, Query(max_length=3)] = DEFAULT_CURRENCY,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[EffectiveCommissionResponse]:
    """Resolve the rule applied to a business.

    The business's own active rule wins over the global one.

    Raises:
        HTTPException: 404 if the business is unknown or no rule applies.
    """
    with service_errors(not_found=(BusinessNotFoundError, CommissionNotFoundError)):
        commission = await _get_service(db).get_effective(business_id, country, currency)
    return ApiResponse(message="Commission retrieved successfully", data=commission)


@router.get(
    "/{commission_id}",
    response_model=ApiResponse[CommissionResponse],
    summary="Get commission",
)
async def get_commission(
    commission_id: int,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CommissionResponse]:
    with service_errors(not_found=(CommissionNotFoundError,)):
        commission = await _get_service(db).get_commission(commission_id)
    return ApiResponse(message="Commission retrieved successfully", data=commission)


@router.patch(
    "/{commission_id}",
    response_model=ApiResponse[CommissionResponse],
    summary="Update commission",
)
async def update_commission(
    commission_id: int,
    data: CommissionUpdateRequest,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[CommissionResponse]:
    with service_errors(not_found=(CommissionNotFoundError,)):
        commission = await _get_service(db).update_commission(commission_id, data)
    return ApiResponse(message="Commission updated successfully", data=commission)


@router.delete(
    "/{commission_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete commission",
)
async def delete_commission(
    commission_id: int,
    current_user: CurrentUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(CommissionNotFoundError,)):
        deleted_id = await _get_service(db).delete_commission(commission_id)
    return ApiResponse(message="Commission deleted successfully", data=DeletedResponse(id=deleted_id))
