# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Discount API endpoints.

Organizations see their own discounts plus shared platform discounts.
Shared discounts are read-only: updating or deleting one answers 403.

- POST / - Create a discount with its tiers
- GET / - List visible discounts
- GET /{discount_id} - Get discount details
- PATCH /{discount_id} - Update discount (tiers are replaced when given)
- DELETE /{discount_id} - Delete discount
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.discount.service import (
    DiscountNotFoundError,
    DiscountService,
    InvalidDiscountWindowError,
    SharedDiscountReadOnlyError,
)
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.discount import (
    DiscountCreateRequest,
    DiscountResponse,
    DiscountUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> DiscountService:
    return DiscountService(db=db)


@router.post(
    "",
    response_model=ApiResponse[DiscountResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create discount",
)
async def create_discount(
    data: DiscountCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DiscountResponse]:
    """Create a discount and its tiers in one transaction.

    Args:
        data: Discount definition.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Created discount with tiers.
    """
    logger.info("Creating %s discount %r for %s", data.discount_type, data.title, current_user.id)

    discount = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Discount created successfully", data=discount)


@router.get(
    "",
    response_model=ApiResponse[list[DiscountResponse]],
    summary="List discounts",
)
async def list_discounts(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[DiscountResponse]]:
    """List owned and shared discounts, newest first."""
    discounts = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Discounts retrieved successfully", data=discounts)


@router.get(
    "/{discount_id}",
    response_model=ApiResponse[DiscountResponse],
    summary="Get discount",
)
async def get_discount(
    discount_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DiscountResponse]:
    with service_errors(not_found=(DiscountNotFoundError,)):
        discount = await _get_service(db).get(current_user.id, discount_id)
    return ApiResponse(message="Discount retrieved successfully", data=discount)


@router.patch(
    "/{discount_id}",
    response_model=ApiResponse[DiscountResponse],
    summary="Update discount",
)
async def update_discount(
    discount_id: int,
    data: DiscountUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DiscountResponse]:
    """Update a discount owned by the current organization.

    A tiers array in the body replaces every existing tier.

    Raises:
        HTTPException: 404 if not visible, 403 if shared, 400 if the
            validity window would end before it starts.
    """
    with service_errors(
        not_found=(DiscountNotFoundError,),
        forbidden=(SharedDiscountReadOnlyError,),
        bad_request=(InvalidDiscountWindowError,),
    ):
        discount = await _get_service(db).update(current_user.id, discount_id, data)
    return ApiResponse(message="Discount updated successfully", data=discount)


@router.delete(
    "/{discount_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete discount",
)
async def delete_discount(
    discount_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(
        not_found=(DiscountNotFoundError,),
        forbidden=(SharedDiscountReadOnlyError,),
    ):
        deleted_id = await _get_service(db).delete(current_user.id, discount_id)
    return ApiResponse(message="Discount deleted successfully", data=DeletedResponse(id=deleted_id))
