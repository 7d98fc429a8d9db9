# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Family API endpoints.

A family is a parent account registered with the current organization.
Creating a family creates its login account as well.

- POST / - Create a family and its parent account
- GET / - List families (search, status filter, pagination)
- GET /{family_id} - Get family details
- PATCH /{family_id} - Update family, address and emergency contact
- DELETE /{family_id} - Delete family
- PATCH /{family_id}/status - Suspend or reactivate a family
- GET /{family_id}/children - List children with their bookings
- GET /{family_id}/payments - Get the payment summary and invoices
- POST /{family_id}/students - Add a student to the family
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.family import (
    EmailAlreadyUsedError,
    FamilyNotFoundError,
    FamilyService,
    InvalidPasswordError,
)
from schooldesk.domains.student import StudentService
from schooldesk.domains.student import FamilyNotFoundError as StudentFamilyNotFoundError
from schooldesk.models.common import (
    ApiResponse,
    DeletedResponse,
    PaginatedResponse,
    Pagination,
)
from schooldesk.models.family import (
    FamilyChild,
    FamilyCreatedResponse,
    FamilyCreateRequest,
    FamilyDetailResponse,
    FamilyListItem,
    FamilyPaymentsResponse,
    FamilyRecord,
    FamilyStatusRequest,
    FamilyUpdateRequest,
)
from schooldesk.models.student import StudentCreateRequest, StudentResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> FamilyService:
    return FamilyService(db=db)


@router.post(
    "",
    response_model=ApiResponse[FamilyCreatedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create family",
)
async def create_family(
    data: FamilyCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[FamilyCreatedResponse]:
    """Create a family and the parent's login account.

    Args:
        data: Parent identity, credentials and contact details.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Created family record and account.

    Raises:
        HTTPException: 409 if the email is already used, 400 if the
            password cannot be hashed.
    """
    logger.info("Creating family for %s", current_user.id)

    with service_errors(
        conflict=(EmailAlreadyUsedError,),
        bad_request=(InvalidPasswordError,),
    ):
        created = await _get_service(db).create_family(current_user.id, data)

    return ApiResponse(message="Family created successfully", data=created)


@router.get(
    "",
    response_model=PaginatedResponse[FamilyListItem],
    summary="List families",
)
async def list_families(
    search: Annotated[
        str | None, Query(description="Match on parent name, email or phone")
    ] = None,
    status_filter: Annotated[
        str | None, Query(alias="status", description="Family status or ALL")
    ] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[FamilyListItem]:
    """List the organization's families, newest first."""
    families, total = await _get_service(db).list_families(
        current_user.id,
        search=search,
        status=status_filter,
        page=page,
        limit=limit,
    )

    return PaginatedResponse(
        message="Families retrieved successfully",
        data=families,
        pagination=Pagination.build(page, limit, total),
    )


@router.get(
    "/{family_id}",
    response_model=ApiResponse[FamilyDetailResponse],
    summary="Get family",
)
async def get_family(
    family_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[FamilyDetailResponse]:
    with service_errors(not_found=(FamilyNotFoundError,)):
        family = await _get_service(db).get_family(current_user.id, family_id)
    return ApiResponse(message="Family retrieved successfully", data=family)


@router.patch(
    "/{family_id}",
    response_model=ApiResponse[FamilyDetailResponse],
    summary="Update family",
)
async def update_family(
    family_id: int,
    data: FamilyUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[FamilyDetailResponse]:
    """Update the family, its account, address and emergency contact.

    Only the fields present in the body change. A new email must not be
    used by another account.
    """
    with service_errors(
        not_found=(FamilyNotFoundError,),
        conflict=(EmailAlreadyUsedError,),
    ):
        family = await _get_service(db).update_family(current_user.id, family_id, data)
    return ApiResponse(message="Family updated successfully", data=family)


@router.delete(
    "/{family_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete family",
)
async def delete_family(
    family_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(FamilyNotFoundError,)):
        deleted_id = await _get_service(db).delete_family(current_user.id, family_id)
    return ApiResponse(message="Family deleted successfully", data=DeletedResponse(id=deleted_id))


@router.patch(
    "/{family_id}/status",
    response_model=ApiResponse[FamilyRecord],
    summary="Set family status",
)
async def set_family_status(
    family_id: int,
    data: FamilyStatusRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[FamilyRecord]:
    with service_errors(not_found=(FamilyNotFoundError,)):
        family = await _get_service(db).set_status(current_user.id, family_id, data.status)
    return ApiResponse(message="Family status updated successfully", data=family)


@router.get(
    "/{family_id}/children",
    response_model=ApiResponse[list[FamilyChild]],
    summary="List children of a family",
)
async def get_family_children(
    family_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[FamilyChild]]:
    """List the family's students.

    Each child lists the classes they are booked into; cancelled bookings
    are left out.
    """
    with service_errors(not_found=(FamilyNotFoundError,)):
        children = await _get_service(db).get_children(current_user.id, family_id)
    return ApiResponse(message="Children retrieved successfully", data=children)


@router.get(
    "/{family_id}/payments",
    response_model=ApiResponse[FamilyPaymentsResponse],
    summary="Get family payments",
)
async def get_family_payments(
    family_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[FamilyPaymentsResponse]:
    with service_errors(not_found=(FamilyNotFoundError,)):
        payments = await _get_service(db).get_payments(current_user.id, family_id)
    return ApiResponse(message="Payments retrieved successfully", data=payments)


@router.post(
    "/{family_id}/students",
    response_model=ApiResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add student to family",
)
async def create_family_student(
    family_id: int,
    data: StudentCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[StudentResponse]:
    """Add a student to one of the organization's families.

    Args:
        family_id: Family the student joins.
        data: Student details and measurements.
        current_user: Authenticated business owner.
        db: Database session.

    Returns:
        Created student.
    """
    with service_errors(not_found=(StudentFamilyNotFoundError,)):
        student = await StudentService(db=db).create_for_family(
            current_user.id, family_id, data
        )
    return ApiResponse(message="Student created successfully", data=student)
