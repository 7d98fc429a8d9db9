# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Term API endpoints.

- POST / - Create a term
- GET / - List terms
- GET /{term_id} - Get term details
- PATCH /{term_id} - Update term
- DELETE /{term_id} - Delete term
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.api.dependencies import get_db, require_auth
from schooldesk.api.v1.common import service_errors
from schooldesk.domains.auth import CurrentUser
from schooldesk.domains.term.service import TermNotFoundError, TermService
from schooldesk.models.common import ApiResponse, DeletedResponse
from schooldesk.models.term import (
    TermCreateRequest,
    TermResponse,
    TermUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> TermService:
    return TermService(db=db)


@router.post(
    "",
    response_model=ApiResponse[TermResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create term",
)
async def create_term(
    data: TermCreateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TermResponse]:
    """Create a term.

    billing_options are stored as given; no cross-field date or frequency
    checks are applied.
    """
    item = await _get_service(db).create(current_user.id, data)
    return ApiResponse(message="Term created successfully", data=item)


@router.get(
    "",
    response_model=ApiResponse[list[TermResponse]],
    summary="List terms",
)
async def list_terms(
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[list[TermResponse]]:
    """List the organization's terms, newest first."""
    items = await _get_service(db).list(current_user.id)
    return ApiResponse(message="Terms retrieved successfully", data=items)


@router.get(
    "/{term_id}",
    response_model=ApiResponse[TermResponse],
    summary="Get term",
)
async def get_term(
    term_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TermResponse]:
    with service_errors(not_found=(TermNotFoundError,)):
        item = await _get_service(db).get(current_user.id, term_id)
    return ApiResponse(message="Term retrieved successfully", data=item)


@router.patch(
    "/{term_id}",
    response_model=ApiResponse[TermResponse],
    summary="Update term",
)
async def update_term(
    term_id: int,
    data: TermUpdateRequest,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[TermResponse]:
    """Update the fields present in the request body."""
    with service_errors(not_found=(TermNotFoundError,)):
        item = await _get_service(db).update(current_user.id, term_id, data)
    return ApiResponse(message="Term updated successfully", data=item)


@router.delete(
    "/{term_id}",
    response_model=ApiResponse[DeletedResponse],
    summary="Delete term",
)
async def delete_term(
    term_id: int,
    current_user: CurrentUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
) -> ApiResponse[DeletedResponse]:
    with service_errors(not_found=(TermNotFoundError,)):
        deleted_id = await _get_service(db).delete(current_user.id, term_id)
    return ApiResponse(message="Term deleted successfully", data=DeletedResponse(id=deleted_id))
