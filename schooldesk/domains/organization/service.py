# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization profile service for the signed-in business owner."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.infrastructure.database.models import BusinessOrganization, User
from schooldesk.models.organization import (
    OrganizationNameSummary,
    OrganizationProfile,
    OrganizationResponse,
    OrganizationUpdateRequest,
    OrganizationUpdateResponse,
    OrganizationUserSummary,
)

logger = logging.getLogger(__name__)

ONBOARDING_STAGE = "organization-updated"


class OrganizationServiceError(Exception):
    """Base exception for organization service errors."""

    pass


class UserNotFoundError(OrganizationServiceError):
    """Raised when the owner account is not found."""

    pass


class OrganizationService:
    """Service for the owner's organization profile.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_organization(self, user_id: str) -> OrganizationResponse:
        """Get the organization owned by user_id, if any."""
        organization = await self._find_organization(user_id)

        return OrganizationResponse(
            organization=OrganizationProfile.model_validate(organization)
            if organization
            else None
        )

    async def update_profile(
        self,
        user_id: str,
        request: OrganizationUpdateRequest,
    ) -> OrganizationUpdateResponse:
        """Record the onboarding organization step.

        Creates the organization with default settings when the owner has
        none yet, stores the phone number and the approximate student
        count on the account and renames the organization.

        Raises:
            UserNotFoundError: If the account does not exist.
        """
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")

        organization = await self._find_organization(user_id)
        if organization is None:
            organization = BusinessOrganization(user_id=user_id, company_name=request.organization_name)
            self.db.add(organization)
            logger.info("Creating organization for %s", user_id)

        meta = dict(user.meta) if isinstance(user.meta, dict) else {}
        meta["students"] = request.students

        user.phone_no = request.phone_no
        user.onboarding_stage = ONBOARDING_STAGE
        user.meta = meta

        organization.company_name = request.organization_name
        organization.industry = request.industry

        await self.db.commit()
        await self.db.refresh(user)
        await self.db.refresh(organization)

        logger.info("Updated organization %s for %s", organization.id, user_id)

        return OrganizationUpdateResponse(
            user=OrganizationUserSummary.model_validate(user),
            organization=OrganizationNameSummary.model_validate(organization),
        )

    async def _find_organization(self, user_id: str) -> BusinessOrganization | None:
        result = await self.db.execute(
            select(BusinessOrganization).where(BusinessOrganization.user_id == user_id)
        )
        return result.scalar_one_or_none()
