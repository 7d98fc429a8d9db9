# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Commission service for platform fee rules.

A commission rule is either global (no business) or bound to one business
organization. For a given country and currency at most one rule of each
scope is active: creating a rule deactivates the previous active ones in
the same transaction.

Resolution order for a business:
1. The active organization rule with the latest effective_from
2. The active global rule with the latest effective_from

Business profiles use resolve_any_market(), where step 1 ignores country and
currency and step 2 uses US/USD.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from schooldesk.infrastructure.database.models import (
    BusinessOrganization,
    Commission,
    CommissionType,
)
from schooldesk.models.commission import (
    CommissionResponse,
    CommissionUpdateRequest,
    EffectiveCommissionResponse,
    GlobalCommissionCreateRequest,
    OrganizationCommissionCreateRequest,
)
from schooldesk.utils.datetime import utc_now

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "US"
DEFAULT_CURRENCY = "USD"
GLOBAL_BUSINESS_NAME = "Global (All Organizations)"
UNKNOWN_BUSINESS_NAME = "Unknown Business"


class CommissionServiceError(Exception):
    """Base exception for commission service errors."""

    pass


class CommissionNotFoundError(CommissionServiceError):
    """Raised when a commission rule is not found."""

    pass


class BusinessNotFoundError(CommissionServiceError):
    """Raised when the referenced business is not found."""

    pass


def normalize_country(country: str | None) -> str:
    """Upper-case a country code; USA is stored as US."""
    if not country:
        return DEFAULT_COUNTRY
    country = country.strip().upper()
    return DEFAULT_COUNTRY if country == "USA" else country


def calculate_commission_amount(
    commission_type: str,
    commission_value: float | None,
    revenue: float,
) -> float:
    """Amount owed to the platform for revenue under a rule.

    FIXED and TIERED rules owe their value as a flat amount; PERCENTAGE
    rules owe value percent of revenue. The result is rounded to cents.
    """
    if not commission_value:
        return 0.0

    if commission_type == CommissionType.PERCENTAGE.value:
        amount = revenue * commission_value / 100
    else:
        amount = commission_value

    return round(amount, 2)


class CommissionService:
    """Service for managing commission rules.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_commissions(
        self,
        business_id: int | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[CommissionResponse], int]:
        """List commission rules, global rules first then newest first.

        Returns:
            Tuple of (rules on the page, total count).
        """
        query = select(Commission)

        if business_id is not None:
            query = query.where(Commission.business_id == business_id)
        if is_active is not None:
            query = query.where(Commission.is_active == is_active)

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            query.options(selectinload(Commission.business))
            .order_by(
                case((Commission.business_id.is_(None), 0), else_=1),
                Commission.effective_from.desc(),
                Commission.id.desc(),
            )
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self.db.execute(query)

        return [self._to_response(row) for row in result.scalars().all()], total

    async def get_commission(self, commission_id: int) -> CommissionResponse:
        """Get a commission rule.

        Raises:
            CommissionNotFoundError: If the rule does not exist.
        """
        return self._to_response(await self._get_row(commission_id))

    async def create_global(self, request: GlobalCommissionCreateRequest) -> CommissionResponse:
        """Create the active global rule for a country and currency.

        Previous active global rules for the same country and currency are
        deactivated in the same transaction.
        """
        values = self._normalize(request.model_dump())

        await self._deactivate(None, values["country"], values["currency"])

        row = Commission(business_id=None, **values)
        self.db.add(row)
        await self.db.commit()

        logger.info(
            "Created global commission %s (%s/%s)", row.id, row.country, row.currency
        )

        return self._to_response(await self._get_row(row.id))

    async def create_organization(
        self,
        request: OrganizationCommissionCreateRequest,
    ) -> CommissionResponse:
        """Create the active rule of one business.

        Raises:
            BusinessNotFoundError: If the business does not exist.
        """
        values = self._normalize(request.model_dump(exclude={"business_id"}))

        business = await self.db.get(BusinessOrganization, request.business_id)
        if business is None:
            raise BusinessNotFoundError(f"Business {request.business_id} not found")

        await self._deactivate(business.id, values["country"], values["currency"])

        row = Commission(business_id=business.id, **values)
        self.db.add(row)
        await self.db.commit()

        logger.info("Created commission %s for business %s", row.id, business.id)

        return self._to_response(await self._get_row(row.id))

    async def update_commission(
        self,
        commission_id: int,
        request: CommissionUpdateRequest,
    ) -> CommissionResponse:
        """Apply the fields present in request.

        Raises:
            CommissionNotFoundError: If the rule does not exist.
        """
        row = await self._get_row(commission_id)

        changes = request.model_dump(exclude_unset=True)
        if "country" in changes:
            changes["country"] = normalize_country(changes["country"])
        if changes.get("currency"):
            changes["currency"] = changes["currency"].upper()
        if changes.get("max_transaction_amt") is not None and changes["max_transaction_amt"] <= 0:
            changes["max_transaction_amt"] = None

        for field, value in changes.items():
            if value is None and not Commission.__table__.columns[field].nullable:
                continue
            setattr(row, field, value)

        await self.db.commit()

        logger.info("Updated commission %s", commission_id)

        return self._to_response(await self._get_row(commission_id))

    async def delete_commission(self, commission_id: int) -> int:
        """Delete a commission rule.

        Raises:
            CommissionNotFoundError: If the rule does not exist.
        """
        row = await self._get_row(commission_id)

        await self.db.delete(row)
        await self.db.commit()

        logger.info("Deleted commission %s", commission_id)

        return commission_id

    async def resolve(
        self,
        business_id: int,
        country: str = DEFAULT_COUNTRY,
        currency: str = DEFAULT_CURRENCY,
    ) -> tuple[Commission | None, bool]:
        """Find the rule that applies to a business.

        Returns:
            Tuple of (rule or None, whether the rule is global).
        """
        country = normalize_country(country)
        currency = currency.upper()

        own = await self._latest_active(business_id, country, currency)
        if own is not None:
            return own, False

        return await self._latest_active(None, country, currency), True

    async def resolve_any_market(self, business_id: int) -> tuple[Commission | None, bool]:
        """Find the rule shown on a business profile.

        The business's latest active rule wins whatever its country or
        currency; without one the global US/USD rule applies.

        Returns:
            Tuple of (rule or None, whether the rule is global).
        """
        own = await self._latest_active(business_id, None, None)
        if own is not None:
            return own, False

        return await self._latest_active(None, DEFAULT_COUNTRY, DEFAULT_CURRENCY), True

    async def get_effective(
        self,
        business_id: int,
        country: str = DEFAULT_COUNTRY,
        currency: str = DEFAULT_CURRENCY,
    ) -> EffectiveCommissionResponse:
        """Get the rule that applies to a business.

        Raises:
            BusinessNotFoundError: If the business does not exist.
            CommissionNotFoundError: If neither an organization nor a
                global rule is active.
        """
        business = await self.db.get(BusinessOrganization, business_id)
        if business is None:
            raise BusinessNotFoundError(f"Business {business_id} not found")

        row, is_global = await self.resolve(business_id, country, currency)
        if row is None:
            raise CommissionNotFoundError(
                f"No active commission for business {business_id} ({country}/{currency})"
            )

        response = self._to_response(await self._get_row(row.id))
        return EffectiveCommissionResponse(**response.model_dump(), is_global=is_global)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_row(self, commission_id: int) -> Commission:
        query = (
            select(Commission)
            .where(Commission.id == commission_id)
            .options(selectinload(Commission.business))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        row = result.scalar_one_or_none()

        if row is None:
            raise CommissionNotFoundError(f"Commission {commission_id} not found")

        return row

    async def _latest_active(
        self,
        business_id: int | None,
        country: str | None,
        currency: str | None,
    ) -> Commission | None:
        """Latest active rule of a scope; a None country or currency matches any."""
        scope = (
            Commission.business_id.is_(None)
            if business_id is None
            else Commission.business_id == business_id
        )
        query = select(Commission).where(scope, Commission.is_active.is_(True))
        if country is not None:
            query = query.where(Commission.country == country)
        if currency is not None:
            query = query.where(Commission.currency == currency)
        query = (
            query.order_by(Commission.effective_from.desc(), Commission.id.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _deactivate(self, business_id: int | None, country: str, currency: str) -> None:
        scope = (
            Commission.business_id.is_(None)
            if business_id is None
            else Commission.business_id == business_id
        )
        await self.db.execute(
            update(Commission)
            .where(
                scope,
                Commission.is_active.is_(True),
                Commission.country == country,
                Commission.currency == currency,
            )
            .values(is_active=False)
        )

    def _normalize(self, values: dict[str, Any]) -> dict[str, Any]:
        values["country"] = normalize_country(values.get("country"))
        values["currency"] = (values.get("currency") or DEFAULT_CURRENCY).upper()
        values["effective_from"] = values.get("effective_from") or utc_now()
        values["applies_to"] = values.get("applies_to") or "ALL"
        max_amount = values.get("max_transaction_amt")
        if max_amount is not None and max_amount <= 0:
            values["max_transaction_amt"] = None
        values["is_active"] = True
        return values

    def _to_response(self, row: Commission) -> CommissionResponse:
        if row.business_id is None:
            business_name = GLOBAL_BUSINESS_NAME
        elif row.business is not None:
            business_name = row.business.company_name
        else:
            business_name = UNKNOWN_BUSINESS_NAME

        response = CommissionResponse.model_validate(row)
        return response.model_copy(update={"business_name": business_name})
