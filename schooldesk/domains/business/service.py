# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Business service for platform administrators.

This module provides the BusinessService class for:
- Listing and searching tenant organizations
- Business detail with dashboard statistics
- Registering a business together with its owner account
- Updating contact details, status and the business commission rule
- Listing the students enrolled with a business

A business organization is owned by a BUSINESS user; that user's id is
the organization id families, classes and other resources are scoped by.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from schooldesk.domains.commission.service import (
    DEFAULT_COUNTRY,
    DEFAULT_CURRENCY,
    CommissionService,
    calculate_commission_amount,
    normalize_country,
)
from schooldesk.infrastructure.database.models import (
    Address,
    BusinessOrganization,
    Cart,
    Class,
    Commission,
    Family,
    Order,
    Payment,
    Student,
    Term,
    User,
    UserRole,
)
from schooldesk.models.business import (
    BusinessCommission,
    BusinessCommissionUpdateRequest,
    BusinessContactInfo,
    BusinessCreatedResponse,
    BusinessCreateRequest,
    BusinessDetailResponse,
    BusinessListItem,
    BusinessOwner,
    BusinessStatistics,
    BusinessStatusResponse,
    BusinessStudentItem,
    BusinessUpdatedResponse,
    BusinessUpdateRequest,
)
from schooldesk.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class BusinessServiceError(Exception):
    """Base exception for business service errors."""

    pass


class BusinessNotFoundError(BusinessServiceError):
    """Raised when a business is not found."""

    pass


class EmailAlreadyUsedError(BusinessServiceError):
    """Raised when an email already belongs to another account."""

    pass


def _status_label(banned: bool) -> str:
    return "Inactive" if banned else "Active"


def _format_address(address: Address | None) -> str | None:
    if address is None:
        return None
    return (
        f"{address.street}, {address.city}, {address.state} {address.zipcode}, "
        f"{address.country}"
    )


def parse_address(value: str) -> Address:
    """Split "street, city, state, zip, country" into an Address row.

    Missing parts are left empty; the country defaults to US.
    """
    parts = [part.strip() for part in value.split(",")]
    parts += [""] * (5 - len(parts))

    return Address(
        street=parts[0],
        city=parts[1],
        state=parts[2],
        zipcode=parts[3],
        country=parts[4] or DEFAULT_COUNTRY,
    )


class BusinessService:
    """Service for managing business organizations.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_businesses(
        self,
        search: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[BusinessListItem], int]:
        """List businesses, newest first.

        Args:
            search: Case-insensitive match on company name, owner email
                and owner phone.
            page: 1-based page number.
            limit: Page size.

        Returns:
            Tuple of (businesses on the page, total count).
        """
        query = select(BusinessOrganization).join(BusinessOrganization.user)

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    BusinessOrganization.company_name.ilike(pattern),
                    User.email.ilike(pattern),
                    User.phone_no.ilike(pattern),
                )
            )

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            query.options(selectinload(BusinessOrganization.user).selectinload(User.address))
            .order_by(BusinessOrganization.created_at.desc(), BusinessOrganization.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self.db.execute(query)

        items = []
        for business in result.scalars().all():
            owner = business.user
            location = business.address or (
                f"{owner.address.city}, {owner.address.state}" if owner.address else None
            )
            items.append(
                BusinessListItem(
                    id=business.id,
                    school_name=business.company_name,
                    location=location,
                    ownership=owner.name,
                    registered=business.created_at,
                    status=_status_label(owner.banned),
                )
            )

        return items, total

    async def get_business(self, business_id: int) -> BusinessDetailResponse:
        """Get business details with dashboard statistics.

        Raises:
            BusinessNotFoundError: If business not found.
        """
        business = await self._get_business(business_id)
        owner = business.user

        revenue = await self._total_revenue(business.user_id)
        commission, is_global = await CommissionService(self.db).resolve_any_market(business.id)
        earned = (
            calculate_commission_amount(
                commission.commission_type, commission.commission_value, revenue
            )
            if commission
            else 0.0
        )

        owner_address = _format_address(owner.address)
        address = business.address or owner_address
        email = business.contact_email or owner.email
        phone = business.contact_phone or owner.phone_no or ""

        return BusinessDetailResponse(
            id=business.id,
            school_name=business.company_name,
            email=email,
            phone=phone,
            address=address,
            website=business.website,
            status=_status_label(owner.banned),
            registered=business.created_at,
            user_id=business.user_id,
            owner=BusinessOwner(
                name=owner.name,
                email=owner.email,
                phone=owner.phone_no,
                address=owner_address,
            ),
            statistics=BusinessStatistics(
                total_students=await self._count_students(business.user_id),
                active_classes=await self._count_active_classes(business.user_id),
                total_revenue=round(revenue, 2),
                earned_commission=earned,
            ),
            contact_info=BusinessContactInfo(
                email=email,
                phone=phone,
                address=address,
                website=business.website,
            ),
            commission=BusinessCommission(
                commission_type=commission.commission_type,
                commission_value=commission.commission_value,
                is_global=is_global,
            )
            if commission
            else None,
        )

    async def create_business(self, request: BusinessCreateRequest) -> BusinessCreatedResponse:
        """Register a business and its owner account.

        The owner, the organization and the optional commission rule are
        committed together. A commission rule is only created when both a
        type and a value are given; otherwise the global rule applies.

        Raises:
            EmailAlreadyUsedError: If the owner email is already registered.
        """
        await self._ensure_email_available(request.owner_email)

        owner = User(
            email=request.owner_email,
            phone_no=request.owner_phone,
            name=request.owner_name,
            role=UserRole.BUSINESS.value,
            banned=not request.status,
            address=parse_address(request.owner_address) if request.owner_address else None,
        )
        business = BusinessOrganization(
            user=owner,
            company_name=request.school_name,
            address=request.address,
            contact_phone=request.phone,
            contact_email=request.email,
            website=request.website,
        )
        self.db.add_all([owner, business])

        commission = None
        if request.commission_type and request.commission_value is not None:
            commission = BusinessCommission(
                commission_type=request.commission_type,
                commission_value=request.commission_value,
            )
            self.db.add(
                Commission(
                    business=business,
                    effective_from=utc_now(),
                    country=DEFAULT_COUNTRY,
                    currency=DEFAULT_CURRENCY,
                    commission_type=request.commission_type,
                    commission_value=request.commission_value,
                )
            )

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise EmailAlreadyUsedError(f"Email {request.owner_email} is already used") from e

        logger.info("Created business %s owned by %s", business.id, owner.id)

        return BusinessCreatedResponse(
            id=business.id,
            school_name=business.company_name,
            email=business.contact_email or owner.email,
            phone=business.contact_phone or owner.phone_no or "",
            status=_status_label(owner.banned),
            address=business.address,
            owner=BusinessOwner(
                name=owner.name,
                email=owner.email,
                phone=owner.phone_no,
                address=request.owner_address,
            ),
            commission=commission,
        )

    async def update_business(
        self,
        business_id: int,
        request: BusinessUpdateRequest,
    ) -> BusinessUpdatedResponse:
        """Update business contact details and the owner account.

        The contact email and phone are mirrored onto the owner account.

        Raises:
            BusinessNotFoundError: If business not found.
            EmailAlreadyUsedError: If the new email belongs to another account.
        """
        business = await self._get_business(business_id)
        owner = business.user

        if request.email and request.email != owner.email:
            await self._ensure_email_available(request.email)

        if request.email:
            owner.email = request.email
            business.contact_email = request.email
        if request.phone:
            owner.phone_no = request.phone
            business.contact_phone = request.phone
        if request.status is not None:
            owner.banned = not request.status
        if request.school_name:
            business.company_name = request.school_name
        if "address" in request.model_fields_set:
            business.address = request.address
        if "website" in request.model_fields_set:
            business.website = request.website

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise EmailAlreadyUsedError(f"Email {request.email} is already used") from e

        logger.info("Updated business %s", business_id)

        return BusinessUpdatedResponse(
            id=business.id,
            school_name=business.company_name,
            email=business.contact_email or owner.email,
            phone=business.contact_phone or owner.phone_no or "",
            website=business.website,
            status=_status_label(owner.banned),
        )

    async def update_commission(
        self,
        business_id: int,
        request: BusinessCommissionUpdateRequest,
    ) -> BusinessCommission:
        """Replace the business commission rule.

        Every active rule of the business is deactivated and a new active
        rule is created in the same transaction.

        Raises:
            BusinessNotFoundError: If business not found.
        """
        business = await self.db.get(BusinessOrganization, business_id)
        if business is None:
            raise BusinessNotFoundError(f"Business {business_id} not found")

        await self.db.execute(
            update(Commission)
            .where(Commission.business_id == business_id, Commission.is_active.is_(True))
            .values(is_active=False)
        )

        commission = Commission(
            business_id=business_id,
            effective_from=utc_now(),
            country=normalize_country(request.country),
            currency=(request.currency or DEFAULT_CURRENCY).upper(),
            commission_type=request.commission_type,
            commission_value=request.commission_value or 0,
        )
        self.db.add(commission)
        await self.db.commit()

        logger.info(
            "Business %s commission set to %s %s",
            business_id,
            commission.commission_type,
            commission.commission_value,
        )

        return BusinessCommission(
            commission_type=commission.commission_type,
            commission_value=commission.commission_value,
        )

    async def set_status(self, business_id: int, status: bool) -> BusinessStatusResponse:
        """Activate or deactivate a business by unbanning or banning its owner.

        Raises:
            BusinessNotFoundError: If business not found.
        """
        business = await self._get_business(business_id)
        business.user.banned = not status

        await self.db.commit()

        logger.info("Business %s status set to %s", business_id, _status_label(not status))

        return BusinessStatusResponse(id=business_id, status=_status_label(not status))

    async def list_students(
        self,
        business_id: int,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[BusinessStudentItem], int]:
        """List students of every family registered with a business.

        Raises:
            BusinessNotFoundError: If business not found.
        """
        business = await self.db.get(BusinessOrganization, business_id)
        if business is None:
            raise BusinessNotFoundError(f"Business {business_id} not found")

        query = (
            select(Student)
            .join(Student.family)
            .where(Family.organization_id == business.user_id)
        )

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            query.options(selectinload(Student.family))
            .order_by(Student.created_at.desc(), Student.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self.db.execute(query)

        items = [
            BusinessStudentItem(
                id=student.id,
                student_name=f"{student.first_name} {student.last_name}",
                email=student.family.primary_parent_email or "",
                phone=student.family.primary_parent_phone_number or "",
            )
            for student in result.scalars().all()
        ]

        return items, total

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_business(self, business_id: int) -> BusinessOrganization:
        query = (
            select(BusinessOrganization)
            .where(BusinessOrganization.id == business_id)
            .options(selectinload(BusinessOrganization.user).selectinload(User.address))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        business = result.scalar_one_or_none()

        if business is None:
            raise BusinessNotFoundError(f"Business {business_id} not found")

        return business

    async def _ensure_email_available(self, email: str) -> None:
        result = await self.db.execute(select(User.id).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise EmailAlreadyUsedError(f"Email {email} is already used")

    async def _count_students(self, owner_id: str) -> int:
        query = (
            select(func.count(Student.id))
            .join(Student.family)
            .where(Family.organization_id == owner_id)
        )
        return (await self.db.execute(query)).scalar() or 0

    async def _count_active_classes(self, owner_id: str) -> int:
        now = utc_now()
        query = (
            select(func.count(Class.id))
            .join(Class.term)
            .where(
                Term.user_id == owner_id,
                Class.start_date <= now,
                Class.end_date >= now,
            )
        )
        return (await self.db.execute(query)).scalar() or 0

    async def _total_revenue(self, owner_id: str) -> float:
        """Sum of cart amounts over paid orders of the business's families, refunds included."""
        family_accounts = select(Family.user_id).where(Family.organization_id == owner_id)
        query = (
            select(func.coalesce(func.sum(Cart.amount), 0))
            .select_from(Order)
            .join(Order.cart)
            .join(Payment, Payment.order_id == Order.id)
            .where(Order.user_id.in_(family_accounts))
        )
        return float((await self.db.execute(query)).scalar() or 0)
