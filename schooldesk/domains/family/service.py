# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Family service for households registered with an organization.

This module provides the FamilyService that handles:
- Family registration together with the family's portal account
- Family search, detail, update, suspension and deletion
- Children overview with their current bookings
- Invoice history built from the family account's orders

Example:
    >>> service = FamilyService(db)
    >>> created = await service.create_family(owner_id, request)
    >>> families, total = await service.list_families(owner_id, search="smith")
"""

from __future__ import annotations

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from schooldesk.domains.auth.password import PasswordHasher, get_password_hasher
from schooldesk.infrastructure.database.models import (
    Address,
    ClassBooking,
    ContactInfo,
    DropInClassBooking,
    Family,
    Order,
    Student,
    User,
    UserRole,
)
from schooldesk.models.family import (
    AddressData,
    EmergencyContact,
    EnrolledClass,
    FamilyAccount,
    FamilyChild,
    FamilyContactInfo,
    FamilyCreatedResponse,
    FamilyCreateRequest,
    FamilyDetailResponse,
    FamilyListItem,
    FamilyPaymentsResponse,
    FamilyRecord,
    FamilyUpdateRequest,
    Invoice,
    PaymentSummary,
)
from schooldesk.utils.datetime import calculate_age, ensure_utc

logger = logging.getLogger(__name__)

CANCELLED_STATUS = "Cancelled"
DEFAULT_INVOICE_DESCRIPTION = "Class Enrollment"


class FamilyServiceError(Exception):
    """Base exception for family service errors."""

    pass


class FamilyNotFoundError(FamilyServiceError):
    """Raised when a family is not found."""

    pass


class EmailAlreadyUsedError(FamilyServiceError):
    """Raised when an email already belongs to another account."""

    pass


class InvalidPasswordError(FamilyServiceError):
    """Raised when the portal password cannot be hashed."""

    pass


def _format_phone(country: str | None, number: str | None) -> str | None:
    if not number:
        return None
    return f"{country or ''} {number}".strip()


class FamilyService:
    """Service for managing families.

    Every method is scoped by the organization id (the business owner's
    user id). A family of another organization is reported as not found.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession, hasher: PasswordHasher | None = None) -> None:
        self.db = db
        self._hasher = hasher

    @property
    def hasher(self) -> PasswordHasher:
        if self._hasher is None:
            self._hasher = get_password_hasher()
        return self._hasher

    async def create_family(
        self,
        owner_id: str,
        request: FamilyCreateRequest,
    ) -> FamilyCreatedResponse:
        """Register a family and its portal account.

        The account and the family are committed together.

        Args:
            owner_id: Organization id.
            request: Family creation data.

        Returns:
            Created family and account (without password hash).

        Raises:
            EmailAlreadyUsedError: If the email is already registered.
            InvalidPasswordError: If the password cannot be hashed.
        """
        await self._ensure_email_available(request.email)

        try:
            password_hash = self.hasher.hash(request.password)
        except ValueError as e:
            raise InvalidPasswordError(str(e)) from e

        user = User(
            email=request.email,
            password=password_hash,
            name=f"{request.first_name} {request.last_name}".strip(),
            role=UserRole.FAMILY.value,
            phone_no=_format_phone(request.phone_country_code, request.phone_number),
            send_invitation_on_signup=request.send_portal_invitation,
        )
        family = Family(
            organization_id=owner_id,
            account=user,
            family_name=request.family_name or f"{request.last_name} Family",
            primary_parent_first_name=request.first_name,
            primary_parent_last_name=request.last_name,
            primary_parent_email=request.email,
            primary_parent_phone_country=request.phone_country_code,
            primary_parent_phone_number=request.phone_number,
            send_portal_invitation=request.send_portal_invitation,
        )

        self.db.add_all([user, family])
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise EmailAlreadyUsedError(f"Email {request.email} is already used") from e

        logger.info("Created family %s (account %s) for %s", family.id, user.id, owner_id)

        return FamilyCreatedResponse(
            family=FamilyRecord.model_validate(family),
            user=FamilyAccount.model_validate(user),
        )

    async def list_families(
        self,
        owner_id: str,
        search: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[FamilyListItem], int]:
        """List families with search and status filtering.

        Args:
            owner_id: Organization id.
            search: Case-insensitive match on names, email and phone.
            status: Exact status; "ALL" or empty means no filter.
            page: 1-based page number.
            limit: Page size.

        Returns:
            Tuple of (families on the page, total count).
        """
        query = (
            select(Family)
            .join(Family.account)
            .where(Family.organization_id == owner_id)
        )

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    Family.family_name.ilike(pattern),
                    Family.primary_parent_first_name.ilike(pattern),
                    Family.primary_parent_last_name.ilike(pattern),
                    Family.primary_parent_email.ilike(pattern),
                    Family.primary_parent_phone_number.ilike(pattern),
                    User.email.ilike(pattern),
                    User.phone_no.ilike(pattern),
                )
            )

        if status and status != "ALL":
            query = query.where(Family.status == status)

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            query.options(selectinload(Family.account), selectinload(Family.students))
            .order_by(Family.created_at.desc(), Family.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self.db.execute(query)

        items = [
            FamilyListItem(
                id=family.id,
                family_name=family.family_name
                or f"{family.primary_parent_first_name} {family.primary_parent_last_name}",
                email=family.primary_parent_email,
                phone=_format_phone(
                    family.primary_parent_phone_country,
                    family.primary_parent_phone_number,
                )
                or family.account.phone_no
                or "",
                students=len(family.students),
                status=family.status or "ACTIVE",
                created_at=family.created_at,
            )
            for family in result.scalars().all()
        ]

        return items, total

    async def get_family(self, owner_id: str, family_id: int) -> FamilyDetailResponse:
        """Get family details.

        Raises:
            FamilyNotFoundError: If family not found.
        """
        family = await self._get_family(
            owner_id,
            family_id,
            selectinload(Family.account).selectinload(User.address),
            selectinload(Family.account).selectinload(User.contact_info),
            selectinload(Family.organization).selectinload(User.business),
        )
        return self._to_detail(family)

    async def update_family(
        self,
        owner_id: str,
        family_id: int,
        request: FamilyUpdateRequest,
    ) -> FamilyDetailResponse:
        """Update a family, its account, address and emergency contact.

        Args:
            owner_id: Organization id.
            family_id: Family identifier.
            request: Fields to change.

        Returns:
            Updated family details.

        Raises:
            FamilyNotFoundError: If family not found.
            EmailAlreadyUsedError: If the new email belongs to another account.
        """
        family = await self._get_family(
            owner_id,
            family_id,
            selectinload(Family.account).selectinload(User.address),
            selectinload(Family.account).selectinload(User.contact_info),
        )
        account = family.account

        if request.email and request.email != account.email:
            await self._ensure_email_available(request.email)

        if request.first_name:
            family.primary_parent_first_name = request.first_name
        if request.last_name:
            family.primary_parent_last_name = request.last_name
        if request.phone_country_code:
            family.primary_parent_phone_country = request.phone_country_code
        if request.phone_number:
            family.primary_parent_phone_number = request.phone_number
        if request.family_name:
            family.family_name = request.family_name
        if request.status is not None:
            family.status = request.status
        if "notes" in request.model_fields_set:
            family.notes = request.notes

        if request.email:
            account.email = request.email
            family.primary_parent_email = request.email
        if request.first_name or request.last_name:
            account.name = (
                f"{family.primary_parent_first_name} {family.primary_parent_last_name}"
            ).strip()
        if request.phone_number or request.phone_country_code:
            account.phone_no = _format_phone(
                family.primary_parent_phone_country, family.primary_parent_phone_number
            )

        if request.address is not None:
            changes = request.address.model_dump(exclude_none=True)
            if account.address is None:
                account.address = Address(**changes)
            else:
                for field, value in changes.items():
                    setattr(account.address, field, value)

        if request.emergency_contact is not None:
            contact = next((c for c in account.contact_info if c.use_in_emergency), None)
            if contact is None:
                contact = ContactInfo(user_id=account.id)
                self.db.add(contact)
            contact.relation = request.emergency_contact.relation
            contact.phone_no = request.emergency_contact.phone_no
            contact.email = request.emergency_contact.email
            contact.use_in_emergency = request.emergency_contact.use_in_emergency

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise EmailAlreadyUsedError(f"Email {request.email} is already used") from e

        logger.info("Updated family %s", family_id)

        return await self.get_family(owner_id, family_id)

    async def delete_family(self, owner_id: str, family_id: int) -> int:
        """Delete a family and, through cascades, its students and bookings.

        Raises:
            FamilyNotFoundError: If family not found.
        """
        family = await self._get_family(owner_id, family_id)

        await self.db.delete(family)
        await self.db.commit()

        logger.info("Deleted family %s", family_id)

        return family_id

    async def set_status(self, owner_id: str, family_id: int, status: str) -> FamilyRecord:
        """Suspend or reactivate a family.

        Raises:
            FamilyNotFoundError: If family not found.
        """
        family = await self._get_family(owner_id, family_id)
        family.status = status

        await self.db.commit()

        logger.info("Family %s status set to %s", family_id, status)

        return FamilyRecord.model_validate(family)

    async def get_children(self, owner_id: str, family_id: int) -> list[FamilyChild]:
        """List a family's students with their active bookings.

        Cancelled bookings are left out; a student with no remaining
        booking is "Not Enrolled".

        Raises:
            FamilyNotFoundError: If family not found.
        """
        family = await self._get_family(
            owner_id,
            family_id,
            selectinload(Family.students)
            .selectinload(Student.class_bookings)
            .selectinload(ClassBooking.class_),
            selectinload(Family.students)
            .selectinload(Student.dropin_bookings)
            .selectinload(DropInClassBooking.dropin_class),
        )

        children = []
        for student in family.students:
            enrolled = [
                EnrolledClass(
                    id=booking.class_.id,
                    title=booking.class_.title,
                    class_type=booking.class_.class_type,
                )
                for booking in student.class_bookings
                if booking.status != CANCELLED_STATUS
            ]
            enrolled.extend(
                EnrolledClass(
                    id=booking.dropin_class.id,
                    title=booking.dropin_class.title,
                    class_type=booking.dropin_class.class_type,
                )
                for booking in student.dropin_bookings
                if booking.status != CANCELLED_STATUS
            )

            children.append(
                FamilyChild(
                    id=student.id,
                    first_name=student.first_name,
                    last_name=student.last_name,
                    date_of_birth=student.date_of_birth,
                    age=calculate_age(student.date_of_birth),
                    overall_status="Enrolled" if enrolled else "Not Enrolled",
                    enrolled_classes=enrolled,
                )
            )

        return children

    async def get_payments(self, owner_id: str, family_id: int) -> FamilyPaymentsResponse:
        """Build the invoice history of a family's portal account.

        Invoices are numbered INV-001, INV-002, ... newest first. An order
        is Paid when it has a payment that was not refunded.

        Raises:
            FamilyNotFoundError: If family not found.
        """
        family = await self._get_family(owner_id, family_id)

        query = (
            select(Order)
            .where(Order.user_id == family.user_id)
            .options(selectinload(Order.cart), selectinload(Order.payment))
            .order_by(Order.date.desc(), Order.id.desc())
        )
        orders = (await self.db.execute(query)).scalars().all()

        invoices = []
        for index, order in enumerate(orders, start=1):
            is_paid = order.payment is not None and order.payment.refund_id is None
            cart = order.cart
            invoices.append(
                Invoice(
                    invoice_id=f"INV-{index:03d}",
                    date=ensure_utc(order.date).date(),
                    description=(cart and (cart.product_title or cart.description))
                    or DEFAULT_INVOICE_DESCRIPTION,
                    amount=cart.amount if cart else 0,
                    status="Paid" if is_paid else "Pending",
                )
            )

        summary = PaymentSummary(
            total_paid=sum(i.amount for i in invoices if i.status == "Paid"),
            total_invoices=len(invoices),
            due=sum(i.amount for i in invoices if i.status == "Pending"),
        )

        return FamilyPaymentsResponse(summary=summary, invoices=invoices)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_family(self, owner_id: str, family_id: int, *options) -> Family:
        query = (
            select(Family)
            .where(Family.id == family_id, Family.organization_id == owner_id)
            .options(*options)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        family = result.scalar_one_or_none()

        if family is None:
            raise FamilyNotFoundError(f"Family {family_id} not found")

        return family

    async def _ensure_email_available(self, email: str) -> None:
        result = await self.db.execute(select(User.id).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise EmailAlreadyUsedError(f"Email {email} is already used")

    def _to_detail(self, family: Family) -> FamilyDetailResponse:
        account = family.account
        business = family.organization.business if family.organization else None
        emergency = next((c for c in account.contact_info if c.use_in_emergency), None)

        return FamilyDetailResponse(
            id=family.id,
            family_name=family.family_name,
            primary_parent_first_name=family.primary_parent_first_name,
            primary_parent_last_name=family.primary_parent_last_name,
            primary_parent_email=family.primary_parent_email,
            primary_parent_phone_country=family.primary_parent_phone_country,
            primary_parent_phone_number=family.primary_parent_phone_number,
            status=family.status,
            notes=family.notes,
            member_since=family.created_at,
            contact_info=FamilyContactInfo(
                email=family.primary_parent_email,
                phone=_format_phone(
                    family.primary_parent_phone_country,
                    family.primary_parent_phone_number,
                )
                or account.phone_no
                or "",
                linked_business=business.company_name if business else "N/A",
            ),
            address=AddressData.model_validate(account.address) if account.address else None,
            emergency_contact=EmergencyContact(
                name=emergency.relation or emergency.email or "N/A",
                relation=emergency.relation,
                phone=emergency.phone_no,
                email=emergency.email,
            )
            if emergency
            else None,
            user=FamilyAccount.model_validate(account),
        )
