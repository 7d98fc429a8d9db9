# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing models: discounts, registration fees, orders and payments.

Orders, carts and payments are written by the checkout flow; this service
only reads them for revenue and invoice reporting.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin
from schooldesk.utils.datetime import utc_now

if TYPE_CHECKING:
    from schooldesk.infrastructure.database.models.user import User


class DiscountType(str, enum.Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class DiscountCategory(str, enum.Enum):
    MULTIPLE_STUDENT = "MULTIPLE_STUDENT"
    CLASS_BY_STUDENT = "CLASS_BY_STUDENT"
    CLASS_BY_FAMILY = "CLASS_BY_FAMILY"


class Discount(Base, TimestampMixin):
    """Discount rule. A NULL user_id marks a shared discount visible to all."""

    __tablename__ = "discounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    discount_type: Mapped[str] = mapped_column(String(20))
    discount_value: Mapped[float] = mapped_column(Float)
    applies_to: Mapped[str] = mapped_column(String(50))
    applicable_class_ids: Mapped[Any | None] = mapped_column(JSON)
    applicable_class_types: Mapped[Any | None] = mapped_column(JSON)
    min_enrollment_count: Mapped[int | None] = mapped_column(Integer)
    sibling_config: Mapped[Any | None] = mapped_column(JSON)
    valid_from: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    valid_until: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    max_uses_total: Mapped[int | None] = mapped_column(Integer)
    max_uses_per_family: Mapped[int | None] = mapped_column(Integer)
    times_used: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    category: Mapped[str | None] = mapped_column(String(30))

    tiers: Mapped[list[DiscountTier]] = relationship(
        back_populates="discount",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DiscountTier.id",
    )


class DiscountTier(Base, TimestampMixin):
    """Percentage step of a multi-student or multi-class discount."""

    __tablename__ = "discount_tiers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    discount_id: Mapped[int] = mapped_column(
        ForeignKey("discounts.id", ondelete="CASCADE"), index=True
    )
    students_per_family: Mapped[int | None] = mapped_column(Integer)
    classes_per_student: Mapped[int | None] = mapped_column(Integer)
    percentage_off: Mapped[float] = mapped_column(Float)

    discount: Mapped[Discount] = relationship(back_populates="tiers")


class RegistrationFee(Base, TimestampMixin):
    """Per-student registration fee with a renewal policy."""

    __tablename__ = "registration_fees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    price_per_student: Mapped[float] = mapped_column(Float)
    max_per_family: Mapped[float | None] = mapped_column(Float)
    renewal_type: Mapped[str] = mapped_column(String(50))
    renewal_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Cart(Base, TimestampMixin):
    """Checked-out basket total."""

    __tablename__ = "carts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[float] = mapped_column(Float, default=0)
    product_title: Mapped[str | None] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)


class Order(Base, TimestampMixin):
    """Order placed by a family account."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    cart_id: Mapped[int | None] = mapped_column(ForeignKey("carts.id", ondelete="SET NULL"))
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    user: Mapped[User] = relationship(back_populates="orders")
    cart: Mapped[Cart | None] = relationship()
    payment: Mapped[Payment | None] = relationship(back_populates="order", uselist=False)


class Payment(Base, TimestampMixin):
    """Captured payment for an order; refund_id is set once refunded."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), unique=True
    )
    refund_id: Mapped[str | None] = mapped_column(String(255))

    order: Mapped[Order] = relationship(back_populates="payment")
