# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Business organizations and platform commission rules."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin
from schooldesk.utils.datetime import utc_now

if TYPE_CHECKING:
    from schooldesk.infrastructure.database.models.user import User


class CommissionType(str, enum.Enum):
    """How a commission value is applied to revenue."""

    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"
    TIERED = "TIERED"


class BusinessOrganization(Base, TimestampMixin):
    """Tenant organization owned by a BUSINESS user."""

    __tablename__ = "business_organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True
    )
    company_name: Mapped[str] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(String(500))
    contact_email: Mapped[str | None] = mapped_column(String(255))
    contact_phone: Mapped[str | None] = mapped_column(String(50))
    website: Mapped[str | None] = mapped_column(String(255))
    industry: Mapped[str] = mapped_column(String(100), default="Education")
    language: Mapped[str] = mapped_column(String(10), default="en")
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    time_zone: Mapped[str] = mapped_column(String(64), default="UTC")
    website_theme: Mapped[str] = mapped_column(String(50), default="default")
    time_format: Mapped[str] = mapped_column(String(10), default="24h")
    start_date_for_weekly_calendar: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    age_cutoff_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    logo: Mapped[str | None] = mapped_column(String(500))

    user: Mapped[User] = relationship(back_populates="business")
    commissions: Mapped[list[Commission]] = relationship(
        back_populates="business",
        passive_deletes=True,
    )


class Commission(Base, TimestampMixin):
    """Platform fee rule.

    A NULL business_id marks a global rule that applies to every
    organization without an active rule of its own.
    """

    __tablename__ = "commissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    business_id: Mapped[int | None] = mapped_column(
        ForeignKey("business_organizations.id", ondelete="CASCADE"), index=True
    )
    effective_from: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    country: Mapped[str] = mapped_column(String(2), default="US")
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    commission_type: Mapped[str] = mapped_column(String(20))
    commission_value: Mapped[float] = mapped_column(Float, default=0)
    tier_config: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    platform_commission: Mapped[float] = mapped_column(Float, default=0)
    platform_amount: Mapped[float] = mapped_column(Float, default=0)
    applies_to: Mapped[str] = mapped_column(String(50), default="ALL")
    min_transaction_amt: Mapped[float | None] = mapped_column(Float)
    max_transaction_amt: Mapped[float | None] = mapped_column(Float)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    business: Mapped[BusinessOrganization | None] = relationship(back_populates="commissions")
