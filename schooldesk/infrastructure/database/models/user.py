# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User accounts, sessions and contact details.

Users are shared by every role: platform admins, business owners (whose
user id doubles as the organization id) and family accounts.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin, new_uuid

if TYPE_CHECKING:
    from schooldesk.infrastructure.database.models.billing import Order
    from schooldesk.infrastructure.database.models.organization import BusinessOrganization


class UserRole(str, enum.Enum):
    """Account roles."""

    ADMIN = "ADMIN"
    BUSINESS = "BUSINESS"
    FAMILY = "FAMILY"


class Address(Base, TimestampMixin):
    """Postal address attached to a user."""

    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street: Mapped[str] = mapped_column(String(255), default="")
    city: Mapped[str] = mapped_column(String(100), default="")
    state: Mapped[str] = mapped_column(String(100), default="")
    zipcode: Mapped[str] = mapped_column(String(20), default="")
    country: Mapped[str] = mapped_column(String(100), default="")


class User(Base, TimestampMixin):
    """Platform account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    password: Mapped[str | None] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(20), default=UserRole.FAMILY.value)
    banned: Mapped[bool] = mapped_column(Boolean, default=False)
    phone_no: Mapped[str | None] = mapped_column(String(50))
    address_id: Mapped[int | None] = mapped_column(
        ForeignKey("addresses.id", ondelete="SET NULL"),
    )
    send_invitation_on_signup: Mapped[bool] = mapped_column(Boolean, default=False)
    onboarding_stage: Mapped[str | None] = mapped_column(String(50))
    meta: Mapped[dict[str, Any] | None] = mapped_column(JSON)

    address: Mapped[Address | None] = relationship()
    contact_info: Mapped[list[ContactInfo]] = relationship(
        back_populates="user",
        passive_deletes=True,
    )
    business: Mapped[BusinessOrganization | None] = relationship(
        back_populates="user",
        uselist=False,
        passive_deletes=True,
    )
    orders: Mapped[list[Order]] = relationship(
        back_populates="user",
        passive_deletes=True,
    )


class ContactInfo(Base, TimestampMixin):
    """Secondary contact for a user; one may be flagged for emergencies."""

    __tablename__ = "contact_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    relation: Mapped[str | None] = mapped_column(String(100))
    phone_no: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(255))
    use_in_emergency: Mapped[bool] = mapped_column(Boolean, default=False)

    user: Mapped[User] = relationship(back_populates="contact_info")


class UserSession(Base, TimestampMixin):
    """Login session issued by the external auth service."""

    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    token: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    ip_address: Mapped[str | None] = mapped_column(String(64))
    user_agent: Mapped[str | None] = mapped_column(String(512))

    user: Mapped[User] = relationship()
