# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Families and their students."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from schooldesk.infrastructure.database.models.booking import ClassBooking, DropInClassBooking
    from schooldesk.infrastructure.database.models.user import User


class Family(Base, TimestampMixin):
    """Guardian household registered with an organization.

    organization_id is the business owner's user id; user_id is the
    family's own login account.
    """

    __tablename__ = "families"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organization_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    family_name: Mapped[str | None] = mapped_column(String(255))
    primary_parent_first_name: Mapped[str] = mapped_column(String(100))
    primary_parent_last_name: Mapped[str] = mapped_column(String(100))
    primary_parent_email: Mapped[str] = mapped_column(String(255))
    primary_parent_phone_country: Mapped[str | None] = mapped_column(String(10))
    primary_parent_phone_number: Mapped[str | None] = mapped_column(String(50))
    send_portal_invitation: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(String(20), default="ACTIVE", index=True)
    notes: Mapped[str | None] = mapped_column(Text)

    account: Mapped[User] = relationship(foreign_keys=[user_id])
    organization: Mapped[User] = relationship(foreign_keys=[organization_id])
    students: Mapped[list[Student]] = relationship(
        back_populates="family",
        passive_deletes=True,
        order_by="Student.id",
    )


class Student(Base, TimestampMixin):
    """Child enrolled through a family."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    family_id: Mapped[int] = mapped_column(
        ForeignKey("families.id", ondelete="CASCADE"), index=True
    )
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    date_of_birth: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    gender: Mapped[str | None] = mapped_column(String(20))
    medical_info: Mapped[str | None] = mapped_column(Text)
    photo_video_consent: Mapped[bool] = mapped_column(Boolean, default=False)

    # Uniform sizing
    height: Mapped[float | None] = mapped_column(Float)
    neck: Mapped[float | None] = mapped_column(Float)
    girth: Mapped[float | None] = mapped_column(Float)
    chest: Mapped[float | None] = mapped_column(Float)
    bra_size: Mapped[str | None] = mapped_column(String(20))
    waist: Mapped[float | None] = mapped_column(Float)
    hips: Mapped[float | None] = mapped_column(Float)
    inseam: Mapped[float | None] = mapped_column(Float)
    shoe_size: Mapped[str | None] = mapped_column(String(20))
    tshirt_size: Mapped[str | None] = mapped_column(String(20))

    family: Mapped[Family] = relationship(back_populates="students")
    class_bookings: Mapped[list[ClassBooking]] = relationship(
        back_populates="student",
        passive_deletes=True,
    )
    dropin_bookings: Mapped[list[DropInClassBooking]] = relationship(
        back_populates="student",
        passive_deletes=True,
    )
