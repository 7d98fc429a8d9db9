# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Scheduling models: terms, camps, classes, lessons and calendar data.

All rows except lessons are owned by an organization (user_id). Lessons
inherit ownership from their class.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from schooldesk.infrastructure.database.models.booking import Trial


class Frequency(str, enum.Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class ClassType(str, enum.Enum):
    ONGOING_CLASS = "ONGOING_CLASS"
    DROP_CLASS = "DROP_CLASS"


class Location(Base, TimestampMixin):
    """Venue where classes take place."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    address: Mapped[str] = mapped_column(String(500))


class Teacher(Base, TimestampMixin):
    """Instructor assigned to classes."""

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(50))


class Term(Base, TimestampMixin):
    """Season or billing period.

    payment_options holds the billing option records exactly as submitted.
    """

    __tablename__ = "terms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    registration_fee: Mapped[bool] = mapped_column(Boolean, default=False)
    season_specific_fee: Mapped[bool] = mapped_column(Boolean, default=False)
    pricing_type: Mapped[str | None] = mapped_column(String(50))
    payment_options: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON)
    pricing: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    season_specific_fees: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON)

    classes: Mapped[list[Class]] = relationship(back_populates="term")


class Camp(Base, TimestampMixin):
    """Holiday camp offering."""

    __tablename__ = "camps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    allow_parents_to_book_individual_days: Mapped[bool] = mapped_column(Boolean, default=False)
    allow_parents_to_book_half_day_session: Mapped[bool] = mapped_column(Boolean, default=False)
    offer_early_dropoff: Mapped[bool] = mapped_column(Boolean, default=False)
    offer_late_pickup: Mapped[bool] = mapped_column(Boolean, default=False)


class ScheduleMixin:
    """Recurring schedule and booking options shared by class kinds."""

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    frequency: Mapped[str] = mapped_column(String(10))
    recurring_day: Mapped[str | None] = mapped_column(String(20))
    start_time_of_class: Mapped[str] = mapped_column(String(10))
    end_time_of_class: Mapped[str | None] = mapped_column(String(10))
    duration: Mapped[int] = mapped_column(Integer)
    pricing_per_lesson: Mapped[float] = mapped_column(Float)
    class_image: Mapped[str | None] = mapped_column(String(500))
    minimum_age: Mapped[int | None] = mapped_column(Integer)
    maximum_age: Mapped[int | None] = mapped_column(Integer)
    class_color: Mapped[str | None] = mapped_column(String(20))
    limit_capacity: Mapped[bool] = mapped_column(Boolean, default=False)
    capacity: Mapped[int | None] = mapped_column(Integer)
    allow_portal_booking: Mapped[bool] = mapped_column(Boolean, default=True)
    family_portal_trial: Mapped[bool] = mapped_column(Boolean, default=False)
    global_class_discount: Mapped[bool] = mapped_column(Boolean, default=False)
    sibling_discount: Mapped[bool] = mapped_column(Boolean, default=False)


class Class(Base, ScheduleMixin, TimestampMixin):
    """Ongoing class, optionally attached to a term."""

    __tablename__ = "classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    term_id: Mapped[int | None] = mapped_column(
        ForeignKey("terms.id", ondelete="SET NULL"), index=True
    )
    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL")
    )
    teacher_id: Mapped[int | None] = mapped_column(
        ForeignKey("teachers.id", ondelete="SET NULL")
    )
    class_type: Mapped[str] = mapped_column(String(20), default=ClassType.ONGOING_CLASS.value)

    term: Mapped[Term | None] = relationship(back_populates="classes")
    location: Mapped[Location | None] = relationship()
    teacher: Mapped[Teacher | None] = relationship()
    lessons: Mapped[list[Lesson]] = relationship(
        back_populates="class_",
        passive_deletes=True,
        order_by="Lesson.date",
    )


class Lesson(Base, TimestampMixin):
    """Single scheduled session of a class."""

    __tablename__ = "lessons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    class_id: Mapped[int] = mapped_column(
        ForeignKey("classes.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    is_trial: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(String(20), default="scheduled")
    attendance_id: Mapped[str | None] = mapped_column(String(64))
    notes: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    start_time: Mapped[str] = mapped_column(String(10))
    end_time: Mapped[str | None] = mapped_column(String(10))
    duration: Mapped[int] = mapped_column(Integer)

    class_: Mapped[Class] = relationship(back_populates="lessons")
    trials: Mapped[list[Trial]] = relationship(back_populates="lesson")


class DropInClass(Base, ScheduleMixin, TimestampMixin):
    """Pay-per-visit class that families book one session at a time."""

    __tablename__ = "dropin_classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL")
    )
    teacher_id: Mapped[int | None] = mapped_column(
        ForeignKey("teachers.id", ondelete="SET NULL")
    )
    class_type: Mapped[str] = mapped_column(String(20), default=ClassType.DROP_CLASS.value)

    location: Mapped[Location | None] = relationship()
    teacher: Mapped[Teacher | None] = relationship()
    lessons: Mapped[list[DropInLesson]] = relationship(
        back_populates="dropin_class",
        passive_deletes=True,
        order_by="DropInLesson.date",
    )


class DropInLesson(Base, TimestampMixin):
    """Single scheduled session of a drop-in class."""

    __tablename__ = "dropin_lessons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dropin_class_id: Mapped[int] = mapped_column(
        ForeignKey("dropin_classes.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(20), default="scheduled")
    notes: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    start_time: Mapped[str] = mapped_column(String(10))
    end_time: Mapped[str | None] = mapped_column(String(10))
    duration: Mapped[int] = mapped_column(Integer)

    dropin_class: Mapped[DropInClass] = relationship(back_populates="lessons")


class Holiday(Base, TimestampMixin):
    """Closure period on the organization calendar."""

    __tablename__ = "holidays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    is_recurring: Mapped[bool] = mapped_column(Boolean, default=False)
    affects_class: Mapped[bool] = mapped_column(Boolean, default=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
