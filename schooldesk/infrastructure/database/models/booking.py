# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Bookings of students into classes: enrollments, trials, waitlist, drop-ins."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin
from schooldesk.infrastructure.database.models.family import Student
from schooldesk.infrastructure.database.models.scheduling import Class, DropInClass, Lesson, Term
from schooldesk.utils.datetime import utc_now


class ClassBooking(Base, TimestampMixin):
    """Enrollment of a student in an ongoing class."""

    __tablename__ = "class_bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    class_id: Mapped[int] = mapped_column(
        ForeignKey("classes.id", ondelete="CASCADE"), index=True
    )
    term_id: Mapped[int | None] = mapped_column(ForeignKey("terms.id", ondelete="SET NULL"))
    student_id: Mapped[int] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), index=True
    )
    enrollment_start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    enrollment_end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    payment_option: Mapped[str] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="Active")

    class_: Mapped[Class] = relationship()
    term: Mapped[Term | None] = relationship()
    student: Mapped[Student] = relationship(back_populates="class_bookings")


class Trial(Base, TimestampMixin):
    """Trial lesson booked for a prospective student."""

    __tablename__ = "trials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    class_id: Mapped[int] = mapped_column(
        ForeignKey("classes.id", ondelete="CASCADE"), index=True
    )
    term_id: Mapped[int | None] = mapped_column(ForeignKey("terms.id", ondelete="SET NULL"))
    student_id: Mapped[int] = mapped_column(ForeignKey("students.id", ondelete="CASCADE"))
    lesson_id: Mapped[int | None] = mapped_column(ForeignKey("lessons.id", ondelete="SET NULL"))
    date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    status: Mapped[str] = mapped_column(String(20), default="pending")
    notes: Mapped[str | None] = mapped_column(Text)

    class_: Mapped[Class] = relationship()
    term: Mapped[Term | None] = relationship()
    student: Mapped[Student] = relationship()
    lesson: Mapped[Lesson | None] = relationship(back_populates="trials")


class WaitlistEntry(Base, TimestampMixin):
    """Student waiting for a place in a class or term."""

    __tablename__ = "waitlist_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    term_id: Mapped[int | None] = mapped_column(ForeignKey("terms.id", ondelete="SET NULL"))
    student_id: Mapped[int] = mapped_column(ForeignKey("students.id", ondelete="CASCADE"))
    class_id: Mapped[int | None] = mapped_column(
        ForeignKey("classes.id", ondelete="CASCADE"), index=True
    )

    class_: Mapped[Class | None] = relationship()
    term: Mapped[Term | None] = relationship()
    student: Mapped[Student] = relationship()


class DropInClassBooking(Base, TimestampMixin):
    """Booking of a student into a drop-in class."""

    __tablename__ = "dropin_bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    dropin_class_id: Mapped[int] = mapped_column(
        ForeignKey("dropin_classes.id", ondelete="CASCADE"), index=True
    )
    student_id: Mapped[int] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"), index=True
    )
    enrollment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    payment_option: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="Active")

    dropin_class: Mapped[DropInClass] = relationship()
    student: Mapped[Student] = relationship(back_populates="dropin_bookings")
