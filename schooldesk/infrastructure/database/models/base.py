# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Declarative base and shared column mixins."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from schooldesk.utils.datetime import utc_now


class Base(DeclarativeBase):
    """Base class for all ORM models."""


def new_uuid() -> str:
    """Generate a string UUID primary key."""
    return str(uuid4())


class TimestampMixin:
    """created_at / updated_at columns maintained on the Python side.

    Values are set by the ORM so they are available right after flush
    without a refresh round-trip.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
        nullable=False,
    )
