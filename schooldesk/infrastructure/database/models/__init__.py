# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ORM models for SchoolDesk.

Importing this package registers every table on Base.metadata.
"""

from schooldesk.infrastructure.database.models.base import Base, TimestampMixin, new_uuid
from schooldesk.infrastructure.database.models.billing import (
    Cart,
    Discount,
    DiscountCategory,
    DiscountTier,
    DiscountType,
    Order,
    Payment,
    RegistrationFee,
)
from schooldesk.infrastructure.database.models.booking import (
    ClassBooking,
    DropInClassBooking,
    Trial,
    WaitlistEntry,
)
from schooldesk.infrastructure.database.models.family import Family, Student
from schooldesk.infrastructure.database.models.organization import (
    BusinessOrganization,
    Commission,
    CommissionType,
)
from schooldesk.infrastructure.database.models.policies import CustomField, WaiverPolicy
from schooldesk.infrastructure.database.models.scheduling import (
    Camp,
    Class,
    ClassType,
    DropInClass,
    DropInLesson,
    Frequency,
    Holiday,
    Lesson,
    Location,
    Teacher,
    Term,
)
from schooldesk.infrastructure.database.models.user import (
    Address,
    ContactInfo,
    User,
    UserRole,
    UserSession,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "new_uuid",
    # Accounts
    "User",
    "UserRole",
    "UserSession",
    "Address",
    "ContactInfo",
    # Organizations
    "BusinessOrganization",
    "Commission",
    "CommissionType",
    # Families
    "Family",
    "Student",
    # Scheduling
    "Location",
    "Teacher",
    "Term",
    "Camp",
    "Class",
    "ClassType",
    "Frequency",
    "Lesson",
    "DropInClass",
    "DropInLesson",
    "Holiday",
    # Bookings
    "ClassBooking",
    "DropInClassBooking",
    "Trial",
    "WaitlistEntry",
    # Billing
    "Discount",
    "DiscountCategory",
    "DiscountTier",
    "DiscountType",
    "RegistrationFee",
    "Cart",
    "Order",
    "Payment",
    # Policies
    "CustomField",
    "WaiverPolicy",
]
