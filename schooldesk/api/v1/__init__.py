# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Each module provides a FastAPI router for one resource.

Modules:
    business: Platform admin management of schools.
    commissions: Platform admin commission rules.
    organization: The signed-in owner's organization profile.
    families: Families, their children and payments.
    students: Students of the organization's families.
    classes: Ongoing classes.
    terms: Terms grouping classes.
    camps: Camps.
    enrollments: Student enrollments into classes.
    trials: Trial lessons.
    waitlist: Class waitlist entries.
    discounts: Discounts and their tiers.
    registration_fees: Registration fees.
    custom_fields: Custom registration fields.
    holidays: Holidays.
    locations: Class locations.
    waiver_policies: Waiver policies.
    lessons: Dated lessons of classes.
    dropin_classes: Drop-in classes.
    dropin_lessons: Lessons of drop-in classes.
    dropin_bookings: Drop-in class bookings.
"""

from fastapi import APIRouter

from schooldesk.api.v1 import (
    business,
    camps,
    classes,
    commissions,
    custom_fields,
    discounts,
    dropin_bookings,
    dropin_classes,
    dropin_lessons,
    enrollments,
    families,
    holidays,
    lessons,
    locations,
    organization,
    registration_fees,
    students,
    terms,
    trials,
    waitlist,
    waiver_policies,
)

router = APIRouter(prefix="/api/v1")

# Platform administration
router.include_router(business.router, prefix="/business", tags=["Business"])
router.include_router(commissions.router, prefix="/commissions", tags=["Commissions"])

# Organization resources
router.include_router(organization.router, prefix="/organization", tags=["Organization"])
router.include_router(families.router, prefix="/families", tags=["Families"])
router.include_router(students.router, prefix="/students", tags=["Students"])
router.include_router(classes.router, prefix="/classes", tags=["Classes"])
router.include_router(terms.router, prefix="/terms", tags=["Terms"])
router.include_router(camps.router, prefix="/camps", tags=["Camps"])
router.include_router(enrollments.router, prefix="/enrollments", tags=["Enrollments"])
router.include_router(trials.router, prefix="/trials", tags=["Trials"])
router.include_router(waitlist.router, prefix="/waitlist", tags=["Waitlist"])
router.include_router(discounts.router, prefix="/discounts", tags=["Discounts"])
router.include_router(registration_fees.router, prefix="/registration-fees", tags=["Registration Fees"])
router.include_router(custom_fields.router, prefix="/custom-fields", tags=["Custom Fields"])
router.include_router(holidays.router, prefix="/holidays", tags=["Holidays"])
router.include_router(locations.router, prefix="/locations", tags=["Locations"])
router.include_router(waiver_policies.router, prefix="/waivers-policies", tags=["Waiver Policies"])

# Scheduling
router.include_router(lessons.router, prefix="/lessons", tags=["Lessons"])
router.include_router(dropin_classes.router, prefix="/dropin-classes", tags=["Drop-in Classes"])
router.include_router(dropin_lessons.router, prefix="/dropin-lessons", tags=["Drop-in Lessons"])
router.include_router(dropin_bookings.router, prefix="/dropin-bookings", tags=["Drop-in Bookings"])

__all__ = ["router"]
