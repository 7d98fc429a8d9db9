# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for SchoolDesk.

All timestamps are stored in UTC and all Python datetimes handled by the
services are timezone-aware. SQLite (used in tests) hands back naive values,
so comparisons go through ensure_utc().

Usage:
    from schooldesk.utils.datetime import utc_now

    created_at = mapped_column(DateTime(timezone=True), default=utc_now)
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None. Naive values are assumed UTC.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def is_expired(expiry: datetime | None) -> bool:
    """Check if a datetime has passed.

    Args:
        expiry: The expiry datetime to check.

    Returns:
        True if expired or expiry is None, False otherwise.
    """
    if expiry is None:
        return True

    return utc_now() > ensure_utc(expiry)


def calculate_age(date_of_birth: date | datetime | None, today: date | None = None) -> int | None:
    """Calculate age in whole years.

    Args:
        date_of_birth: Birth date, or None when unknown.
        today: Reference date. Defaults to the current UTC date.

    Returns:
        Age in years, or None when date_of_birth is None.

    Example:
        >>> calculate_age(date(2015, 6, 1), today=date(2025, 5, 31))
        9
    """
    if date_of_birth is None:
        return None

    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()
    today = today or utc_now().date()

    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
