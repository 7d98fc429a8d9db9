# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Holiday domain package."""

from schooldesk.domains.holiday.service import (
    HolidayNotFoundError,
    HolidayService,
    HolidayServiceError,
    InvalidHolidayRangeError,
)

__all__ = [
    "HolidayNotFoundError",
    "HolidayService",
    "HolidayServiceError",
    "InvalidHolidayRangeError",
]
