# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Holiday service.

Holidays are listed in calendar order so the scheduling UI can walk them
alongside lessons.
"""

import logging
from typing import Any

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Holiday
from schooldesk.models.holiday import HolidayResponse
from schooldesk.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


class HolidayServiceError(Exception):
    """Base exception for holiday service errors."""

    pass


class HolidayNotFoundError(HolidayServiceError):
    """Raised when a holiday is not found."""

    pass


class InvalidHolidayRangeError(HolidayServiceError):
    """Raised when an update would end a holiday before it starts."""

    pass


class HolidayService(OwnedResourceService[Holiday, HolidayResponse]):
    """Owner-scoped CRUD for holidays."""

    model = Holiday
    response_model = HolidayResponse
    not_found_error = HolidayNotFoundError

    def _order_by(self) -> list[Any]:
        return [Holiday.start_date.asc(), Holiday.id.asc()]

    async def _prepare_update(
        self,
        owner_id: str,
        row: Holiday,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        start = ensure_utc(values.get("start_date") or row.start_date)
        end = ensure_utc(values.get("end_date") or row.end_date)
        if end < start:
            raise InvalidHolidayRangeError("end_date must not be before start_date")
        return values
