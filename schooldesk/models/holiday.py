# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Holiday request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from schooldesk.models.common import ORMModel
from schooldesk.utils.datetime import ensure_utc


class HolidayCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    is_recurring: bool = False
    affects_class: bool = False
    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def check_range(self) -> "HolidayCreateRequest":
        if ensure_utc(self.end_date) < ensure_utc(self.start_date):
            raise ValueError("end_date must not be before start_date")
        return self


class HolidayUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    is_recurring: bool | None = None
    affects_class: bool | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class HolidayResponse(ORMModel):
    id: int
    user_id: str
    name: str
    is_recurring: bool
    affects_class: bool
    start_date: datetime
    end_date: datetime
    created_at: datetime
    updated_at: datetime
