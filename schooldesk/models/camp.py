# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Camp request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class CampCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    start_date: datetime
    end_date: datetime | None = None
    allow_parents_to_book_individual_days: bool = False
    allow_parents_to_book_half_day_session: bool = False
    offer_early_dropoff: bool = False
    offer_late_pickup: bool = False


class CampUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    start_date: datetime | None = None
    end_date: datetime | None = None
    allow_parents_to_book_individual_days: bool | None = None
    allow_parents_to_book_half_day_session: bool | None = None
    offer_early_dropoff: bool | None = None
    offer_late_pickup: bool | None = None


class CampResponse(ORMModel):
    id: int
    user_id: str
    title: str
    start_date: datetime
    end_date: datetime | None = None
    allow_parents_to_book_individual_days: bool
    allow_parents_to_book_half_day_session: bool
    offer_early_dropoff: bool
    offer_late_pickup: bool
    created_at: datetime
    updated_at: datetime
