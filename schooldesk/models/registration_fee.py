# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Registration fee request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class RegistrationFeeCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    price_per_student: float = Field(ge=0)
    max_per_family: float | None = Field(default=None, ge=0)
    renewal_type: str = Field(min_length=1, max_length=50)
    renewal_date: datetime | None = None
    is_active: bool = True


class RegistrationFeeUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    price_per_student: float | None = Field(default=None, ge=0)
    max_per_family: float | None = Field(default=None, ge=0)
    renewal_type: str | None = Field(default=None, min_length=1, max_length=50)
    renewal_date: datetime | None = None
    is_active: bool | None = None


class RegistrationFeeResponse(ORMModel):
    id: int
    user_id: str
    title: str
    price_per_student: float
    max_per_family: float | None = None
    renewal_type: str
    renewal_date: datetime | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
