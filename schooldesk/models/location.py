# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Location request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class LocationCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=500)


class LocationUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, min_length=1, max_length=500)


class LocationSummary(ORMModel):
    id: int
    name: str
    address: str


class LocationResponse(LocationSummary):
    created_at: datetime
    updated_at: datetime
