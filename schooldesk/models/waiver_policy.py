# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waiver policy request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class WaiverPolicyCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    permission: str = Field(min_length=1, max_length=50)


class WaiverPolicyUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    permission: str | None = Field(default=None, min_length=1, max_length=50)


class WaiverPolicyResponse(ORMModel):
    id: int
    user_id: str
    title: str
    description: str
    permission: str
    created_at: datetime
    updated_at: datetime
