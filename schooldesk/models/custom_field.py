# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom registration field request/response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class CustomFieldCreateRequest(BaseModel):
    applies_to: str = Field(min_length=1, max_length=50, description="Form the question appears on")
    question: str = Field(min_length=1)
    answer_type: str = Field(min_length=1, max_length=50, description="e.g. text, select, checkbox")
    options: Any | None = Field(default=None, description="Choices for select-style answers")
    is_required: bool = False
    is_active: bool = True


class CustomFieldUpdateRequest(BaseModel):
    applies_to: str | None = Field(default=None, min_length=1, max_length=50)
    question: str | None = Field(default=None, min_length=1)
    answer_type: str | None = Field(default=None, min_length=1, max_length=50)
    options: Any | None = None
    is_required: bool | None = None
    is_active: bool | None = None


class CustomFieldResponse(ORMModel):
    id: int
    user_id: str
    applies_to: str
    question: str
    answer_type: str
    options: Any | None = None
    is_required: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
