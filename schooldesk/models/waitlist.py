# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.class_ import ClassSummary
from schooldesk.models.common import ORMModel
from schooldesk.models.student import StudentSummary


class WaitlistCreateRequest(BaseModel):
    student_id: int
    class_id: int | None = None
    term_id: int | None = None


class WaitlistUpdateRequest(BaseModel):
    student_id: int | None = None
    class_id: int | None = None
    term_id: int | None = None


class WaitlistResponse(ORMModel):
    id: int
    user_id: str
    student_id: int
    class_id: int | None = None
    term_id: int | None = None
    class_: ClassSummary | None = Field(default=None, serialization_alias="class")
    student: StudentSummary | None = None
    created_at: datetime
    updated_at: datetime
