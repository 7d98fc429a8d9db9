# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trial lesson schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.class_ import ClassSummary
from schooldesk.models.common import ORMModel
from schooldesk.models.student import StudentSummary


class TrialCreateRequest(BaseModel):
    class_id: int
    student_id: int
    term_id: int | None = None
    lesson_id: int | None = None
    date: datetime | None = None
    status: str = Field(default="pending", max_length=20)
    notes: str | None = None


class TrialUpdateRequest(BaseModel):
    class_id: int | None = None
    student_id: int | None = None
    term_id: int | None = None
    lesson_id: int | None = None
    date: datetime | None = None
    status: str | None = Field(default=None, max_length=20)
    notes: str | None = None


class TrialResponse(ORMModel):
    id: int
    user_id: str
    class_id: int
    term_id: int | None = None
    student_id: int
    lesson_id: int | None = None
    date: datetime | None = None
    status: str
    notes: str | None = None
    class_: ClassSummary | None = Field(default=None, serialization_alias="class")
    student: StudentSummary | None = None
    created_at: datetime
    updated_at: datetime
