# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class enrollment (booking) schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from schooldesk.models.class_ import ClassSummary
from schooldesk.models.common import ORMModel
from schooldesk.models.student import StudentSummary
from schooldesk.utils.datetime import ensure_utc


class EnrollmentCreateRequest(BaseModel):
    class_id: int
    student_id: int
    term_id: int | None = None
    enrollment_start_date: datetime
    enrollment_end_date: datetime
    payment_option: str = Field(min_length=1, max_length=50)
    status: str = Field(default="Active", max_length=20)

    @model_validator(mode="after")
    def check_dates(self) -> "EnrollmentCreateRequest":
        if ensure_utc(self.enrollment_end_date) < ensure_utc(self.enrollment_start_date):
            raise ValueError("enrollment_end_date must not be before enrollment_start_date")
        return self


class EnrollmentUpdateRequest(BaseModel):
    class_id: int | None = None
    student_id: int | None = None
    term_id: int | None = None
    enrollment_start_date: datetime | None = None
    enrollment_end_date: datetime | None = None
    payment_option: str | None = Field(default=None, min_length=1, max_length=50)
    status: str | None = Field(default=None, max_length=20)


class EnrollmentResponse(ORMModel):
    id: int
    user_id: str
    class_id: int
    term_id: int | None = None
    student_id: int
    enrollment_start_date: datetime
    enrollment_end_date: datetime
    payment_option: str
    status: str
    class_: ClassSummary | None = Field(default=None, serialization_alias="class")
    student: StudentSummary | None = None
    created_at: datetime
    updated_at: datetime
