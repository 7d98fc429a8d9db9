# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drop-in class, lesson and booking schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.class_ import ScheduleFields, ScheduleResponse, ScheduleUpdateFields
from schooldesk.models.common import ORMModel
from schooldesk.models.student import StudentSummary


class DropInClassCreateRequest(ScheduleFields):
    pass


class DropInClassUpdateRequest(ScheduleUpdateFields):
    pass


class DropInClassSummary(ORMModel):
    id: int
    title: str
    class_type: str


class DropInLessonBrief(ORMModel):
    id: int
    title: str
    date: datetime
    start_time: str
    status: str


class DropInClassResponse(ScheduleResponse):
    pass


class DropInClassDetailResponse(DropInClassResponse):
    lessons: list[DropInLessonBrief] = Field(default_factory=list)


class DropInLessonCreateRequest(BaseModel):
    dropin_class_id: int
    title: str = Field(min_length=1, max_length=255)
    status: str = "scheduled"
    notes: str | None = None
    date: datetime
    start_time: str = Field(min_length=1, max_length=10)
    end_time: str | None = Field(default=None, max_length=10)
    duration: int = Field(gt=0)


class DropInLessonUpdateRequest(BaseModel):
    dropin_class_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    status: str | None = None
    notes: str | None = None
    date: datetime | None = None
    start_time: str | None = Field(default=None, min_length=1, max_length=10)
    end_time: str | None = Field(default=None, max_length=10)
    duration: int | None = Field(default=None, gt=0)


class DropInLessonResponse(ORMModel):
    id: int
    dropin_class_id: int
    title: str
    status: str
    notes: str | None = None
    date: datetime
    start_time: str
    end_time: str | None = None
    duration: int
    dropin_class: DropInClassSummary | None = None
    created_at: datetime
    updated_at: datetime


class DropInBookingCreateRequest(BaseModel):
    dropin_class_id: int
    student_id: int
    enrollment_date: datetime | None = None
    payment_option: str | None = Field(default=None, max_length=50)
    status: str = Field(default="Active", max_length=20)


class DropInBookingUpdateRequest(BaseModel):
    dropin_class_id: int | None = None
    student_id: int | None = None
    enrollment_date: datetime | None = None
    payment_option: str | None = Field(default=None, max_length=50)
    status: str | None = Field(default=None, max_length=20)


class DropInBookingResponse(ORMModel):
    id: int
    user_id: str
    dropin_class_id: int
    student_id: int
    enrollment_date: datetime
    payment_option: str | None = None
    status: str
    dropin_class: DropInClassSummary | None = None
    student: StudentSummary | None = None
    created_at: datetime
    updated_at: datetime
