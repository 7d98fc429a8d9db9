# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class request/response schemas.

The schedule block is shared with drop-in classes (see dropin.py).
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel
from schooldesk.models.location import LocationSummary
from schooldesk.models.teacher import TeacherSummary
from schooldesk.models.term import TermSummary

FrequencyValue = Literal["DAILY", "WEEKLY", "MONTHLY"]
ClassTypeValue = Literal["ONGOING_CLASS", "DROP_CLASS"]


class ScheduleFields(BaseModel):
    """Required schedule fields for creating a class."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    start_date: datetime
    end_date: datetime
    frequency: FrequencyValue
    recurring_day: str | None = None
    start_time_of_class: str = Field(min_length=1, max_length=10, examples=["16:30"])
    end_time_of_class: str | None = Field(default=None, max_length=10)
    duration: int = Field(gt=0, description="Duration in minutes")
    pricing_per_lesson: float = Field(ge=0)
    class_image: str | None = None
    location_id: int | None = None
    teacher_id: int | None = None
    minimum_age: int | None = Field(default=None, ge=0)
    maximum_age: int | None = Field(default=None, ge=0)
    class_color: str | None = None
    limit_capacity: bool = False
    capacity: int | None = Field(default=None, ge=0)
    allow_portal_booking: bool = True
    family_portal_trial: bool = False
    global_class_discount: bool = False
    sibling_discount: bool = False


class ScheduleUpdateFields(BaseModel):
    """Optional schedule fields for partial updates."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    frequency: FrequencyValue | None = None
    recurring_day: str | None = None
    start_time_of_class: str | None = Field(default=None, min_length=1, max_length=10)
    end_time_of_class: str | None = Field(default=None, max_length=10)
    duration: int | None = Field(default=None, gt=0)
    pricing_per_lesson: float | None = Field(default=None, ge=0)
    class_image: str | None = None
    location_id: int | None = None
    teacher_id: int | None = None
    minimum_age: int | None = Field(default=None, ge=0)
    maximum_age: int | None = Field(default=None, ge=0)
    class_color: str | None = None
    limit_capacity: bool | None = None
    capacity: int | None = Field(default=None, ge=0)
    allow_portal_booking: bool | None = None
    family_portal_trial: bool | None = None
    global_class_discount: bool | None = None
    sibling_discount: bool | None = None


class ClassCreateRequest(ScheduleFields):
    class_type: ClassTypeValue = "ONGOING_CLASS"
    term_id: int | None = None


class ClassUpdateRequest(ScheduleUpdateFields):
    class_type: ClassTypeValue | None = None
    term_id: int | None = None


class ClassSummary(ORMModel):
    id: int
    title: str
    class_type: str


class LessonBrief(ORMModel):
    id: int
    title: str
    date: datetime
    start_time: str
    status: str


class ScheduleResponse(ORMModel):
    id: int
    user_id: str
    title: str
    description: str | None = None
    start_date: datetime
    end_date: datetime
    frequency: str
    recurring_day: str | None = None
    start_time_of_class: str
    end_time_of_class: str | None = None
    duration: int
    pricing_per_lesson: float
    class_image: str | None = None
    location_id: int | None = None
    teacher_id: int | None = None
    minimum_age: int | None = None
    maximum_age: int | None = None
    class_color: str | None = None
    limit_capacity: bool
    capacity: int | None = None
    allow_portal_booking: bool
    family_portal_trial: bool
    global_class_discount: bool
    sibling_discount: bool
    class_type: str
    location: LocationSummary | None = None
    teacher: TeacherSummary | None = None
    created_at: datetime
    updated_at: datetime


class ClassResponse(ScheduleResponse):
    term_id: int | None = None
    term: TermSummary | None = None


class ClassDetailResponse(ClassResponse):
    lessons: list[LessonBrief] = Field(default_factory=list)
