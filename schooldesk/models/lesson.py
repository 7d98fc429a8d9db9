# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lesson request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.class_ import ClassSummary
from schooldesk.models.common import ORMModel


class LessonCreateRequest(BaseModel):
    class_id: int
    title: str = Field(min_length=1, max_length=255)
    is_trial: bool = False
    status: str = "scheduled"
    attendance_id: str | None = None
    notes: str | None = None
    date: datetime
    start_time: str = Field(min_length=1, max_length=10)
    end_time: str | None = Field(default=None, max_length=10)
    duration: int = Field(gt=0)


class LessonUpdateRequest(BaseModel):
    class_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    is_trial: bool | None = None
    status: str | None = None
    attendance_id: str | None = None
    notes: str | None = None
    date: datetime | None = None
    start_time: str | None = Field(default=None, min_length=1, max_length=10)
    end_time: str | None = Field(default=None, max_length=10)
    duration: int | None = Field(default=None, gt=0)


class TrialBrief(ORMModel):
    id: int
    student_id: int
    status: str


class LessonResponse(ORMModel):
    id: int
    class_id: int
    title: str
    is_trial: bool
    status: str
    attendance_id: str | None = None
    notes: str | None = None
    date: datetime
    start_time: str
    end_time: str | None = None
    duration: int
    class_: ClassSummary | None = Field(default=None, serialization_alias="class")
    created_at: datetime
    updated_at: datetime


class LessonDetailResponse(LessonResponse):
    trials: list[TrialBrief] = Field(default_factory=list)
