# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class StudentMeasurements(BaseModel):
    """Uniform sizing fields, all optional."""

    height: float | None = Field(default=None, ge=0)
    neck: float | None = Field(default=None, ge=0)
    girth: float | None = Field(default=None, ge=0)
    chest: float | None = Field(default=None, ge=0)
    bra_size: str | None = Field(default=None, max_length=20)
    waist: float | None = Field(default=None, ge=0)
    hips: float | None = Field(default=None, ge=0)
    inseam: float | None = Field(default=None, ge=0)
    shoe_size: str | None = Field(default=None, max_length=20)
    tshirt_size: str | None = Field(default=None, max_length=20)


class StudentCreateRequest(StudentMeasurements):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    date_of_birth: datetime | None = None
    gender: str | None = Field(default=None, max_length=20)
    medical_info: str | None = None
    photo_video_consent: bool = False


class StudentUpdateRequest(StudentMeasurements):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    date_of_birth: datetime | None = None
    gender: str | None = Field(default=None, max_length=20)
    medical_info: str | None = None
    photo_video_consent: bool | None = None


class StudentSummary(ORMModel):
    id: int
    family_id: int
    first_name: str
    last_name: str


class StudentResponse(StudentSummary):
    date_of_birth: datetime | None = None
    gender: str | None = None
    medical_info: str | None = None
    photo_video_consent: bool
    height: float | None = None
    neck: float | None = None
    girth: float | None = None
    chest: float | None = None
    bra_size: str | None = None
    waist: float | None = None
    hips: float | None = None
    inseam: float | None = None
    shoe_size: str | None = None
    tshirt_size: str | None = None
    created_at: datetime
    updated_at: datetime
