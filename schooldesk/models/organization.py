# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schemas for the signed-in business owner's organization profile."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from schooldesk.models.common import ORMModel


class OrganizationProfile(ORMModel):
    id: int
    company_name: str
    industry: str
    language: str
    currency: str
    time_zone: str
    website_theme: str
    time_format: str
    start_date_for_weekly_calendar: datetime
    age_cutoff_date: datetime
    logo: str | None = None


class OrganizationResponse(BaseModel):
    organization: OrganizationProfile | None = None


class OrganizationUpdateRequest(BaseModel):
    """Onboarding step that names the organization."""

    phone_no: str = Field(min_length=1, max_length=50)
    organization_name: str = Field(min_length=1, max_length=255)
    industry: str = Field(min_length=1, max_length=100)
    students: int = Field(ge=0, description="Approximate number of students")


class OrganizationUserSummary(ORMModel):
    id: str
    phone_no: str | None = None
    onboarding_stage: str | None = None
    meta: dict[str, Any] | None = None


class OrganizationNameSummary(ORMModel):
    id: int
    company_name: str
    industry: str


class OrganizationUpdateResponse(BaseModel):
    user: OrganizationUserSummary
    organization: OrganizationNameSummary
