# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Business (tenant organization) schemas used by platform admins."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, model_validator

CommissionTypeValue = Literal["PERCENTAGE", "FIXED", "TIERED"]
BusinessStatus = Literal["Active", "Inactive"]


class BusinessListItem(BaseModel):
    id: int
    school_name: str
    location: str | None = None
    ownership: str | None = None
    registered: datetime
    status: BusinessStatus


class BusinessOwner(BaseModel):
    name: str | None = None
    email: str
    phone: str | None = None
    address: str | None = None


class BusinessContactInfo(BaseModel):
    email: str
    phone: str
    address: str | None = None
    website: str | None = None


class BusinessStatistics(BaseModel):
    total_students: int = 0
    active_classes: int = 0
    total_revenue: float = 0
    earned_commission: float = 0


class BusinessCommission(BaseModel):
    commission_type: str
    commission_value: float | None = None
    is_global: bool = False


class BusinessDetailResponse(BaseModel):
    """Business detail as shown on the admin dashboard.

    user_id is the owner's account id, which is also the organization id
    families and classes are scoped by.
    """

    id: int
    school_name: str
    email: str
    phone: str
    address: str | None = None
    website: str | None = None
    status: BusinessStatus
    registered: datetime
    user_id: str
    owner: BusinessOwner
    statistics: BusinessStatistics
    contact_info: BusinessContactInfo
    commission: BusinessCommission | None = None


class BusinessCreateRequest(BaseModel):
    school_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    address: str | None = Field(default=None, max_length=500)
    website: str | None = Field(default=None, max_length=255)
    owner_name: str = Field(min_length=1, max_length=255)
    owner_email: EmailStr
    owner_phone: str = Field(min_length=1, max_length=50)
    owner_address: str | None = Field(
        default=None,
        description="Comma separated: street, city, state, zip, country",
    )
    commission_type: CommissionTypeValue | None = None
    commission_value: float | None = Field(default=None, ge=0)
    status: bool = True


class BusinessCreatedResponse(BaseModel):
    id: int
    school_name: str
    email: str
    phone: str
    status: BusinessStatus
    address: str | None = None
    owner: BusinessOwner
    commission: BusinessCommission | None = None


class BusinessUpdateRequest(BaseModel):
    school_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    address: str | None = Field(default=None, max_length=500)
    website: str | None = Field(default=None, max_length=255)
    status: bool | None = None


class BusinessUpdatedResponse(BaseModel):
    id: int
    school_name: str
    email: str
    phone: str
    website: str | None = None
    status: BusinessStatus


class BusinessCommissionUpdateRequest(BaseModel):
    commission_type: CommissionTypeValue
    commission_value: float | None = Field(default=None, ge=0)
    country: str | None = Field(default=None, max_length=3)
    currency: str | None = Field(default=None, max_length=3)

    @model_validator(mode="after")
    def check_value(self) -> "BusinessCommissionUpdateRequest":
        if self.commission_type != "TIERED" and self.commission_value is None:
            raise ValueError("commission_value is required for PERCENTAGE and FIXED")
        return self


class BusinessStatusRequest(BaseModel):
    status: bool


class BusinessStatusResponse(BaseModel):
    id: int
    status: BusinessStatus


class BusinessStudentItem(BaseModel):
    id: int
    student_name: str
    email: str
    phone: str
    status: str = "Active"
