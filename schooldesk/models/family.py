# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Family request/response schemas."""

from datetime import date as Date, datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from schooldesk.models.common import ORMModel

FamilyStatus = Literal["ACTIVE", "SUSPENDED", "INACTIVE"]


class FamilyCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    phone_country_code: str | None = Field(default=None, max_length=10)
    phone_number: str | None = Field(default=None, max_length=50)
    send_portal_invitation: bool = False
    family_name: str | None = Field(default=None, max_length=255)


class FamilyRecord(ORMModel):
    id: int
    organization_id: str
    user_id: str
    family_name: str | None = None
    primary_parent_first_name: str
    primary_parent_last_name: str
    primary_parent_email: str
    primary_parent_phone_country: str | None = None
    primary_parent_phone_number: str | None = None
    send_portal_invitation: bool
    status: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class FamilyAccount(ORMModel):
    """Family login account. Never carries the password hash."""

    id: str
    email: str
    name: str | None = None
    phone_no: str | None = None
    role: str | None = None
    send_invitation_on_signup: bool | None = None


class FamilyCreatedResponse(BaseModel):
    family: FamilyRecord
    user: FamilyAccount


class FamilyListItem(BaseModel):
    id: int
    family_name: str
    email: str
    phone: str
    students: int
    status: str
    created_at: datetime


class FamilyContactInfo(BaseModel):
    email: str
    phone: str
    linked_business: str


class AddressData(ORMModel):
    street: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""
    country: str = ""


class EmergencyContact(BaseModel):
    name: str
    relation: str | None = None
    phone: str | None = None
    email: str | None = None


class FamilyDetailResponse(BaseModel):
    id: int
    family_name: str | None = None
    primary_parent_first_name: str
    primary_parent_last_name: str
    primary_parent_email: str
    primary_parent_phone_country: str | None = None
    primary_parent_phone_number: str | None = None
    status: str
    notes: str | None = None
    member_since: datetime
    contact_info: FamilyContactInfo
    address: AddressData | None = None
    emergency_contact: EmergencyContact | None = None
    user: FamilyAccount


class AddressUpdate(BaseModel):
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zipcode: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, max_length=100)


class EmergencyContactUpdate(BaseModel):
    relation: str | None = Field(default=None, max_length=100)
    phone_no: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    use_in_emergency: bool = True


class FamilyUpdateRequest(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone_country_code: str | None = Field(default=None, max_length=10)
    phone_number: str | None = Field(default=None, max_length=50)
    family_name: str | None = Field(default=None, max_length=255)
    status: FamilyStatus | None = None
    notes: str | None = None
    address: AddressUpdate | None = None
    emergency_contact: EmergencyContactUpdate | None = None


class FamilyStatusRequest(BaseModel):
    status: FamilyStatus


class EnrolledClass(BaseModel):
    id: int
    title: str
    class_type: str


class FamilyChild(BaseModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: datetime | None = None
    age: int | None = None
    overall_status: Literal["Enrolled", "Not Enrolled"]
    enrolled_classes: list[EnrolledClass] = Field(default_factory=list)


class Invoice(BaseModel):
    invoice_id: str
    date: Date
    description: str
    amount: float
    status: Literal["Paid", "Pending"]


class PaymentSummary(BaseModel):
    total_paid: float = 0
    total_invoices: int = 0
    due: float = 0


class FamilyPaymentsResponse(BaseModel):
    summary: PaymentSummary
    invoices: list[Invoice] = Field(default_factory=list)
