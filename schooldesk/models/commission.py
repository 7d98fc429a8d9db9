# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Commission rule schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from schooldesk.models.business import CommissionTypeValue
from schooldesk.models.common import ORMModel


class CommissionCreateBase(BaseModel):
    commission_type: CommissionTypeValue
    commission_value: float = Field(ge=0)
    country: str | None = Field(default=None, max_length=3)
    currency: str | None = Field(default=None, max_length=3)
    effective_from: datetime | None = None
    applies_to: str | None = Field(default=None, max_length=50)
    min_transaction_amt: float | None = Field(default=None, ge=0)
    max_transaction_amt: float | None = None
    tier_config: dict[str, Any] | None = None


class GlobalCommissionCreateRequest(CommissionCreateBase):
    pass


class OrganizationCommissionCreateRequest(CommissionCreateBase):
    business_id: int


class CommissionUpdateRequest(BaseModel):
    commission_type: CommissionTypeValue | None = None
    commission_value: float | None = Field(default=None, ge=0)
    country: str | None = Field(default=None, max_length=3)
    currency: str | None = Field(default=None, max_length=3)
    effective_from: datetime | None = None
    applies_to: str | None = Field(default=None, max_length=50)
    min_transaction_amt: float | None = Field(default=None, ge=0)
    max_transaction_amt: float | None = None
    tier_config: dict[str, Any] | None = None
    is_active: bool | None = None


class CommissionResponse(ORMModel):
    id: int
    business_id: int | None = None
    business_name: str | None = None
    effective_from: datetime
    country: str
    currency: str
    commission_type: str
    commission_value: float
    tier_config: dict[str, Any] | None = None
    platform_commission: float
    platform_amount: float
    applies_to: str
    min_transaction_amt: float | None = None
    max_transaction_amt: float | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class EffectiveCommissionResponse(CommissionResponse):
    is_global: bool = False
