# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Term request/response schemas.

Billing options are accepted as a list of tagged records and stored as-is;
no consistency check is made between dates and frequencies.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from schooldesk.models.common import ORMModel

PricingType = Literal[
    "By Lesson",
    "By Month",
    "By Season",
    "Number of Classes",
    "Number of Hours",
]

BillingOptionType = Literal["Upfront", "Monthly", "Every two weeks", "Weekly", "Custom"]


class BillingOption(BaseModel):
    """One way a family may pay for the term."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    type: BillingOptionType
    payment_date: str | None = None
    frequency: str | None = None
    start_date: str | None = None
    custom_name: str | None = None
    custom_description: str | None = None
    custom_frequency: str | None = None
    custom_start_date: str | None = None


class SeasonSpecificFee(BaseModel):
    name: str
    amount: float = Field(ge=0)
    max_per_family: float | None = Field(default=None, ge=0)


class TermCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    start_date: datetime
    end_date: datetime
    registration_fee: bool = False
    season_specific_fee: bool = False
    pricing_type: PricingType | None = None
    billing_options: list[BillingOption] | None = None
    pricing: dict[str, Any] | None = None
    season_specific_fees: list[SeasonSpecificFee] | None = None


class TermUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    start_date: datetime | None = None
    end_date: datetime | None = None
    registration_fee: bool | None = None
    season_specific_fee: bool | None = None
    pricing_type: PricingType | None = None
    billing_options: list[BillingOption] | None = None
    pricing: dict[str, Any] | None = None
    season_specific_fees: list[SeasonSpecificFee] | None = None


class TermSummary(ORMModel):
    id: int
    title: str
    start_date: datetime
    end_date: datetime


class TermResponse(TermSummary):
    user_id: str
    registration_fee: bool
    season_specific_fee: bool
    pricing_type: str | None = None
    billing_options: list[dict[str, Any]] | None = Field(
        default=None,
        validation_alias=AliasChoices("payment_options", "billing_options"),
    )
    pricing: dict[str, Any] | None = None
    season_specific_fees: list[dict[str, Any]] | None = None
    created_at: datetime
    updated_at: datetime
