# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Discount and discount tier schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from schooldesk.models.common import ORMModel
from schooldesk.utils.datetime import ensure_utc

DiscountTypeValue = Literal["PERCENTAGE", "FIXED"]
DiscountCategoryValue = Literal["MULTIPLE_STUDENT", "CLASS_BY_STUDENT", "CLASS_BY_FAMILY"]


class DiscountTierRequest(BaseModel):
    students_per_family: int | None = Field(default=None, ge=1)
    classes_per_student: int | None = Field(default=None, ge=1)
    percentage_off: float = Field(ge=0, le=100)


class DiscountTierResponse(ORMModel):
    id: int
    students_per_family: int | None = None
    classes_per_student: int | None = None
    percentage_off: float


class DiscountCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    discount_type: DiscountTypeValue
    discount_value: float = Field(ge=0)
    applies_to: str = Field(min_length=1, max_length=50)
    applicable_class_ids: list[int] | None = None
    applicable_class_types: list[str] | None = None
    min_enrollment_count: int | None = Field(default=None, ge=0)
    sibling_config: dict[str, Any] | None = None
    valid_from: datetime
    valid_until: datetime
    max_uses_total: int | None = Field(default=None, ge=0)
    max_uses_per_family: int | None = Field(default=None, ge=0)
    times_used: int = Field(default=0, ge=0)
    is_active: bool = True
    category: DiscountCategoryValue | None = None
    tiers: list[DiscountTierRequest] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_validity_window(self) -> "DiscountCreateRequest":
        if ensure_utc(self.valid_until) < ensure_utc(self.valid_from):
            raise ValueError("valid_until must not be before valid_from")
        return self


class DiscountUpdateRequest(BaseModel):
    """Partial update. Sending ``tiers`` replaces the existing tiers."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    discount_type: DiscountTypeValue | None = None
    discount_value: float | None = Field(default=None, ge=0)
    applies_to: str | None = Field(default=None, min_length=1, max_length=50)
    applicable_class_ids: list[int] | None = None
    applicable_class_types: list[str] | None = None
    min_enrollment_count: int | None = Field(default=None, ge=0)
    sibling_config: dict[str, Any] | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    max_uses_total: int | None = Field(default=None, ge=0)
    max_uses_per_family: int | None = Field(default=None, ge=0)
    times_used: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
    category: DiscountCategoryValue | None = None
    tiers: list[DiscountTierRequest] | None = None


class DiscountResponse(ORMModel):
    id: int
    user_id: str | None = None
    title: str
    description: str | None = None
    discount_type: str
    discount_value: float
    applies_to: str
    applicable_class_ids: list[Any] | None = None
    applicable_class_types: list[Any] | None = None
    min_enrollment_count: int | None = None
    sibling_config: dict[str, Any] | None = None
    valid_from: datetime
    valid_until: datetime
    max_uses_total: int | None = None
    max_uses_per_family: int | None = None
    times_used: int
    is_active: bool
    category: str | None = None
    tiers: list[DiscountTierResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
