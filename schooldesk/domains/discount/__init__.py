# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Discount domain package."""

from schooldesk.domains.discount.service import (
    DiscountNotFoundError,
    DiscountService,
    DiscountServiceError,
    InvalidDiscountWindowError,
    SharedDiscountReadOnlyError,
)

__all__ = [
    "DiscountNotFoundError",
    "DiscountService",
    "DiscountServiceError",
    "InvalidDiscountWindowError",
    "SharedDiscountReadOnlyError",
]
