# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Commission domain package."""

from schooldesk.domains.commission.service import (
    BusinessNotFoundError,
    CommissionNotFoundError,
    CommissionService,
    CommissionServiceError,
    calculate_commission_amount,
    normalize_country,
)

__all__ = [
    "BusinessNotFoundError",
    "CommissionNotFoundError",
    "CommissionService",
    "CommissionServiceError",
    "calculate_commission_amount",
    "normalize_country",
]
