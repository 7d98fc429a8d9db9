# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Business domain package."""

from schooldesk.domains.business.service import (
    BusinessNotFoundError,
    BusinessService,
    BusinessServiceError,
    EmailAlreadyUsedError,
    parse_address,
)

__all__ = [
    "BusinessNotFoundError",
    "BusinessService",
    "BusinessServiceError",
    "EmailAlreadyUsedError",
    "parse_address",
]
