# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Registration fee domain package."""

from schooldesk.domains.registration_fee.service import (
    RegistrationFeeNotFoundError,
    RegistrationFeeService,
    RegistrationFeeServiceError,
)

__all__ = [
    "RegistrationFeeNotFoundError",
    "RegistrationFeeService",
    "RegistrationFeeServiceError",
]
