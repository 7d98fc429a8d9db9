# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Registration fee service."""

import logging

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import RegistrationFee
from schooldesk.models.registration_fee import RegistrationFeeResponse

logger = logging.getLogger(__name__)


class RegistrationFeeServiceError(Exception):
    """Base exception for registration fee service errors."""

    pass


class RegistrationFeeNotFoundError(RegistrationFeeServiceError):
    """Raised when a registration fee is not found."""

    pass


class RegistrationFeeService(OwnedResourceService[RegistrationFee, RegistrationFeeResponse]):
    model = RegistrationFee
    response_model = RegistrationFeeResponse
    not_found_error = RegistrationFeeNotFoundError
