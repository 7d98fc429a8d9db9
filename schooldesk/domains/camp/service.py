# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Camp service."""

import logging

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Camp
from schooldesk.models.camp import CampResponse

logger = logging.getLogger(__name__)


class CampServiceError(Exception):
    """Base exception for camp service errors."""

    pass


class CampNotFoundError(CampServiceError):
    """Raised when a camp is not found."""

    pass


class CampService(OwnedResourceService[Camp, CampResponse]):
    model = Camp
    response_model = CampResponse
    not_found_error = CampNotFoundError
