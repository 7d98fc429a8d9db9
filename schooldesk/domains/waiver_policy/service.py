# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waiver and policy documents shown to families at registration."""

import logging

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import WaiverPolicy
from schooldesk.models.waiver_policy import WaiverPolicyResponse

logger = logging.getLogger(__name__)


class WaiverPolicyServiceError(Exception):
    """Base exception for waiver policy service errors."""

    pass


class WaiverPolicyNotFoundError(WaiverPolicyServiceError):
    """Raised when a waiver policy is not found."""

    pass


class WaiverPolicyService(OwnedResourceService[WaiverPolicy, WaiverPolicyResponse]):
    model = WaiverPolicy
    response_model = WaiverPolicyResponse
    not_found_error = WaiverPolicyNotFoundError
