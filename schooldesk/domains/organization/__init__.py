# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization domain package."""

from schooldesk.domains.organization.service import (
    OrganizationService,
    OrganizationServiceError,
    UserNotFoundError,
)

__all__ = ["OrganizationService", "OrganizationServiceError", "UserNotFoundError"]
