# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom registration form fields."""

import logging

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import CustomField
from schooldesk.models.custom_field import CustomFieldResponse

logger = logging.getLogger(__name__)


class CustomFieldServiceError(Exception):
    """Base exception for custom field service errors."""

    pass


class CustomFieldNotFoundError(CustomFieldServiceError):
    """Raised when a custom field is not found."""

    pass


class CustomFieldService(OwnedResourceService[CustomField, CustomFieldResponse]):
    """Owner-scoped CRUD for custom fields.

    list() accepts applies_to and is_active filters.
    """

    model = CustomField
    response_model = CustomFieldResponse
    not_found_error = CustomFieldNotFoundError
