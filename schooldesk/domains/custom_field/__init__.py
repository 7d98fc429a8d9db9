# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom field domain package."""

from schooldesk.domains.custom_field.service import (
    CustomFieldNotFoundError,
    CustomFieldService,
    CustomFieldServiceError,
)

__all__ = ["CustomFieldNotFoundError", "CustomFieldService", "CustomFieldServiceError"]
