# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Location domain package."""

from schooldesk.domains.location.service import (
    LocationNotFoundError,
    LocationService,
    LocationServiceError,
)

__all__ = ["LocationNotFoundError", "LocationService", "LocationServiceError"]
