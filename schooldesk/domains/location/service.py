# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Location service: venues where classes are held."""

import logging

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Location
from schooldesk.models.location import LocationResponse

logger = logging.getLogger(__name__)


class LocationServiceError(Exception):
    """Base exception for location service errors."""

    pass


class LocationNotFoundError(LocationServiceError):
    """Raised when a location is not found."""

    pass


class LocationService(OwnedResourceService[Location, LocationResponse]):
    """Owner-scoped CRUD for locations."""

    model = Location
    response_model = LocationResponse
    not_found_error = LocationNotFoundError
