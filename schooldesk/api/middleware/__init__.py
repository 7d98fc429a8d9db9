# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API middleware package."""

from schooldesk.api.middleware.auth import PUBLIC_PATHS, AuthMiddleware
from schooldesk.api.middleware.rate_limit import (
    build_limiter,
    get_client_identifier,
    rate_limit_exceeded_handler,
)

__all__ = [
    "AuthMiddleware",
    "PUBLIC_PATHS",
    "build_limiter",
    "get_client_identifier",
    "rate_limit_exceeded_handler",
]
