# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic request/response schemas for the REST API.

One module per resource; shared envelope types live in ``common``.
"""

from schooldesk.models.common import (
    ApiResponse,
    DeletedResponse,
    ErrorResponse,
    PaginatedResponse,
    Pagination,
)

__all__ = [
    "ApiResponse",
    "DeletedResponse",
    "ErrorResponse",
    "PaginatedResponse",
    "Pagination",
]
