# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Term service.

Billing options arrive as ``billing_options`` and are persisted unchanged
in the ``payment_options`` JSON column.
"""

import logging
from typing import Any

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Term
from schooldesk.models.term import TermResponse

logger = logging.getLogger(__name__)


class TermServiceError(Exception):
    """Base exception for term service errors."""

    pass


class TermNotFoundError(TermServiceError):
    """Raised when a term is not found."""

    pass


def _to_columns(values: dict[str, Any]) -> dict[str, Any]:
    if "billing_options" in values:
        values["payment_options"] = values.pop("billing_options")
    return values


class TermService(OwnedResourceService[Term, TermResponse]):
    """Owner-scoped CRUD for terms."""

    model = Term
    response_model = TermResponse
    not_found_error = TermNotFoundError

    async def _prepare_create(self, owner_id: str, values: dict[str, Any]) -> dict[str, Any]:
        return _to_columns(values)

    async def _prepare_update(
        self,
        owner_id: str,
        row: Term,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        return _to_columns(values)
