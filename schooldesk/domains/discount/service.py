# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Discount service.

Discounts with no owner are shared by every organization: they show up in
listings but only the owner of a discount may change or delete it. Tiers
are written together with their discount in a single commit.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import selectinload

from schooldesk.domains.base import OwnedResourceService
from schooldesk.infrastructure.database.models import Discount, DiscountTier
from schooldesk.models.discount import DiscountResponse
from schooldesk.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


class DiscountServiceError(Exception):
    """Base exception for discount service errors."""

    pass


class DiscountNotFoundError(DiscountServiceError):
    """Raised when a discount is not found."""

    pass


class SharedDiscountReadOnlyError(DiscountServiceError):
    """Raised when an organization tries to change a shared discount."""

    pass


class InvalidDiscountWindowError(DiscountServiceError):
    """Raised when an update would end a discount before it starts."""

    pass


def _build_tiers(tiers: list[dict[str, Any]]) -> list[DiscountTier]:
    return [
        DiscountTier(
            students_per_family=tier.get("students_per_family"),
            classes_per_student=tier.get("classes_per_student"),
            percentage_off=tier["percentage_off"],
        )
        for tier in tiers
    ]


class DiscountService(OwnedResourceService[Discount, DiscountResponse]):
    """CRUD for discounts and their tiers."""

    model = Discount
    response_model = DiscountResponse
    not_found_error = DiscountNotFoundError

    def _base_query(self, owner_id: str) -> Select:
        return select(Discount).where(
            or_(Discount.user_id == owner_id, Discount.user_id.is_(None))
        )

    def _load_options(self) -> list[Any]:
        return [selectinload(Discount.tiers)]

    def _new_row(self, owner_id: str, values: dict[str, Any]) -> Discount:
        tiers = values.pop("tiers", None) or []
        return Discount(user_id=owner_id, tiers=_build_tiers(tiers), **values)

    async def _prepare_update(
        self,
        owner_id: str,
        row: Discount,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        self._check_writable(row, owner_id)

        valid_from = ensure_utc(values.get("valid_from") or row.valid_from)
        valid_until = ensure_utc(values.get("valid_until") or row.valid_until)
        if valid_until < valid_from:
            raise InvalidDiscountWindowError("valid_until must not be before valid_from")

        if "tiers" in values:
            # Assigning a new collection removes the old tiers (delete-orphan).
            values["tiers"] = _build_tiers(values["tiers"] or [])

        return values

    async def delete(self, owner_id: str, item_id: int) -> int:
        """Delete an owned discount together with its tiers.

        Raises:
            DiscountNotFoundError: If not visible to owner_id.
            SharedDiscountReadOnlyError: If the discount is shared.
        """
        row = await self._get_row(owner_id, item_id)
        self._check_writable(row, owner_id)

        await self.db.delete(row)
        await self.db.commit()

        logger.info("Deleted discount %s", item_id)

        return item_id

    def _check_writable(self, row: Discount, owner_id: str) -> None:
        if row.user_id != owner_id:
            raise SharedDiscountReadOnlyError(
                f"Discount {row.id} is shared and cannot be modified"
            )
