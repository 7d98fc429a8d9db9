# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for commission endpoints."""

import pytest
from sqlalchemy import select

from schooldesk.infrastructure.database.models import BusinessOrganization

pytestmark = pytest.mark.integration


@pytest.fixture
async def business_id(db, owner_user) -> int:
    result = await db.execute(
        select(BusinessOrganization.id).where(BusinessOrganization.user_id == owner_user.id)
    )
    return result.scalar_one()


@pytest.fixture
async def admin_client(client, login, admin):
    login(admin)
    return client


async def create_global(client, value: float, **extra) -> dict:
    response = await client.post(
        "/api/v1/commissions/global",
        json={"commission_type": "PERCENTAGE", "commission_value": value, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestAccess:
    async def test_business_owner_is_refused(self, client) -> None:
        response = await client.get("/api/v1/commissions")

        assert response.status_code == 403
        assert response.json() == {"message": "Admin access required", "success": False}

    async def test_anonymous_is_unauthorized(self, client, login) -> None:
        login(None)

        response = await client.get("/api/v1/commissions")

        assert response.status_code == 401


class TestGlobalCommissions:
    async def test_create_defaults(self, admin_client) -> None:
        created = await create_global(admin_client, 2.5, country="usa", currency="usd")

        assert created["business_id"] is None
        assert created["business_name"] == "Global (All Organizations)"
        assert created["country"] == "US"
        assert created["currency"] == "USD"
        assert created["applies_to"] == "ALL"
        assert created["is_active"] is True

    async def test_new_global_deactivates_previous(self, admin_client) -> None:
        first = await create_global(admin_client, 2.5)
        second = await create_global(admin_client, 3.0)

        previous = await admin_client.get(f"/api/v1/commissions/{first['id']}")
        active = await admin_client.get("/api/v1/commissions", params={"is_active": True})

        assert previous.json()["data"]["is_active"] is False
        assert [c["id"] for c in active.json()["data"]] == [second["id"]]

    async def test_other_country_stays_active(self, admin_client) -> None:
        us = await create_global(admin_client, 2.5)
        await create_global(admin_client, 4.0, country="GB", currency="GBP")

        response = await admin_client.get(f"/api/v1/commissions/{us['id']}")

        assert response.json()["data"]["is_active"] is True

    async def test_non_positive_max_amount_is_cleared(self, admin_client) -> None:
        created = await create_global(admin_client, 2.5, max_transaction_amt=0)

        assert created["max_transaction_amt"] is None


class TestOrganizationCommissions:
    async def test_unknown_business(self, admin_client) -> None:
        response = await admin_client.post(
            "/api/v1/commissions/organization",
            json={"business_id": 999, "commission_type": "FIXED", "commission_value": 30},
        )

        assert response.status_code == 404

    async def test_effective_prefers_organization_rule(self, admin_client, business_id) -> None:
        await create_global(admin_client, 2.5)
        url = f"/api/v1/commissions/business/{business_id}/effective"

        global_rule = await admin_client.get(url)
        assert global_rule.json()["data"]["is_global"] is True
        assert global_rule.json()["data"]["commission_value"] == 2.5

        created = await admin_client.post(
            "/api/v1/commissions/organization",
            json={"business_id": business_id, "commission_type": "FIXED", "commission_value": 30},
        )
        assert created.status_code == 201, created.text
        assert created.json()["data"]["business_name"] == "Sunrise Dance Academy"

        own_rule = await admin_client.get(url)
        data = own_rule.json()["data"]
        assert data["is_global"] is False
        assert data["commission_type"] == "FIXED"
        assert data["commission_value"] == 30

    async def test_effective_without_any_rule(self, admin_client, business_id) -> None:
        response = await admin_client.get(
            f"/api/v1/commissions/business/{business_id}/effective"
        )

        assert response.status_code == 404

    async def test_list_puts_global_first(self, admin_client, business_id) -> None:
        await admin_client.post(
            "/api/v1/commissions/organization",
            json={"business_id": business_id, "commission_type": "FIXED", "commission_value": 30},
        )
        await create_global(admin_client, 2.5)

        response = await admin_client.get("/api/v1/commissions")

        body = response.json()
        assert [c["business_id"] for c in body["data"]] == [None, business_id]
        assert body["pagination"]["total"] == 2

    async def test_filter_by_business(self, admin_client, business_id) -> None:
        await create_global(admin_client, 2.5)
        await admin_client.post(
            "/api/v1/commissions/organization",
            json={"business_id": business_id, "commission_type": "FIXED", "commission_value": 30},
        )

        response = await admin_client.get(
            "/api/v1/commissions", params={"business_id": business_id}
        )

        assert [c["business_id"] for c in response.json()["data"]] == [business_id]


class TestUpdateAndDelete:
    async def test_update(self, admin_client) -> None:
        created = await create_global(admin_client, 2.5)

        response = await admin_client.patch(
            f"/api/v1/commissions/{created['id']}",
            json={"commission_value": 3.5, "is_active": False},
        )

        assert response.status_code == 200
        assert response.json()["data"]["commission_value"] == 3.5
        assert response.json()["data"]["is_active"] is False

    async def test_delete(self, admin_client) -> None:
        created = await create_global(admin_client, 2.5)

        response = await admin_client.delete(f"/api/v1/commissions/{created['id']}")

        assert response.status_code == 200
        assert (await admin_client.get(f"/api/v1/commissions/{created['id']}")).status_code == 404

    async def test_unknown_commission(self, admin_client) -> None:
        response = await admin_client.patch("/api/v1/commissions/999", json={"commission_value": 1})

        assert response.status_code == 404
