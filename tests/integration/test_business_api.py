# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the admin business endpoints."""

from datetime import datetime, timedelta, timezone

import pytest

pytestmark = pytest.mark.integration


def business_payload(**overrides) -> dict:
    payload = {
        "school_name": "Harbor Swim School",
        "email": "info@harborswim.example.com",
        "phone": "+1 555 0200",
        "address": "9 Dock Rd",
        "owner_name": "Hank Harbor",
        "owner_email": "hank@harborswim.example.com",
        "owner_phone": "+1 555 0201",
        "owner_address": "9 Dock Rd, Bayside, CA, 90001",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def admin_client(client, login, admin):
    login(admin)
    return client


async def create_business(client, **overrides) -> dict:
    response = await client.post("/api/v1/business", json=business_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateBusiness:
    async def test_create_with_commission(self, admin_client) -> None:
        created = await create_business(
            admin_client, commission_type="PERCENTAGE", commission_value=4
        )

        assert created["school_name"] == "Harbor Swim School"
        assert created["status"] == "Active"
        assert created["owner"]["email"] == "hank@harborswim.example.com"
        assert created["commission"] == {
            "commission_type": "PERCENTAGE",
            "commission_value": 4,
            "is_global": False,
        }

    async def test_create_inactive_without_commission(self, admin_client) -> None:
        created = await create_business(admin_client, status=False)

        assert created["status"] == "Inactive"
        assert created["commission"] is None

    async def test_owner_email_conflict(self, admin_client) -> None:
        response = await admin_client.post(
            "/api/v1/business", json=business_payload(owner_email="owner@school.example.com")
        )

        assert response.status_code == 409

    async def test_requires_admin(self, client) -> None:
        response = await client.post("/api/v1/business", json=business_payload())

        assert response.status_code == 403


class TestListBusinesses:
    async def test_list_and_search(self, admin_client) -> None:
        await create_business(admin_client)

        everything = await admin_client.get("/api/v1/business")
        searched = await admin_client.get("/api/v1/business", params={"search": "harbor"})

        assert everything.json()["pagination"]["total"] == 2
        assert [b["school_name"] for b in everything.json()["data"]] == [
            "Harbor Swim School",
            "Sunrise Dance Academy",
        ]
        assert [b["ownership"] for b in searched.json()["data"]] == ["Hank Harbor"]


class TestBusinessDetail:
    async def test_detail_with_global_commission(self, admin_client) -> None:
        created = await create_business(admin_client)
        await admin_client.post(
            "/api/v1/commissions/global",
            json={"commission_type": "PERCENTAGE", "commission_value": 2.5},
        )

        response = await admin_client.get(f"/api/v1/business/{created['id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["owner"]["address"] == "9 Dock Rd, Bayside, CA 90001, US"
        assert data["statistics"] == {
            "total_students": 0,
            "active_classes": 0,
            "total_revenue": 0,
            "earned_commission": 0,
        }
        assert data["commission"]["is_global"] is True
        assert data["contact_info"]["email"] == "info@harborswim.example.com"

    async def test_unknown_business(self, admin_client) -> None:
        response = await admin_client.get("/api/v1/business/999")

        assert response.status_code == 404

    async def test_update(self, admin_client) -> None:
        created = await create_business(admin_client)

        response = await admin_client.patch(
            f"/api/v1/business/{created['id']}",
            json={"school_name": "Harbor Aquatics", "website": "https://harbor.test"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["school_name"] == "Harbor Aquatics"
        assert data["website"] == "https://harbor.test"

    async def test_update_to_taken_email(self, admin_client) -> None:
        created = await create_business(admin_client)

        response = await admin_client.patch(
            f"/api/v1/business/{created['id']}", json={"email": "owner@school.example.com"}
        )

        assert response.status_code == 409


class TestCommissionAndStatus:
    async def test_commission_update_replaces_active_rule(self, admin_client) -> None:
        created = await create_business(
            admin_client, commission_type="PERCENTAGE", commission_value=4
        )

        response = await admin_client.patch(
            f"/api/v1/business/{created['id']}/commission",
            json={"commission_type": "FIXED", "commission_value": 25},
        )

        assert response.status_code == 200
        assert response.json()["data"]["commission_type"] == "FIXED"
        active = await admin_client.get(
            "/api/v1/commissions",
            params={"business_id": created["id"], "is_active": True},
        )
        assert [c["commission_value"] for c in active.json()["data"]] == [25]

    async def test_commission_value_required(self, admin_client) -> None:
        created = await create_business(admin_client)

        response = await admin_client.patch(
            f"/api/v1/business/{created['id']}/commission",
            json={"commission_type": "FIXED"},
        )

        assert response.status_code == 422

    async def test_status(self, admin_client) -> None:
        created = await create_business(admin_client)

        response = await admin_client.patch(
            f"/api/v1/business/{created['id']}/status", json={"status": False}
        )

        assert response.json()["data"] == {"id": created["id"], "status": "Inactive"}
        detail = await admin_client.get(f"/api/v1/business/{created['id']}")
        assert detail.json()["data"]["status"] == "Inactive"


class TestBusinessStudents:
    async def test_students_of_business(self, client, login, admin) -> None:
        family = await client.post(
            "/api/v1/families",
            json={
                "first_name": "Sam",
                "last_name": "Parker",
                "email": "sam.parker@family.example.com",
                "password": "portal-pass-1",
                "phone_number": "5550101",
            },
        )
        family_id = family.json()["data"]["family"]["id"]
        await client.post(
            f"/api/v1/families/{family_id}/students",
            json={"first_name": "Mia", "last_name": "Parker"},
        )
        login(admin)
        businesses = await client.get("/api/v1/business", params={"search": "Sunrise"})
        business_id = businesses.json()["data"][0]["id"]

        response = await client.get(f"/api/v1/business/{business_id}/students")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == [
            {
                "id": body["data"][0]["id"],
                "student_name": "Mia Parker",
                "email": "sam.parker@family.example.com",
                "phone": "5550101",
                "status": "Active",
            }
        ]
        assert body["pagination"]["total"] == 1


@pytest.fixture
async def sunrise(client, login, admin, place_order) -> int:
    """Id of the owner's business, seeded with orders and running classes."""
    family = await client.post(
        "/api/v1/families",
        json={
            "first_name": "Sam",
            "last_name": "Parker",
            "email": "sam.parker@family.example.com",
            "password": "portal-pass-1",
        },
    )
    account_id = family.json()["data"]["family"]["user_id"]
    placed_on = datetime(2031, 1, 10, tzinfo=timezone.utc)
    await place_order(account_id, 200, "Autumn Term", placed_on)
    await place_order(account_id, 50, "Summer Camp", placed_on, refund_id="re_9")
    await place_order(account_id, 80, "Trial Lesson", placed_on, paid=False)

    now = datetime.now(timezone.utc).replace(microsecond=0)
    running = (
        (now - timedelta(days=7)).isoformat(),
        (now + timedelta(days=30)).isoformat(),
    )
    term = await client.post(
        "/api/v1/terms",
        json={"title": "Now", "start_date": running[0], "end_date": running[1]},
    )
    class_ = {
        "start_date": running[0],
        "end_date": running[1],
        "frequency": "WEEKLY",
        "start_time_of_class": "16:00",
        "duration": 60,
        "pricing_per_lesson": 20,
    }
    for title, term_id in (("Jazz", term.json()["data"]["id"]), ("Tap", None)):
        response = await client.post(
            "/api/v1/classes", json={**class_, "title": title, "term_id": term_id}
        )
        assert response.status_code == 201, response.text

    login(admin)
    businesses = await client.get("/api/v1/business", params={"search": "Sunrise"})
    return businesses.json()["data"][0]["id"]


class TestBusinessStatistics:
    @pytest.mark.parametrize(
        ("commission_type", "commission_value", "earned"),
        [("PERCENTAGE", 10, 25), ("FIXED", 30, 30)],
    )
    async def test_revenue_and_earned_commission(
        self, client, sunrise, commission_type, commission_value, earned
    ) -> None:
        await client.patch(
            f"/api/v1/business/{sunrise}/commission",
            json={"commission_type": commission_type, "commission_value": commission_value},
        )

        response = await client.get(f"/api/v1/business/{sunrise}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["statistics"] == {
            "total_students": 0,
            "active_classes": 1,
            "total_revenue": 250,
            "earned_commission": earned,
        }
        assert data["commission"]["is_global"] is False

    async def test_commission_in_another_market(self, client, sunrise) -> None:
        await client.post(
            "/api/v1/commissions/global",
            json={"commission_type": "PERCENTAGE", "commission_value": 2.5},
        )
        await client.patch(
            f"/api/v1/business/{sunrise}/commission",
            json={
                "commission_type": "FIXED",
                "commission_value": 99,
                "country": "CA",
                "currency": "CAD",
            },
        )

        response = await client.get(f"/api/v1/business/{sunrise}")

        data = response.json()["data"]
        assert data["commission"] == {
            "commission_type": "FIXED",
            "commission_value": 99,
            "is_global": False,
        }
        assert data["statistics"]["earned_commission"] == 99

    async def test_falls_back_to_global_rule(self, client, sunrise) -> None:
        await client.post(
            "/api/v1/commissions/global",
            json={"commission_type": "PERCENTAGE", "commission_value": 2.5},
        )

        response = await client.get(f"/api/v1/business/{sunrise}")

        data = response.json()["data"]
        assert data["commission"]["is_global"] is True
        assert data["statistics"]["earned_commission"] == 6.25
