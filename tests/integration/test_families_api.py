# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for family endpoints."""

from datetime import datetime, timezone

import pytest

pytestmark = pytest.mark.integration


async def create_family(client, first_name="Sam", last_name="Parker", email=None, **extra) -> dict:
    payload = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email or f"{first_name.lower()}.{last_name.lower()}@family.example.com",
        "password": "portal-pass-1",
        **extra,
    }
    response = await client.post("/api/v1/families", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateFamily:
    async def test_create_family_and_account(self, client, owner) -> None:
        created = await create_family(client, phone_country_code="+1", phone_number="5550101")

        family, user = created["family"], created["user"]
        assert family["family_name"] == "Parker Family"
        assert family["organization_id"] == owner.id
        assert family["status"] == "ACTIVE"
        assert family["user_id"] == user["id"]
        assert user["role"] == "FAMILY"
        assert user["phone_no"] == "+1 5550101"
        assert "password" not in user

    async def test_duplicate_email_conflicts(self, client) -> None:
        await create_family(client)

        response = await client.post(
            "/api/v1/families",
            json={
                "first_name": "Other",
                "last_name": "Person",
                "email": "sam.parker@family.example.com",
                "password": "portal-pass-2",
            },
        )

        assert response.status_code == 409
        assert response.json()["success"] is False

    async def test_owner_email_is_taken_too(self, client) -> None:
        response = await client.post(
            "/api/v1/families",
            json={
                "first_name": "Olivia",
                "last_name": "Owner",
                "email": "owner@school.example.com",
                "password": "portal-pass-1",
            },
        )

        assert response.status_code == 409

    async def test_short_password_is_rejected(self, client) -> None:
        response = await client.post(
            "/api/v1/families",
            json={
                "first_name": "Sam",
                "last_name": "Parker",
                "email": "sam@family.example.com",
                "password": "short",
            },
        )

        assert response.status_code == 422


class TestListFamilies:
    async def test_paginated_newest_first(self, client) -> None:
        for name in ("Adams", "Baker", "Clark"):
            await create_family(client, last_name=name)

        response = await client.get("/api/v1/families", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert [f["family_name"] for f in body["data"]] == ["Clark Family", "Baker Family"]
        assert body["pagination"]["total"] == 3
        assert body["pagination"]["total_pages"] == 2

    async def test_search_and_status_filter(self, client) -> None:
        adams = await create_family(client, last_name="Adams")
        await create_family(client, last_name="Baker")
        await client.patch(
            f"/api/v1/families/{adams['family']['id']}/status", json={"status": "SUSPENDED"}
        )

        searched = await client.get("/api/v1/families", params={"search": "bak"})
        suspended = await client.get("/api/v1/families", params={"status": "SUSPENDED"})
        everything = await client.get("/api/v1/families", params={"status": "ALL"})

        assert [f["family_name"] for f in searched.json()["data"]] == ["Baker Family"]
        assert [f["family_name"] for f in suspended.json()["data"]] == ["Adams Family"]
        assert everything.json()["pagination"]["total"] == 2

    async def test_other_owner_sees_nothing(self, client, login, other_owner) -> None:
        await create_family(client)
        login(other_owner)

        response = await client.get("/api/v1/families")

        assert response.json()["data"] == []


class TestFamilyDetail:
    async def test_detail(self, client) -> None:
        created = await create_family(client, phone_country_code="+1", phone_number="5550101")
        family_id = created["family"]["id"]

        response = await client.get(f"/api/v1/families/{family_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["contact_info"] == {
            "email": "sam.parker@family.example.com",
            "phone": "+1 5550101",
            "linked_business": "Sunrise Dance Academy",
        }
        assert data["address"] is None
        assert data["emergency_contact"] is None

    async def test_update_address_and_emergency_contact(self, client) -> None:
        created = await create_family(client)
        family_id = created["family"]["id"]

        response = await client.patch(
            f"/api/v1/families/{family_id}",
            json={
                "first_name": "Samantha",
                "notes": "Prefers email",
                "address": {"street": "5 Elm St", "city": "Springfield"},
                "emergency_contact": {"relation": "Aunt", "phone_no": "+1 5550199"},
            },
        )

        assert response.status_code == 200, response.text
        data = response.json()["data"]
        assert data["primary_parent_first_name"] == "Samantha"
        assert data["user"]["name"] == "Samantha Parker"
        assert data["notes"] == "Prefers email"
        assert data["address"]["street"] == "5 Elm St"
        assert data["address"]["city"] == "Springfield"
        assert data["emergency_contact"]["relation"] == "Aunt"
        assert data["emergency_contact"]["phone"] == "+1 5550199"

    async def test_phone_number_update_keeps_country_code(self, client) -> None:
        created = await create_family(client, phone_country_code="+1", phone_number="5550101")
        family_id = created["family"]["id"]

        response = await client.patch(
            f"/api/v1/families/{family_id}", json={"phone_number": "5550202"}
        )

        assert response.status_code == 200, response.text
        data = response.json()["data"]
        assert data["user"]["phone_no"] == "+1 5550202"
        assert data["contact_info"]["phone"] == "+1 5550202"

    async def test_country_code_update_rewrites_account_phone(self, client) -> None:
        created = await create_family(client, phone_country_code="+1", phone_number="5550101")

        response = await client.patch(
            f"/api/v1/families/{created['family']['id']}", json={"phone_country_code": "+44"}
        )

        assert response.json()["data"]["user"]["phone_no"] == "+44 5550101"

    async def test_update_to_taken_email_conflicts(self, client) -> None:
        first = await create_family(client, last_name="Adams")
        await create_family(client, last_name="Baker")

        response = await client.patch(
            f"/api/v1/families/{first['family']['id']}",
            json={"email": "sam.baker@family.example.com"},
        )

        assert response.status_code == 409

    async def test_status_change(self, client) -> None:
        created = await create_family(client)

        response = await client.patch(
            f"/api/v1/families/{created['family']['id']}/status",
            json={"status": "INACTIVE"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "INACTIVE"

    async def test_delete_removes_students(self, client) -> None:
        created = await create_family(client)
        family_id = created["family"]["id"]
        student = await client.post(
            f"/api/v1/families/{family_id}/students",
            json={"first_name": "Mia", "last_name": "Parker"},
        )
        student_id = student.json()["data"]["id"]

        response = await client.delete(f"/api/v1/families/{family_id}")

        assert response.status_code == 200
        assert response.json()["data"] == {"id": family_id, "deleted": True}
        assert (await client.get(f"/api/v1/families/{family_id}")).status_code == 404
        assert (await client.get(f"/api/v1/students/{student_id}")).status_code == 404

    async def test_unknown_family_students_not_found(self, client) -> None:
        response = await client.post(
            "/api/v1/families/999/students",
            json={"first_name": "Mia", "last_name": "Parker"},
        )

        assert response.status_code == 404


class TestChildrenAndPayments:
    async def test_children_enrollment_status(self, client, period) -> None:
        created = await create_family(client)
        family_id = created["family"]["id"]
        students = []
        for first_name in ("Mia", "Leo"):
            response = await client.post(
                f"/api/v1/families/{family_id}/students",
                json={"first_name": first_name, "last_name": "Parker"},
            )
            students.append(response.json()["data"])
        class_ = await client.post(
            "/api/v1/classes",
            json={
                "title": "Tap",
                "start_date": period[0],
                "end_date": period[1],
                "frequency": "WEEKLY",
                "start_time_of_class": "17:00",
                "duration": 45,
                "pricing_per_lesson": 12,
            },
        )
        class_id = class_.json()["data"]["id"]

        enrollments = []
        for student in students:
            response = await client.post(
                "/api/v1/enrollments",
                json={
                    "class_id": class_id,
                    "student_id": student["id"],
                    "enrollment_start_date": period[0],
                    "enrollment_end_date": period[1],
                    "payment_option": "upfront",
                },
            )
            assert response.status_code == 201, response.text
            enrollments.append(response.json()["data"])
        await client.patch(
            f"/api/v1/enrollments/{enrollments[1]['id']}", json={"status": "Cancelled"}
        )

        response = await client.get(f"/api/v1/families/{family_id}/children")

        assert response.status_code == 200
        children = {c["first_name"]: c for c in response.json()["data"]}
        assert children["Mia"]["overall_status"] == "Enrolled"
        assert [c["title"] for c in children["Mia"]["enrolled_classes"]] == ["Tap"]
        assert children["Leo"]["overall_status"] == "Not Enrolled"
        assert children["Leo"]["enrolled_classes"] == []

    async def test_payments_without_orders(self, client) -> None:
        created = await create_family(client)

        response = await client.get(f"/api/v1/families/{created['family']['id']}/payments")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "summary": {"total_paid": 0, "total_invoices": 0, "due": 0},
            "invoices": [],
        }

    async def test_invoices_paid_pending_and_refunded(self, client, place_order) -> None:
        created = await create_family(client)
        account_id = created["family"]["user_id"]
        await place_order(
            account_id, 100, "Autumn Term", datetime(2031, 1, 10, tzinfo=timezone.utc)
        )
        await place_order(
            account_id, 40, "Trial Lesson", datetime(2031, 2, 10, tzinfo=timezone.utc), paid=False
        )
        await place_order(
            account_id,
            25,
            "Summer Camp",
            datetime(2031, 3, 10, tzinfo=timezone.utc),
            refund_id="re_123",
        )

        response = await client.get(f"/api/v1/families/{created['family']['id']}/payments")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [(i["invoice_id"], i["description"], i["status"]) for i in data["invoices"]] == [
            ("INV-001", "Summer Camp", "Pending"),
            ("INV-002", "Trial Lesson", "Pending"),
            ("INV-003", "Autumn Term", "Paid"),
        ]
        assert data["invoices"][0]["date"] == "2031-03-10"
        assert data["summary"] == {"total_paid": 100, "total_invoices": 3, "due": 65}
