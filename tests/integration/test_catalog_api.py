# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for owner-scoped catalog resources.

Covers holidays, camps, registration fees, custom fields, waiver policies
and the drop-in class family of endpoints.
"""

import pytest

pytestmark = pytest.mark.integration


class TestHolidays:
    async def test_listed_by_start_date(self, client) -> None:
        for name, start, end in (
            ("Winter Break", "2030-12-20T00:00:00Z", "2031-01-03T00:00:00Z"),
            ("Thanksgiving", "2030-11-28T00:00:00Z", "2030-11-29T00:00:00Z"),
        ):
            response = await client.post(
                "/api/v1/holidays",
                json={"name": name, "start_date": start, "end_date": end, "affects_class": True},
            )
            assert response.status_code == 201, response.text

        response = await client.get("/api/v1/holidays")

        assert [h["name"] for h in response.json()["data"]] == ["Thanksgiving", "Winter Break"]

    async def test_create_with_inverted_range(self, client) -> None:
        response = await client.post(
            "/api/v1/holidays",
            json={
                "name": "Backwards",
                "start_date": "2030-12-20T00:00:00Z",
                "end_date": "2030-12-01T00:00:00Z",
            },
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        ("end_date", "expected"),
        [("2030-12-24T00:00:00", 201), ("2030-12-10T00:00:00", 422)],
    )
    async def test_range_mixing_naive_and_offset_dates(self, client, end_date, expected) -> None:
        response = await client.post(
            "/api/v1/holidays",
            json={"name": "Winter Break", "start_date": "2030-12-20T00:00:00Z", "end_date": end_date},
        )

        assert response.status_code == expected, response.text

    async def test_update_with_inverted_range(self, client) -> None:
        created = await client.post(
            "/api/v1/holidays",
            json={
                "name": "Spring Break",
                "start_date": "2031-04-01T00:00:00Z",
                "end_date": "2031-04-08T00:00:00Z",
            },
        )
        holiday_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/holidays/{holiday_id}", json={"end_date": "2031-03-01T00:00:00Z"}
        )

        assert response.status_code == 400


class TestSimpleResources:
    @pytest.mark.parametrize(
        ("path", "payload", "field", "changed"),
        [
            (
                "/api/v1/camps",
                {"title": "Summer Camp", "start_date": "2031-07-01T09:00:00Z"},
                "title",
                "Summer Arts Camp",
            ),
            (
                "/api/v1/registration-fees",
                {"title": "Annual Fee", "price_per_student": 25, "renewal_type": "ANNUAL"},
                "price_per_student",
                30,
            ),
            (
                "/api/v1/custom-fields",
                {
                    "applies_to": "STUDENT",
                    "question": "Any allergies?",
                    "answer_type": "select",
                    "options": ["None", "Nuts", "Dairy"],
                },
                "is_required",
                True,
            ),
            (
                "/api/v1/waivers-policies",
                {
                    "title": "Photo Release",
                    "description": "Photos may be used on our website.",
                    "permission": "OPTIONAL",
                },
                "permission",
                "REQUIRED",
            ),
        ],
    )
    async def test_crud(self, client, login, other_owner, path, payload, field, changed) -> None:
        created = await client.post(path, json=payload)
        assert created.status_code == 201, created.text
        item = created.json()["data"]
        url = f"{path}/{item['id']}"

        updated = await client.patch(url, json={field: changed})
        assert updated.status_code == 200, updated.text
        assert updated.json()["data"][field] == changed

        listed = await client.get(path)
        assert [i["id"] for i in listed.json()["data"]] == [item["id"]]

        login(other_owner)
        assert (await client.get(url)).status_code == 404
        assert (await client.delete(url)).status_code == 404

        login(None)
        assert (await client.get(path)).status_code == 401

    async def test_custom_field_options_round_trip(self, client) -> None:
        response = await client.post(
            "/api/v1/custom-fields",
            json={
                "applies_to": "FAMILY",
                "question": "How did you hear about us?",
                "answer_type": "select",
                "options": ["Friend", "Search", "Flyer"],
            },
        )

        assert response.json()["data"]["options"] == ["Friend", "Search", "Flyer"]
        assert response.json()["data"]["is_active"] is True


class TestDropIn:
    async def _create_dropin_class(self, client, period) -> dict:
        response = await client.post(
            "/api/v1/dropin-classes",
            json={
                "title": "Open Studio",
                "start_date": period[0],
                "end_date": period[1],
                "frequency": "WEEKLY",
                "start_time_of_class": "18:00",
                "duration": 90,
                "pricing_per_lesson": 15,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    async def test_class_with_lessons(self, client, period) -> None:
        dropin_class = await self._create_dropin_class(client, period)
        assert dropin_class["class_type"] == "DROP_CLASS"

        lesson = await client.post(
            "/api/v1/dropin-lessons",
            json={
                "dropin_class_id": dropin_class["id"],
                "title": "Session 1",
                "date": "2030-02-04T18:00:00Z",
                "start_time": "18:00",
                "duration": 90,
            },
        )
        assert lesson.status_code == 201, lesson.text
        assert lesson.json()["data"]["status"] == "scheduled"

        detail = await client.get(f"/api/v1/dropin-classes/{dropin_class['id']}")
        by_class = await client.get(f"/api/v1/dropin-lessons/class/{dropin_class['id']}")

        assert [item["title"] for item in detail.json()["data"]["lessons"]] == ["Session 1"]
        assert [item["title"] for item in by_class.json()["data"]] == ["Session 1"]

    async def test_lesson_for_unknown_class(self, client) -> None:
        response = await client.post(
            "/api/v1/dropin-lessons",
            json={
                "dropin_class_id": 999,
                "title": "Orphan",
                "date": "2030-02-04T18:00:00Z",
                "start_time": "18:00",
                "duration": 90,
            },
        )

        assert response.status_code == 404

    async def test_booking(self, client, period) -> None:
        dropin_class = await self._create_dropin_class(client, period)
        family = await client.post(
            "/api/v1/families",
            json={
                "first_name": "Sam",
                "last_name": "Parker",
                "email": "sam.parker@family.example.com",
                "password": "portal-pass-1",
            },
        )
        family_id = family.json()["data"]["family"]["id"]
        student = await client.post(
            f"/api/v1/families/{family_id}/students",
            json={"first_name": "Mia", "last_name": "Parker"},
        )

        response = await client.post(
            "/api/v1/dropin-bookings",
            json={"dropin_class_id": dropin_class["id"], "student_id": student.json()["data"]["id"]},
        )

        assert response.status_code == 201, response.text
        data = response.json()["data"]
        assert data["status"] == "Active"
        assert data["enrollment_date"]
        assert data["dropin_class"]["title"] == "Open Studio"

        children = await client.get(f"/api/v1/families/{family_id}/children")
        child = children.json()["data"][0]
        assert child["overall_status"] == "Enrolled"
        assert child["enrolled_classes"][0]["class_type"] == "DROP_CLASS"

    async def test_booking_unknown_student(self, client, period) -> None:
        dropin_class = await self._create_dropin_class(client, period)

        response = await client.post(
            "/api/v1/dropin-bookings",
            json={"dropin_class_id": dropin_class["id"], "student_id": 999},
        )

        assert response.status_code == 404
