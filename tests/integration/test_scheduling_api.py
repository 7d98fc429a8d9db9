# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for terms, classes, lessons and bookings."""

import pytest

pytestmark = pytest.mark.integration


def class_payload(start: str, end: str, **overrides) -> dict:
    payload = {
        "title": "Ballet Beginners",
        "start_date": start,
        "end_date": end,
        "frequency": "WEEKLY",
        "recurring_day": "Monday",
        "start_time_of_class": "16:30",
        "duration": 60,
        "pricing_per_lesson": 18.5,
    }
    payload.update(overrides)
    return payload


async def create_term(client, period) -> dict:
    start, end = period
    response = await client.post(
        "/api/v1/terms",
        json={
            "title": "Autumn",
            "start_date": start,
            "end_date": end,
            "billing_options": [{"type": "Upfront"}],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_class(client, period, **overrides) -> dict:
    response = await client.post("/api/v1/classes", json=class_payload(*period, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_student(client) -> dict:
    family = await client.post(
        "/api/v1/families",
        json={
            "first_name": "Sam",
            "last_name": "Parker",
            "email": "sam.parker@family.example.com",
            "password": "portal-pass-1",
        },
    )
    assert family.status_code == 201, family.text
    family_id = family.json()["data"]["family"]["id"]

    student = await client.post(
        f"/api/v1/families/{family_id}/students",
        json={"first_name": "Mia", "last_name": "Parker", "tshirt_size": "S"},
    )
    assert student.status_code == 201, student.text
    return student.json()["data"]


class TestClasses:
    async def test_create_with_references(self, client, period, location, teacher) -> None:
        term = await create_term(client, period)

        created = await create_class(
            client,
            period,
            term_id=term["id"],
            location_id=location.id,
            teacher_id=teacher.id,
        )

        assert created["class_type"] == "ONGOING_CLASS"
        assert created["term"]["title"] == "Autumn"
        assert created["location"]["name"] == "Main Studio"
        assert created["teacher"]["name"] == "Tina Teacher"

    async def test_foreign_location_is_not_found(
        self, client, login, other_owner, period, location
    ) -> None:
        login(other_owner)

        response = await client.post(
            "/api/v1/classes", json=class_payload(*period, location_id=location.id)
        )

        assert response.status_code == 404

    async def test_list_by_term(self, client, period) -> None:
        term = await create_term(client, period)
        await create_class(client, period, term_id=term["id"])
        await create_class(client, period, title="Unattached")

        response = await client.get(f"/api/v1/classes/term/{term['id']}")

        assert response.status_code == 200
        assert [c["title"] for c in response.json()["data"]] == ["Ballet Beginners"]

    async def test_detail_includes_lessons_in_date_order(self, client, period) -> None:
        class_ = await create_class(client, period)
        for title, date in (("Week 2", "2030-01-14T16:30:00Z"), ("Week 1", "2030-01-07T16:30:00Z")):
            response = await client.post(
                "/api/v1/lessons",
                json={
                    "class_id": class_["id"],
                    "title": title,
                    "date": date,
                    "start_time": "16:30",
                    "duration": 60,
                },
            )
            assert response.status_code == 201, response.text

        detail = await client.get(f"/api/v1/classes/{class_['id']}")
        by_class = await client.get(f"/api/v1/lessons/class/{class_['id']}")

        assert [lesson["title"] for lesson in detail.json()["data"]["lessons"]] == ["Week 1", "Week 2"]
        assert [lesson["title"] for lesson in by_class.json()["data"]] == ["Week 1", "Week 2"]

    async def test_delete_removes_lessons(self, client, period) -> None:
        class_ = await create_class(client, period)
        lesson = await client.post(
            "/api/v1/lessons",
            json={
                "class_id": class_["id"],
                "title": "Only",
                "date": "2030-01-07T16:30:00Z",
                "start_time": "16:30",
                "duration": 60,
            },
        )
        lesson_id = lesson.json()["data"]["id"]

        await client.delete(f"/api/v1/classes/{class_['id']}")

        assert (await client.get(f"/api/v1/lessons/{lesson_id}")).status_code == 404


class TestEnrollments:
    async def test_enroll_student(self, client, period) -> None:
        class_ = await create_class(client, period)
        student = await create_student(client)

        response = await client.post(
            "/api/v1/enrollments",
            json={
                "class_id": class_["id"],
                "student_id": student["id"],
                "enrollment_start_date": period[0],
                "enrollment_end_date": period[1],
                "payment_option": "upfront",
            },
        )

        assert response.status_code == 201, response.text
        data = response.json()["data"]
        assert data["status"] == "Active"
        assert data["class"]["title"] == "Ballet Beginners"
        assert data["student"]["first_name"] == "Mia"

        listed = await client.get(f"/api/v1/enrollments/class/{class_['id']}")
        assert [e["id"] for e in listed.json()["data"]] == [data["id"]]

    @pytest.mark.parametrize(
        ("end_date", "expected"),
        [("2031-06-30T00:00:00", 201), ("2031-05-01T00:00:00", 422)],
    )
    async def test_period_mixing_naive_and_offset_dates(
        self, client, period, end_date, expected
    ) -> None:
        class_ = await create_class(client, period)
        student = await create_student(client)

        response = await client.post(
            "/api/v1/enrollments",
            json={
                "class_id": class_["id"],
                "student_id": student["id"],
                "enrollment_start_date": "2031-06-01T00:00:00+02:00",
                "enrollment_end_date": end_date,
                "payment_option": "upfront",
            },
        )

        assert response.status_code == expected, response.text

    async def test_period_must_not_end_before_start(self, client, period) -> None:
        class_ = await create_class(client, period)
        student = await create_student(client)
        created = await client.post(
            "/api/v1/enrollments",
            json={
                "class_id": class_["id"],
                "student_id": student["id"],
                "enrollment_start_date": period[0],
                "enrollment_end_date": period[1],
                "payment_option": "upfront",
            },
        )
        enrollment_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/enrollments/{enrollment_id}",
            json={"enrollment_end_date": "2000-01-01T00:00:00Z"},
        )

        assert response.status_code == 400

    async def test_unknown_student_is_not_found(self, client, period) -> None:
        class_ = await create_class(client, period)

        response = await client.post(
            "/api/v1/enrollments",
            json={
                "class_id": class_["id"],
                "student_id": 999,
                "enrollment_start_date": period[0],
                "enrollment_end_date": period[1],
                "payment_option": "upfront",
            },
        )

        assert response.status_code == 404


class TestTrialsAndWaitlist:
    async def test_trial_and_waitlist_by_class(self, client, period) -> None:
        class_ = await create_class(client, period)
        student = await create_student(client)

        trial = await client.post(
            "/api/v1/trials",
            json={"class_id": class_["id"], "student_id": student["id"]},
        )
        waitlist = await client.post(
            "/api/v1/waitlist",
            json={"class_id": class_["id"], "student_id": student["id"]},
        )

        assert trial.status_code == 201, trial.text
        assert trial.json()["data"]["status"] == "pending"
        assert waitlist.status_code == 201, waitlist.text

        trials = await client.get(f"/api/v1/trials/class/{class_['id']}")
        entries = await client.get(f"/api/v1/waitlist/class/{class_['id']}")
        assert len(trials.json()["data"]) == 1
        assert len(entries.json()["data"]) == 1
