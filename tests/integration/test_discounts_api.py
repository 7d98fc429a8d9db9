# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for discount endpoints."""

from datetime import datetime, timezone

import pytest

from schooldesk.infrastructure.database.models import Discount

pytestmark = pytest.mark.integration


def discount_payload(period, **overrides) -> dict:
    payload = {
        "title": "Sibling Saver",
        "discount_type": "PERCENTAGE",
        "discount_value": 10,
        "applies_to": "ALL_CLASSES",
        "valid_from": period[0],
        "valid_until": period[1],
        "category": "MULTIPLE_STUDENT",
        "tiers": [
            {"students_per_family": 2, "percentage_off": 10},
            {"students_per_family": 3, "percentage_off": 15},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def shared_discount(db) -> Discount:
    row = Discount(
        user_id=None,
        title="Platform Launch",
        discount_type="FIXED",
        discount_value=5,
        applies_to="ALL_CLASSES",
        valid_from=datetime(2030, 1, 1, tzinfo=timezone.utc),
        valid_until=datetime(2030, 12, 31, tzinfo=timezone.utc),
    )
    db.add(row)
    await db.commit()
    return row


class TestDiscounts:
    async def test_create_with_tiers(self, client, owner, period) -> None:
        response = await client.post("/api/v1/discounts", json=discount_payload(period))

        assert response.status_code == 201, response.text
        data = response.json()["data"]
        assert data["user_id"] == owner.id
        assert data["times_used"] == 0
        assert [t["percentage_off"] for t in data["tiers"]] == [10, 15]

    async def test_invalid_window_on_create_is_a_validation_error(self, client, period) -> None:
        response = await client.post(
            "/api/v1/discounts",
            json=discount_payload(period, valid_from=period[1], valid_until=period[0]),
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        ("valid_until", "expected"),
        [("2031-03-01T00:00:00", 201), ("2030-12-01T00:00:00", 422)],
    )
    async def test_window_mixing_naive_and_offset_bounds(
        self, client, period, valid_until, expected
    ) -> None:
        response = await client.post(
            "/api/v1/discounts",
            json=discount_payload(
                period, valid_from="2031-01-01T00:00:00+00:00", valid_until=valid_until
            ),
        )

        assert response.status_code == expected, response.text

    async def test_update_replaces_tiers(self, client, period) -> None:
        created = await client.post("/api/v1/discounts", json=discount_payload(period))
        discount_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/discounts/{discount_id}",
            json={"tiers": [{"students_per_family": 4, "percentage_off": 25}]},
        )

        assert response.status_code == 200, response.text
        tiers = response.json()["data"]["tiers"]
        assert [(t["students_per_family"], t["percentage_off"]) for t in tiers] == [(4, 25)]

        fetched = await client.get(f"/api/v1/discounts/{discount_id}")
        assert len(fetched.json()["data"]["tiers"]) == 1

    async def test_update_keeps_tiers_when_omitted(self, client, period) -> None:
        created = await client.post("/api/v1/discounts", json=discount_payload(period))
        discount_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/discounts/{discount_id}", json={"title": "Family Saver"}
        )

        data = response.json()["data"]
        assert data["title"] == "Family Saver"
        assert len(data["tiers"]) == 2

    async def test_update_window_ending_before_start(self, client, period) -> None:
        created = await client.post("/api/v1/discounts", json=discount_payload(period))
        discount_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/discounts/{discount_id}",
            json={"valid_until": "2000-01-01T00:00:00Z"},
        )

        assert response.status_code == 400

    async def test_delete(self, client, period) -> None:
        created = await client.post("/api/v1/discounts", json=discount_payload(period))
        discount_id = created.json()["data"]["id"]

        response = await client.delete(f"/api/v1/discounts/{discount_id}")

        assert response.status_code == 200
        assert (await client.get(f"/api/v1/discounts/{discount_id}")).status_code == 404


class TestSharedDiscounts:
    async def test_shared_discount_is_listed(self, client, shared_discount) -> None:
        response = await client.get("/api/v1/discounts")

        assert [d["title"] for d in response.json()["data"]] == ["Platform Launch"]
        assert response.json()["data"][0]["user_id"] is None

    async def test_shared_discount_is_read_only(self, client, shared_discount) -> None:
        url = f"/api/v1/discounts/{shared_discount.id}"

        updated = await client.patch(url, json={"title": "Mine now"})
        deleted = await client.delete(url)

        assert updated.status_code == 403
        assert deleted.status_code == 403
        assert (await client.get(url)).json()["data"]["title"] == "Platform Launch"

    async def test_foreign_discount_is_hidden(self, client, login, other_owner, period) -> None:
        created = await client.post("/api/v1/discounts", json=discount_payload(period))
        discount_id = created.json()["data"]["id"]
        login(other_owner)

        response = await client.patch(f"/api/v1/discounts/{discount_id}", json={"title": "x"})

        assert response.status_code == 404
