# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the owner-scoped CRUD contract, using locations."""

import pytest

pytestmark = pytest.mark.integration

BASE = "/api/v1/locations"


class TestLocationsCrud:
    """Create, read, update and delete through the API."""

    async def test_create_returns_envelope(self, client) -> None:
        response = await client.post(BASE, json={"name": "North Hall", "address": "9 North Rd"})

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Location created successfully"
        assert body["data"]["name"] == "North Hall"
        assert body["data"]["id"] > 0

    async def test_list_newest_first(self, client) -> None:
        for name in ("First", "Second"):
            await client.post(BASE, json={"name": name, "address": "1 Road"})

        response = await client.get(BASE)

        assert response.status_code == 200
        assert [item["name"] for item in response.json()["data"]] == ["Second", "First"]

    async def test_partial_update_keeps_other_fields(self, client) -> None:
        created = (await client.post(BASE, json={"name": "Old", "address": "1 Road"})).json()
        location_id = created["data"]["id"]

        response = await client.patch(f"{BASE}/{location_id}", json={"name": "New"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "New"
        assert data["address"] == "1 Road"

    async def test_null_for_required_field_is_ignored(self, client) -> None:
        created = (await client.post(BASE, json={"name": "Keep", "address": "1 Road"})).json()
        location_id = created["data"]["id"]

        response = await client.patch(f"{BASE}/{location_id}", json={"name": None})

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Keep"

    async def test_delete_then_get_is_not_found(self, client) -> None:
        created = (await client.post(BASE, json={"name": "Gone", "address": "1 Road"})).json()
        location_id = created["data"]["id"]

        deleted = await client.delete(f"{BASE}/{location_id}")
        missing = await client.get(f"{BASE}/{location_id}")
        deleted_again = await client.delete(f"{BASE}/{location_id}")

        assert deleted.status_code == 200
        assert deleted.json()["data"] == {"id": location_id, "deleted": True}
        assert missing.status_code == 404
        assert missing.json() == {"message": f"Location {location_id} not found", "success": False}
        assert deleted_again.status_code == 404

    async def test_validation_error_envelope(self, client) -> None:
        response = await client.post(BASE, json={"name": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        fields = {error["field"] for error in body["errors"]}
        assert {"name", "address"} <= fields


class TestOwnerScoping:
    """Rows of another organization look exactly like missing rows."""

    async def test_other_owner_cannot_see_or_change(self, client, login, other_owner) -> None:
        created = (await client.post(BASE, json={"name": "Mine", "address": "1 Road"})).json()
        location_id = created["data"]["id"]

        login(other_owner)

        assert (await client.get(BASE)).json()["data"] == []
        assert (await client.get(f"{BASE}/{location_id}")).status_code == 404
        assert (await client.patch(f"{BASE}/{location_id}", json={"name": "x"})).status_code == 404
        assert (await client.delete(f"{BASE}/{location_id}")).status_code == 404

    async def test_unauthenticated_request_rejected(self, client, login) -> None:
        login(None)

        response = await client.get(BASE)

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized", "success": False}
