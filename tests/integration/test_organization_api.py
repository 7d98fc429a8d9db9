# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the organization profile endpoints."""

import pytest

pytestmark = pytest.mark.integration

PROFILE = {
    "phone_no": "+1 555 0100",
    "organization_name": "Sunrise Performing Arts",
    "industry": "Dance",
    "students": 120,
}


class TestOrganization:
    async def test_get_existing_organization(self, client) -> None:
        response = await client.get("/api/v1/organization")

        assert response.status_code == 200
        organization = response.json()["data"]["organization"]
        assert organization["company_name"] == "Sunrise Dance Academy"
        assert organization["industry"] == "Education"
        assert organization["currency"] == "USD"

    async def test_no_organization_yet(self, client, login, other_owner) -> None:
        login(other_owner)

        response = await client.get("/api/v1/organization")

        assert response.json()["data"] == {"organization": None}

    async def test_update_renames_organization(self, client, owner) -> None:
        response = await client.patch("/api/v1/organization", json=PROFILE)

        assert response.status_code == 200, response.text
        data = response.json()["data"]
        assert data["user"] == {
            "id": owner.id,
            "phone_no": "+1 555 0100",
            "onboarding_stage": "organization-updated",
            "meta": {"students": 120},
        }
        assert data["organization"]["company_name"] == "Sunrise Performing Arts"
        assert data["organization"]["industry"] == "Dance"

    async def test_update_creates_missing_organization(self, client, login, other_owner) -> None:
        login(other_owner)

        updated = await client.patch("/api/v1/organization", json=PROFILE)
        fetched = await client.get("/api/v1/organization")

        assert updated.status_code == 200
        assert fetched.json()["data"]["organization"]["company_name"] == "Sunrise Performing Arts"

    async def test_negative_student_count_is_rejected(self, client) -> None:
        response = await client.patch("/api/v1/organization", json={**PROFILE, "students": -1})

        assert response.status_code == 422
