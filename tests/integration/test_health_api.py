# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for health endpoints."""

from unittest.mock import patch

import pytest

from schooldesk import __version__

pytestmark = pytest.mark.integration


class TestHealth:
    async def test_healthy_with_database(self, client, test_engine) -> None:
        with patch("schooldesk.api.routes.health.get_engine", return_value=test_engine):
            response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["components"]["database"]["status"] == "healthy"
        assert body["components"]["database"]["latency_ms"] is not None

    async def test_unhealthy_without_database(self, client) -> None:
        response = await client.get("/health")

        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["components"]["database"]["status"] == "unhealthy"
        assert "not initialized" in body["components"]["database"]["message"]

    async def test_readiness(self, client, test_engine) -> None:
        with patch("schooldesk.api.routes.health.get_engine", return_value=test_engine):
            ready = await client.get("/health/ready")
        not_ready = await client.get("/health/ready")

        assert ready.json()["ready"] is True
        assert not_ready.json()["ready"] is False
        assert not_ready.json()["checks"]["database"]["status"] == "unhealthy"
