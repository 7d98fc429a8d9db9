# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the session cookie middleware.

Tests the middleware in isolation from the database: the session factory
yields a mock session.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from schooldesk.api.dependencies import get_current_user
from schooldesk.api.middleware.auth import REQUEST_ID_HEADER, AuthMiddleware

COOKIE_NAME = "schooldesk.session_token"


def _session_row() -> MagicMock:
    user = MagicMock()
    user.id = "user-1"
    user.email = "owner@school.example.com"
    user.name = "Olivia Owner"
    user.role = "BUSINESS"
    user.banned = False

    session = MagicMock()
    session.user = user
    session.expires_at = datetime.now(timezone.utc) + timedelta(hours=1)
    return session


def _session_factory(row: MagicMock | None) -> tuple:
    """Build a session factory whose lookups return row."""
    db = AsyncMock()
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    db.execute = AsyncMock(return_value=result)

    @asynccontextmanager
    async def factory():
        yield db

    return factory, db


def _build_app(session_factory) -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        AuthMiddleware,
        cookie_name=COOKIE_NAME,
        session_factory=session_factory,
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/v1/test")
    async def test_endpoint(request: Request) -> dict:
        user = get_current_user(request)
        return {"user_id": user.id if user else None}

    return app


class TestAuthMiddleware:
    """Tests for AuthMiddleware."""

    def test_public_path_skips_lookup(self) -> None:
        factory, db = _session_factory(_session_row())
        client = TestClient(_build_app(factory), cookies={COOKIE_NAME: "tok.sig"})

        response = client.get("/health")

        assert response.status_code == 200
        db.execute.assert_not_called()

    def test_valid_cookie_sets_user(self) -> None:
        factory, _ = _session_factory(_session_row())
        client = TestClient(_build_app(factory), cookies={COOKIE_NAME: "tok.sig"})

        response = client.get("/api/v1/test")

        assert response.status_code == 200
        assert response.json() == {"user_id": "user-1"}

    def test_missing_cookie_sets_user_none(self) -> None:
        factory, db = _session_factory(_session_row())
        client = TestClient(_build_app(factory))

        response = client.get("/api/v1/test")

        assert response.json() == {"user_id": None}
        db.execute.assert_not_called()

    def test_unknown_session_sets_user_none(self) -> None:
        factory, _ = _session_factory(None)
        client = TestClient(_build_app(factory), cookies={COOKIE_NAME: "tok.sig"})

        response = client.get("/api/v1/test")

        assert response.json() == {"user_id": None}

    def test_lookup_failure_continues_anonymously(self) -> None:
        factory, db = _session_factory(None)
        db.execute.side_effect = RuntimeError("database down")
        client = TestClient(_build_app(factory), cookies={COOKIE_NAME: "tok.sig"})

        response = client.get("/api/v1/test")

        assert response.status_code == 200
        assert response.json() == {"user_id": None}

    def test_request_id_is_echoed(self) -> None:
        factory, _ = _session_factory(None)
        client = TestClient(_build_app(factory))

        response = client.get("/api/v1/test", headers={REQUEST_ID_HEADER: "req-123"})

        assert response.headers[REQUEST_ID_HEADER] == "req-123"

    def test_request_id_is_generated(self) -> None:
        factory, _ = _session_factory(None)
        client = TestClient(_build_app(factory))

        response = client.get("/api/v1/test")

        assert response.headers[REQUEST_ID_HEADER]


class TestProtectedRoutes:
    """The real app answers 401 without a session."""

    @pytest.mark.parametrize("path", ["/api/v1/classes", "/api/v1/families"])
    async def test_protected_route_requires_session(self, app, login, path) -> None:
        login(None)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            response = await c.get(path)

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized", "success": False}
