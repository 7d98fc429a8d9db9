# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for session cookie resolution."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from schooldesk.domains.auth.session import CurrentUser, SessionService, parse_session_token


def _session_row(expires_in: timedelta, banned: bool = False, role: str = "BUSINESS") -> MagicMock:
    user = MagicMock()
    user.id = "user-1"
    user.email = "owner@school.example.com"
    user.name = "Olivia Owner"
    user.role = role
    user.banned = banned

    session = MagicMock()
    session.id = "session-1"
    session.user_id = user.id
    session.user = user
    session.expires_at = datetime.now(timezone.utc) + expires_in
    return session


class TestParseSessionToken:
    """Tests for parse_session_token."""

    def test_strips_signature(self) -> None:
        assert parse_session_token("tok123.c2lnbmF0dXJl") == "tok123"

    def test_unsigned_token_kept(self) -> None:
        assert parse_session_token("tok123") == "tok123"

    @pytest.mark.parametrize("value", [None, "", ".signature-only"])
    def test_missing_token_returns_none(self, value) -> None:
        assert parse_session_token(value) is None


class TestCurrentUser:
    """Tests for CurrentUser role helpers."""

    def test_roles(self) -> None:
        admin = CurrentUser(id="a", email="a@x.example.com", role="ADMIN")
        owner = CurrentUser(id="b", email="b@x.example.com", role="BUSINESS")

        assert admin.is_admin and not admin.is_business
        assert owner.is_business and not owner.is_admin


class TestSessionService:
    """Tests for SessionService.resolve."""

    @pytest.mark.asyncio
    async def test_valid_session_returns_user(self, mock_db, make_result) -> None:
        mock_db.execute.return_value = make_result(_session_row(timedelta(hours=1)))

        user = await SessionService(mock_db).resolve("tok.sig")

        assert user == CurrentUser(
            id="user-1",
            email="owner@school.example.com",
            name="Olivia Owner",
            role="BUSINESS",
        )

    @pytest.mark.asyncio
    async def test_unknown_token_returns_none(self, mock_db, make_result) -> None:
        mock_db.execute.return_value = make_result(None)

        assert await SessionService(mock_db).resolve("tok.sig") is None

    @pytest.mark.asyncio
    async def test_expired_session_returns_none(self, mock_db, make_result) -> None:
        mock_db.execute.return_value = make_result(_session_row(timedelta(minutes=-1)))

        assert await SessionService(mock_db).resolve("tok.sig") is None

    @pytest.mark.asyncio
    async def test_banned_user_returns_none(self, mock_db, make_result) -> None:
        mock_db.execute.return_value = make_result(
            _session_row(timedelta(hours=1), banned=True)
        )

        assert await SessionService(mock_db).resolve("tok.sig") is None

    @pytest.mark.asyncio
    async def test_missing_cookie_skips_lookup(self, mock_db) -> None:
        assert await SessionService(mock_db).resolve(None) is None
        mock_db.execute.assert_not_called()
