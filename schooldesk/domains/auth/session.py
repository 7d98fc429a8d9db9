# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session cookie resolution.

Sessions are issued by the external sign-in service and stored in
``user_sessions``. This module only reads them: it turns a cookie value
into the authenticated user, or None when the session is unknown,
expired or belongs to a banned account.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from schooldesk.infrastructure.database.models import User, UserRole, UserSession
from schooldesk.utils.datetime import is_expired

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated user attached to the request.

    The user id doubles as the organization id for business owners.
    """

    id: str
    email: str
    name: str | None = None
    role: str = UserRole.FAMILY.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def is_business(self) -> bool:
        return self.role == UserRole.BUSINESS.value

    @classmethod
    def from_user(cls, user: User) -> CurrentUser:
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)


def parse_session_token(cookie_value: str | None) -> str | None:
    """Extract the session token from a cookie value.

    Signed cookies have the form ``<token>.<signature>``; only the token
    part is stored server side.

    Examples:
        >>> parse_session_token("abc.sig")
        'abc'
        >>> parse_session_token("abc")
        'abc'
        >>> parse_session_token("") is None
        True
    """
    if not cookie_value:
        return None
    token = cookie_value.split(".", 1)[0].strip()
    return token or None


class SessionService:
    """Looks up login sessions.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def resolve(self, cookie_value: str | None) -> CurrentUser | None:
        """Resolve a session cookie to the authenticated user.

        Args:
            cookie_value: Raw cookie value, possibly signed.

        Returns:
            CurrentUser, or None if the request is unauthenticated.
        """
        token = parse_session_token(cookie_value)
        if token is None:
            return None

        query = (
            select(UserSession)
            .options(selectinload(UserSession.user))
            .where(UserSession.token == token)
        )
        result = await self.db.execute(query)
        session = result.scalar_one_or_none()

        if session is None:
            logger.debug("Unknown session token")
            return None

        if is_expired(session.expires_at):
            logger.debug("Session %s expired", session.id)
            return None

        if session.user is None or session.user.banned:
            logger.info("Rejected session for banned user %s", session.user_id)
            return None

        return CurrentUser.from_user(session.user)
