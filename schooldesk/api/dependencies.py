# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

Dependencies are used to:
- Get a database session per request
- Get the authenticated user
- Restrict platform routes to administrators

Example:
    @router.get("")
    async def list_locations(
        current_user: CurrentUser = Depends(require_auth),
        db: AsyncSession = Depends(get_db),
    ):
        ...
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from schooldesk.domains.auth import CurrentUser
from schooldesk.infrastructure.database.connection import get_session

logger = logging.getLogger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the request.

    Yields:
        AsyncSession, rolled back if the request fails.
    """
    async with get_session() as session:
        yield session


# =========================================================================
# Authentication Dependencies
# =========================================================================


def get_current_user(request: Request) -> CurrentUser | None:
    """Get the user resolved by the auth middleware, if any."""
    return getattr(request.state, "user", None)


def require_auth(request: Request) -> CurrentUser:
    """Require an authenticated user.

    Raises:
        HTTPException: 401 if the request carries no valid session.
    """
    user = get_current_user(request)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user


def require_admin(current_user: CurrentUser = Depends(require_auth)) -> CurrentUser:
    """Require a platform administrator.

    Raises:
        HTTPException: 401 if unauthenticated, 403 if not an admin.
    """
    if not current_user.is_admin:
        logger.info("Admin route refused for %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
