# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session cookie authentication middleware.

This middleware reads the session cookie issued by the auth service,
looks the session up and populates request.state.user.

Example:
    GET /api/v1/classes
    Cookie: schooldesk.session_token=<token>.<signature>
"""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from schooldesk.domains.auth import SessionService
from schooldesk.infrastructure.database.connection import get_session
from schooldesk.utils.logging import bind_context, clear_context

logger = logging.getLogger(__name__)

# Paths that don't require authentication
PUBLIC_PATHS = frozenset({
    "/",
    "/health",
    "/health/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
})

REQUEST_ID_HEADER = "X-Request-ID"


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware for session cookie authentication.

    For public paths, authentication is skipped. For protected paths
    without a valid session the request continues with
    request.state.user = None and the endpoint dependency answers 401.

    Attributes:
        _cookie_name: Name of the session cookie.
        _session_factory: Async context manager factory yielding a session.
    """

    def __init__(
        self,
        app: ASGIApp,
        cookie_name: str,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]] = get_session,
    ) -> None:
        super().__init__(app)
        self._cookie_name = cookie_name
        self._session_factory = session_factory

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        """Resolve the session cookie and bind the request log context."""
        request.state.user = None

        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        bind_context(request_id=request_id)

        if not self._is_public_path(request.url.path):
            cookie = request.cookies.get(self._cookie_name)
            if cookie:
                try:
                    async with self._session_factory() as session:
                        request.state.user = await SessionService(session).resolve(cookie)
                except Exception as e:
                    logger.warning("Auth middleware error: %s", str(e))
                    # Continue with user=None

            if request.state.user is not None:
                bind_context(user_id=request.state.user.id)
                logger.debug("User authenticated: %s", request.state.user.id)

        try:
            response = await call_next(request)
        finally:
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _is_public_path(self, path: str) -> bool:
        return path in PUBLIC_PATHS
