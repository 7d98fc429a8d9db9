# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for router helpers, pagination and rate limit keys."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from schooldesk.api.middleware.rate_limit import get_client_identifier
from schooldesk.api.v1.common import service_errors
from schooldesk.models.common import Pagination


class MissingError(Exception):
    pass


class SharedError(Exception):
    pass


class TestServiceErrors:
    @pytest.mark.parametrize(
        ("groups", "error", "status_code"),
        [
            ({"not_found": (MissingError,)}, MissingError("Location 1 not found"), 404),
            ({"forbidden": (SharedError,)}, SharedError("shared"), 403),
            ({"conflict": (MissingError,)}, MissingError("taken"), 409),
            ({"bad_request": (MissingError,)}, MissingError("bad range"), 400),
        ],
    )
    def test_maps_to_status(self, groups, error, status_code) -> None:
        with pytest.raises(HTTPException) as exc_info:
            with service_errors(**groups):
                raise error

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == str(error)

    def test_unmapped_errors_propagate(self) -> None:
        with pytest.raises(SharedError):
            with service_errors(not_found=(MissingError,)):
                raise SharedError("boom")

    def test_no_error_passes(self) -> None:
        with service_errors(not_found=(MissingError,)):
            value = 1

        assert value == 1


class TestPagination:
    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 10, 0), (10, 10, 1), (11, 10, 2), (95, 20, 5)],
    )
    def test_total_pages(self, total, limit, pages) -> None:
        assert Pagination.build(page=1, limit=limit, total=total).total_pages == pages


class TestClientIdentifier:
    def _request(self, user) -> MagicMock:
        request = MagicMock()
        request.state = SimpleNamespace(user=user)
        request.client.host = "203.0.113.9"
        request.headers = {}
        return request

    def test_authenticated_user_keyed_by_id(self) -> None:
        request = self._request(SimpleNamespace(id="user-42"))

        assert get_client_identifier(request) == "user:user-42"

    def test_anonymous_keyed_by_ip(self) -> None:
        request = self._request(None)

        assert get_client_identifier(request) == "ip:203.0.113.9"
