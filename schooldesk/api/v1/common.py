# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Helpers shared by the v1 routers.

Service modules raise their own exception hierarchies; routers translate
them into HTTP errors with service_errors().

Example:
    with service_errors(not_found=(LocationNotFoundError,)):
        location = await service.get(current_user.id, location_id)
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

ErrorTypes = tuple[type[Exception], ...]


@contextmanager
def service_errors(
    *,
    not_found: ErrorTypes = (),
    forbidden: ErrorTypes = (),
    conflict: ErrorTypes = (),
    bad_request: ErrorTypes = (),
) -> Iterator[None]:
    """Translate service exceptions into HTTPException.

    The groups are checked in order: not_found (404), forbidden (403),
    conflict (409), bad_request (400). Anything else propagates.
    """
    try:
        yield
    except not_found as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except forbidden as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except conflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except bad_request as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
