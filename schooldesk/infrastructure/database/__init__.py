# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for SchoolDesk.

Example:
    from schooldesk.infrastructure.database import get_session

    async with get_session() as session:
        result = await session.execute(select(Term))
"""

from schooldesk.infrastructure.database.connection import (
    DatabaseError,
    close_database,
    create_all_tables,
    create_engine_for_url,
    create_sessionmaker,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)

__all__ = [
    "DatabaseError",
    "close_database",
    "create_all_tables",
    "create_engine_for_url",
    "create_sessionmaker",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
]
