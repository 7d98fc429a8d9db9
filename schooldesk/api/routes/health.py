# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Liveness and readiness probes.

Both probes run a ``SELECT 1`` round trip; they are mounted outside the
/api/v1 prefix and skip session lookup.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from schooldesk import __version__
from schooldesk.core.config import get_settings
from schooldesk.infrastructure.database.connection import DatabaseError, get_engine

logger = logging.getLogger(__name__)

router = APIRouter()

_started_at = time.time()


class ProbeResult(BaseModel):
    """Outcome of probing one backing service."""
    status: str = Field(description="healthy or unhealthy")
    latency_ms: float | None = Field(None, description="Round trip in milliseconds")
    message: str | None = Field(None, description="Failure reason, if any")


class Dependencies(BaseModel):
    database: ProbeResult | None = None


class HealthStatus(BaseModel):
    """Body of GET /health."""
    status: str = Field(description="healthy when every dependency is")
    timestamp: datetime = Field(description="Server time in UTC")
    version: str = Field(description="SchoolDesk package version")
    environment: str = Field(description="Configured environment name")
    uptime_seconds: int = Field(description="Seconds since process start")
    components: Dependencies = Field(default_factory=Dependencies)


class ReadinessStatus(BaseModel):
    ready: bool = Field(description="True when requests can be served")
    checks: dict[str, Any] = Field(description="Per-dependency probe summary")


async def probe_database() -> ProbeResult:
    """Run SELECT 1 against the configured engine."""
    try:
        engine = get_engine()
        began = time.perf_counter()
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
        elapsed_ms = (time.perf_counter() - began) * 1000
    except (DatabaseError, SQLAlchemyError, OSError) as exc:
        logger.error("Database probe failed: %s", exc)
        return ProbeResult(status="unhealthy", message=str(exc))
    return ProbeResult(status="healthy", latency_ms=round(elapsed_ms, 2))


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    """Report overall status, version and uptime along with the database probe."""
    database = await probe_database()
    return HealthStatus(
        status=database.status,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=get_settings().environment,
        uptime_seconds=int(time.time() - _started_at),
        components=Dependencies(database=database),
    )


@router.get("/health/ready", response_model=ReadinessStatus)
async def ready() -> ReadinessStatus:
    database = await probe_database()
    return ReadinessStatus(
        ready=database.status == "healthy",
        checks={"database": {"status": database.status, "latency_ms": database.latency_ms}},
    )
