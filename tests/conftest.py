# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests use mock sessions and never touch a database
- Integration tests get a fresh in-memory SQLite database per test and an
  httpx client bound to the FastAPI app with get_db and require_auth
  overridden
"""

import os
from collections.abc import AsyncIterator, Callable, Iterator
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Cheap bcrypt rounds for accounts created during tests
os.environ.setdefault("AUTH_PASSWORD_HASH_ROUNDS", "4")

from schooldesk.api import create_app  # noqa: E402
from schooldesk.api.dependencies import get_db, require_auth  # noqa: E402
from schooldesk.core.config import RateLimitSettings, Settings, clear_settings_cache  # noqa: E402
from schooldesk.domains.auth import CurrentUser  # noqa: E402
from schooldesk.infrastructure.database.connection import (  # noqa: E402
    create_all_tables,
    create_engine_for_url,
    create_sessionmaker,
)
from schooldesk.infrastructure.database.models import (  # noqa: E402
    BusinessOrganization,
    Cart,
    Location,
    Order,
    Payment,
    Teacher,
    User,
    UserRole,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (in-memory database)"
    )


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment changes in a test do not leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Unit Fixtures
# =============================================================================


@pytest.fixture
def mock_db() -> AsyncMock:
    """Create mock database session."""
    db = AsyncMock()
    db.add = MagicMock()
    db.add_all = MagicMock()
    db.delete = AsyncMock()
    db.flush = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    db.get = AsyncMock()
    return db


@pytest.fixture
def make_result() -> Callable[[object], MagicMock]:
    """Build mock execute() results whose scalar accessors return a value."""

    def _make(value: object) -> MagicMock:
        result = MagicMock()
        result.scalar_one_or_none.return_value = value
        result.scalar.return_value = value
        return result

    return _make


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def test_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_engine_for_url(TEST_DATABASE_URL)
    await create_all_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    """Session for arranging and inspecting rows directly."""
    async with session_factory() as session:
        yield session


async def _create_user(db: AsyncSession, email: str, role: UserRole, name: str) -> User:
    user = User(email=email, name=name, role=role.value, email_verified=True)
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def owner_user(db: AsyncSession) -> User:
    """Business owner with an organization."""
    user = await _create_user(db, "owner@school.example.com", UserRole.BUSINESS, "Olivia Owner")
    db.add(
        BusinessOrganization(
            user_id=user.id,
            company_name="Sunrise Dance Academy",
            contact_email=user.email,
            contact_phone="+1 555 0100",
        )
    )
    await db.commit()
    return user


@pytest.fixture
async def other_owner_user(db: AsyncSession) -> User:
    """A second business owner, used to check owner scoping."""
    return await _create_user(db, "rival@school.example.com", UserRole.BUSINESS, "Riley Rival")


@pytest.fixture
async def admin_user(db: AsyncSession) -> User:
    return await _create_user(db, "admin@platform.example.com", UserRole.ADMIN, "Ada Admin")


@pytest.fixture
def owner(owner_user: User) -> CurrentUser:
    return CurrentUser.from_user(owner_user)


@pytest.fixture
def other_owner(other_owner_user: User) -> CurrentUser:
    return CurrentUser.from_user(other_owner_user)


@pytest.fixture
def admin(admin_user: User) -> CurrentUser:
    return CurrentUser.from_user(admin_user)


@pytest.fixture
async def location(db: AsyncSession, owner_user: User) -> Location:
    row = Location(user_id=owner_user.id, name="Main Studio", address="1 Main St")
    db.add(row)
    await db.commit()
    return row


@pytest.fixture
async def teacher(db: AsyncSession, owner_user: User) -> Teacher:
    row = Teacher(user_id=owner_user.id, name="Tina Teacher", email="tina@school.example.com")
    db.add(row)
    await db.commit()
    return row


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def app(session_factory):
    """FastAPI app on the test database with rate limiting disabled."""
    app = create_app(Settings(rate_limit=RateLimitSettings(enabled=False)))

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def login(app) -> Callable[[CurrentUser | None], None]:
    """Switch the authenticated user; None makes requests anonymous."""

    def _login(user: CurrentUser | None) -> None:
        if user is None:
            app.dependency_overrides.pop(require_auth, None)
        else:
            app.dependency_overrides[require_auth] = lambda: user

    return _login


@pytest.fixture
async def client(app, login, owner: CurrentUser) -> AsyncIterator[AsyncClient]:
    """Client authenticated as the business owner."""
    login(owner)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def period() -> tuple[str, str]:
    """A two month window starting next week, as ISO strings."""
    start = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=7)
    return start.isoformat(), (start + timedelta(days=60)).isoformat()


@pytest.fixture
def place_order(db: AsyncSession) -> Callable[..., object]:
    """Insert a checked-out cart and its order for a portal account.

    ``paid`` adds a payment; ``refund_id`` marks that payment refunded.
    """

    async def _place(
        user_id: str,
        amount: float,
        title: str,
        placed_on: datetime,
        paid: bool = True,
        refund_id: str | None = None,
    ) -> Order:
        order = Order(user_id=user_id, date=placed_on, cart=Cart(amount=amount, product_title=title))
        if paid:
            order.payment = Payment(refund_id=refund_id)
        db.add(order)
        await db.commit()
        return order

    return _place
