"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

import itertools
import uuid
from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.db.session import get_db, init_db
from blog_api.main import app
from blog_api.models import Base, EntityFactory


# Test database URL
# WHY: In-memory SQLite eliminates external database dependencies.
# StaticPool keeps a single connection so every session sees the same
# in-memory database.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite://"

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0)


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    Create a test database engine.

    WHY: Function scope ensures each test gets a fresh database state.
    """
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    await init_db(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    WHY: AsyncClient over ASGITransport exercises the full app (middleware,
    exception handlers, routers) without running a server. Startup events
    don't fire, so no sample data is seeded.

    Yields:
        AsyncClient: HTTP client for making test requests
    """

    async def override_get_db():
        """Override database dependency with test session."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def ticking_clock():
    """Clock that advances one second per call, starting at FIXED_NOW."""
    ticks = itertools.count()
    return lambda: FIXED_NOW + timedelta(seconds=next(ticks))


@pytest.fixture
def sequential_ids():
    """Id generator yielding UUID(int=1), UUID(int=2), ..."""
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def entity_factory(fixed_clock, sequential_ids) -> EntityFactory:
    """
    Deterministic entity factory.

    WHY: Known ids and timestamps make assertions exact.
    """
    return EntityFactory(clock=fixed_clock, id_generator=sequential_ids)


@pytest.fixture
def sample_user_data() -> dict:
    """
    Sample user request body.

    WHY: Centralizing test data ensures consistency across tests.
    """
    return {
        "email": "a@x.com",
        "name": "A",
        "age": 20,
    }
