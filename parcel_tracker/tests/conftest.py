"""
Centralized Test Configuration.
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from parcel_tracker.app.db.session import init_models, drop_models
from parcel_tracker.app.schemas.parcel import ParcelCreate
from parcel_tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test; schema created before and dropped after."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(test_engine)
    
    yield test_engine
    
    await drop_models(test_engine)
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


def make_parcel(**overrides) -> ParcelCreate:
    """Test parcel: client 1000, registered, address 'test'."""
    data = {
        "client": 1000,
        "status": "registered",
        "address": "test",
        "created_at": "2024-01-01T00:00:00Z",
    }
    data.update(overrides)
    return ParcelCreate(**data)
