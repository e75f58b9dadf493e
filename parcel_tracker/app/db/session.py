"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support (aiosqlite by default, asyncpg for PostgreSQL).
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from parcel_tracker.app.core.config import settings

# Create declarative base for models
Base = declarative_base()


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create an async engine from settings.
    
    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    url = database_url or settings.database_url
    kwargs = {
        "echo": settings.db_echo if echo is None else echo,
        "future": True,
    }
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow
    return create_async_engine(url, **kwargs)


# Create async engine
engine = build_engine()

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db():
    """
    Dependency-style provider for database sessions.
    
    Yields an async database session and ensures it's properly closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create the parcel table if it does not exist."""
    # Import models to ensure they are registered with Base
    from parcel_tracker.app.models.parcel import Parcel  # noqa: F401
    
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(bind: AsyncEngine = engine) -> None:
    """Drop the parcel table."""
    from parcel_tracker.app.models.parcel import Parcel  # noqa: F401
    
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
