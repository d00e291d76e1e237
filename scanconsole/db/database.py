# scanconsole/db/database.py
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.engine import make_url
from typing import AsyncGenerator

from scanconsole.core.config import settings
from scanconsole.core.logging import logger


def _engine_url(database_url: str) -> str:
    return database_url.replace("postgresql://", "postgresql+asyncpg://")


def create_engine_from_settings():
    url = make_url(_engine_url(settings.DATABASE_URL))
    kwargs = {"echo": settings.DEBUG}
    # SQLite drivers manage their own pool
    if url.get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
    return create_async_engine(url, **kwargs)


# Create async engine
engine = create_engine_from_settings()

# Create async session factory
async_session_local = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency"""
    async with async_session_local() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Initialize database (create tables, provision default settings)"""
    from scanconsole.db.base import Base
    from scanconsole.db.models import Setting, RegistryAccount  # noqa: F401 - register models
    from scanconsole.services.settings_service import seed_default_settings

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_local() as session:
        created = await seed_default_settings(session)
        if created:
            logger.info("Provisioned default settings", extra={"count": created})


async def close_db():
    """Close database connections"""
    await engine.dispose()
