from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from employee_records.core.config import settings
from employee_records.db.base_class import Base


def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.SQLALCHEMY_ECHO}
    if settings.is_sqlite:
        # SQLite picks its own pool; pool sizing arguments are rejected there
        return options

    # - pool_pre_ping: verify connections are alive before use
    # - pool_recycle: recycle connections after 1 hour to avoid DB-side timeouts
    # - pool_timeout: wait up to 30s for a connection before raising
    options.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_timeout=30,
    )
    return options


engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **_engine_options())

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def check_db_connection() -> bool:
    """
    Verify database connectivity. Used by the health check.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create missing tables from the model metadata (development only)."""
    # Register the models on Base.metadata
    import employee_records.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
