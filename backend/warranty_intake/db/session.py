"""Database engine and session configuration."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# Register all models with SQLModel metadata before create_all()
import warranty_intake.models  # noqa: F401
from warranty_intake.config import settings


def create_engine(database_url: str) -> AsyncEngine:
    """Create an async engine with pool settings suited to the backend."""
    options: dict[str, Any] = {
        "echo": False,  # SQL logging controlled via structlog configuration
        "future": True,
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=300,  # Recycle connections after 5 minutes
        )
    return create_async_engine(database_url, **options)


def create_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = create_engine(settings.database_url)

async_session_maker = create_session_maker(engine)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create missing tables. Existing tables and rows are left untouched."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the engine and release all connections.

    Should be called during application shutdown.
    """
    await engine.dispose()
