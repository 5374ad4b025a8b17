"""Database package with engine and session management."""

from warranty_intake.db.session import (
    async_session_maker,
    create_engine,
    create_session_maker,
    dispose_engine,
    engine,
    init_db,
)

__all__ = [
    "async_session_maker",
    "create_engine",
    "create_session_maker",
    "dispose_engine",
    "engine",
    "init_db",
]
