"""Database session management with async SQLAlchemy."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bookshelf.config import settings

logger = structlog.get_logger(__name__)

engine = create_async_engine(settings.database_url, echo=settings.db_echo)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def close_db() -> None:
    """Dispose of the connection pool."""
    logger.info("Closing database connection")
    await engine.dispose()
    logger.info("Database connection closed")
