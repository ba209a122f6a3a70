"""
Database connection management
"""
import logging
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from bmi_tracker.config import settings
from bmi_tracker.database.schema import ensure_schema
from bmi_tracker.utils.url_builder import resolve_database_url

logger = logging.getLogger(__name__)

# Global database objects, owned by the application lifespan
engine: Optional[AsyncEngine] = None
async_session: Optional[async_sessionmaker] = None


async def init_database(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create the shared engine and check the store is reachable

    Args:
        database_url: Async database URL; defaults to the configured one

    Returns:
        The initialized engine

    Raises:
        RuntimeError: If no database is configured
        Exception: Any driver error raised while connecting
    """
    global engine, async_session

    database_url = database_url or resolve_database_url(settings)
    if not database_url:
        raise RuntimeError("Database not configured: set DB_HOST/DB_USER/DB_PASS/DB_NAME or DATABASE_URL")

    engine_kwargs = {"pool_pre_ping": True, "echo": False}
    if not database_url.startswith("sqlite"):
        engine_kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_SIZE * 2,
            pool_recycle=3600,
        )

    new_engine = create_async_engine(database_url, **engine_kwargs)
    try:
        async with new_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        if settings.DB_AUTO_CREATE:
            await ensure_schema(new_engine)
    except Exception:
        logger.exception("DB connect error")
        await new_engine.dispose()
        raise

    engine = new_engine
    async_session = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    logger.info("Database engine initialized (%s)", engine.dialect.name)
    return engine


async def close_database() -> None:
    """Dispose of the shared engine and its pool."""
    global engine, async_session

    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    async_session = None


def get_session() -> Optional[async_sessionmaker]:
    """
    Get database session maker

    Returns:
        Session maker or None if not initialized
    """
    return async_session
