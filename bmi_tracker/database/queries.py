"""
Session handling with store error wrapping
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bmi_tracker.database.connection import get_session
from bmi_tracker.errors import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_session() -> AsyncIterator[AsyncSession]:
    """
    Open a session with its own transaction, committed on exit

    Every store call runs in one of these, so statements never share a
    transaction across requests. No retry: a failed statement fails the
    request that issued it.

    Yields:
        Database session inside an active transaction

    Raises:
        StoreError: carrying the driver's error text
    """
    session_maker = get_session()
    if session_maker is None:
        raise StoreError("Database not configured")

    try:
        async with session_maker() as session:
            async with session.begin():
                yield session
    except SQLAlchemyError as e:
        error_msg = str(getattr(e, "orig", None) or e)
        logger.error("Database error: %s: %s", type(e).__name__, error_msg[:200], exc_info=True)
        raise StoreError(error_msg) from e
