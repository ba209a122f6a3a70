"""
Health check endpoints
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from bmi_tracker.database.queries import store_session
from bmi_tracker.errors import StoreError

router = APIRouter()


@router.get("/healthz")
async def healthcheck():
    """Health check endpoint; pings the store with SELECT 1"""
    try:
        async with store_session() as session:
            await session.execute(text("SELECT 1"))
    except StoreError as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": "unreachable", "detail": str(e)},
        )
    return {"status": "ok", "database": "ok"}
