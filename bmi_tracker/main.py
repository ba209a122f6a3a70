"""
Main FastAPI application
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from bmi_tracker.config import settings
from bmi_tracker.cors import EmptyPreflightCORSMiddleware
from bmi_tracker.database.connection import close_database, init_database
from bmi_tracker.errors import register_exception_handlers
from bmi_tracker.routes import health, weights, checklist

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store that cannot be reached at startup stops the process
    await init_database()
    try:
        yield
    finally:
        await close_database()


# Create FastAPI app
app = FastAPI(
    title="BMI Tracker Backend API",
    description="Body-weight entries and daily meal checklist",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    EmptyPreflightCORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(weights.router, tags=["Weights"])
app.include_router(checklist.router, tags=["Checklist"])
