"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from app.api.routes import auth, health, readings
from app.core.config import settings
from app.core.database import Base, engine
from app.core.logging import setup_logging

# Import models for Base.metadata.create_all
from app.models import meter_reading  # noqa: F401

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Photos are served from here; the directory must exist before mounting
settings.IMAGES_DIR.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started, data in %s", settings.PROJECT_NAME, settings.VERSION, settings.DATA_DIR)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Water meter reading tracker",
    lifespan=lifespan,
)

# Session middleware for password authentication
app.add_middleware(
    SessionMiddleware,  # type: ignore[arg-type]
    secret_key=settings.SECRET_KEY,
    session_cookie="watermeter_session",
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=not settings.DEBUG,
)

# Mount meter photos
app.mount("/images", StaticFiles(directory=str(settings.IMAGES_DIR)), name="images")

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(auth.router, prefix="/api")
app.include_router(readings.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
