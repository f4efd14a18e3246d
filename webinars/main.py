"""
Webinar Management Backend - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from webinars.api import webinars
from webinars.config import settings
from webinars.db import init_db, close_db
from webinars.domain.entities import (
    DomainError,
    DuplicateWebinarError,
    NaiveTimestampError,
    SeatsValidationError,
    WebinarForbiddenError,
    WebinarNotFoundError,
    WebinarUpdateError,
)
from webinars.version import __version__
import logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown"""
    logger.info("🚀 Starting Webinar Management Backend")
    logger.info(f"📦 Version: {__version__}")
    logger.info(f"📝 Environment: {settings.environment}")

    await init_db()

    yield

    logger.info("👋 Shutting down")
    await close_db()


app = FastAPI(
    title="Webinar Management Backend",
    description="Webinar records and seat management",
    version=__version__,
    lifespan=lifespan,
)

if settings.cors_origin_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"✅ CORS configured for origins: {settings.cors_origin_list}")


# ============================================
# Domain error → HTTP status mapping
# ============================================

ERROR_STATUS_CODES = {
    WebinarNotFoundError: status.HTTP_404_NOT_FOUND,
    WebinarForbiddenError: status.HTTP_403_FORBIDDEN,
    SeatsValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateWebinarError: status.HTTP_409_CONFLICT,
    NaiveTimestampError: status.HTTP_400_BAD_REQUEST,
    WebinarUpdateError: status.HTTP_404_NOT_FOUND,
}


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors raised by use cases and repositories"""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} → {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


app.include_router(webinars.router, prefix="/webinars", tags=["webinars"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment
    }

