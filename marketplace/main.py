"""FreelancerWorks - job marketplace API for freelancers and employers."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.core.config import settings
from marketplace.core.redis_client import close_redis
from marketplace.core.storage import init_models
from marketplace.routers import (
    applications_router,
    jobs_router,
    notifications_router,
    profiles_router,
    resumes_router,
)

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    await init_models()

    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY is not set; transactional email is disabled")

    logger.info("Application initialized")

    yield

    logger.info("Shutting down...")
    await close_redis()
    logger.info("Shutdown complete")


app = FastAPI(
    title="FreelancerWorks",
    description="Job marketplace connecting freelancers and employers",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs_router)
app.include_router(applications_router)
app.include_router(notifications_router)
app.include_router(profiles_router)
app.include_router(resumes_router)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "message": "FreelancerWorks API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
        "realtime_enabled": settings.realtime_enabled,
        "email_enabled": bool(settings.resend_api_key),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "freelancerworks"}
