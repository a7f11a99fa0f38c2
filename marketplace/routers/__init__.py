"""API routers."""

from marketplace.routers.applications import router as applications_router
from marketplace.routers.jobs import router as jobs_router
from marketplace.routers.notifications import router as notifications_router
from marketplace.routers.profiles import router as profiles_router
from marketplace.routers.resumes import router as resumes_router

__all__ = [
    "applications_router",
    "jobs_router",
    "notifications_router",
    "profiles_router",
    "resumes_router",
]
