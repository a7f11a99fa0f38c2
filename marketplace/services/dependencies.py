"""FastAPI dependencies wiring services to their collaborators."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.redis_client import NotificationFeed, get_notification_feed
from marketplace.core.storage import get_session
from marketplace.services.application_service import ApplicationService
from marketplace.services.email_service import EmailDispatcher, get_email_dispatcher
from marketplace.services.job_service import JobService
from marketplace.services.notification_service import NotificationService
from marketplace.services.profile_service import ProfileService
from marketplace.services.resume_store import ResumeStore, get_resume_store
from marketplace.services.review_service import ReviewService


def get_job_service(session: AsyncSession = Depends(get_session)) -> JobService:
    return JobService(session)


def get_profile_service(session: AsyncSession = Depends(get_session)) -> ProfileService:
    return ProfileService(session)


def get_application_service(
    session: AsyncSession = Depends(get_session),
    resume_store: ResumeStore = Depends(get_resume_store),
) -> ApplicationService:
    return ApplicationService(session, resume_store)


def get_notification_service(
    session: AsyncSession = Depends(get_session),
    feed: NotificationFeed | None = Depends(get_notification_feed),
) -> NotificationService:
    return NotificationService(session, feed)


def get_review_service(
    session: AsyncSession = Depends(get_session),
    notifications: NotificationService = Depends(get_notification_service),
    email: EmailDispatcher = Depends(get_email_dispatcher),
) -> ReviewService:
    """Create the review workflow with its collaborators."""
    return ReviewService(session, notifications, email)
