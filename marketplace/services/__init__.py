"""Marketplace services."""

from marketplace.services.application_service import ApplicationService
from marketplace.services.job_service import JobService
from marketplace.services.notification_service import NotificationService
from marketplace.services.profile_service import ProfileService
from marketplace.services.review_service import ReviewService

__all__ = [
    "ApplicationService",
    "JobService",
    "NotificationService",
    "ProfileService",
    "ReviewService",
]
