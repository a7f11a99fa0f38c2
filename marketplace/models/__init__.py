"""Database models."""

from marketplace.models.application import JobApplication
from marketplace.models.job import Job
from marketplace.models.notification import Notification
from marketplace.models.profile import Profile
from marketplace.models.session import AuthSession

__all__ = [
    "AuthSession",
    "Job",
    "JobApplication",
    "Notification",
    "Profile",
]
