"""Pydantic schemas for request/response validation."""

from marketplace.schemas.applications import (
    ApplicationForm,
    InterviewData,
    ReviewResult,
    StatusUpdateRequest,
)
from marketplace.schemas.jobs import JobCreate, JobFilters, JobResponse

__all__ = [
    "ApplicationForm",
    "InterviewData",
    "JobCreate",
    "JobFilters",
    "JobResponse",
    "ReviewResult",
    "StatusUpdateRequest",
]
