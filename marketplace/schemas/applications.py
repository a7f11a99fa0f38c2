"""Schemas for job applications and the review workflow."""

from datetime import date, datetime, time
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

ApplicationStatus = Literal["pending", "shortlisted", "accepted", "rejected"]
ReviewStatus = Literal["shortlisted", "accepted", "rejected"]


class ApplicationForm(BaseModel):
    """Freelancer's application to a job."""

    name: str = Field(..., min_length=2, description="Applicant's full name")
    email: EmailStr
    phone: str = Field(..., description="Contact phone, at least 10 digits")
    cover_letter: str = Field(..., min_length=20)
    proposed_rate: float | None = Field(default=None, ge=0)

    @field_validator("phone")
    @classmethod
    def check_phone_digits(cls, value: str) -> str:
        digits = sum(ch.isdigit() for ch in value)
        if digits < 10:
            raise ValueError("Phone number must be at least 10 digits")
        return value.strip()


class InterviewData(BaseModel):
    """Interview slot offered to a shortlisted candidate."""

    date: date
    time: time
    notes: str = ""


class StatusUpdateRequest(BaseModel):
    """Employer's decision on an application."""

    status: ReviewStatus
    interview: InterviewData | None = Field(
        default=None, description="Only valid together with status=shortlisted"
    )


class ApplicationResponse(BaseModel):
    """An application as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    job_id: str
    freelancer_id: str
    status: ApplicationStatus
    cover_letter: str
    proposed_rate: float | None
    phone_number: str | None
    resume_url: str | None
    interview_date: date | None
    interview_time: time | None
    interview_notes: str | None
    created_at: datetime


class FreelancerSummary(BaseModel):
    full_name: str | None = None
    email: str = ""
    skills: list[str] = Field(default_factory=list)


class ApplicationDetail(ApplicationResponse):
    """Application joined with applicant and job display data."""

    freelancer: FreelancerSummary = Field(default_factory=FreelancerSummary)
    job_title: str = ""


class MyApplication(ApplicationResponse):
    """Freelancer's view of their own application."""

    job_title: str = ""
    job_status: str | None = None
    budget_min: float | None = None
    budget_max: float | None = None


class EmployerApplications(BaseModel):
    """Employer dashboard listing."""

    items: list[ApplicationDetail]
    counts: dict[str, int]


class ReviewResult(BaseModel):
    """Outcome of a status change."""

    application: ApplicationDetail
    job_status: str
    notification_id: str | None = None
    email_sent: bool = False


class ResumeLink(BaseModel):
    url: str
    expires_at: datetime
