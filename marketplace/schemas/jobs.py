"""Schemas for job postings."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

JobType = Literal["full-time", "part-time", "contract", "freelance"]
ExperienceLevel = Literal["entry", "intermediate", "expert"]
JobStatus = Literal["open", "in_progress", "closed"]


class JobCreate(BaseModel):
    """Request to post a new job."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    budget_min: float | None = Field(default=None, ge=0)
    budget_max: float | None = Field(default=None, ge=0)
    location: str | None = Field(default=None, max_length=255)
    job_type: JobType | None = None
    experience_level: ExperienceLevel | None = None
    skills_required: list[str] = Field(default_factory=list)

    @field_validator("skills_required")
    @classmethod
    def strip_skills(cls, value: list[str]) -> list[str]:
        return [skill.strip() for skill in value if skill and skill.strip()]

    @model_validator(mode="after")
    def check_budget_range(self) -> "JobCreate":
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_max < self.budget_min
        ):
            raise ValueError("budget_max must be greater than or equal to budget_min")
        return self


class JobFilters(BaseModel):
    """Browse filters for open jobs."""

    search: str | None = Field(None, description="Matches title, description or skills")
    job_type: JobType | None = None
    experience_level: ExperienceLevel | None = None
    min_budget: float | None = Field(None, ge=0, description="Lower bound on budget_min")
    max_budget: float | None = Field(None, ge=0, description="Upper bound on budget_max")


class JobResponse(BaseModel):
    """A job as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    employer_id: str
    title: str
    description: str
    budget_min: float | None
    budget_max: float | None
    location: str | None
    job_type: str | None
    experience_level: str | None
    skills_required: list[str]
    status: JobStatus
    created_at: datetime


class EmployerSummary(BaseModel):
    full_name: str | None = None
    email: str | None = None


class JobListing(JobResponse):
    """Open job with its employer's display data."""

    employer: EmployerSummary = Field(default_factory=EmployerSummary)


class EmployerJob(JobResponse):
    """Employer's own job with the number of applications received."""

    application_count: int = 0
