"""Job posting and browsing."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.context import RequestContext
from marketplace.core.exceptions import InvalidInputError, NotFoundError, PermissionDeniedError
from marketplace.models.application import JobApplication
from marketplace.models.job import Job
from marketplace.models.profile import Profile
from marketplace.schemas.jobs import (
    EmployerJob,
    EmployerSummary,
    JobCreate,
    JobFilters,
    JobListing,
)
from marketplace.utils.filters import JobFilter

logger = logging.getLogger(__name__)


class JobService:
    """Employer job postings and the public job board."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def post_job(self, ctx: RequestContext, payload: JobCreate) -> Job:
        """Create an open job owned by the calling employer."""
        ctx.require_role("employer")

        job = Job(
            employer_id=ctx.user_id,
            title=payload.title.strip(),
            description=payload.description,
            budget_min=payload.budget_min,
            budget_max=payload.budget_max,
            location=payload.location or None,
            job_type=payload.job_type,
            experience_level=payload.experience_level,
            skills_required=payload.skills_required,
            status="open",
        )
        self.session.add(job)
        await self.session.commit()
        await self.session.refresh(job)
        logger.info(f"Job {job.id} posted by employer {ctx.user_id}")
        return job

    async def get_job(self, job_id: str) -> Job:
        job = await self.session.get(Job, job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return job

    async def close_job(self, ctx: RequestContext, job_id: str) -> Job:
        """Stop accepting applications for a job."""
        job = await self.get_job(job_id)
        if job.employer_id != ctx.user_id:
            raise PermissionDeniedError("You can only close your own jobs")
        if job.status == "closed":
            raise InvalidInputError("Job is already closed")

        job.status = "closed"
        await self.session.commit()
        logger.info(f"Job {job_id} closed by employer {ctx.user_id}")
        return job

    async def browse_jobs(self, filters: JobFilters | None = None) -> list[JobListing]:
        """Open jobs, newest first, with employer display data."""
        result = await self.session.execute(
            select(Job).where(Job.status == "open").order_by(Job.created_at.desc())
        )
        jobs = JobFilter(filters or JobFilters()).apply(list(result.scalars()))
        if not jobs:
            return []

        employers = await self._load_profiles({job.employer_id for job in jobs})
        listings = []
        for job in jobs:
            employer = employers.get(job.employer_id)
            listing = JobListing.model_validate(job)
            if employer is not None:
                listing.employer = EmployerSummary(
                    full_name=employer.full_name, email=employer.email
                )
            listings.append(listing)
        return listings

    async def employer_jobs(self, ctx: RequestContext) -> list[EmployerJob]:
        """The caller's jobs, newest first, with application counts."""
        result = await self.session.execute(
            select(Job, func.count(JobApplication.id))
            .outerjoin(JobApplication, JobApplication.job_id == Job.id)
            .where(Job.employer_id == ctx.user_id)
            .group_by(Job.id)
            .order_by(Job.created_at.desc())
        )
        return [
            EmployerJob.model_validate(job).model_copy(update={"application_count": count})
            for job, count in result.all()
        ]

    async def _load_profiles(self, user_ids: set[str]) -> dict[str, Profile]:
        result = await self.session.execute(
            select(Profile).where(Profile.id.in_(user_ids))
        )
        return {profile.id: profile for profile in result.scalars()}
