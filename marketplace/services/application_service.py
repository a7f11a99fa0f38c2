"""Application intake and read-side views."""

import logging
from collections import Counter
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.config import settings
from marketplace.core.context import RequestContext
from marketplace.core.exceptions import (
    DuplicateApplicationError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
)
from marketplace.models.application import APPLICATION_STATUSES, JobApplication
from marketplace.models.job import Job
from marketplace.models.profile import Profile
from marketplace.schemas.applications import (
    ApplicationDetail,
    ApplicationForm,
    EmployerApplications,
    FreelancerSummary,
    MyApplication,
    ResumeLink,
)
from marketplace.services.resume_store import ResumeStore
from marketplace.utils.validators import validate_resume_upload

logger = logging.getLogger(__name__)


@dataclass
class ResumeUpload:
    """Resume file received with an application."""

    filename: str | None
    content: bytes


def build_detail(
    application: JobApplication, job: Job, freelancer: Profile | None
) -> ApplicationDetail:
    """Combine an application row with its pre-joined job and applicant."""
    detail = ApplicationDetail.model_validate(application)
    detail.job_title = job.title
    if freelancer is not None:
        detail.freelancer = FreelancerSummary(
            full_name=freelancer.full_name,
            email=freelancer.email,
            skills=freelancer.skills or [],
        )
    return detail


class ApplicationService:
    """Freelancer submissions and the views built on them."""

    def __init__(self, session: AsyncSession, resume_store: ResumeStore | None = None):
        self.session = session
        self.resume_store = resume_store

    async def submit_application(
        self,
        ctx: RequestContext,
        job_id: str,
        form: ApplicationForm,
        resume: ResumeUpload | None = None,
    ) -> JobApplication:
        """Submit a pending application, uploading the resume first."""
        ctx.require_role("freelancer")

        job = await self.session.get(Job, job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        if job.status != "open":
            raise InvalidInputError(f"Job {job_id} is not accepting applications")

        if await self._has_already_applied(job_id, ctx.user_id):
            raise DuplicateApplicationError(job_id, ctx.user_id)

        resume_key = None
        if resume is not None:
            resume_key = await self._store_resume(ctx, job_id, resume)

        application = JobApplication(
            job_id=job_id,
            freelancer_id=ctx.user_id,
            status="pending",
            cover_letter=form.cover_letter,
            proposed_rate=form.proposed_rate,
            phone_number=form.phone,
            resume_url=resume_key,
        )
        self.session.add(application)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateApplicationError(job_id, ctx.user_id) from e

        await self.session.refresh(application)
        logger.info(
            f"Application {application.id} submitted by {ctx.user_id} for job {job_id}"
        )
        return application

    async def _has_already_applied(self, job_id: str, freelancer_id: str) -> bool:
        result = await self.session.execute(
            select(JobApplication.id).where(
                JobApplication.job_id == job_id,
                JobApplication.freelancer_id == freelancer_id,
            )
        )
        return result.first() is not None

    async def _store_resume(
        self, ctx: RequestContext, job_id: str, resume: ResumeUpload
    ) -> str:
        if self.resume_store is None:
            raise InvalidInputError("Resume uploads are not available")

        validation = validate_resume_upload(
            resume.filename, len(resume.content), settings.resume_max_bytes
        )
        if not validation.is_valid:
            raise InvalidInputError(validation.error)

        key = ResumeStore.build_key(ctx.user_id, job_id, resume.filename)
        return await self.resume_store.save(key, resume.content)

    async def list_my_applications(self, ctx: RequestContext) -> list[MyApplication]:
        """The caller's applications, newest first, with job data."""
        result = await self.session.execute(
            select(JobApplication, Job)
            .join(Job, Job.id == JobApplication.job_id)
            .where(JobApplication.freelancer_id == ctx.user_id)
            .order_by(JobApplication.created_at.desc())
        )
        items = []
        for application, job in result.all():
            item = MyApplication.model_validate(application)
            item.job_title = job.title
            item.job_status = job.status
            item.budget_min = job.budget_min
            item.budget_max = job.budget_max
            items.append(item)
        return items

    async def employer_applications(
        self, ctx: RequestContext, status: str | None = None
    ) -> EmployerApplications:
        """Applications to the caller's jobs with per-status counts."""
        ctx.require_role("employer")

        result = await self.session.execute(
            select(JobApplication, Job, Profile)
            .join(Job, Job.id == JobApplication.job_id)
            .outerjoin(Profile, Profile.id == JobApplication.freelancer_id)
            .where(Job.employer_id == ctx.user_id)
            .order_by(JobApplication.created_at.desc())
        )
        rows = result.all()

        counts = Counter(application.status for application, _, _ in rows)
        items = [
            build_detail(application, job, freelancer)
            for application, job, freelancer in rows
            if status is None or application.status == status
        ]
        return EmployerApplications(
            items=items,
            counts={name: counts.get(name, 0) for name in APPLICATION_STATUSES},
        )

    async def get_detail(self, application_id: str) -> tuple[ApplicationDetail, Job]:
        """Load one application pre-joined with its job and applicant."""
        result = await self.session.execute(
            select(JobApplication, Job, Profile)
            .join(Job, Job.id == JobApplication.job_id)
            .outerjoin(Profile, Profile.id == JobApplication.freelancer_id)
            .where(JobApplication.id == application_id)
        )
        row = result.first()
        if row is None:
            raise NotFoundError("Application", application_id)
        application, job, freelancer = row
        return build_detail(application, job, freelancer), job

    async def resume_link(self, ctx: RequestContext, application_id: str) -> ResumeLink:
        """Signed, short-lived download link for an application's resume."""
        detail, job = await self.get_detail(application_id)
        if ctx.user_id not in (job.employer_id, detail.freelancer_id):
            raise PermissionDeniedError("You cannot view this resume")
        if not detail.resume_url:
            raise NotFoundError("Resume for application", application_id)
        if self.resume_store is None:
            raise InvalidInputError("Resume downloads are not available")

        url, expires_at = self.resume_store.signed_url(detail.resume_url)
        return ResumeLink(url=url, expires_at=expires_at)
