"""Employer review workflow for job applications.

A status change runs as a chain of independent writes, each committed on its
own:

1. the application's status (and interview slot),
2. the job's status when a candidate is accepted,
3. a notification for the freelancer, pushed to the realtime feed,
4. a transactional email.

Failures in 1 and 2 surface to the caller; nothing already committed is rolled
back. Failures in 3 and 4 are logged and never fail the operation.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.context import RequestContext
from marketplace.core.exceptions import (
    EmailDispatchError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from marketplace.models.application import JobApplication
from marketplace.models.job import Job
from marketplace.models.profile import Profile
from marketplace.schemas.applications import InterviewData, ReviewResult
from marketplace.services.application_service import build_detail
from marketplace.services.email_service import EmailDispatcher
from marketplace.services.notification_service import NotificationService
from marketplace.utils.validators import validate_status_transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewNotice:
    title: str
    message: str
    type: str


def build_review_notice(
    new_status: str, job_title: str, interview: InterviewData | None = None
) -> ReviewNotice:
    """Pick the freelancer-facing notification for a review decision."""
    if interview is not None:
        return ReviewNotice(
            title="Interview Scheduled",
            message=(
                f'An interview for "{job_title}" has been scheduled on '
                f"{interview.date.isoformat()} at {interview.time:%H:%M}."
            ),
            type="info",
        )

    notice_type = {"accepted": "success", "rejected": "error"}.get(new_status, "info")
    return ReviewNotice(
        title=f"Application {new_status}",
        message=f'Your application for "{job_title}" has been {new_status}.',
        type=notice_type,
    )


class ReviewService:
    """Applies an employer's decision to one application."""

    def __init__(
        self,
        session: AsyncSession,
        notifications: NotificationService,
        email: EmailDispatcher | None = None,
    ):
        self.session = session
        self.notifications = notifications
        self.email = email

    async def update_application_status(
        self,
        ctx: RequestContext,
        application_id: str,
        new_status: str,
        interview: InterviewData | None = None,
    ) -> ReviewResult:
        """Change an application's status and fan out the side effects."""
        if ctx.role != "employer":
            raise PermissionDeniedError("Only employers can review applications")

        application, job = await self._load(application_id)
        if job.employer_id != ctx.user_id:
            raise PermissionDeniedError("You can only review applications to your own jobs")

        previous = application.status
        validation = validate_status_transition(previous, new_status, interview)
        if not validation.is_valid:
            raise InvalidTransitionError(previous, new_status, validation.error)
        for warning in validation.warnings:
            logger.info(f"Application {application_id}: {warning}")

        # Step 1: the primary write; failure aborts the whole operation
        await self._write_status(application, previous, new_status, interview)
        logger.info(f"Application {application_id}: {previous} -> {new_status}")

        # Step 2
        if new_status == "accepted":
            job.status = "in_progress"
            await self._commit(f"mark job {job.id} in progress")
            logger.info(f"Job {job.id} moved to in_progress")

        profiles = await self._load_profiles(application.freelancer_id, job.employer_id)
        freelancer = profiles.get(application.freelancer_id)
        employer = profiles.get(job.employer_id)

        # Snapshot plain values; a failed side effect rolls back and expires rows
        result = ReviewResult(
            application=build_detail(application, job, freelancer),
            job_status=job.status,
        )
        job_title = job.title
        freelancer_id = application.freelancer_id
        freelancer_email = freelancer.email if freelancer else None
        freelancer_name = (freelancer.full_name if freelancer else None) or "there"
        employer_name = employer.full_name if employer else None

        # Step 3
        notice = build_review_notice(new_status, job_title, interview)
        try:
            notification = await self.notifications.create(
                user_id=freelancer_id,
                title=notice.title,
                message=notice.message,
                type=notice.type,
                related_application_id=application_id,
            )
            result.notification_id = notification.id
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to create notification for application {application_id}: {e}")
        except Exception:
            logger.exception(f"Unexpected error notifying applicant of {application_id}")

        # Step 4
        result.email_sent = await self._send_email(
            application_id,
            new_status,
            interview,
            to=freelancer_email,
            freelancer_name=freelancer_name,
            job_title=job_title,
            employer_name=employer_name,
        )
        return result

    async def _load(self, application_id: str) -> tuple[JobApplication, Job]:
        result = await self.session.execute(
            select(JobApplication, Job)
            .join(Job, Job.id == JobApplication.job_id)
            .where(JobApplication.id == application_id)
        )
        row = result.first()
        if row is None:
            raise NotFoundError("Application", application_id)
        return row[0], row[1]

    async def _write_status(
        self,
        application: JobApplication,
        previous: str,
        new_status: str,
        interview: InterviewData | None,
    ) -> None:
        """Apply the decision only if the status is still the one validated."""
        application_id = application.id
        values = {"status": new_status}
        if interview is not None:
            values.update(
                JobApplication.interview_values(interview.date, interview.time, interview.notes)
            )
        elif new_status != "shortlisted":
            values.update(JobApplication.interview_values())

        statement = (
            update(JobApplication)
            .where(JobApplication.id == application_id, JobApplication.status == previous)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error while trying to update application {application_id}: {e}")
            raise

        if result.rowcount == 0:
            await self.session.rollback()
            await self.session.refresh(application)
            logger.warning(
                f"Application {application_id} moved to {application.status} "
                f"before {new_status} could be applied"
            )
            raise InvalidTransitionError(
                application.status, new_status, "Application was updated by another request"
            )

        await self._commit(f"update application {application_id}")
        await self.session.refresh(application)

    async def _load_profiles(self, *user_ids: str) -> dict[str, Profile]:
        result = await self.session.execute(
            select(Profile).where(Profile.id.in_(set(user_ids)))
        )
        return {profile.id: profile for profile in result.scalars()}

    async def _commit(self, action: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error while trying to {action}: {e}")
            raise

    async def _send_email(
        self,
        application_id: str,
        new_status: str,
        interview: InterviewData | None,
        to: str | None,
        freelancer_name: str,
        job_title: str,
        employer_name: str | None,
    ) -> bool:
        if self.email is None:
            return False
        if not to:
            logger.warning(f"No email address for applicant of {application_id}; skipping email")
            return False

        try:
            if interview is not None:
                return await self.email.send_interview(
                    to=to,
                    freelancer_name=freelancer_name,
                    job_title=job_title,
                    employer_name=employer_name,
                    interview_date=interview.date,
                    interview_time=interview.time,
                    notes=interview.notes,
                )
            return await self.email.send_application_status(
                to=to,
                job_title=job_title,
                status=new_status,
                employer_name=employer_name,
            )
        except EmailDispatchError as e:
            logger.error(f"Email dispatch failed for application {application_id}: {e}")
        except Exception:
            logger.exception(f"Unexpected error sending email for application {application_id}")
        return False
