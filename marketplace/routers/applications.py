"""API routes for job applications and the employer review workflow."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.config import settings
from marketplace.core.context import (
    RequestContext,
    get_request_context,
    require_employer,
    require_freelancer,
)
from marketplace.core.exceptions import MarketplaceError, to_http_exception
from marketplace.schemas.applications import (
    ApplicationForm,
    ApplicationResponse,
    ApplicationStatus,
    EmployerApplications,
    MyApplication,
    ResumeLink,
    ReviewResult,
    StatusUpdateRequest,
)
from marketplace.services.application_service import ApplicationService, ResumeUpload
from marketplace.services.dependencies import (
    get_application_service,
    get_review_service,
)
from marketplace.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


async def _read_resume(resume: UploadFile) -> ResumeUpload:
    """Read an uploaded resume, refusing anything over the size limit."""
    limit = settings.resume_max_bytes
    too_large = HTTPException(
        status_code=413, detail=f"Resume exceeds maximum size of {limit} bytes"
    )
    if resume.size is not None and resume.size > limit:
        raise too_large

    content = await resume.read(limit + 1)
    if len(content) > limit:
        raise too_large
    return ResumeUpload(filename=resume.filename, content=content)


@router.post(
    "/jobs/{job_id}/applications",
    response_model=ApplicationResponse,
    status_code=201,
)
async def apply_to_job(
    job_id: str,
    form: Annotated[ApplicationForm, Form()],
    resume: UploadFile | None = File(default=None),
    ctx: RequestContext = Depends(require_freelancer),
    service: ApplicationService = Depends(get_application_service),
):
    """Submit an application, optionally with a resume file."""
    upload = None
    if resume is not None and resume.filename:
        upload = await _read_resume(resume)

    try:
        return await service.submit_application(ctx, job_id, form, upload)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error submitting application to job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/applications/mine", response_model=list[MyApplication])
async def my_applications(
    ctx: RequestContext = Depends(require_freelancer),
    service: ApplicationService = Depends(get_application_service),
):
    """The caller's applications, newest first."""
    try:
        return await service.list_my_applications(ctx)
    except SQLAlchemyError as e:
        logger.error(f"Database error listing applications for {ctx.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/applications/employer", response_model=EmployerApplications)
async def employer_applications(
    status: ApplicationStatus | None = Query(default=None),
    ctx: RequestContext = Depends(require_employer),
    service: ApplicationService = Depends(get_application_service),
):
    """Employer dashboard: applications to the caller's jobs with counts."""
    try:
        return await service.employer_applications(ctx, status)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error loading dashboard for {ctx.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.patch("/applications/{application_id}/status", response_model=ReviewResult)
async def update_application_status(
    application_id: str,
    request: StatusUpdateRequest,
    ctx: RequestContext = Depends(get_request_context),
    service: ReviewService = Depends(get_review_service),
):
    """Shortlist, accept or reject an application, or schedule an interview."""
    try:
        return await service.update_application_status(
            ctx, application_id, request.status, request.interview
        )
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error updating application {application_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update application")


@router.get("/applications/{application_id}/resume", response_model=ResumeLink)
async def resume_link(
    application_id: str,
    ctx: RequestContext = Depends(get_request_context),
    service: ApplicationService = Depends(get_application_service),
):
    """Short-lived signed link to the application's resume."""
    try:
        return await service.resume_link(ctx, application_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
