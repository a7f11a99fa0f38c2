"""API routes for job postings."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.context import RequestContext, require_employer
from marketplace.core.exceptions import MarketplaceError, to_http_exception
from marketplace.schemas.jobs import (
    EmployerJob,
    ExperienceLevel,
    JobCreate,
    JobFilters,
    JobListing,
    JobResponse,
    JobType,
)
from marketplace.services.dependencies import get_job_service
from marketplace.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobListing])
async def browse_jobs(
    search: str | None = Query(default=None, description="Title, description or skill"),
    job_type: JobType | None = Query(default=None),
    experience_level: ExperienceLevel | None = Query(default=None),
    min_budget: float | None = Query(default=None, ge=0),
    max_budget: float | None = Query(default=None, ge=0),
    service: JobService = Depends(get_job_service),
):
    """Browse open jobs, newest first."""
    filters = JobFilters(
        search=search,
        job_type=job_type,
        experience_level=experience_level,
        min_budget=min_budget,
        max_budget=max_budget,
    )
    try:
        return await service.browse_jobs(filters)
    except SQLAlchemyError as e:
        logger.error(f"Database error browsing jobs: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.post("", response_model=JobResponse, status_code=201)
async def post_job(
    payload: JobCreate,
    ctx: RequestContext = Depends(require_employer),
    service: JobService = Depends(get_job_service),
):
    """Post a new job."""
    try:
        return await service.post_job(ctx, payload)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error posting job: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/mine", response_model=list[EmployerJob])
async def my_jobs(
    ctx: RequestContext = Depends(require_employer),
    service: JobService = Depends(get_job_service),
):
    """The caller's jobs with application counts."""
    try:
        return await service.employer_jobs(ctx)
    except SQLAlchemyError as e:
        logger.error(f"Database error listing employer jobs: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    try:
        return await service.get_job(job_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{job_id}/close", response_model=JobResponse)
async def close_job(
    job_id: str,
    ctx: RequestContext = Depends(require_employer),
    service: JobService = Depends(get_job_service),
):
    """Stop accepting applications for a job."""
    try:
        return await service.close_job(ctx, job_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error closing job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
