"""API routes for profiles and talent browsing."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.context import RequestContext, get_request_context
from marketplace.core.exceptions import MarketplaceError, to_http_exception
from marketplace.schemas.profiles import (
    ContactRequest,
    ContactResponse,
    ProfileResponse,
    ProfileUpdate,
)
from marketplace.services.dependencies import get_notification_service, get_profile_service
from marketplace.services.email_service import EmailDispatcher, get_email_dispatcher
from marketplace.services.notification_service import NotificationService
from marketplace.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profiles"])


@router.get("/profiles/me", response_model=ProfileResponse)
async def get_my_profile(
    ctx: RequestContext = Depends(get_request_context),
    service: ProfileService = Depends(get_profile_service),
):
    try:
        return await service.get_profile(ctx.user_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.put("/profiles/me", response_model=ProfileResponse)
async def update_my_profile(
    changes: ProfileUpdate,
    ctx: RequestContext = Depends(get_request_context),
    service: ProfileService = Depends(get_profile_service),
):
    """Update the caller's own profile."""
    try:
        return await service.update_profile(ctx, changes)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error updating profile {ctx.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/talent", response_model=list[ProfileResponse])
async def browse_talent(
    search: str | None = Query(default=None, description="Name, location or skill"),
    service: ProfileService = Depends(get_profile_service),
):
    """Browse freelancer profiles."""
    try:
        return await service.browse_talent(search)
    except SQLAlchemyError as e:
        logger.error(f"Database error browsing talent: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.post("/talent/{freelancer_id}/contact", response_model=ContactResponse)
async def contact_freelancer(
    freelancer_id: str,
    request: ContactRequest,
    ctx: RequestContext = Depends(get_request_context),
    service: ProfileService = Depends(get_profile_service),
    email: EmailDispatcher = Depends(get_email_dispatcher),
    notifications: NotificationService = Depends(get_notification_service),
):
    """Send a message to a freelancer's registered email."""
    try:
        return await service.contact_freelancer(
            ctx, freelancer_id, request.message, email, notifications
        )
    except MarketplaceError as e:
        raise to_http_exception(e)
