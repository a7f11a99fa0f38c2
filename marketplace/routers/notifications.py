"""API routes for in-app notifications."""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sse_starlette.sse import EventSourceResponse

from marketplace.core.context import RequestContext, get_request_context
from marketplace.core.exceptions import MarketplaceError, to_http_exception
from marketplace.core.redis_client import NotificationFeed, get_notification_feed
from marketplace.schemas.notifications import (
    MarkAllReadResponse,
    NotificationList,
    NotificationResponse,
)
from marketplace.services.dependencies import get_notification_service
from marketplace.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationList)
async def list_notifications(
    limit: int | None = Query(default=None, ge=1, le=100),
    ctx: RequestContext = Depends(get_request_context),
    service: NotificationService = Depends(get_notification_service),
):
    """Most recent notifications and the unread count."""
    try:
        return await service.list_recent(ctx, limit)
    except SQLAlchemyError as e:
        logger.error(f"Database error listing notifications for {ctx.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    ctx: RequestContext = Depends(get_request_context),
    service: NotificationService = Depends(get_notification_service),
):
    try:
        updated = await service.mark_all_read(ctx)
    except SQLAlchemyError as e:
        logger.error(f"Database error marking notifications read for {ctx.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    return MarkAllReadResponse(updated=updated, unread_count=0)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: str,
    ctx: RequestContext = Depends(get_request_context),
    service: NotificationService = Depends(get_notification_service),
):
    """Mark one notification read. Safe to repeat."""
    try:
        return await service.mark_read(ctx, notification_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error marking notification {notification_id} read: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/stream")
async def stream_notifications(
    ctx: RequestContext = Depends(get_request_context),
    feed: NotificationFeed | None = Depends(get_notification_feed),
):
    """Push newly created notifications via Server-Sent Events."""
    if feed is None:
        raise HTTPException(status_code=503, detail="Realtime notifications are disabled")

    async def event_generator():
        async for notification in feed.subscribe(ctx.user_id):
            yield {
                "event": "notification",
                "data": json.dumps(notification, ensure_ascii=False),
            }

    return EventSourceResponse(event_generator())
