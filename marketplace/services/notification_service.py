"""Notification inbox and realtime delivery."""

import logging

from redis.exceptions import RedisError
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.config import settings
from marketplace.core.context import RequestContext
from marketplace.core.exceptions import NotFoundError
from marketplace.core.redis_client import NotificationFeed
from marketplace.models.notification import Notification
from marketplace.schemas.notifications import NotificationList, NotificationResponse

logger = logging.getLogger(__name__)


class NotificationService:
    """Writes inbox records and pushes them to subscribed clients."""

    def __init__(self, session: AsyncSession, feed: NotificationFeed | None = None):
        self.session = session
        self.feed = feed

    async def create(
        self,
        user_id: str,
        title: str,
        message: str,
        type: str = "info",
        related_application_id: str | None = None,
    ) -> Notification:
        """Persist a notification and publish it to the user's feed."""
        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            read=False,
            related_application_id=related_application_id,
        )
        self.session.add(notification)
        await self.session.commit()
        await self.session.refresh(notification)
        logger.info(f"Notification {notification.id} created for user {user_id}")

        await self._publish(notification)
        return notification

    async def _publish(self, notification: Notification) -> None:
        if self.feed is None:
            return
        payload = NotificationResponse.model_validate(notification).model_dump(mode="json")
        try:
            await self.feed.publish(notification.user_id, payload)
        except (RedisError, OSError) as e:
            logger.warning(
                f"Realtime delivery failed for notification {notification.id}: {e}"
            )

    async def list_recent(
        self, ctx: RequestContext, limit: int | None = None
    ) -> NotificationList:
        """Most recent notifications for the caller, newest first."""
        result = await self.session.execute(
            select(Notification)
            .where(Notification.user_id == ctx.user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit or settings.notifications_page_size)
        )
        items = [NotificationResponse.model_validate(n) for n in result.scalars()]
        return NotificationList(
            items=items, unread_count=await self.unread_count(ctx.user_id)
        )

    async def unread_count(self, user_id: str) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
        )
        return result.scalar_one()

    async def mark_read(self, ctx: RequestContext, notification_id: str) -> Notification:
        """Mark one notification read; repeated calls are no-ops."""
        notification = await self.session.get(Notification, notification_id)
        if notification is None or notification.user_id != ctx.user_id:
            raise NotFoundError("Notification", notification_id)

        if not notification.read:
            notification.read = True
            await self.session.commit()
        return notification

    async def mark_all_read(self, ctx: RequestContext) -> int:
        """Mark every unread notification of the caller read."""
        result = await self.session.execute(
            update(Notification)
            .where(Notification.user_id == ctx.user_id, Notification.read.is_(False))
            .values(read=True)
        )
        await self.session.commit()
        logger.info(f"Marked {result.rowcount} notification(s) read for {ctx.user_id}")
        return result.rowcount
