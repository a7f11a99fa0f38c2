"""Tests for NotificationService."""

from datetime import UTC, datetime, timedelta

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from marketplace.core.exceptions import NotFoundError
from marketplace.models.notification import Notification
from marketplace.services.notification_service import NotificationService


@pytest.fixture
def service(session, mock_feed):
    return NotificationService(session, mock_feed)


async def _seed(session, user_id, count, read=False):
    base = datetime.now(UTC).replace(tzinfo=None)
    for i in range(count):
        session.add(
            Notification(
                user_id=user_id,
                title=f"Note {i}",
                message=f"Message {i}",
                type="info",
                read=read,
                created_at=base - timedelta(minutes=count - i),
            )
        )
    await session.commit()


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_persists_unread(self, service, session):
        notification = await service.create("freelancer-1", "Hello", "World", "success")

        stored = await session.get(Notification, notification.id)
        assert stored.read is False
        assert stored.type == "success"

    @pytest.mark.asyncio
    async def test_feed_failure_is_swallowed(self, service, mock_feed):
        mock_feed.publish.side_effect = RedisConnectionError("redis down")

        notification = await service.create("freelancer-1", "Hello", "World")

        assert notification.id is not None

    @pytest.mark.asyncio
    async def test_create_without_feed(self, session):
        notification = await NotificationService(session).create("u", "t", "m")
        assert notification.type == "info"


class TestListRecent:
    @pytest.mark.asyncio
    async def test_newest_first_and_limited(self, service, session, freelancer_ctx):
        await _seed(session, freelancer_ctx.user_id, 25)

        result = await service.list_recent(freelancer_ctx)

        assert len(result.items) == 20
        assert result.items[0].title == "Note 24"
        assert result.unread_count == 25

    @pytest.mark.asyncio
    async def test_only_own_notifications(self, service, session, freelancer_ctx):
        await _seed(session, "someone-else", 3)

        result = await service.list_recent(freelancer_ctx)

        assert result.items == []
        assert result.unread_count == 0


class TestMarkRead:
    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, service, session, freelancer_ctx):
        notification = await service.create(freelancer_ctx.user_id, "t", "m")

        await service.mark_read(freelancer_ctx, notification.id)
        again = await service.mark_read(freelancer_ctx, notification.id)

        assert again.read is True
        assert await service.unread_count(freelancer_ctx.user_id) == 0

    @pytest.mark.asyncio
    async def test_cannot_mark_someone_elses(self, service, employer_ctx):
        notification = await service.create("freelancer-1", "t", "m")

        with pytest.raises(NotFoundError):
            await service.mark_read(employer_ctx, notification.id)

    @pytest.mark.asyncio
    async def test_mark_all_read(self, service, session, freelancer_ctx):
        await _seed(session, freelancer_ctx.user_id, 3)
        await _seed(session, freelancer_ctx.user_id, 2, read=True)

        updated = await service.mark_all_read(freelancer_ctx)

        assert updated == 3
        assert await service.unread_count(freelancer_ctx.user_id) == 0
        assert await service.mark_all_read(freelancer_ctx) == 0
