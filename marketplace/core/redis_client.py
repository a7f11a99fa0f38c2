"""Redis client for the realtime notification feed."""

import json
import logging
from collections.abc import AsyncIterator

from redis.asyncio import Redis

from marketplace.core.config import settings

logger = logging.getLogger(__name__)

# Async Redis client
_redis_client: Redis | None = None


async def get_redis() -> Redis:
    """Get or create async Redis client."""
    global _redis_client
    if _redis_client is None:
        _redis_client = Redis.from_url(
            settings.redis_url,
            decode_responses=True,
        )
    return _redis_client


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


class NotificationFeed:
    """Per-user pub/sub channel carrying newly created notifications."""

    PREFIX = "notifications:"

    def __init__(self, redis: Redis | None = None):
        self._redis = redis

    async def _client(self) -> Redis:
        if self._redis is None:
            self._redis = await get_redis()
        return self._redis

    @classmethod
    def channel(cls, user_id: str) -> str:
        return f"{cls.PREFIX}{user_id}"

    async def publish(self, user_id: str, payload: dict) -> int:
        """Publish one notification; returns the number of live subscribers."""
        redis = await self._client()
        receivers = await redis.publish(
            self.channel(user_id), json.dumps(payload, default=str)
        )
        logger.debug(f"Published notification to {receivers} subscriber(s) of {user_id}")
        return receivers

    async def subscribe(self, user_id: str) -> AsyncIterator[dict]:
        """Yield notifications for one user as they are published."""
        redis = await self._client()
        pubsub = redis.pubsub()
        await pubsub.subscribe(self.channel(user_id))
        try:
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                try:
                    yield json.loads(message["data"])
                except (TypeError, ValueError) as e:
                    logger.warning(f"Dropping malformed feed message for {user_id}: {e}")
        finally:
            await pubsub.unsubscribe(self.channel(user_id))
            await pubsub.aclose()


async def get_notification_feed() -> NotificationFeed | None:
    """Dependency returning the feed, or None when realtime is disabled."""
    if not settings.realtime_enabled:
        return None
    return NotificationFeed()
