"""Core application components."""

from marketplace.core.config import settings
from marketplace.core.exceptions import AuthenticationError, MarketplaceError
from marketplace.core.storage import Base, SessionStore, async_session

__all__ = [
    "AuthenticationError",
    "Base",
    "MarketplaceError",
    "SessionStore",
    "async_session",
    "settings",
]
