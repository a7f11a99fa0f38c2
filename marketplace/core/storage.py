"""Database connection and storage utilities."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from marketplace.core.config import settings

if TYPE_CHECKING:
    from marketplace.models.session import AuthSession

engine: AsyncEngine = create_async_engine(
    str(settings.database_url),
    echo=False,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    import marketplace.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with async_session() as session:
        yield session


class SessionStore:
    """Lookups for bearer tokens issued by the identity provider."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, token_data: dict) -> AuthSession:
        """Mirror a token issued upstream so requests can be resolved."""
        from marketplace.models.session import AuthSession

        record = AuthSession(**token_data)
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def get(self, access_token: str) -> AuthSession | None:
        """Get the session for a bearer token, if any."""
        from marketplace.models.session import AuthSession

        result = await self.session.execute(
            select(AuthSession).where(AuthSession.access_token == access_token)
        )
        return result.scalar_one_or_none()
