"""Authenticated request context."""

import logging
from dataclasses import dataclass

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.exceptions import (
    AuthenticationError,
    PermissionDeniedError,
    forbidden_exception,
    unauthorized_exception,
)
from marketplace.core.storage import SessionStore, get_session
from marketplace.models.profile import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller, resolved once at the request boundary."""

    user_id: str
    role: str
    email: str
    full_name: str | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def require_role(self, role: str) -> None:
        if self.role != role:
            raise PermissionDeniedError(f"Only {role}s can perform this action")


def _parse_bearer(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError("Not authenticated")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Invalid authorization header")
    return token.strip()


async def resolve_context(
    session: AsyncSession,
    authorization: str | None,
) -> RequestContext:
    """Resolve a bearer token to the caller's identity and role."""
    token = _parse_bearer(authorization)

    auth = await SessionStore(session).get(token)
    if auth is None:
        raise AuthenticationError("Unknown session")
    if auth.is_expired():
        raise AuthenticationError("Session expired")

    profile = await session.get(Profile, auth.user_id)
    if profile is None:
        logger.warning(f"Session for user {auth.user_id} has no profile")
        raise AuthenticationError("No profile for this session")

    return RequestContext(
        user_id=profile.id,
        role=profile.role,
        email=profile.email,
        full_name=profile.full_name,
    )


async def get_request_context(
    authorization: str | None = Header(None),
    session: AsyncSession = Depends(get_session),
) -> RequestContext:
    """FastAPI dependency for the authenticated caller."""
    try:
        return await resolve_context(session, authorization)
    except AuthenticationError as e:
        raise unauthorized_exception(e.detail)


def require_employer(
    ctx: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Dependency restricting an endpoint to employers."""
    if ctx.role != "employer":
        raise forbidden_exception("Only employers can perform this action")
    return ctx


def require_freelancer(
    ctx: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Dependency restricting an endpoint to freelancers."""
    if ctx.role != "freelancer":
        raise forbidden_exception("Only freelancers can perform this action")
    return ctx
