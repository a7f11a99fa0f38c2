"""Profiles, talent browsing and client-to-freelancer contact."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.context import RequestContext
from marketplace.core.exceptions import InvalidInputError, NotFoundError
from marketplace.models.profile import Profile
from marketplace.schemas.profiles import ContactResponse, ProfileUpdate
from marketplace.services.email_service import EmailDispatcher
from marketplace.services.notification_service import NotificationService
from marketplace.utils.filters import TalentFilter

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_profile(self, user_id: str) -> Profile:
        profile = await self.session.get(Profile, user_id)
        if profile is None:
            raise NotFoundError("Profile", user_id)
        return profile

    async def update_profile(self, ctx: RequestContext, changes: ProfileUpdate) -> Profile:
        """Apply the fields present in ``changes`` to the caller's profile."""
        profile = await self.get_profile(ctx.user_id)
        for field, value in changes.model_dump(exclude_unset=True).items():
            if field == "skills" and value is None:
                value = []
            setattr(profile, field, value)
        await self.session.commit()
        await self.session.refresh(profile)
        logger.info(f"Profile {ctx.user_id} updated")
        return profile

    async def browse_talent(self, search: str | None = None) -> list[Profile]:
        """Freelancer profiles matching a name, location or skill."""
        result = await self.session.execute(
            select(Profile)
            .where(Profile.role == "freelancer")
            .order_by(Profile.created_at.desc())
        )
        return TalentFilter(search).apply(list(result.scalars()))

    async def contact_freelancer(
        self,
        ctx: RequestContext,
        freelancer_id: str,
        message: str,
        email: EmailDispatcher,
        notifications: NotificationService | None = None,
    ) -> ContactResponse:
        """Email a freelancer on behalf of the caller."""
        freelancer = await self.get_profile(freelancer_id)
        if freelancer.role != "freelancer":
            raise InvalidInputError("Messages can only be sent to freelancers")
        if freelancer.id == ctx.user_id:
            raise InvalidInputError("You cannot message yourself")

        sender_name = ctx.full_name or "A FreelancerWorks User"
        sent = await email.send_contact(
            to=freelancer.email,
            sender_name=sender_name,
            sender_email=ctx.email,
            message=message,
        )

        if notifications is not None:
            try:
                await notifications.create(
                    user_id=freelancer.id,
                    title="New message",
                    message=f"{sender_name} sent you a message. Check your email to reply.",
                    type="info",
                )
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.error(f"Failed to create contact notification for {freelancer_id}: {e}")

        if not sent:
            return ContactResponse(status="skipped", message="Email delivery is disabled")
        return ContactResponse(status="sent", message="Message sent successfully!")
