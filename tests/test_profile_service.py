"""Tests for ProfileService."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select

from marketplace.core.exceptions import InvalidInputError, NotFoundError
from marketplace.models.notification import Notification
from marketplace.models.profile import Profile
from marketplace.schemas.profiles import ProfileUpdate
from marketplace.services.notification_service import NotificationService
from marketplace.services.profile_service import ProfileService


@pytest.fixture
def service(session):
    return ProfileService(session)


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_only_set_fields_change(self, service, freelancer_ctx, freelancer):
        updated = await service.update_profile(
            freelancer_ctx, ProfileUpdate(bio="Backend specialist", skills=[" Go ", ""])
        )

        assert updated.bio == "Backend specialist"
        assert updated.skills == ["Go"]
        assert updated.location == "Berlin"
        assert updated.hourly_rate == 60.0

    @pytest.mark.asyncio
    async def test_missing_profile(self, service, freelancer_ctx):
        with pytest.raises(NotFoundError):
            await service.update_profile(freelancer_ctx, ProfileUpdate(bio="x"))


class TestBrowseTalent:
    @pytest.mark.asyncio
    async def test_only_freelancers(self, service, employer, freelancer):
        profiles = await service.browse_talent()
        assert [p.id for p in profiles] == ["freelancer-1"]

    @pytest.mark.asyncio
    async def test_search_by_skill_and_location(self, service, session, freelancer):
        session.add(
            Profile(
                id="freelancer-2",
                email="ops@example.com",
                full_name="Sam Ops",
                role="freelancer",
                location="Lisbon",
                skills=["Kubernetes"],
            )
        )
        await session.commit()

        assert [p.id for p in await service.browse_talent("fastapi")] == ["freelancer-1"]
        assert [p.id for p in await service.browse_talent("lisbon")] == ["freelancer-2"]
        assert await service.browse_talent("cobol") == []


class TestContactFreelancer:
    @pytest.mark.asyncio
    async def test_sends_email_and_notifies(
        self, service, session, employer_ctx, freelancer, mock_email
    ):
        notifications = NotificationService(session)

        response = await service.contact_freelancer(
            employer_ctx, freelancer.id, "Are you available next week?", mock_email, notifications
        )

        assert response.status == "sent"
        mock_email.send_contact.assert_awaited_once_with(
            to="dev@example.com",
            sender_name="Acme Hiring",
            sender_email="boss@example.com",
            message="Are you available next week?",
        )
        result = await session.execute(
            select(Notification).where(Notification.user_id == freelancer.id)
        )
        notification = result.scalar_one()
        assert notification.title == "New message"

    @pytest.mark.asyncio
    async def test_unconfigured_email_is_skipped(self, service, employer_ctx, freelancer):
        email = AsyncMock()
        email.send_contact.return_value = False

        response = await service.contact_freelancer(employer_ctx, freelancer.id, "Hi", email)

        assert response.status == "skipped"

    @pytest.mark.asyncio
    async def test_cannot_contact_employer(
        self, service, freelancer_ctx, employer, mock_email
    ):
        with pytest.raises(InvalidInputError):
            await service.contact_freelancer(freelancer_ctx, employer.id, "Hi", mock_email)
        mock_email.send_contact.assert_not_awaited()
