"""Email dispatcher keyed by template type."""

import logging
from collections.abc import AsyncGenerator
from datetime import date, time

from marketplace.services.email_client import ResendClient
from marketplace.services.email_templates import (
    RenderedEmail,
    render_application_status,
    render_contact,
    render_interview,
)

logger = logging.getLogger(__name__)


class EmailDispatcher:
    """Renders and sends the marketplace's transactional emails.

    Every ``send_*`` method returns ``True`` when the provider accepted the
    message and ``False`` when sending is disabled (no API key). Provider and
    network failures raise ``EmailDispatchError``; callers decide whether a
    failure is fatal.
    """

    def __init__(self, client: ResendClient):
        self.client = client

    async def send_application_status(
        self,
        to: str,
        job_title: str,
        status: str,
        employer_name: str | None = None,
    ) -> bool:
        logger.info(f"Sending {status} email to {to} for job: {job_title}")
        email = render_application_status(job_title, status, employer_name)
        return await self._deliver(to, email)

    async def send_interview(
        self,
        to: str,
        freelancer_name: str,
        job_title: str,
        employer_name: str | None,
        interview_date: date,
        interview_time: time,
        notes: str | None = None,
    ) -> bool:
        logger.info(f"Sending interview email to {to} for job: {job_title}")
        email = render_interview(
            freelancer_name,
            job_title,
            employer_name,
            interview_date,
            interview_time,
            notes,
        )
        return await self._deliver(to, email)

    async def send_contact(
        self,
        to: str,
        sender_name: str,
        sender_email: str,
        message: str,
    ) -> bool:
        logger.info(f"Sending contact email to {to} from {sender_name}")
        email = render_contact(sender_name, sender_email, message)
        return await self._deliver(to, email, reply_to=sender_email)

    async def _deliver(
        self, to: str, email: RenderedEmail, reply_to: str | None = None
    ) -> bool:
        if not self.client.configured:
            logger.warning(f"Email disabled (no RESEND_API_KEY); not sending '{email.subject}'")
            return False
        data = await self.client.send([to], email.subject, email.html, reply_to=reply_to)
        logger.info(f"Email sent successfully: {data.get('id', data)}")
        return True


async def get_email_dispatcher() -> AsyncGenerator[EmailDispatcher, None]:
    """FastAPI dependency for the email dispatcher with proper cleanup."""
    client = ResendClient()
    try:
        yield EmailDispatcher(client)
    finally:
        await client.close()
