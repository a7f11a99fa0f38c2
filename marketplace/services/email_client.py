"""Resend API client for outbound email."""

import logging
from typing import Any

import httpx

from marketplace.core.config import settings
from marketplace.core.exceptions import EmailDispatchError

logger = logging.getLogger(__name__)


class ResendClient:
    """Thin async client for the Resend transactional email API."""

    SERVICE = "Resend"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.resend_api_key
        self.client = httpx.AsyncClient(
            base_url=base_url or settings.resend_api_url,
            timeout=httpx.Timeout(15.0),
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def send(
        self,
        to: list[str],
        subject: str,
        html: str,
        reply_to: str | None = None,
        sender: str | None = None,
    ) -> dict[str, Any]:
        """Send one email and return the provider's response body."""
        payload: dict[str, Any] = {
            "from": sender or settings.email_from,
            "to": to,
            "subject": subject,
            "html": html,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            response = await self.client.post(
                "/emails",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Network error sending email to {to}: {e}")
            raise EmailDispatchError(self.SERVICE, 503, f"Network error: {e}") from e

        if response.status_code >= 400:
            detail = response.text[:500]
            logger.error(f"Resend API error: {response.status_code} - {detail}")
            raise EmailDispatchError(self.SERVICE, response.status_code, detail)

        try:
            return response.json()
        except ValueError:
            return {"status": "success", "status_code": response.status_code}

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
