"""
Transactional email transport backed by Resend.

The Resend SDK is synchronous, so the call runs in a worker thread: the
request handler awaits it as its only suspension point. The transport is
provided to routes through the `get_email_transport` dependency, which
tests override with a mock.
"""

import asyncio
import logging
from functools import lru_cache
from typing import List, Optional, Protocol, TypedDict

import resend

from backend.config import settings

logger = logging.getLogger(__name__)


class EmailParams(TypedDict):
    """One outbound email, in the shape expected by resend.Emails.send."""
    subject: str
    to: List[str]
    html: str
    text: str


class EmailTransport(Protocol):
    async def send(self, sender: str, params: EmailParams) -> Optional[str]:
        """Send one email and return the provider message id, raise on failure."""
        ...


class ResendTransport:
    """EmailTransport implementation calling the Resend HTTP API."""

    def __init__(self, api_key: str):
        self.api_key = api_key
        # The SDK reads its credential from module state
        resend.api_key = api_key

    async def send(self, sender: str, params: EmailParams) -> Optional[str]:
        """
        Send an email through Resend.

        Args:
            sender: Sender identity, e.g. "Infinity Beta <onboarding@resend.dev>"
            params: Recipient, subject, HTML and plain-text bodies

        Returns:
            Resend message id (None if the provider did not return one)

        Raises:
            resend.exceptions.ResendError: On authentication, validation or
                network errors reported by the provider
        """
        payload = {"from": sender, **params}
        response = await asyncio.to_thread(resend.Emails.send, payload)

        message_id = response.get("id") if response else None
        logger.debug(f"Resend accepted message id={message_id}")
        return message_id


@lru_cache
def get_email_transport() -> EmailTransport:
    """
    FastAPI dependency returning the configured email transport.

    Built once per process, so the API key is installed in the SDK a
    single time rather than on every request.

    A missing RESEND_API_KEY is not checked here: the provider rejects the
    call and the failure surfaces as a SERVER_ERROR like any other
    delivery error.
    """
    return ResendTransport(api_key=settings.RESEND_API_KEY)
