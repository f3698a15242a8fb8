"""
Notification facade for outbound email.

Delivery is best effort: failures are logged and reported in the returned
NotificationResult, never raised. Without RESEND_API_KEY emails are only
logged.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from config.settings import settings
from utils.email_templates import EmailContent

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    error: Optional[str] = None


class NotificationService:
    """
    Send emails through the Resend HTTP API.

    Args:
        api_key: Resend API key (defaults to settings.RESEND_API_KEY)
        client: Optional httpx client, mainly for tests
    """

    def __init__(self, api_key: Optional[str] = None, client: Optional[httpx.Client] = None):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.client = client
        self.sender = f"{settings.EMAIL_FROM_NAME} <{settings.EMAIL_FROM}>"

    def send(self, to: str, subject: str, html: str) -> NotificationResult:
        """
        Send one email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Returns:
            NotificationResult with success flag and error text on failure
        """
        if not to:
            logger.warning(f"Email '{subject}' not sent: recipient address missing")
            return NotificationResult(success=False, error="Recipient address missing")

        if not self.api_key:
            logger.info(f"[EMAIL STUB] To: {to} | Subject: {subject}")
            logger.debug(f"[EMAIL STUB] Body: {html[:200]}...")
            return NotificationResult(success=False, error="Email delivery is not configured")

        payload = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            if self.client is not None:
                response = self.client.post(RESEND_API_URL, json=payload, headers=headers)
            else:
                with httpx.Client(timeout=settings.EMAIL_TIMEOUT_SECONDS) as client:
                    response = client.post(RESEND_API_URL, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Network error sending email to {to}: {e}")
            return NotificationResult(success=False, error="Network error")

        if response.status_code >= 400:
            logger.error(f"Email to {to} rejected ({response.status_code}): {response.text}")
            return NotificationResult(success=False, error=response.text)

        logger.info(f"Email sent to {to}: {subject}")
        return NotificationResult(success=True)

    def send_email(self, to: str, email: EmailContent) -> NotificationResult:
        return self.send(to, email.subject, email.html)
