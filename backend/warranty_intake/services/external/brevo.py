"""Brevo transactional email (SMTP v3 API) client."""

from typing import Any

import httpx
import structlog

from warranty_intake.config import settings
from warranty_intake.services.claims.config import EmailConfig

logger = structlog.get_logger(__name__)


class BrevoEmailService:
    """Service for sending transactional emails through Brevo.

    Swap this class only if the email provider changes.
    """

    def __init__(
        self,
        config: EmailConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or EmailConfig.from_settings(settings)
        self._transport = transport

    def _build_payload(self, to: str, subject: str, html_body: str, text_body: str) -> dict[str, Any]:
        sender: dict[str, str] = {"email": self.config.from_email}
        if self.config.from_name:
            sender["name"] = self.config.from_name

        payload: dict[str, Any] = {
            "sender": sender,
            "to": [{"email": to}],
            "subject": subject,
            "htmlContent": html_body,
            "textContent": text_body,
        }
        if self.config.reply_to:
            payload["replyTo"] = {"email": self.config.reply_to}
        return payload

    async def send(self, to: str, subject: str, html_body: str, text_body: str) -> bool:
        """Send one email.

        Args:
            to: Recipient address
            subject: Subject line
            html_body: HTML content (values must already be escaped)
            text_body: Plain-text alternative

        Returns:
            True if Brevo accepted the message, False otherwise
        """
        if not self.config.api_key or not self.config.from_email:
            logger.error("Brevo not configured", has_api_key=bool(self.config.api_key))
            return False

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    self.config.endpoint,
                    json=self._build_payload(to, subject, html_body, text_body),
                    headers={"api-key": self.config.api_key},
                    timeout=10.0,
                )
                response.raise_for_status()

                logger.info("Sent confirmation email", status_code=response.status_code)
                return True

            except httpx.HTTPStatusError as e:
                logger.error(
                    "Brevo send failed",
                    status_code=e.response.status_code,
                    response_body=e.response.text[:300],
                )
                return False
            except httpx.RequestError as e:
                logger.error("Brevo request failed", error=str(e))
                return False
