"""
Notification gateway adapters.

SendGridNotificationGateway talks to the SendGrid v3 mail/send HTTP API.
DisabledNotificationGateway is used when no API key / sender is configured:
every delivery attempt fails, so reset requests for real users report an error.
"""

import logging
from typing import Optional

import httpx

from src.app.services.notification_gateway import NotificationDeliveryError, NotificationGateway

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Reset your password"

RESET_HTML_TEMPLATE = """
<div style="font-family: Arial, sans-serif; line-height: 1.6;">
  <h2>Reset your password</h2>
  <p>You requested a password reset. Click the button below to set a new password:</p>
  <p>
    <a href="{reset_url}" style="display: inline-block; padding: 10px 16px; background: #ffb703; color: #1c1c1c; text-decoration: none; border-radius: 8px; font-weight: 600;">
      Reset Password
    </a>
  </p>
  <p>If you did not request this, you can ignore this email.</p>
</div>
"""


class SendGridNotificationGateway(NotificationGateway):
    """Send reset links through the SendGrid v3 API"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        api_url: str = "https://api.sendgrid.com/v3/mail/send",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def _build_payload(self, to_email: str, reset_url: str) -> dict:
        text = (
            "You requested a password reset. "
            f"Open this link to reset your password: {reset_url}"
        )
        return {
            "personalizations": [{"to": [{"email": to_email}]}],
            "from": {"email": self.from_email},
            "subject": RESET_SUBJECT,
            "content": [
                {"type": "text/plain", "value": text},
                {"type": "text/html", "value": RESET_HTML_TEMPLATE.format(reset_url=reset_url)},
            ],
        }

    async def send_password_reset(self, to_email: str, reset_url: str) -> None:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self._build_payload(to_email, reset_url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Reset email transport failure: %s", type(exc).__name__)
            raise NotificationDeliveryError("Notification provider unreachable") from exc

        if not response.is_success:
            logger.error("Reset email rejected by provider: status=%d", response.status_code)
            raise NotificationDeliveryError(
                f"Notification provider returned {response.status_code}"
            )

        logger.info("Reset email accepted by provider")


class DisabledNotificationGateway(NotificationGateway):
    """Stand-in used when SendGrid credentials are not configured"""

    async def send_password_reset(self, to_email: str, reset_url: str) -> None:
        raise NotificationDeliveryError("Notification gateway is not configured")


def build_notification_gateway(config) -> NotificationGateway:
    """Pick the gateway implementation from application config"""
    if not config.SENDGRID_API_KEY or not config.SENDGRID_FROM_EMAIL:
        logger.warning(
            "SendGrid is not configured; set SENDGRID_API_KEY and SENDGRID_FROM_EMAIL "
            "to enable password reset emails"
        )
        return DisabledNotificationGateway()

    return SendGridNotificationGateway(
        api_key=config.SENDGRID_API_KEY,
        from_email=config.SENDGRID_FROM_EMAIL,
        api_url=config.SENDGRID_API_URL,
        timeout=config.NOTIFICATION_TIMEOUT_SECONDS,
    )
