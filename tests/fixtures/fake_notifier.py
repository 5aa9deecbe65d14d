from typing import List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from src.app.services.notification_gateway import NotificationDeliveryError, NotificationGateway


class RecordingNotificationGateway(NotificationGateway):
    """Keeps sent reset links in memory; can be switched to fail"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.fail = False

    async def send_password_reset(self, to_email: str, reset_url: str) -> None:
        if self.fail:
            raise NotificationDeliveryError("Simulated provider outage")
        self.sent.append((to_email, reset_url))

    def last_token(self) -> Optional[str]:
        if not self.sent:
            return None
        _, url = self.sent[-1]
        return parse_qs(urlparse(url).query)["token"][0]
