from abc import ABC, abstractmethod


class NotificationDeliveryError(Exception):
    """Raised when a notification could not be handed to the provider"""


class NotificationGateway(ABC):
    """Outbound notification port - application layer"""

    @abstractmethod
    async def send_password_reset(self, to_email: str, reset_url: str) -> None:
        """
        Deliver a password reset link.

        Raises:
            NotificationDeliveryError: gateway misconfigured or provider failure
        """
        pass
