"""Service interfaces for outbound infrastructure used by domain services."""

from abc import ABC, abstractmethod

from eventdesk.domain.entities.user import User
from eventdesk.domain.value_objects.reset_token import ResetToken


class IPasswordResetEmailService(ABC):
    """Interface for delivering password reset links."""

    @abstractmethod
    async def send_password_reset_email(
        self,
        user: User,
        token: ResetToken,
        language: str = "en",
    ) -> bool:
        """Send a password reset email to ``user``.

        Args:
            user: Recipient account.
            token: Reset token to embed in the link.
            language: Language for the email content.

        Returns:
            bool: True if the email was sent (or logged in test mode).

        Raises:
            EmailServiceError: If delivery fails.
        """
        raise NotImplementedError
