"""Password Reset Request Service.

Starts the reset flow: issue a single-use token for the account and hand it
to the notifier. The caller always receives the same success response,
whether or not the email belongs to an account and whether or not the email
could be delivered, so the endpoint cannot be used to enumerate accounts.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import BackgroundTasks

from eventdesk.core.exceptions import EmailServiceError
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.user import User
from eventdesk.domain.interfaces.repositories import IUserRepository
from eventdesk.domain.interfaces.services import IPasswordResetEmailService
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.domain.value_objects.reset_token import ResetToken
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class PasswordResetRequestService:
    """Service for handling password reset requests."""

    def __init__(
        self,
        user_repository: IUserRepository,
        credentials: CredentialService,
        email_service: IPasswordResetEmailService,
    ):
        self._user_repository = user_repository
        self._credentials = credentials
        self._email_service = email_service

    async def request_password_reset(
        self,
        email: str,
        language: str = "en",
        correlation_id: Optional[str] = None,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> Dict[str, str]:
        """Request a password reset for the given email address.

        Any previously issued token for the account is replaced.
        With ``background_tasks`` the email is sent after the response, so
        a registered address does not answer measurably slower than an
        unknown one.

        Returns:
            Dict containing the success message, identical for every email.
        """
        log = logger.bind(correlation_id=correlation_id, email=mask_email(email))
        response = {"message": get_translated_message("password_reset_email_sent", language)}

        user = await self._user_repository.get_by_email(email)
        if user is None:
            log.info("Password reset requested for unknown email")
            return response

        token = self._credentials.generate_reset_token()
        user.set_password_reset_token(token.value, token.expires_at)
        user = await self._user_repository.update(
            user.id,
            {
                "password_reset_token": user.password_reset_token,
                "password_reset_token_expires_at": user.password_reset_token_expires_at,
                "updated_at": user.updated_at,
            },
        )
        log.info("Password reset token issued", user_id=user.id, token=token.mask_for_logging())

        if background_tasks is not None:
            background_tasks.add_task(self._deliver, user, token, language, log)
        else:
            await self._deliver(user, token, language, log)

        return response

    async def _deliver(self, user: User, token: ResetToken, language: str, log: Any) -> None:
        try:
            await self._email_service.send_password_reset_email(user, token, language)
        except EmailServiceError as e:
            log.error("Password reset email delivery failed", user_id=user.id, error=str(e))
