"""Password Reset Service.

Completes the reset flow: a matching, unexpired token lets the caller set a
new password, after which the token is cleared so it cannot be replayed.
"""

from datetime import datetime
from typing import Dict, Optional

import structlog

from eventdesk.core.exceptions import PasswordResetError
from eventdesk.core.logging import mask_email
from eventdesk.domain.interfaces.repositories import IUserRepository
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class PasswordResetService:
    """Service for executing password resets with valid tokens."""

    def __init__(self, user_repository: IUserRepository, credentials: CredentialService):
        self._user_repository = user_repository
        self._credentials = credentials

    async def reset_password(
        self,
        email: str,
        token: str,
        new_password: str,
        language: str = "en",
        now: Optional[datetime] = None,
    ) -> Dict[str, str]:
        """Sets ``new_password`` if ``token`` is the account's pending reset token.

        Raises:
            PasswordResetError: If the account is unknown, no token is pending,
                the token does not match, or it has expired.
        """
        user = await self._user_repository.get_by_email(email)
        valid = user is not None and self._credentials.is_reset_token_valid(
            user.password_reset_token,
            user.password_reset_token_expires_at,
            token,
            now,
        )
        if not valid:
            logger.warning(
                "Password reset refused",
                email=mask_email(email),
                known_user=user is not None,
            )
            raise PasswordResetError(get_translated_message("invalid_or_expired_reset_token", language))

        user.hashed_password = self._credentials.hash_password(new_password)
        user.clear_password_reset_token()
        await self._user_repository.update(
            user.id,
            {
                "hashed_password": user.hashed_password,
                "password_reset_token": None,
                "password_reset_token_expires_at": None,
                "updated_at": user.updated_at,
            },
        )
        logger.info("Password reset completed", user_id=user.id)
        return {"message": get_translated_message("password_reset_success", language)}
