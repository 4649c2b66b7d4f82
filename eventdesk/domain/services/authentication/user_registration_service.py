"""User Registration Domain Service.

Creates customer accounts. Emails are stored exactly as submitted and must
be unique; the repository's unique constraint settles concurrent signups.
"""

import structlog

from eventdesk.core.exceptions import DuplicateUserError
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.user import Role, User
from eventdesk.domain.interfaces.repositories import IUserRepository
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class UserRegistrationService:
    """Domain service for customer signup."""

    def __init__(self, user_repository: IUserRepository, credentials: CredentialService):
        self._user_repository = user_repository
        self._credentials = credentials

    async def register_user(
        self,
        full_name: str,
        email: str,
        password: str,
        language: str = "en",
    ) -> User:
        """Registers a new customer account.

        Args:
            full_name: Display name.
            email: Login email, unique across customers.
            password: Plaintext password; only its hash is stored.
            language: Language for error messages.

        Returns:
            User: The stored account, with its id assigned.

        Raises:
            DuplicateUserError: If the email is already registered.
        """
        if await self._user_repository.get_by_email(email) is not None:
            logger.info("Signup refused, email already registered", email=mask_email(email))
            raise DuplicateUserError(get_translated_message("email_already_registered", language))

        user = User(
            full_name=full_name,
            email=email,
            hashed_password=self._credentials.hash_password(password),
            role=Role.USER,
        )
        try:
            user = await self._user_repository.insert(user)
        except DuplicateUserError as e:
            raise DuplicateUserError(get_translated_message("email_already_registered", language)) from e

        logger.info("User registered", user_id=user.id, email=mask_email(user.email))
        return user
