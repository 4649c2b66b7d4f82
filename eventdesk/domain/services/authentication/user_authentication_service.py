"""Authentication of customers and administrators.

Both logins answer with the same generic error whatever part of the
credentials was wrong, and an unknown email still pays for a bcrypt
verification so response timing does not reveal registered addresses.
"""

import hmac
from typing import Optional, Tuple

import structlog

from eventdesk.core.exceptions import DuplicateUserError, InvalidCredentialsError, UserNotFoundError
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.user import User
from eventdesk.domain.interfaces.repositories import IAdminRepository, IUserRepository
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.domain.value_objects.principal import PrincipalKind
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)


class UserAuthenticationService:
    """Verifies customer credentials and issues bearer tokens."""

    def __init__(self, user_repository: IUserRepository, credentials: CredentialService):
        self._user_repository = user_repository
        self._credentials = credentials

    async def authenticate_user(self, email: str, password: str, language: str = "en") -> User:
        """Returns the user whose email and password match.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match.
        """
        user = await self._user_repository.get_by_email(email)
        if user is None:
            self._credentials.verify_against_dummy(password)
            logger.info("Login failed", email=mask_email(email), reason="unknown_email")
            raise InvalidCredentialsError(get_translated_message("invalid_credentials", language))

        if not self._credentials.verify_password(password, user.hashed_password):
            logger.info("Login failed", user_id=user.id, reason="wrong_password")
            raise InvalidCredentialsError(get_translated_message("invalid_credentials", language))

        logger.info("User authenticated", user_id=user.id)
        return user

    async def login(self, email: str, password: str, language: str = "en") -> Tuple[User, str]:
        """Authenticates a customer and issues a bearer token."""
        user = await self.authenticate_user(email, password, language)
        token = self._credentials.issue_token(
            user.id, user.email, PrincipalKind.USER, extra={"role": user.role.value}
        )
        return user, token

    async def get_user(self, user_id: int, language: str = "en") -> User:
        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(get_translated_message("user_not_found", language))
        return user


class AdminAuthenticationService:
    """Verifies administrator credentials (password and security code)."""

    def __init__(self, admin_repository: IAdminRepository, credentials: CredentialService):
        self._admin_repository = admin_repository
        self._credentials = credentials

    async def login(
        self,
        email: str,
        password: str,
        security_code: str,
        language: str = "en",
    ) -> Tuple[Admin, str]:
        """Authenticates an administrator and issues an admin bearer token.

        Raises:
            InvalidCredentialsError: If the email is unknown, or the password or
                security code does not match.
        """
        admin = await self._admin_repository.get_by_email(email)
        if admin is None:
            password_ok = self._credentials.verify_against_dummy(password)
            code_ok = False
        else:
            password_ok = self._credentials.verify_password(password, admin.hashed_password)
            code_ok = hmac.compare_digest(admin.security_code.encode(), security_code.encode())
        if not (password_ok and code_ok):
            logger.warning(
                "Admin login failed",
                email=mask_email(email),
                known_admin=admin is not None,
            )
            raise InvalidCredentialsError(get_translated_message("invalid_admin_credentials", language))

        token = self._credentials.issue_token(admin.id, admin.email, PrincipalKind.ADMIN, extra={"role": "admin"})
        logger.info("Admin authenticated", admin_id=admin.id)
        return admin, token

    async def ensure_admin(
        self,
        email: str,
        password: str,
        security_code: str,
        full_name: Optional[str] = None,
    ) -> Admin:
        """Creates the administrator if no admin with ``email`` exists yet.

        Existing administrators are returned untouched.
        """
        existing = await self._admin_repository.get_by_email(email)
        if existing is not None:
            logger.debug("Bootstrap admin already present", admin_id=existing.id)
            return existing
        admin = Admin(
            email=email,
            full_name=full_name,
            hashed_password=self._credentials.hash_password(password),
            security_code=security_code,
        )
        try:
            admin = await self._admin_repository.insert(admin)
        except DuplicateUserError:
            # Another worker created it first.
            admin = await self._admin_repository.get_by_email(email)
        logger.info("Bootstrap admin ensured", admin_id=admin.id, email=mask_email(email))
        return admin
