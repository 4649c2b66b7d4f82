"""User and Admin repositories backed by SQLAlchemy async sessions."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from structlog import get_logger

from eventdesk.core.exceptions import DatabaseError, DuplicateUserError, UserNotFoundError
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.user import User
from eventdesk.domain.interfaces.repositories import IAdminRepository, IUserRepository
from eventdesk.infrastructure.repositories.base import SQLRepository

logger = get_logger(__name__)


class UserRepository(SQLRepository[User], IUserRepository):
    """SQLAlchemy implementation of ``IUserRepository``.

    Emails are matched exactly as stored. The unique constraint on
    ``users.email`` is the source of truth for duplicate detection, so two
    concurrent signups for the same email cannot both succeed.
    """

    model = User
    not_found_error = UserNotFoundError

    async def insert(self, user: User) -> User:
        self.db_session.add(user)
        try:
            saved = await self._commit(user, "insert")
        except IntegrityError as e:
            logger.info("Duplicate user email rejected", email=mask_email(user.email))
            raise DuplicateUserError("Email already registered") from e
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to save user") from e
        logger.info("User saved", user_id=saved.id, email=mask_email(saved.email))
        return saved

    async def get_by_email(self, email: str) -> Optional[User]:
        user = await self._first(select(User).where(User.email == email))
        logger.debug("User lookup by email completed", email=mask_email(email), found=user is not None)
        return user


class AdminRepository(SQLRepository[Admin], IAdminRepository):
    """SQLAlchemy implementation of ``IAdminRepository``."""

    model = Admin

    async def insert(self, admin: Admin) -> Admin:
        self.db_session.add(admin)
        try:
            saved = await self._commit(admin, "insert")
        except IntegrityError as e:
            raise DuplicateUserError("Email already registered") from e
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to save admin") from e
        logger.info("Admin saved", admin_id=saved.id, email=mask_email(saved.email))
        return saved

    async def get_by_email(self, email: str) -> Optional[Admin]:
        return await self._first(select(Admin).where(Admin.email == email))
