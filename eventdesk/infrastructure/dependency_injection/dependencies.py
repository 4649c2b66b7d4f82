"""Dependency injection factories for repositories and domain services.

Every service is constructed per request from FastAPI ``Depends`` factories,
so tests can swap any layer with ``app.dependency_overrides``.

The repository factories pick the backend at request time: when the
application holds an ``InMemoryStore`` on ``app.state.memory_store`` the
in-memory repositories are used, otherwise the SQL repositories are bound to
a request-scoped ``AsyncSession``.
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

import structlog
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.core.config.settings import settings
from eventdesk.domain.interfaces.repositories import (
    IAdminRepository,
    IConsultationRepository,
    IContactInquiryRepository,
    IUserRepository,
)
from eventdesk.domain.interfaces.services import IPasswordResetEmailService
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.domain.services.authentication import (
    AdminAuthenticationService,
    UserAuthenticationService,
    UserRegistrationService,
)
from eventdesk.domain.services.booking import BookingIdGenerator, BookingLifecycleService
from eventdesk.domain.services.password_reset import PasswordResetRequestService, PasswordResetService
from eventdesk.infrastructure.database.async_db import AsyncSessionFactory
from eventdesk.infrastructure.repositories import (
    AdminRepository,
    ConsultationRepository,
    ContactInquiryRepository,
    InMemoryAdminRepository,
    InMemoryConsultationRepository,
    InMemoryContactInquiryRepository,
    InMemoryStore,
    InMemoryUserRepository,
    UserRepository,
)
from eventdesk.infrastructure.services.email import PasswordResetEmailService

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Infrastructure Layer Dependencies
# ---------------------------------------------------------------------------


def get_memory_store(request: Request) -> Optional[InMemoryStore]:
    return getattr(request.app.state, "memory_store", None)


MemoryStore = Annotated[Optional[InMemoryStore], Depends(get_memory_store)]


async def get_db_session(store: MemoryStore) -> AsyncGenerator[Optional[AsyncSession], None]:
    """Yields a request-scoped session, or ``None`` for the in-memory backend.

    Rolls back the transaction if the request fails; the session is always
    closed by its context manager.
    """
    if store is not None:
        yield None
        return
    async with AsyncSessionFactory() as session:
        logger.debug("async_db_session_created")
        try:
            yield session
        except Exception:  # noqa: BLE001 - any error must trigger rollback
            await session.rollback()
            logger.error("async_db_session_rollback")
            raise


DBSession = Annotated[Optional[AsyncSession], Depends(get_db_session)]


def get_user_repository(store: MemoryStore, db: DBSession) -> IUserRepository:
    return InMemoryUserRepository(store) if store is not None else UserRepository(db)


def get_admin_repository(store: MemoryStore, db: DBSession) -> IAdminRepository:
    return InMemoryAdminRepository(store) if store is not None else AdminRepository(db)


def get_consultation_repository(store: MemoryStore, db: DBSession) -> IConsultationRepository:
    return InMemoryConsultationRepository(store) if store is not None else ConsultationRepository(db)


def get_contact_repository(store: MemoryStore, db: DBSession) -> IContactInquiryRepository:
    return InMemoryContactInquiryRepository(store) if store is not None else ContactInquiryRepository(db)


@lru_cache
def get_credential_service() -> CredentialService:
    """Process-wide credential service; it only holds configuration."""
    return CredentialService()


@lru_cache
def get_booking_id_generator() -> BookingIdGenerator:
    """Process-wide generator so booking ids stay monotonic per process."""
    return BookingIdGenerator(prefix=settings.BOOKING_ID_PREFIX)


@lru_cache
def get_email_service() -> IPasswordResetEmailService:
    return PasswordResetEmailService()


UserRepo = Annotated[IUserRepository, Depends(get_user_repository)]
AdminRepo = Annotated[IAdminRepository, Depends(get_admin_repository)]
Credentials = Annotated[CredentialService, Depends(get_credential_service)]

# ---------------------------------------------------------------------------
# Domain Service Dependencies
# ---------------------------------------------------------------------------


def get_lifecycle_service(
    consultations: Annotated[IConsultationRepository, Depends(get_consultation_repository)],
    contacts: Annotated[IContactInquiryRepository, Depends(get_contact_repository)],
    booking_ids: Annotated[BookingIdGenerator, Depends(get_booking_id_generator)],
) -> BookingLifecycleService:
    return BookingLifecycleService(consultations, contacts, booking_ids)


def get_user_registration_service(users: UserRepo, credentials: Credentials) -> UserRegistrationService:
    return UserRegistrationService(users, credentials)


def get_user_authentication_service(users: UserRepo, credentials: Credentials) -> UserAuthenticationService:
    return UserAuthenticationService(users, credentials)


def get_admin_authentication_service(admins: AdminRepo, credentials: Credentials) -> AdminAuthenticationService:
    return AdminAuthenticationService(admins, credentials)


def get_password_reset_request_service(
    users: UserRepo,
    credentials: Credentials,
    email_service: Annotated[IPasswordResetEmailService, Depends(get_email_service)],
) -> PasswordResetRequestService:
    return PasswordResetRequestService(users, credentials, email_service)


def get_password_reset_service(users: UserRepo, credentials: Credentials) -> PasswordResetService:
    return PasswordResetService(users, credentials)


# Annotated shortcuts used by the routers
LifecycleService = Annotated[BookingLifecycleService, Depends(get_lifecycle_service)]
RegistrationService = Annotated[UserRegistrationService, Depends(get_user_registration_service)]
UserAuthService = Annotated[UserAuthenticationService, Depends(get_user_authentication_service)]
AdminAuthService = Annotated[AdminAuthenticationService, Depends(get_admin_authentication_service)]
ResetRequestService = Annotated[PasswordResetRequestService, Depends(get_password_reset_request_service)]
ResetService = Annotated[PasswordResetService, Depends(get_password_reset_service)]
