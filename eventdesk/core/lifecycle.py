"""Application lifecycle management.

This module handles application startup and shutdown events: preparing the
configured persistence backend, creating the bootstrap administrator and
releasing database connections on shutdown.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from eventdesk.core.config.settings import settings
from eventdesk.core.logging import logger
from eventdesk.domain.interfaces.repositories import IAdminRepository
from eventdesk.domain.services.authentication import AdminAuthenticationService
from eventdesk.infrastructure.database import AsyncSessionFactory, create_db_and_tables, dispose_engine
from eventdesk.infrastructure.dependency_injection.dependencies import get_credential_service
from eventdesk.infrastructure.repositories import AdminRepository, InMemoryAdminRepository, InMemoryStore


async def bootstrap_admin(admins: IAdminRepository) -> None:
    """Creates the administrator described by the ADMIN_* settings, if configured."""
    if not settings.bootstrap_admin_configured:
        logger.info("admin_bootstrap_skipped")
        return
    await AdminAuthenticationService(admins, get_credential_service()).ensure_admin(
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD.get_secret_value(),
        security_code=settings.ADMIN_SECURITY_CODE.get_secret_value(),
        full_name=settings.ADMIN_FULL_NAME,
    )


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager that handles startup and shutdown events.

        With the ``memory`` backend an ``InMemoryStore`` is placed on
        ``app.state``; with the ``sql`` backend the tables are created
        (retrying while the database comes up).

        Args:
            app (FastAPI): The FastAPI application instance
        """
        # Startup
        if settings.REPOSITORY_BACKEND == "memory":
            app.state.memory_store = InMemoryStore()
            await bootstrap_admin(InMemoryAdminRepository(app.state.memory_store))
        else:
            app.state.memory_store = None
            await create_db_and_tables()
            async with AsyncSessionFactory() as session:
                await bootstrap_admin(AdminRepository(session))
        logger.info(
            "application_startup",
            env=settings.APP_ENV,
            version=settings.VERSION,
            backend=settings.REPOSITORY_BACKEND,
        )

        yield

        # Shutdown
        await dispose_engine()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
