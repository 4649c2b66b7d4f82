"""Process-level setup run once before the EventDesk app is created.

Loads ``.env`` without overriding variables already set by the deployment,
configures structlog, loads the message catalogs and reports configuration
that would leave the service half usable: no administrator to review
submissions, or an in-memory store outside development and test.
"""

from dotenv import load_dotenv

from eventdesk.core.config.settings import settings
from eventdesk.core.logging import configure_logging, logger
from eventdesk.utils.i18n import setup_i18n


def initialize_application() -> None:
    """Load environment, logging and catalogs, then log the effective setup."""
    load_dotenv(override=False)

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    setup_i18n()

    if not settings.bootstrap_admin_configured:
        logger.warning("admin_bootstrap_not_configured", hint="set ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_SECURITY_CODE")
    if settings.REPOSITORY_BACKEND == "memory" and settings.APP_ENV not in ("development", "test"):
        logger.warning("memory_backend_outside_development", env=settings.APP_ENV)

    logger.info(
        "application_initialized",
        env=settings.APP_ENV,
        backend=settings.REPOSITORY_BACKEND,
        languages=list(settings.SUPPORTED_LANGUAGES),
        email_test_mode=settings.EMAIL_TEST_MODE,
    )
