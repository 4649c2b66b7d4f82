"""Main application settings and configuration management.

This module composes all the application settings from the different modules
(app, database, auth, email) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object for use throughout the application.

Environment Support:
- Development: Uses .env, emails are logged instead of sent
- Test: Uses .env.test, emails are logged instead of sent
- Staging: Uses .env.staging, SMTP credentials required
- Production: Uses .env.production, SMTP credentials required
"""

import logging
import os
from pathlib import Path

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .email import EmailSettings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, DatabaseSettings, AuthSettings, EmailSettings):
    """The main settings class that aggregates all application configurations.

    It inherits from all the specialized settings classes, providing a unified
    interface to all configuration parameters.

    Usage:
        - Access settings via the singleton instance `settings` throughout the application.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        """Initialize settings with environment-specific configuration."""
        super().__init__(**kwargs)
        self._set_environment_defaults(self.APP_ENV)

    def _set_environment_defaults(self, env: str) -> None:
        """Set environment-specific default values.

        Args:
            env: Environment name
        """
        if env in ("development", "test"):
            self.EMAIL_TEST_MODE = True

        if env == "development":
            self.DEBUG = True

        logger.info(
            "Application running in %s environment (email test mode: %s, debug: %s)",
            env,
            self.EMAIL_TEST_MODE,
            self.DEBUG,
        )

    def validate_required_fields(self) -> None:
        """Validates that the environment is usable for the current APP_ENV.

        Email misconfiguration never blocks startup: password reset requests
        already report success regardless of delivery.

        Raises:
            ValueError: If a production deployment still points at SQLite.
        """
        if self.APP_ENV == "production" and self.DATABASE_URL.startswith("sqlite"):
            error_msg = "Production deployments require POSTGRES_HOST or DATABASE_URL to be set"
            logger.error(error_msg)
            raise ValueError(error_msg)

        try:
            self.validate_smtp_config()
        except ValueError as e:
            logger.error(f"Email configuration error: {e}")


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    env = os.getenv("APP_ENV", "development")

    env_files = {
        "development": ".env",
        "test": ".env.test",
        "staging": ".env.staging",
        "production": ".env.production",
    }

    env_file = env_files.get(env, ".env")

    if env != "development" and Path(env_file).exists():
        logger.info(f"Loading environment configuration from {env_file}")
        return Settings(_env_file=env_file)
    if Path(".env").exists():
        logger.info(f"Loading environment configuration from .env (environment: {env})")
    else:
        logger.info(f"No .env file found, using environment variables only (environment: {env})")
    return Settings()


# Create a singleton instance of the settings to be used across the application.
settings = create_settings()
settings.validate_required_fields()
