"""Email configuration settings for the EventDesk application.

This module defines email-related configuration parameters for the outbound
notifier, which currently delivers password reset links.
"""

from pathlib import Path
from typing import Optional

from pydantic import EmailStr, Field, SecretStr
from pydantic_settings import BaseSettings

_DEFAULT_TEMPLATES_DIR = str(Path(__file__).resolve().parents[2] / "templates" / "email")


class EmailSettings(BaseSettings):
    """Email configuration settings with secure defaults and validation.

    Attributes:
        EMAIL_SMTP_HOST: SMTP server hostname
        EMAIL_SMTP_PORT: SMTP server port (587 for STARTTLS, 465 for SSL)
        EMAIL_SMTP_USERNAME: SMTP authentication username
        EMAIL_SMTP_PASSWORD: SMTP authentication password (SecretStr)
        EMAIL_SMTP_USE_TLS: Enable STARTTLS (recommended)
        EMAIL_SMTP_USE_SSL: Enable implicit SSL (alternative to STARTTLS)
        EMAIL_FROM_EMAIL: Default sender email address
        EMAIL_FROM_NAME: Default sender name
        EMAIL_TEMPLATES_DIR: Directory containing email templates
        PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: Reset token lifetime
        PASSWORD_RESET_URL_BASE: Base URL for password reset links in the frontend
        EMAIL_TEST_MODE: Log emails instead of sending them
    """

    EMAIL_SMTP_HOST: str = Field(default="localhost", description="SMTP server hostname")
    EMAIL_SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    EMAIL_SMTP_USERNAME: Optional[str] = None
    EMAIL_SMTP_PASSWORD: Optional[SecretStr] = None
    EMAIL_SMTP_USE_TLS: bool = True
    EMAIL_SMTP_USE_SSL: bool = False

    EMAIL_FROM_EMAIL: EmailStr = Field(default="noreply@example.com")
    EMAIL_FROM_NAME: str = Field(default="EventDesk")

    EMAIL_TEMPLATES_DIR: str = Field(default=_DEFAULT_TEMPLATES_DIR)

    PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        ge=1,
        le=1440,
        description="Password reset token expiration time in minutes",
    )
    PASSWORD_RESET_URL_BASE: str = Field(
        default="http://localhost:3000/reset-password",
        description="Base URL for password reset links in frontend",
    )

    EMAIL_TEST_MODE: bool = Field(
        default=False,
        description="Enable test mode (emails logged instead of sent)",
    )

    def validate_smtp_config(self) -> None:
        """Validate SMTP configuration for production use.

        Raises:
            ValueError: If SMTP configuration is invalid or insecure
        """
        if self.EMAIL_TEST_MODE or getattr(self, "APP_ENV", "development") not in {
            "production",
            "staging",
        }:
            return

        if not self.EMAIL_SMTP_USERNAME or not self.EMAIL_SMTP_PASSWORD:
            raise ValueError("EMAIL_SMTP_USERNAME and EMAIL_SMTP_PASSWORD are required in production")

        if not (self.EMAIL_SMTP_USE_TLS or self.EMAIL_SMTP_USE_SSL):
            raise ValueError("Either EMAIL_SMTP_USE_TLS or EMAIL_SMTP_USE_SSL must be enabled")

        if self.EMAIL_SMTP_USE_TLS and self.EMAIL_SMTP_USE_SSL:
            raise ValueError("Cannot enable both EMAIL_SMTP_USE_TLS and EMAIL_SMTP_USE_SSL simultaneously")
