"""Infrastructure implementation of the password reset notifier.

Renders the reset email from a Jinja2 template and delivers it over SMTP
with fastapi-mail. In test mode (development and test environments by
default) the email is rendered and logged instead of sent.
"""

from pathlib import Path
from typing import Any, Optional

import structlog
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from eventdesk.core.config.settings import settings
from eventdesk.core.exceptions import EmailServiceError, TemplateRenderError
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.user import User
from eventdesk.domain.interfaces.services import IPasswordResetEmailService
from eventdesk.domain.value_objects.reset_token import ResetToken
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)

TEMPLATE_NAME = "password_reset.html"


class PasswordResetEmailService(IPasswordResetEmailService):
    """Sends password reset links.

    Attributes:
        jinja_env: Jinja2 environment for template rendering.
        fastmail: FastMail instance for email delivery, ``None`` in test mode.
    """

    def __init__(self, test_mode: Optional[bool] = None, templates_dir: Optional[str] = None):
        self._test_mode = settings.EMAIL_TEST_MODE if test_mode is None else test_mode
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(Path(templates_dir or settings.EMAIL_TEMPLATES_DIR))),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.fastmail: Optional[FastMail] = None if self._test_mode else self._build_client()
        logger.info("PasswordResetEmailService initialized", test_mode=self._test_mode)

    @staticmethod
    def _build_client() -> FastMail:
        try:
            config = ConnectionConfig(
                MAIL_USERNAME=settings.EMAIL_SMTP_USERNAME or "",
                MAIL_PASSWORD=settings.EMAIL_SMTP_PASSWORD.get_secret_value() if settings.EMAIL_SMTP_PASSWORD else "",
                MAIL_FROM=settings.EMAIL_FROM_EMAIL,
                MAIL_FROM_NAME=settings.EMAIL_FROM_NAME,
                MAIL_PORT=settings.EMAIL_SMTP_PORT,
                MAIL_SERVER=settings.EMAIL_SMTP_HOST,
                MAIL_STARTTLS=settings.EMAIL_SMTP_USE_TLS,
                MAIL_SSL_TLS=settings.EMAIL_SMTP_USE_SSL,
                USE_CREDENTIALS=bool(settings.EMAIL_SMTP_USERNAME and settings.EMAIL_SMTP_PASSWORD),
                VALIDATE_CERTS=True,
            )
        except ValueError as e:
            logger.error("Failed to configure FastMail", error=str(e))
            raise EmailServiceError(f"Failed to configure email service: {e}") from e
        return FastMail(config)

    def reset_url(self, token: str) -> str:
        return f"{settings.PASSWORD_RESET_URL_BASE}?token={token}"

    def render(self, **context: Any) -> str:
        """Renders the reset email body.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        try:
            return self.jinja_env.get_template(TEMPLATE_NAME).render(**context)
        except TemplateNotFound as e:
            logger.error("Template not found", template=TEMPLATE_NAME)
            raise TemplateRenderError(f"Template file not found: {TEMPLATE_NAME}") from e
        except TemplateError as e:
            logger.error("Template rendering failed", template=TEMPLATE_NAME, error=str(e))
            raise TemplateRenderError(f"Template rendering failed: {e}") from e

    async def send_password_reset_email(
        self,
        user: User,
        token: ResetToken,
        language: str = "en",
    ) -> bool:
        subject = get_translated_message("password_reset_email_subject", language)
        html = self.render(
            subject=subject,
            greeting=get_translated_message("password_reset_email_greeting", language).format(
                name=user.full_name
            ),
            body=get_translated_message("password_reset_email_body", language).format(
                minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES
            ),
            action=get_translated_message("password_reset_email_action", language),
            ignore_notice=get_translated_message("password_reset_email_ignore", language),
            reset_url=self.reset_url(token.value),
            language=language,
        )

        if self.fastmail is None:
            logger.info(
                "Password reset email (test mode)",
                user_id=user.id,
                user_email=mask_email(user.email),
                subject=subject,
                html_length=len(html),
                expires_at=token.expires_at.isoformat(),
            )
            return True

        message = MessageSchema(
            subject=subject,
            recipients=[user.email],
            body=html,
            subtype=MessageType.html,
        )
        try:
            await self.fastmail.send_message(message)
        except Exception as e:
            logger.error(
                "Failed to send password reset email",
                user_id=user.id,
                user_email=mask_email(user.email),
                error=str(e),
            )
            raise EmailServiceError(f"Failed to send password reset email: {e}") from e

        logger.info("Password reset email sent", user_id=user.id, user_email=mask_email(user.email))
        return True
