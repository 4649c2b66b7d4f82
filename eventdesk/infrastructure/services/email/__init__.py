from .password_reset_email_service import PasswordResetEmailService

__all__ = ["PasswordResetEmailService"]
