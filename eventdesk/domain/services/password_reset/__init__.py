"""Password Reset Domain Services.

Request and execution phases of the password reset workflow.
"""

from .password_reset_request_service import PasswordResetRequestService
from .password_reset_service import PasswordResetService

__all__ = [
    "PasswordResetRequestService",
    "PasswordResetService",
]
