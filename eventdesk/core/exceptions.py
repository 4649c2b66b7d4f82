from __future__ import annotations

"""Centralized, structured exception hierarchy for EventDesk.

Each exception carries a machine-readable `code` for programmatic error
handling and a human-readable `message` for logging and user feedback.

The hierarchy is designed to:
- Provide clear, specific errors for different failure scenarios.
- Support internationalization (i18n) for user-facing messages.
- Map cleanly to HTTP status codes in the API layer (see `core.handlers`).
"""

from typing import Final

__all__: Final = [
    "EventDeskError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PermissionError",
    "ValidationError",
    "UserAlreadyExistsError",
    "DuplicateUserError",
    "DuplicateBookingIdError",
    "NotFoundError",
    "UserNotFoundError",
    "ConsultationNotFoundError",
    "ContactInquiryNotFoundError",
    "PasswordResetError",
    "DatabaseError",
    "EmailServiceError",
    "TemplateRenderError",
]


class EventDeskError(Exception):
    """Base exception class for all custom errors in the EventDesk application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
                       This message can be translated.
        code (str): A unique, machine-readable error code for identifying
                    the type of error programmatically.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(EventDeskError):
    """Raised for general authentication failures.

    Maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials (password or admin security code) do not match.

    The message is deliberately generic so callers cannot tell which part of
    the credentials was wrong.
    """

    def __init__(self, message: str, code: str = "invalid_credentials"):
        super().__init__(message, code)


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is missing, malformed, tampered with or expired."""

    def __init__(self, message: str, code: str = "invalid_token"):
        super().__init__(message, code)


class PermissionError(EventDeskError):
    """Raised when an authenticated principal may not perform an action.

    Covers both role checks (non-admin on an admin route) and ownership checks
    (editing someone else's consultation). Maps to `403 Forbidden`.
    """

    def __init__(self, message: str, code: str = "permission_denied"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Validation errors (map to 400 Bad Request)
# ---------------------------------------------------------------------------


class ValidationError(EventDeskError):
    """Raised for data validation failures detected outside request parsing.

    Example: a status value outside the lifecycle vocabulary.
    """

    def __init__(self, message: str, code: str = "validation_error", field: str | None = None):
        self.field = field
        super().__init__(message, code)


class UserAlreadyExistsError(EventDeskError):
    """Raised when attempting to create an account whose email is taken."""

    def __init__(self, message: str, code: str = "user_already_exists"):
        super().__init__(message, code)


class DuplicateUserError(UserAlreadyExistsError):
    """Raised by repositories when the unique email constraint is violated.

    Signup reports this as `400 Bad Request`.
    """

    def __init__(self, message: str, code: str = "duplicate_user_error"):
        super().__init__(message, code)


class DuplicateBookingIdError(EventDeskError):
    """Raised by repositories when a booking identifier is already taken.

    The lifecycle service retries creation with a fresh identifier, so this
    only reaches the API layer after repeated collisions.
    """

    def __init__(self, message: str = "Booking identifier already exists", code: str = "duplicate_booking_id"):
        super().__init__(message, code)


class PasswordResetError(AuthenticationError):
    """Raised when a password reset token is invalid, expired or already used.

    Maps to `400 Bad Request`.
    """

    def __init__(self, message: str, code: str = "password_reset_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Lookup errors (map to 404 Not Found)
# ---------------------------------------------------------------------------


class NotFoundError(EventDeskError):
    """Raised when a referenced record does not exist."""

    def __init__(self, message: str = "Resource not found", code: str = "not_found"):
        super().__init__(message, code)


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found", code: str = "user_not_found"):
        super().__init__(message, code)


class ConsultationNotFoundError(NotFoundError):
    def __init__(self, message: str = "Consultation not found", code: str = "consultation_not_found"):
        super().__init__(message, code)


class ContactInquiryNotFoundError(NotFoundError):
    def __init__(self, message: str = "Contact inquiry not found", code: str = "contact_not_found"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Infrastructure errors (map to 500 Internal Server Error)
# ---------------------------------------------------------------------------


class DatabaseError(EventDeskError):
    """Raised for low-level database interaction errors.

    Wraps underlying driver errors so no storage detail leaks to clients.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


class EmailServiceError(EventDeskError):
    """Raised when the outbound notifier cannot deliver an email."""

    def __init__(self, message: str, code: str = "email_service_error"):
        super().__init__(message, code)


class TemplateRenderError(EmailServiceError):
    """Raised when an email template fails to render."""

    def __init__(self, message: str, code: str = "template_render_error"):
        super().__init__(message, code)
