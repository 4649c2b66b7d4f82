import pytest

from eventdesk.core.exceptions import (
    AuthenticationError,
    ConsultationNotFoundError,
    DuplicateBookingIdError,
    DuplicateUserError,
    EmailServiceError,
    EventDeskError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    PasswordResetError,
    TemplateRenderError,
    UserAlreadyExistsError,
    ValidationError,
)
from eventdesk.utils.i18n import get_translated_message


def test_authentication_error_default():
    # Arrange
    message = get_translated_message("invalid_credentials", "en")
    code = "auth_failed"

    # Act
    error = AuthenticationError(message, code)

    # Assert
    assert error.message == message
    assert error.code == code
    assert str(error) == message


def test_authentication_error_no_code():
    error = AuthenticationError("nope")

    assert error.code == "authentication_error"


@pytest.mark.parametrize(
    "error_cls,parent,code",
    [
        (InvalidCredentialsError, AuthenticationError, "invalid_credentials"),
        (InvalidTokenError, AuthenticationError, "invalid_token"),
        (PasswordResetError, AuthenticationError, "password_reset_error"),
        (DuplicateUserError, UserAlreadyExistsError, "duplicate_user_error"),
        (TemplateRenderError, EmailServiceError, "template_render_error"),
    ],
)
def test_hierarchy_and_default_codes(error_cls, parent, code):
    error = error_cls("message")

    assert isinstance(error, parent)
    assert isinstance(error, EventDeskError)
    assert error.code == code


def test_not_found_errors_have_default_messages():
    error = ConsultationNotFoundError()

    assert isinstance(error, NotFoundError)
    assert error.message == "Consultation not found"
    assert error.code == "consultation_not_found"


def test_duplicate_booking_id_default_message():
    assert DuplicateBookingIdError().code == "duplicate_booking_id"


def test_validation_error_carries_field():
    error = ValidationError("bad status", field="status")

    assert error.field == "status"
    assert error.code == "validation_error"
