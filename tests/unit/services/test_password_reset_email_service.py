"""Tests for the password reset notifier."""

from datetime import datetime, timedelta, timezone

import pytest

from eventdesk.core.exceptions import EmailServiceError, TemplateRenderError
from eventdesk.domain.value_objects.reset_token import ResetToken
from eventdesk.infrastructure.services.email import PasswordResetEmailService
from tests.factories import create_fake_user


@pytest.fixture
def reset_token() -> ResetToken:
    return ResetToken(value="ab" * 32, expires_at=datetime.now(timezone.utc) + timedelta(hours=1))


@pytest.fixture
def user():
    return create_fake_user(id=1, full_name="Ana Silva", email="ana@example.com")


class TestPasswordResetEmailService:
    def test_test_mode_has_no_mail_client(self):
        service = PasswordResetEmailService(test_mode=True)

        assert service.fastmail is None

    def test_reset_url_carries_token(self, settings_override):
        settings_override(PASSWORD_RESET_URL_BASE="https://events.example.com/reset")
        service = PasswordResetEmailService(test_mode=True)

        assert service.reset_url("abc") == "https://events.example.com/reset?token=abc"

    async def test_test_mode_renders_without_sending(self, user, reset_token, mocker):
        service = PasswordResetEmailService(test_mode=True)
        render = mocker.spy(service, "render")

        assert await service.send_password_reset_email(user, reset_token) is True

        html = render.spy_return
        assert "Hello Ana Silva," in html
        assert f"token={reset_token.value}" in html
        assert "60 minutes" in html

    async def test_rendered_email_is_translated(self, user, reset_token, mocker):
        service = PasswordResetEmailService(test_mode=True)
        render = mocker.spy(service, "render")

        await service.send_password_reset_email(user, reset_token, language="es")

        assert "Hola Ana Silva," in render.spy_return
        assert 'lang="es"' in render.spy_return

    async def test_sends_through_fastmail(self, user, reset_token, mocker):
        service = PasswordResetEmailService(test_mode=True)
        service.fastmail = mocker.Mock()
        service.fastmail.send_message = mocker.AsyncMock()

        assert await service.send_password_reset_email(user, reset_token) is True

        message = service.fastmail.send_message.await_args.args[0]
        assert "ana@example.com" in str(message.recipients[0])
        assert message.subject == "Reset your password"

    async def test_delivery_failure_raises_email_service_error(self, user, reset_token, mocker):
        service = PasswordResetEmailService(test_mode=True)
        service.fastmail = mocker.Mock()
        service.fastmail.send_message = mocker.AsyncMock(side_effect=ConnectionError("refused"))

        with pytest.raises(EmailServiceError):
            await service.send_password_reset_email(user, reset_token)

    def test_missing_template_raises(self, tmp_path):
        service = PasswordResetEmailService(test_mode=True, templates_dir=str(tmp_path))

        with pytest.raises(TemplateRenderError):
            service.render(subject="x")
