"""End-to-end password reset over HTTP."""

import pytest

from eventdesk.core.exceptions import EmailServiceError
from eventdesk.infrastructure.dependency_injection.dependencies import get_email_service
from eventdesk.infrastructure.repositories import InMemoryUserRepository


@pytest.fixture
def sent_emails(app, mocker):
    """Captures reset emails instead of rendering them."""
    email_service = mocker.Mock()
    email_service.send_password_reset_email = mocker.AsyncMock(return_value=True)
    app.dependency_overrides[get_email_service] = lambda: email_service
    return email_service.send_password_reset_email


async def _stored_token(memory_store, email: str) -> str:
    return (await InMemoryUserRepository(memory_store).get_by_email(email)).password_reset_token


async def test_request_is_identical_for_unknown_email(async_client, signup_and_login, sent_emails):
    await signup_and_login(email="a@x.com")

    known = await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})
    unknown = await async_client.post("/api/password-reset-request", json={"email": "ghost@x.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()
    assert known.json()["success"] is True
    assert sent_emails.await_count == 1


async def test_request_succeeds_when_delivery_fails(async_client, signup_and_login, sent_emails):
    await signup_and_login(email="a@x.com")
    sent_emails.side_effect = EmailServiceError("SMTP down")

    response = await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json()["success"] is True


async def test_reset_with_token_is_single_use(async_client, memory_store, signup_and_login, sent_emails):
    await signup_and_login(email="a@x.com", password="secret1")
    await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})
    token = await _stored_token(memory_store, "a@x.com")
    payload = {"email": "a@x.com", "token": token, "newPassword": "brandnew1"}

    first = await async_client.post("/api/password-reset", json=payload)
    replay = await async_client.post("/api/password-reset", json={**payload, "newPassword": "another1"})

    assert first.status_code == 200
    assert first.json()["message"] == "Password has been reset successfully"
    assert replay.status_code == 400
    old = await async_client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    new = await async_client.post("/api/login", json={"email": "a@x.com", "password": "brandnew1"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_wrong_token_is_400(async_client, signup_and_login, sent_emails):
    await signup_and_login(email="a@x.com")
    await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})

    response = await async_client.post(
        "/api/password-reset", json={"email": "a@x.com", "token": "0" * 64, "newPassword": "brandnew1"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid or expired reset token"


async def test_reset_token_is_not_a_bearer_token(async_client, memory_store, signup_and_login, sent_emails):
    await signup_and_login(email="a@x.com")
    await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})
    token = await _stored_token(memory_store, "a@x.com")

    response = await async_client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


async def test_request_in_test_mode_without_override(async_client, signup_and_login):
    await signup_and_login(email="a@x.com")

    response = await async_client.post("/api/password-reset-request", json={"email": "a@x.com"})

    assert response.status_code == 200
