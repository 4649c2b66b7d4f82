"""Administrator login, review and updates."""

import pytest

from eventdesk.domain.services.auth.credential_service import CredentialService
from tests.conftest import ADMIN_CREDENTIALS
from tests.factories import consultation_payload, contact_payload


@pytest.fixture
async def consultation(async_client):
    response = await async_client.post("/api/consultation", json=consultation_payload())
    return response.json()["consultation"]


@pytest.fixture
async def contact(async_client):
    response = await async_client.post("/api/contact", json=contact_payload())
    return response.json()["contact"]


async def test_admin_login_returns_admin(async_client, admin_headers):
    response = await async_client.post("/api/admin/login", json=ADMIN_CREDENTIALS)

    body = response.json()
    assert body["success"] is True
    assert body["admin"]["email"] == "admin@example.com"
    assert body["admin"]["fullName"] == "Site Admin"


@pytest.mark.parametrize("field", ["password", "securityCode"])
async def test_admin_login_rejects_wrong_secret(async_client, admin_headers, field):
    payload = {**ADMIN_CREDENTIALS, field: "wrong-value"}

    response = await async_client.post("/api/admin/login", json=payload)

    assert response.status_code == 401


async def test_lists_consultations_and_contacts(async_client, admin_headers, consultation, contact):
    consultations = await async_client.get("/api/admin/consultations", headers=admin_headers)
    contacts = await async_client.get("/api/admin/contacts", headers=admin_headers)

    assert [c["id"] for c in consultations.json()["consultations"]] == [consultation["id"]]
    assert [c["id"] for c in contacts.json()["contacts"]] == [contact["id"]]


async def test_update_consultation(async_client, admin_headers, consultation):
    response = await async_client.patch(
        f"/api/admin/consultations/{consultation['id']}",
        json={"status": "scheduled", "scheduledDateTime": "2025-05-01T15:00", "adminComment": "Call first"},
        headers=admin_headers,
    )

    updated = response.json()["consultation"]
    assert response.status_code == 200
    assert updated["status"] == "scheduled"
    assert updated["scheduledDateTime"] == "2025-05-01T15:00"
    assert updated["adminComment"] == "Call first"
    assert updated["bookingId"] == consultation["bookingId"]


async def test_empty_patch_resets_status_and_schedule(async_client, admin_headers, consultation):
    url = f"/api/admin/consultations/{consultation['id']}"
    await async_client.patch(
        url,
        json={"status": "confirmed", "scheduledDateTime": "2025-05-01T15:00", "adminComment": "Keep"},
        headers=admin_headers,
    )

    response = await async_client.patch(url, json={}, headers=admin_headers)

    updated = response.json()["consultation"]
    assert updated["status"] == "pending"
    assert updated["scheduledDateTime"] is None
    assert updated["adminComment"] == "Keep"


async def test_null_comment_clears_it(async_client, admin_headers, consultation):
    url = f"/api/admin/consultations/{consultation['id']}"
    await async_client.patch(url, json={"adminComment": "note"}, headers=admin_headers)

    response = await async_client.patch(url, json={"adminComment": None}, headers=admin_headers)

    assert response.json()["consultation"]["adminComment"] is None


async def test_unknown_status_is_400(async_client, admin_headers, consultation):
    response = await async_client.patch(
        f"/api/admin/consultations/{consultation['id']}", json={"status": "archived"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"


async def test_update_missing_consultation_is_404(async_client, admin_headers):
    response = await async_client.patch("/api/admin/consultations/999", json={}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Consultation not found"


async def test_update_contact(async_client, admin_headers, contact):
    url = f"/api/admin/contacts/{contact['id']}"

    replied = await async_client.patch(url, json={"status": "replied", "adminComment": "Sent"}, headers=admin_headers)
    reset = await async_client.patch(url, json={}, headers=admin_headers)

    assert replied.json()["contact"]["status"] == "replied"
    assert reset.json()["contact"]["status"] == "new"
    assert reset.json()["contact"]["adminComment"] == "Sent"


async def test_update_missing_contact_is_404(async_client, admin_headers):
    response = await async_client.patch("/api/admin/contacts/5", json={"status": "replied"}, headers=admin_headers)

    assert response.status_code == 404


async def test_update_payment(async_client, admin_headers, consultation):
    response = await async_client.patch(
        f"/api/admin/consultations/{consultation['id']}/payment",
        json={"paymentStatus": "paid", "paymentIntentId": "pi_123"},
        headers=admin_headers,
    )

    updated = response.json()["consultation"]
    assert updated["paymentStatus"] == "paid"
    assert updated["paymentIntentId"] == "pi_123"


async def test_update_payment_rejects_unknown_status(async_client, admin_headers, consultation):
    response = await async_client.patch(
        f"/api/admin/consultations/{consultation['id']}/payment",
        json={"paymentStatus": "settled"},
        headers=admin_headers,
    )

    assert response.status_code == 400


async def test_lookup_by_booking_id(async_client, admin_headers, consultation):
    found = await async_client.get(
        f"/api/admin/consultations/booking/{consultation['bookingId']}", headers=admin_headers
    )
    missing = await async_client.get("/api/admin/consultations/booking/RGM-1", headers=admin_headers)

    assert found.json()["consultation"]["id"] == consultation["id"]
    assert missing.status_code == 404


async def test_unknown_admin_email_costs_the_same_bcrypt_work(async_client, admin_headers, mocker):
    await async_client.post("/api/admin/login", json={**ADMIN_CREDENTIALS, "email": "warmup@example.com"})
    verify_spy = mocker.spy(CredentialService, "verify_password")

    await async_client.post("/api/admin/login", json={**ADMIN_CREDENTIALS, "email": "ghost@example.com"})
    unknown = verify_spy.call_count
    verify_spy.reset_mock()
    await async_client.post("/api/admin/login", json={**ADMIN_CREDENTIALS, "password": "wrong-value"})

    assert unknown == verify_spy.call_count == 1
