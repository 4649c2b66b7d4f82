"""Customers viewing and editing their own submissions."""

from tests.factories import consultation_payload, contact_payload

EVENT_DETAILS = {
    "eventType": "Gala",
    "eventDate": "2026-02-14",
    "location": "Porto",
    "budget": "50000",
    "details": "Black tie",
}


async def test_lists_only_own_submissions(async_client, signup_and_login):
    _, ana = await signup_and_login(email="ana@example.com")
    _, bob = await signup_and_login(email="bob@example.com")
    await async_client.post("/api/consultation", json=consultation_payload(), headers=ana)
    await async_client.post("/api/consultation", json=consultation_payload(), headers=bob)
    await async_client.post("/api/consultation", json=consultation_payload())
    await async_client.post("/api/contact", json=contact_payload(), headers=ana)

    consultations = await async_client.get("/api/my/consultations", headers=ana)
    contacts = await async_client.get("/api/my/contacts", headers=bob)

    assert len(consultations.json()["consultations"]) == 1
    assert contacts.json()["contacts"] == []


async def test_owner_edits_event_details(async_client, signup_and_login):
    _, headers = await signup_and_login()
    created = (await async_client.post("/api/consultation", json=consultation_payload(), headers=headers)).json()

    response = await async_client.patch(
        f"/api/my/consultations/{created['consultation']['id']}", json=EVENT_DETAILS, headers=headers
    )

    updated = response.json()["consultation"]
    assert response.status_code == 200
    assert updated["location"] == "Porto"
    assert updated["details"] == "Black tie"
    assert updated["bookingId"] == created["bookingId"]
    assert updated["status"] == "pending"


async def test_owner_cannot_change_status_through_edit(async_client, signup_and_login):
    _, headers = await signup_and_login()
    created = (await async_client.post("/api/consultation", json=consultation_payload(), headers=headers)).json()

    response = await async_client.patch(
        f"/api/my/consultations/{created['consultation']['id']}",
        json={**EVENT_DETAILS, "status": "completed", "paymentStatus": "paid"},
        headers=headers,
    )

    assert response.json()["consultation"]["status"] == "pending"
    assert response.json()["consultation"]["paymentStatus"] == "unpaid"


async def test_editing_someone_elses_consultation_is_forbidden(async_client, signup_and_login, admin_headers):
    _, ana = await signup_and_login(email="ana@example.com")
    _, bob = await signup_and_login(email="bob@example.com")
    created = (
        await async_client.post("/api/consultation", json=consultation_payload(location="Lisbon"), headers=ana)
    ).json()
    consultation_id = created["consultation"]["id"]

    response = await async_client.patch(f"/api/my/consultations/{consultation_id}", json=EVENT_DETAILS, headers=bob)

    assert response.status_code == 403
    listing = await async_client.get("/api/admin/consultations", headers=admin_headers)
    assert listing.json()["consultations"][0]["location"] == "Lisbon"


async def test_anonymous_consultation_cannot_be_edited(async_client, signup_and_login):
    _, headers = await signup_and_login()
    created = (await async_client.post("/api/consultation", json=consultation_payload())).json()

    response = await async_client.patch(
        f"/api/my/consultations/{created['consultation']['id']}", json=EVENT_DETAILS, headers=headers
    )

    assert response.status_code == 403


async def test_editing_missing_consultation_is_404(async_client, signup_and_login):
    _, headers = await signup_and_login()

    response = await async_client.patch("/api/my/consultations/404", json=EVENT_DETAILS, headers=headers)

    assert response.status_code == 404
