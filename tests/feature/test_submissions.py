"""Public consultation and contact submissions."""

from tests.factories import consultation_payload, contact_payload


async def test_anonymous_consultation(async_client):
    response = await async_client.post("/api/consultation", json=consultation_payload(eventType="Wedding"))

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["bookingId"].startswith("RGM-")
    consultation = body["consultation"]
    assert consultation["bookingId"] == body["bookingId"]
    assert consultation["eventType"] == "Wedding"
    assert consultation["status"] == "pending"
    assert consultation["paymentStatus"] == "unpaid"
    assert consultation["userId"] is None


async def test_booking_ids_are_unique(async_client):
    booking_ids = set()
    for _ in range(10):
        response = await async_client.post("/api/consultation", json=consultation_payload())
        booking_ids.add(response.json()["bookingId"])

    assert len(booking_ids) == 10


async def test_authenticated_consultation_is_owned(async_client, signup_and_login):
    user, headers = await signup_and_login()

    response = await async_client.post("/api/consultation", json=consultation_payload(), headers=headers)

    assert response.json()["consultation"]["userId"] == user["id"]


async def test_invalid_token_on_public_route_is_anonymous(async_client):
    response = await async_client.post(
        "/api/consultation",
        json=consultation_payload(),
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 200
    assert response.json()["consultation"]["userId"] is None


async def test_admin_token_does_not_own_submission(async_client, admin_headers):
    response = await async_client.post("/api/consultation", json=consultation_payload(), headers=admin_headers)

    assert response.json()["consultation"]["userId"] is None


async def test_consultation_missing_fields_is_400(async_client):
    payload = consultation_payload()
    del payload["location"]

    response = await async_client.post("/api/consultation", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "location"


async def test_snake_case_body_is_accepted(async_client):
    payload = consultation_payload()
    payload["event_type"] = payload.pop("eventType")
    payload["event_date"] = payload.pop("eventDate")

    response = await async_client.post("/api/consultation", json=payload)

    assert response.status_code == 200


async def test_contact_submission(async_client, signup_and_login):
    user, headers = await signup_and_login()

    anonymous = await async_client.post("/api/contact", json=contact_payload(subject="Hello"))
    owned = await async_client.post("/api/contact", json=contact_payload(), headers=headers)

    assert anonymous.status_code == 200
    assert anonymous.json()["contact"]["status"] == "new"
    assert anonymous.json()["contact"]["subject"] == "Hello"
    assert anonymous.json()["contact"]["userId"] is None
    assert owned.json()["contact"]["userId"] == user["id"]


async def test_contact_requires_message(async_client):
    response = await async_client.post("/api/contact", json=contact_payload(message=""))

    assert response.status_code == 400
