"""
Tests for booking creation and retrieval.
"""

from sqlmodel import select

from thelook.models import Booking

BOOKING = {
    "date": "2024-01-01",
    "email": "a@x.com",
    "serviceName": "Haircut",
    "slot": "10:00",
}


class TestCreateBooking:
    """POST /booking"""

    def test_first_booking_is_inserted(self, client, session):
        response = client.post("/booking", json=BOOKING)

        assert response.status_code == 200
        body = response.json()
        assert body["acknowledged"] is True
        assert isinstance(body["insertedId"], int)

        stored = session.get(Booking, body["insertedId"])
        assert stored.service_name == "Haircut"
        assert stored.slot == "10:00"
        assert stored.paid is False

    def test_duplicate_booking_is_acknowledged_false(self, client, session):
        client.post("/booking", json=BOOKING)
        response = client.post("/booking", json={**BOOKING, "slot": "11:00"})

        assert response.status_code == 200
        assert response.json() == {
            "acknowledged": False,
            "message": "already have a booking on 2024-01-01",
        }
        assert len(session.exec(select(Booking)).all()) == 1

    def test_same_email_other_service_is_allowed(self, client):
        client.post("/booking", json=BOOKING)
        response = client.post("/booking", json={**BOOKING, "serviceName": "Fade"})

        assert response.json()["acknowledged"] is True

    def test_same_email_other_date_is_allowed(self, client):
        client.post("/booking", json=BOOKING)
        response = client.post("/booking", json={**BOOKING, "date": "2024-01-02"})

        assert response.json()["acknowledged"] is True

    def test_optional_fields_are_stored(self, client, session):
        payload = {**BOOKING, "price": 18, "customerName": "Alex", "phone": "555-0100"}

        response = client.post("/booking", json=payload)

        stored = session.get(Booking, response.json()["insertedId"])
        assert stored.price == 18
        assert stored.customer_name == "Alex"
        assert stored.phone == "555-0100"

    def test_missing_fields_are_rejected(self, client):
        response = client.post("/booking", json={"date": "2024-01-01", "email": "a@x.com"})
        assert response.status_code == 422

    def test_malformed_date_is_rejected(self, client):
        response = client.post("/booking", json={**BOOKING, "date": "tomorrow"})
        assert response.status_code == 422


class TestReadBookings:
    """GET /booking and GET /booking/{id}"""

    def test_list_requires_token(self, client):
        response = client.get("/booking", params={"email": "a@x.com"})
        assert response.status_code == 401

    def test_list_rejects_bad_token(self, client):
        response = client.get(
            "/booking",
            params={"email": "a@x.com"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 403

    def test_list_by_email(self, client, auth_header):
        client.post("/booking", json=BOOKING)
        client.post("/booking", json={**BOOKING, "email": "b@x.com"})

        response = client.get(
            "/booking", params={"email": "a@x.com"}, headers=auth_header("a@x.com")
        )

        assert response.status_code == 200
        [booking] = response.json()
        assert booking["email"] == "a@x.com"
        assert booking["serviceName"] == "Haircut"
        assert booking["paid"] is False

    def test_list_keeps_booking_order(self, client, auth_header):
        for service in ("Shave", "Haircut", "Beard Trim"):
            client.post("/booking", json={**BOOKING, "serviceName": service})

        response = client.get(
            "/booking", params={"email": "a@x.com"}, headers=auth_header("a@x.com")
        )

        assert [b["serviceName"] for b in response.json()] == ["Shave", "Haircut", "Beard Trim"]

    def test_list_is_not_restricted_to_token_owner(self, client, auth_header):
        client.post("/booking", json=BOOKING)

        response = client.get(
            "/booking", params={"email": "a@x.com"}, headers=auth_header("other@x.com")
        )

        assert len(response.json()) == 1

    def test_get_by_id(self, client, auth_header):
        booking_id = client.post("/booking", json=BOOKING).json()["insertedId"]

        response = client.get(f"/booking/{booking_id}", headers=auth_header("a@x.com"))

        assert response.status_code == 200
        assert response.json()["id"] == booking_id
        assert response.json()["date"] == "2024-01-01"

    def test_get_missing_returns_null(self, client, auth_header):
        response = client.get("/booking/999", headers=auth_header("a@x.com"))

        assert response.status_code == 200
        assert response.json() is None

    def test_get_by_id_requires_token(self, client):
        response = client.get("/booking/1")
        assert response.status_code == 401
