"""
API tests for bookings and booking attachments.

Tests cover:
- Booking creation, default status and validation
- Listing only the caller's bookings
- Booking details with attachments and messages
- Ownership: other users' bookings and attachments are 404
- Authentication guard on every /bookings route
- ServiceM8 job sync is best-effort
"""

import pytest

from booking_portal import db
from booking_portal.models import Attachment, Booking
from helpers import create_booking


def add_attachment(booking_id, file_name="test.pdf"):
    attachment = Attachment(
        booking_id=booking_id,
        file_name=file_name,
        file_path=f"/uploads/{file_name}",
        file_size=1024,
        mime_type="application/pdf",
    )
    db.session.add(attachment)
    db.session.commit()
    return attachment.id


class TestCreateBooking:
    def test_creates_booking(self, auth_client):
        response = create_booking(
            auth_client,
            title="New Test Booking",
            description="This is a new booking created via API",
            date="2025-02-15T00:00:00.000Z",
        )
        body = response.get_json()

        assert response.status_code == 201
        assert body["success"] is True
        booking = body["responseObject"]
        assert booking["id"]
        assert booking["title"] == "New Test Booking"
        assert booking["description"] == "This is a new booking created via API"
        assert booking["status"] == "pending"
        assert booking["userId"] == auth_client.user_id
        assert booking["date"].startswith("2025-02-15T00:00:00")

    def test_default_status(self, auth_client):
        response = auth_client.post("/bookings", json={
            "title": "Booking with Default Status",
            "date": "2025-03-01T00:00:00.000Z",
        })
        body = response.get_json()

        assert response.status_code == 201
        assert body["responseObject"]["status"] == "Work Order"
        assert body["responseObject"]["description"] is None

    def test_missing_title(self, auth_client):
        response = auth_client.post("/bookings", json={
            "description": "Missing title",
            "date": "2025-02-15T00:00:00.000Z",
        })

        assert response.status_code == 400
        assert response.get_json()["message"].startswith("Invalid input")
        assert Booking.query.count() == 0

    def test_empty_title(self, auth_client):
        response = create_booking(auth_client, title="")

        assert response.status_code == 400
        assert response.get_json()["message"] == "Invalid input: Title is required"

    @pytest.mark.parametrize("date", [
        "not-a-valid-date",
        "2025-02-15",
        "15/02/2025 10:00",
        "2025-01-01T00:00:00",
        "2025-01-01T00:00+05:30",
    ])
    def test_invalid_date(self, auth_client, date):
        response = create_booking(auth_client, date=date)

        assert response.status_code == 400
        assert response.get_json()["message"] == "Invalid input: Date must be a valid ISO datetime"

    def test_requires_authentication(self, client, crm):
        response = create_booking(client)

        assert response.status_code == 401
        assert Booking.query.count() == 0
        crm.create_job.assert_not_called()

    def test_syncs_servicem8_job(self, auth_client, crm):
        create_booking(auth_client, status="Quote", date="2025-04-01T09:30:00.000Z")

        user = auth_client.get(f"/users/{auth_client.user_id}").get_json()["responseObject"]
        crm.create_job.assert_called_once_with(
            status="Quote",
            date="2025-04-01T09:30:00.000Z",
            company_uuid=user["uuid"],
        )

    def test_crm_failure_does_not_fail_booking(self, auth_client, crm):
        crm.create_job.return_value = None

        response = create_booking(auth_client)

        assert response.status_code == 201
        assert Booking.query.count() == 1

    def test_session_of_deleted_user(self, auth_client):
        from booking_portal.models import User
        db.session.delete(db.session.get(User, auth_client.user_id))
        db.session.commit()

        response = create_booking(auth_client)

        assert response.status_code == 404
        assert response.get_json()["message"] == "User not found"


class TestListBookings:
    def test_lists_own_bookings_newest_first(self, auth_client, other_client):
        create_booking(auth_client, title="First")
        create_booking(auth_client, title="Second")
        create_booking(other_client, title="Not mine")

        response = auth_client.get("/bookings")
        body = response.get_json()

        assert response.status_code == 200
        assert [booking["title"] for booking in body["responseObject"]] == ["Second", "First"]

    def test_empty_list(self, auth_client):
        response = auth_client.get("/bookings")

        assert response.status_code == 200
        assert response.get_json()["responseObject"] == []

    def test_requires_authentication(self, client):
        assert client.get("/bookings").status_code == 401


class TestGetBooking:
    def test_booking_details(self, auth_client):
        booking_id = create_booking(auth_client).get_json()["responseObject"]["id"]
        add_attachment(booking_id)
        auth_client.post(f"/bookings/{booking_id}/messages", json={"content": "Hello"})

        response = auth_client.get(f"/bookings/{booking_id}")
        body = response.get_json()

        assert response.status_code == 200
        booking = body["responseObject"]
        assert booking["id"] == booking_id
        assert booking["title"] == "Test Booking"
        assert len(booking["attachments"]) == 1
        assert booking["attachments"][0]["fileName"] == "test.pdf"
        assert len(booking["messages"]) == 1
        assert booking["messages"][0]["content"] == "Hello"
        assert booking["messages"][0]["messageAttachments"] == []

    def test_non_existent_booking(self, auth_client):
        response = auth_client.get("/bookings/99999")

        assert response.status_code == 404
        assert response.get_json()["message"] == "Booking not found"

    def test_other_users_booking(self, auth_client, other_client):
        booking_id = create_booking(other_client).get_json()["responseObject"]["id"]

        response = auth_client.get(f"/bookings/{booking_id}")

        assert response.status_code == 404

    def test_invalid_id(self, auth_client):
        assert auth_client.get("/bookings/abc").status_code == 400

    def test_requires_authentication(self, client):
        assert client.get("/bookings/1").status_code == 401


class TestGetAttachment:
    def test_attachment_details(self, auth_client):
        booking_id = create_booking(auth_client).get_json()["responseObject"]["id"]
        attachment_id = add_attachment(booking_id)

        response = auth_client.get(f"/bookings/{booking_id}/attachments/{attachment_id}")
        body = response.get_json()

        assert response.status_code == 200
        assert body["responseObject"]["id"] == attachment_id
        assert body["responseObject"]["bookingId"] == booking_id
        assert body["responseObject"]["fileName"] == "test.pdf"
        assert body["responseObject"]["mimeType"] == "application/pdf"

    def test_attachment_through_wrong_booking(self, auth_client):
        booking_id = create_booking(auth_client).get_json()["responseObject"]["id"]
        other_booking_id = create_booking(auth_client, title="Other").get_json()["responseObject"]["id"]
        attachment_id = add_attachment(booking_id)

        response = auth_client.get(f"/bookings/{other_booking_id}/attachments/{attachment_id}")

        assert response.status_code == 404
        assert response.get_json()["responseObject"] is None

    def test_attachment_of_other_users_booking(self, auth_client, other_client):
        booking_id = create_booking(other_client).get_json()["responseObject"]["id"]
        attachment_id = add_attachment(booking_id)

        response = auth_client.get(f"/bookings/{booking_id}/attachments/{attachment_id}")

        assert response.status_code == 404
        assert response.get_json()["message"] == "Attachment not found"

    def test_non_existent_attachment(self, auth_client):
        booking_id = create_booking(auth_client).get_json()["responseObject"]["id"]

        response = auth_client.get(f"/bookings/{booking_id}/attachments/99999")

        assert response.status_code == 404

    def test_requires_authentication(self, client):
        assert client.get("/bookings/1/attachments/1").status_code == 401
