"""Request helpers shared by the API tests."""

DEFAULT_PASSWORD = "password123"


def register(client, email="user@example.com", password=DEFAULT_PASSWORD, name="Test User", phone_number="9876543210"):
    return client.post("/register", json={
        "name": name,
        "email": email,
        "phone_number": phone_number,
        "password": password,
    })


def login(client, email="user@example.com", password=DEFAULT_PASSWORD):
    return client.post("/login", json={"email": email, "password": password})


def create_booking(client, **overrides):
    payload = {
        "title": "Test Booking",
        "description": "This is a test booking",
        "status": "pending",
        "date": "2025-01-01T00:00:00.000Z",
    }
    payload.update(overrides)
    return client.post("/bookings", json=payload)
