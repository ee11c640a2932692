"""
API tests for login, logout and the session snapshot.

Tests cover:
- Login with valid credentials sets the session
- Same 401 message for unknown email and wrong password
- Validation of the login body
- Logout deletes the server-side session record
- Session snapshot for authenticated and anonymous clients
"""

from helpers import register, login


class TestLogin:
    def test_login_with_valid_credentials(self, app, client):
        register(app.test_client(), email="test@example.com")

        response = login(client, email="test@example.com")
        body = response.get_json()

        assert response.status_code == 200
        assert body["success"] is True
        assert "Login successful" in body["message"]
        assert body["responseObject"]["id"]
        assert body["responseObject"]["email"] == "test@example.com"
        assert "password" not in body["responseObject"]
        assert "sessionId" in response.headers.get("Set-Cookie", "")

    def test_wrong_password(self, app, client):
        register(app.test_client(), email="test@example.com")

        response = login(client, email="test@example.com", password="wrongpassword")
        body = response.get_json()

        assert response.status_code == 401
        assert body["success"] is False
        assert body["message"] == "Invalid email or password"
        assert body["responseObject"] is None

    def test_unknown_email(self, client):
        response = login(client, email="nobody@example.com")
        body = response.get_json()

        assert response.status_code == 401
        assert body["message"] == "Invalid email or password"

    def test_failed_login_does_not_create_session(self, app, client):
        register(app.test_client(), email="test@example.com")
        login(client, email="test@example.com", password="wrongpassword")

        assert client.get("/login/session").status_code == 401

    def test_invalid_email_format(self, client):
        response = login(client, email="invalid-email")
        body = response.get_json()

        assert response.status_code == 400
        assert body["success"] is False


class TestLogout:
    def test_logout(self, auth_client):
        response = auth_client.post("/login/logout")
        body = response.get_json()

        assert response.status_code == 200
        assert body["success"] is True
        assert "Logout successful" in body["message"]
        assert auth_client.get("/bookings").status_code == 401

    def test_logged_out_cookie_no_longer_authenticates(self, app, auth_client):
        session_id = auth_client.get_cookie("sessionId").value
        replay = app.test_client()
        replay.set_cookie("sessionId", session_id)
        assert replay.get("/login/session").status_code == 200

        auth_client.post("/login/logout")

        assert replay.get("/login/session").status_code == 401
        assert replay.get("/bookings").status_code == 401

    def test_logout_without_session(self, client):
        assert client.post("/login/logout").status_code == 200


class TestSession:
    def test_session_snapshot_when_authenticated(self, app, client):
        register(app.test_client(), email="session@example.com", name="Session User", phone_number="555")
        login(client, email="session@example.com")

        response = client.get("/login/session")
        body = response.get_json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["responseObject"]["userId"]
        assert body["responseObject"]["userEmail"] == "session@example.com"
        assert body["responseObject"]["userName"] == "Session User"
        assert body["responseObject"]["userPhoneNumber"] == "555"

    def test_session_when_not_authenticated(self, client):
        response = client.get("/login/session")
        body = response.get_json()

        assert response.status_code == 401
        assert body["success"] is False
        assert "not authenticated" in body["message"]
