from hms.core.config import settings

from .conftest import (
    PASSWORD, SEED_DOCTOR_EMAIL, SEED_DOCTOR_ID, SEED_DOCTOR_PASSWORD,
    auth_headers, login, register
)

# Test data
test_user_data = {
    "email": "test@example.com",
    "password": "TestPassword123",
    "name": "Test User",
    "role": "patient",
}

test_login_data = {
    "email": "test@example.com",
    "password": "TestPassword123"
}

class TestAuthentication:
    """Test authentication endpoints."""

    def test_register_user(self, client):
        """Test user registration."""
        response = client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["email"] == test_user_data["email"]
        assert data["role"] == "patient"
        assert data["isSeed"] is False
        assert data["profileId"]
        assert "password" not in data
        assert "passwordHash" not in data

    def test_register_doctor_creates_profile(self, client):
        """A registered doctor shows up in the directory."""
        user = register(client, "newdoc@example.com", role="doctor", name="Dr. New", specialization="Dermatology")
        response = client.get("/api/v1/doctors/", params={"include_seed": False})
        doctors = response.json()["data"]
        assert [d["id"] for d in doctors] == [user["id"]]
        assert doctors[0]["specialization"] == "Dermatology"
        assert doctors[0]["availability"]["days"] == ["Mon", "Tue", "Wed", "Thu", "Fri"]

    def test_register_duplicate_email(self, client):
        """Test registration with duplicate email."""
        client.post("/api/v1/auth/register", json=test_user_data)

        response = client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == 409
        body = response.json()
        assert body == {"success": False, "error": "Conflict", "message": "Email already registered"}

    def test_register_seed_doctor_email(self, client):
        """Seed doctor emails cannot be claimed by a new account."""
        response = client.post("/api/v1/auth/register", json={**test_user_data, "email": SEED_DOCTOR_EMAIL})
        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"

    def test_register_weak_password(self, client):
        """Test registration with weak password."""
        weak_password_data = test_user_data.copy()
        weak_password_data["password"] = "weak"

        response = client.post("/api/v1/auth/register", json=weak_password_data)
        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "ValidationError"

    def test_register_rate_limited(self, client, monkeypatch):
        """Registration is limited per client address."""
        monkeypatch.setattr(settings, "RATE_LIMIT_REQUESTS", 2)
        for i in range(2):
            register(client, f"user{i}@example.com")

        response = client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == 429
        assert response.json()["error"] == "TooManyRequests"

    def test_register_rejects_admin_role(self, client):
        response = client.post("/api/v1/auth/register", json={**test_user_data, "role": "admin"})
        assert response.status_code == 422

    def test_login_success(self, client):
        """Test successful login."""
        client.post("/api/v1/auth/register", json=test_user_data)

        response = client.post("/api/v1/auth/login", json=test_login_data)
        assert response.status_code == 200
        data = response.json()["data"]
        assert "accessToken" in data
        assert "refreshToken" in data
        assert data["tokenType"] == "bearer"
        assert data["user"]["email"] == test_user_data["email"]

    def test_login_invalid_credentials(self, client):
        """Test login with invalid credentials."""
        response = client.post("/api/v1/auth/login", json={
            "email": "nonexistent@example.com",
            "password": "wrongpassword"
        })
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_account_lockout(self, client):
        """Five failed logins lock the account."""
        client.post("/api/v1/auth/register", json=test_user_data)

        for _ in range(5):
            response = client.post("/api/v1/auth/login", json={
                "email": test_user_data["email"],
                "password": "WrongPassword1"
            })
            assert response.status_code == 401

        response = client.post("/api/v1/auth/login", json=test_login_data)
        assert response.status_code == 423
        assert response.json()["error"] == "Locked"

    def test_seed_doctor_login(self, client):
        """Seed doctors sign in with the shared password and have no database row."""
        tokens = login(client, SEED_DOCTOR_EMAIL, SEED_DOCTOR_PASSWORD)
        assert tokens["user"]["id"] == SEED_DOCTOR_ID
        assert tokens["user"]["profileId"] == SEED_DOCTOR_ID
        assert tokens["user"]["isSeed"] is True
        assert tokens["user"]["role"] == "doctor"

        response = client.get("/api/v1/auth/me", headers=auth_headers(tokens))
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Dr. Sarah Johnson"

    def test_seed_doctor_wrong_password(self, client):
        response = client.post("/api/v1/auth/login", json={
            "email": SEED_DOCTOR_EMAIL,
            "password": "not-the-password1"
        })
        assert response.status_code == 401

    def test_protected_endpoint_without_token(self, client):
        """Test accessing protected endpoint without token."""
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_protected_endpoint_with_token(self, client):
        """Test accessing protected endpoint with valid token."""
        client.post("/api/v1/auth/register", json=test_user_data)
        tokens = login(client, test_login_data["email"], test_login_data["password"])

        response = client.get("/api/v1/auth/me", headers=auth_headers(tokens))
        assert response.status_code == 200
        assert response.json()["data"]["email"] == test_user_data["email"]

    def test_invalid_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_refresh_token(self, client):
        """Test token refresh."""
        client.post("/api/v1/auth/register", json=test_user_data)
        tokens = login(client, test_login_data["email"], test_login_data["password"])

        response = client.post("/api/v1/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert response.status_code == 200
        new_tokens = response.json()["data"]
        assert new_tokens["refreshToken"] != tokens["refreshToken"]

        # The rotated token cannot be used again
        response = client.post("/api/v1/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert response.status_code == 401

    def test_refresh_with_access_token(self, client):
        client.post("/api/v1/auth/register", json=test_user_data)
        tokens = login(client, test_login_data["email"], test_login_data["password"])

        response = client.post("/api/v1/auth/refresh", json={"refreshToken": tokens["accessToken"]})
        assert response.status_code == 401

    def test_logout(self, client):
        """Test user logout."""
        client.post("/api/v1/auth/register", json=test_user_data)
        tokens = login(client, test_login_data["email"], test_login_data["password"])

        response = client.post("/api/v1/auth/logout", json={"refreshToken": tokens["refreshToken"]})
        assert response.status_code == 200
        assert response.json()["message"] == "Successfully logged out"

        response = client.post("/api/v1/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert response.status_code == 401

    def test_change_password(self, client):
        """Test password change."""
        register(client, "changer@example.com")
        headers = auth_headers(login(client, "changer@example.com"))

        response = client.post("/api/v1/auth/change-password", headers=headers, json={
            "currentPassword": PASSWORD,
            "newPassword": "BetterPassword456"
        })
        assert response.status_code == 200

        response = client.post("/api/v1/auth/login", json={
            "email": "changer@example.com",
            "password": "BetterPassword456"
        })
        assert response.status_code == 200

    def test_change_password_wrong_current(self, client):
        register(client, "changer@example.com")
        headers = auth_headers(login(client, "changer@example.com"))

        response = client.post("/api/v1/auth/change-password", headers=headers, json={
            "currentPassword": "WrongPassword1",
            "newPassword": "BetterPassword456"
        })
        assert response.status_code == 400
        assert response.json()["error"] == "BadRequest"

    def test_verify_token(self, client):
        user = register(client, "verify@example.com")
        headers = auth_headers(login(client, "verify@example.com"))

        response = client.post("/api/v1/auth/verify-token", headers=headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["valid"] is True
        assert data["userId"] == user["id"]
        assert data["role"] == "patient"

class TestApplication:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Process-Time" in response.headers

    def test_info(self, client):
        response = client.get("/api/v1/info")
        assert response.json()["endpoints"]["appointments"] == "/api/v1/appointments"
