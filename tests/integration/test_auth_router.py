"""
Integration tests for auth router.

Tests registration, login, profile and password changes at /api/auth,
including per-tenant accounts and the auth rate limit.
"""

from tripgo.config import get_api_settings
from tripgo.models import TenantPlan, User

from tests.fixtures.data import SAMPLE_REGISTRATION
from tests.fixtures.factories import DEFAULT_PASSWORD, auth_headers_for, create_tenant, create_user


class TestRegister:
    """Test POST /api/auth/register endpoint."""

    def test_registers_customer(self, client, test_tenant):
        response = client.post("/api/auth/register", json=SAMPLE_REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["data"]["token"]
        user = body["data"]["user"]
        assert user["email"] == "new.customer@example.com"
        assert user["role"] == "CUSTOMER"
        assert user["tenant_id"] == test_tenant.id
        assert "password_hash" not in user

    def test_email_is_lowercased(self, client, test_tenant, test_db):
        payload = dict(SAMPLE_REGISTRATION, email="Mixed.Case@Example.com")
        client.post("/api/auth/register", json=payload)

        assert test_db.query(User).filter(User.email == "mixed.case@example.com").count() == 1

    def test_duplicate_email_in_tenant(self, client, customer_user):
        payload = dict(SAMPLE_REGISTRATION, email=customer_user.email)
        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Email already registered in this tenant"

    def test_same_email_in_another_tenant(self, client, customer_user, other_tenant):
        payload = dict(SAMPLE_REGISTRATION, email=customer_user.email)
        response = client.post("/api/auth/register", json=payload, headers={"X-Tenant-ID": "tripgo-cruises"})

        assert response.status_code == 201
        assert response.json()["data"]["user"]["tenant_id"] == other_tenant.id

    def test_registration_disabled(self, client, test_db):
        create_tenant(
            test_db,
            name="Closed",
            slug="closed",
            domain="closed.tripgo.com",
            subdomain="closed",
            settings={"allow_registration": False},
        )
        response = client.post("/api/auth/register", json=SAMPLE_REGISTRATION, headers={"X-Tenant-ID": "closed"})

        assert response.status_code == 403
        assert response.json()["error"] == "Registration is disabled for this tenant"

    def test_plan_user_limit(self, client, test_db):
        tenant = create_tenant(
            test_db, name="Small", slug="small", domain="small.tripgo.com", subdomain="small", plan=TenantPlan.BASIC
        )
        for i in range(10):
            create_user(test_db, tenant, email=f"user{i}@example.com")

        response = client.post("/api/auth/register", json=SAMPLE_REGISTRATION, headers={"X-Tenant-ID": "small"})

        assert response.status_code == 403
        assert response.json()["error"] == "Tenant has reached the users limit for BASIC plan"

    def test_short_password_rejected(self, client, test_tenant):
        response = client.post("/api/auth/register", json=dict(SAMPLE_REGISTRATION, password="123"))
        assert response.status_code == 422

    def test_no_tenant(self, client):
        response = client.post("/api/auth/register", json=SAMPLE_REGISTRATION)
        assert response.status_code == 404
        assert response.json()["error"] == "No tenant found"


class TestLogin:
    """Test POST /api/auth/login endpoint."""

    def test_login_success(self, client, customer_user, test_db):
        response = client.post(
            "/api/auth/login", json={"email": "Customer@Example.com", "password": DEFAULT_PASSWORD}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["user"]["id"] == customer_user.id
        assert body["data"]["user"]["last_login_at"] is not None

    def test_wrong_password(self, client, customer_user):
        response = client.post("/api/auth/login", json={"email": customer_user.email, "password": "wrong-pass"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"

    def test_account_scoped_to_tenant(self, client, customer_user, other_tenant):
        response = client.post(
            "/api/auth/login",
            json={"email": customer_user.email, "password": DEFAULT_PASSWORD},
            headers={"X-Tenant-ID": "tripgo-cruises"},
        )
        assert response.status_code == 401

    def test_deactivated_account(self, client, test_tenant, test_db):
        create_user(test_db, test_tenant, email="gone@example.com", is_active=False)
        response = client.post("/api/auth/login", json={"email": "gone@example.com", "password": DEFAULT_PASSWORD})

        assert response.status_code == 401
        assert response.json()["error"] == "Account is deactivated"

    def test_rate_limited(self, client, customer_user):
        limit = get_api_settings().auth_rate_limit_per_minute
        payload = {"email": customer_user.email, "password": "wrong-pass"}

        statuses = [client.post("/api/auth/login", json=payload).status_code for _ in range(limit + 1)]

        assert statuses[:limit] == [401] * limit
        assert statuses[-1] == 429

        response = client.post("/api/auth/login", json=payload)
        assert response.headers["Retry-After"]
        assert response.json()["retry_after"] > 0


class TestProfile:
    """Test profile and password endpoints."""

    def test_get_profile(self, client, customer_headers, customer_user):
        response = client.get("/api/auth/profile", headers=customer_headers)

        assert response.status_code == 200
        assert response.json()["data"]["email"] == customer_user.email

    def test_profile_requires_token(self, client, test_tenant):
        response = client.get("/api/auth/profile")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client, test_tenant):
        response = client.get("/api/auth/profile", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid or expired token"

    def test_token_from_other_tenant(self, client, customer_user, other_tenant):
        headers = auth_headers_for(customer_user, tenant=other_tenant)
        response = client.get("/api/auth/profile", headers=headers)

        assert response.status_code == 403
        assert response.json()["error"] == "Token tenant mismatch"

    def test_update_profile(self, client, customer_headers):
        response = client.put("/api/auth/profile", headers=customer_headers, json={"phone": "555-0199"})

        assert response.status_code == 200
        assert response.json()["data"]["phone"] == "555-0199"

    def test_change_password(self, client, customer_headers, customer_user):
        response = client.put(
            "/api/auth/change-password",
            headers=customer_headers,
            json={"current_password": DEFAULT_PASSWORD, "new_password": "brand-new-pass"},
        )
        assert response.status_code == 200

        login = client.post("/api/auth/login", json={"email": customer_user.email, "password": "brand-new-pass"})
        assert login.status_code == 200

    def test_change_password_wrong_current(self, client, customer_headers):
        response = client.put(
            "/api/auth/change-password",
            headers=customer_headers,
            json={"current_password": "nope", "new_password": "brand-new-pass"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Current password is incorrect"

    def test_logout(self, client):
        response = client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged out successfully"}
