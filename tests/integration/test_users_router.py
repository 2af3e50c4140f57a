"""
Integration tests for users router.

Tests tenant admin user management at /api/users.
"""

from tripgo.models import TenantPlan, User, UserRole

from tests.fixtures.factories import (
    auth_headers_for,
    create_booking,
    create_hotel,
    create_tenant,
    create_user,
)

NEW_USER = {
    "email": "Agent@Example.com",
    "password": "secret123",
    "first_name": "Avery",
    "last_name": "Agent",
    "role": "EMPLOYEE",
}


class TestListUsers:
    """Test GET /api/users endpoint."""

    def test_requires_admin(self, client, customer_headers):
        assert client.get("/api/users", headers=customer_headers).status_code == 403

    def test_lists_tenant_users_only(self, client, admin_headers, customer_user, other_tenant, test_db):
        create_user(test_db, other_tenant, email="elsewhere@example.com")

        response = client.get("/api/users", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert {u["email"] for u in data["users"]} == {"admin@example.com", "customer@example.com"}
        assert data["pagination"]["total"] == 2
        assert all("password_hash" not in u for u in data["users"])

    def test_filters(self, client, admin_headers, customer_user, test_tenant, test_db):
        create_user(test_db, test_tenant, email="sleepy@example.com", first_name="Sam", is_active=False)

        response = client.get("/api/users?role=ADMIN", headers=admin_headers)
        assert [u["email"] for u in response.json()["data"]["users"]] == ["admin@example.com"]

        response = client.get("/api/users?is_active=false", headers=admin_headers)
        assert [u["email"] for u in response.json()["data"]["users"]] == ["sleepy@example.com"]

        response = client.get("/api/users?search=SAM", headers=admin_headers)
        assert [u["email"] for u in response.json()["data"]["users"]] == ["sleepy@example.com"]


class TestGetUser:
    """Test GET /api/users/{id} endpoint."""

    def test_includes_counts(self, client, admin_headers, customer_user, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant)
        create_booking(test_db, test_tenant, customer_user, hotel)
        create_booking(test_db, test_tenant, customer_user, hotel)

        response = client.get(f"/api/users/{customer_user.id}", headers=admin_headers)

        data = response.json()["data"]
        assert data["email"] == "customer@example.com"
        assert data["booking_count"] == 2
        assert data["review_count"] == 0

    def test_user_of_other_tenant_not_found(self, client, admin_headers, other_tenant, test_db):
        outsider = create_user(test_db, other_tenant, email="elsewhere@example.com")

        response = client.get(f"/api/users/{outsider.id}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "User not found"


class TestCreateUser:
    """Test POST /api/users endpoint."""

    def test_creates_with_role(self, client, admin_headers, test_tenant):
        response = client.post("/api/users", headers=admin_headers, json=NEW_USER)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["data"]["email"] == "agent@example.com"
        assert body["data"]["role"] == "EMPLOYEE"
        assert body["data"]["tenant_id"] == test_tenant.id

        login = client.post("/api/auth/login", json={"email": "agent@example.com", "password": "secret123"})
        assert login.status_code == 200

    def test_duplicate_email(self, client, admin_headers, customer_user):
        payload = dict(NEW_USER, email="customer@example.com")

        response = client.post("/api/users", headers=admin_headers, json=payload)

        assert response.status_code == 409
        assert response.json()["error"] == "User with this email already exists"

    def test_invalid_role(self, client, admin_headers):
        response = client.post("/api/users", headers=admin_headers, json=dict(NEW_USER, role="OWNER"))
        assert response.status_code == 422

    def test_plan_user_limit(self, client, test_db):
        tenant = create_tenant(
            test_db, name="Tiny", slug="tiny", domain="tiny.tripgo.com", subdomain="tiny", plan=TenantPlan.BASIC
        )
        admin = create_user(test_db, tenant, email="owner@tiny.example.com", role=UserRole.ADMIN)
        for i in range(9):
            create_user(test_db, tenant, email=f"user{i}@tiny.example.com")

        response = client.post("/api/users", headers=auth_headers_for(admin, tenant), json=NEW_USER)

        assert response.status_code == 403
        assert response.json()["error"] == "Tenant has reached the users limit for BASIC plan"


class TestUpdateUser:
    """Test PUT /api/users/{id} and /role."""

    def test_owner_updates_own_profile(self, client, customer_headers, customer_user):
        response = client.put(
            f"/api/users/{customer_user.id}",
            headers=customer_headers,
            json={"phone": "+1 555 0100", "first_name": None},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["phone"] == "+1 555 0100"
        assert data["first_name"] == customer_user.first_name

    def test_customer_cannot_edit_others(self, client, customer_headers, admin_user):
        response = client.put(f"/api/users/{admin_user.id}", headers=customer_headers, json={"phone": "1"})

        assert response.status_code == 403
        assert response.json()["error"] == "Access denied"

    def test_customer_cannot_reactivate_self(self, client, customer_headers, customer_user):
        response = client.put(f"/api/users/{customer_user.id}", headers=customer_headers, json={"is_active": True})
        assert response.status_code == 403

    def test_admin_deactivates_user(self, client, admin_headers, customer_user):
        response = client.put(f"/api/users/{customer_user.id}", headers=admin_headers, json={"is_active": False})
        assert response.json()["data"]["is_active"] is False

        login = client.post("/api/auth/login", json={"email": "customer@example.com", "password": "password123"})
        assert login.status_code == 401

    def test_admin_cannot_deactivate_self(self, client, admin_headers, admin_user):
        response = client.put(f"/api/users/{admin_user.id}", headers=admin_headers, json={"is_active": False})

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot deactivate your own account"

    def test_change_role(self, client, admin_headers, customer_user):
        response = client.put(f"/api/users/{customer_user.id}/role", headers=admin_headers, json={"role": "ADMIN"})

        assert response.status_code == 200
        assert response.json()["message"] == "User role updated successfully"
        assert response.json()["data"]["role"] == "ADMIN"

    def test_cannot_change_own_role(self, client, admin_headers, admin_user):
        response = client.put(f"/api/users/{admin_user.id}/role", headers=admin_headers, json={"role": "CUSTOMER"})

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot change your own role"


class TestDeleteUser:
    """Test DELETE /api/users/{id} endpoint."""

    def test_delete(self, client, admin_headers, customer_user, test_db):
        user_id = customer_user.id

        response = client.delete(f"/api/users/{user_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully"
        test_db.expire_all()
        assert test_db.query(User).filter(User.id == user_id).first() is None

    def test_cannot_delete_self(self, client, admin_headers, admin_user):
        response = client.delete(f"/api/users/{admin_user.id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot delete your own account"

    def test_user_with_bookings_kept(self, client, admin_headers, customer_user, test_tenant, test_db):
        create_booking(test_db, test_tenant, customer_user, create_hotel(test_db, test_tenant))

        response = client.delete(f"/api/users/{customer_user.id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Cannot delete user with bookings or reviews")
