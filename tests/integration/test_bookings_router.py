"""
Integration tests for bookings router.

Tests booking creation and pricing, ownership checks, the status
lifecycle, admin listings and the monthly plan quota.
"""

from tripgo.models import BookingStatus, BookingType, PaymentStatus, TenantPlan

from tests.fixtures.factories import (
    auth_headers_for,
    create_booking,
    create_cruise,
    create_hotel,
    create_package,
    create_tenant,
    create_user,
)

HOTEL_STAY = {"guests": 2, "check_in": "2099-01-01T14:00:00", "check_out": "2099-01-04T11:00:00"}


class TestCreateBooking:
    """Test POST /api/bookings/{type}/{item_id}."""

    def test_hotel_total_uses_nights_and_guests(self, client, customer_headers, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant, price_per_night=200.0)

        response = client.post(f"/api/bookings/hotel/{hotel.id}", headers=customer_headers, json=HOTEL_STAY)

        assert response.status_code == 201
        data = response.json()["data"]
        # 3 nights (the last partial day rounds up) for 2 guests
        assert data["total_amount"] == 1200.0
        assert data["booking_type"] == "HOTEL"
        assert data["hotel_id"] == hotel.id
        assert data["item_name"] == hotel.name
        assert data["status"] == "PENDING"
        assert data["payment_status"] == "PENDING"

    def test_hotel_requires_dates(self, client, customer_headers, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant)

        response = client.post(f"/api/bookings/hotel/{hotel.id}", headers=customer_headers, json={"guests": 2})

        assert response.status_code == 400
        assert response.json()["error"] == "Check-in and check-out dates are required for hotel bookings"

    def test_cruise_total_is_price_times_guests(self, client, customer_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant, price=1000.0)

        response = client.post(f"/api/bookings/cruise/{cruise.id}", headers=customer_headers, json={"guests": 3})

        assert response.status_code == 201
        assert response.json()["data"]["total_amount"] == 3000.0
        assert response.json()["data"]["item_id"] == cruise.id

    def test_package_booking(self, client, customer_headers, test_tenant, test_db):
        package = create_package(test_db, test_tenant, price=2500.0)

        response = client.post(f"/api/bookings/package/{package.id}", headers=customer_headers, json={})
        assert response.json()["data"]["total_amount"] == 2500.0

    def test_invalid_type(self, client, customer_headers):
        response = client.post("/api/bookings/plane/1", headers=customer_headers, json={"guests": 1})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid booking type"

    def test_unavailable_item(self, client, customer_headers, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant, available=False)

        response = client.post(f"/api/bookings/hotel/{hotel.id}", headers=customer_headers, json=HOTEL_STAY)

        assert response.status_code == 404
        assert response.json()["error"] == "Hotel not found or not available"

    def test_item_of_other_tenant(self, client, customer_headers, other_tenant, test_db):
        cruise = create_cruise(test_db, other_tenant)
        response = client.post(f"/api/bookings/cruise/{cruise.id}", headers=customer_headers, json={"guests": 1})
        assert response.status_code == 404

    def test_requires_login(self, client, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        response = client.post(f"/api/bookings/cruise/{cruise.id}", json={"guests": 1})
        assert response.status_code == 401

    def test_monthly_plan_quota(self, client, test_db):
        tenant = create_tenant(
            test_db, name="Tiny", slug="tiny", domain="tiny.tripgo.com", subdomain="tiny", plan=TenantPlan.BASIC
        )
        user = create_user(test_db, tenant, email="busy@example.com")
        hotel = create_hotel(test_db, tenant)
        for _ in range(50):
            create_booking(test_db, tenant, user, hotel)

        response = client.post(
            f"/api/bookings/hotel/{hotel.id}", headers=auth_headers_for(user, tenant), json=HOTEL_STAY
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Tenant has reached the bookings limit for BASIC plan"


class TestReadBookings:
    """Test booking lookups and listings."""

    def test_owner_can_read(self, client, customer_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, create_hotel(test_db, test_tenant))

        response = client.get(f"/api/bookings/{booking.id}", headers=customer_headers)

        assert response.status_code == 200
        assert response.json()["data"]["user"]["email"] == customer_user.email

    def test_other_customer_denied(self, client, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, create_hotel(test_db, test_tenant))
        stranger = create_user(test_db, test_tenant, email="stranger@example.com")

        response = client.get(f"/api/bookings/{booking.id}", headers=auth_headers_for(stranger))

        assert response.status_code == 403
        assert response.json()["error"] == "Access denied"

    def test_admin_can_read_any(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, create_hotel(test_db, test_tenant))
        assert client.get(f"/api/bookings/{booking.id}", headers=admin_headers).status_code == 200

    def test_missing(self, client, customer_headers):
        response = client.get("/api/bookings/999", headers=customer_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "Booking not found"

    def test_user_bookings_only_own(self, client, customer_headers, customer_user, admin_user, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant)
        mine = create_booking(test_db, test_tenant, customer_user, hotel)
        create_booking(test_db, test_tenant, admin_user, hotel)

        response = client.get("/api/bookings/user", headers=customer_headers)

        data = response.json()["data"]
        assert [b["id"] for b in data["bookings"]] == [mine.id]
        assert data["pagination"]["total"] == 1

    def test_admin_list_filters(self, client, admin_headers, customer_user, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant)
        cruise = create_cruise(test_db, test_tenant)
        create_booking(test_db, test_tenant, customer_user, hotel)
        confirmed = create_booking(
            test_db, test_tenant, customer_user, hotel, status=BookingStatus.CONFIRMED
        )
        create_booking(
            test_db,
            test_tenant,
            customer_user,
            cruise,
            booking_type=BookingType.CRUISE,
            status=BookingStatus.CONFIRMED,
        )

        response = client.get("/api/bookings?status=CONFIRMED&type=HOTEL", headers=admin_headers)

        assert response.status_code == 200
        assert [b["id"] for b in response.json()["data"]["bookings"]] == [confirmed.id]

    def test_admin_list_requires_admin(self, client, customer_headers):
        assert client.get("/api/bookings", headers=customer_headers).status_code == 403

    def test_overview(self, client, admin_headers, customer_user, test_tenant, test_db):
        hotel = create_hotel(test_db, test_tenant)
        create_booking(test_db, test_tenant, customer_user, hotel, total_amount=100.0)
        create_booking(
            test_db,
            test_tenant,
            customer_user,
            hotel,
            total_amount=700.0,
            status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.PAID,
        )
        create_booking(
            test_db, test_tenant, customer_user, hotel, total_amount=300.0, status=BookingStatus.CANCELLED
        )

        response = client.get("/api/bookings/admin/overview", headers=admin_headers)

        data = response.json()["data"]
        assert data["total_bookings"] == 3
        assert data["pending_bookings"] == 1
        assert data["confirmed_bookings"] == 1
        assert data["cancelled_bookings"] == 1
        assert data["total_revenue"] == 700.0
        assert len(data["recent_bookings"]) == 3


class TestBookingLifecycle:
    """Test update, cancel and payment confirmation."""

    def _book_hotel(self, client, headers, test_db, tenant):
        hotel = create_hotel(test_db, tenant, price_per_night=200.0)
        response = client.post(f"/api/bookings/hotel/{hotel.id}", headers=headers, json=HOTEL_STAY)
        return response.json()["data"]

    def test_update_recomputes_total(self, client, customer_headers, test_tenant, test_db):
        booking = self._book_hotel(client, customer_headers, test_db, test_tenant)

        response = client.put(f"/api/bookings/{booking['id']}", headers=customer_headers, json={"guests": 3})

        assert response.status_code == 200
        assert response.json()["data"]["total_amount"] == 1800.0

    def test_confirm_payment(self, client, customer_headers, test_tenant, test_db):
        booking = self._book_hotel(client, customer_headers, test_db, test_tenant)

        response = client.post(
            f"/api/bookings/{booking['id']}/confirm-payment",
            headers=customer_headers,
            json={"payment_reference": "pi_12345"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "CONFIRMED"
        assert data["payment_status"] == "PAID"
        assert data["payment_reference"] == "pi_12345"

    def test_confirmed_booking_cannot_be_updated(self, client, customer_headers, test_tenant, test_db):
        booking = self._book_hotel(client, customer_headers, test_db, test_tenant)
        client.post(
            f"/api/bookings/{booking['id']}/confirm-payment",
            headers=customer_headers,
            json={"payment_reference": "pi_1"},
        )

        response = client.put(f"/api/bookings/{booking['id']}", headers=customer_headers, json={"guests": 1})

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot update confirmed or completed booking"

    def test_cancel(self, client, customer_headers, test_tenant, test_db):
        booking = self._book_hotel(client, customer_headers, test_db, test_tenant)

        response = client.delete(f"/api/bookings/{booking['id']}", headers=customer_headers)
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "CANCELLED"

        again = client.delete(f"/api/bookings/{booking['id']}", headers=customer_headers)
        assert again.status_code == 400
        assert again.json()["error"] == "Booking is already cancelled"

    def test_cannot_pay_cancelled_booking(self, client, customer_headers, test_tenant, test_db):
        booking = self._book_hotel(client, customer_headers, test_db, test_tenant)
        client.delete(f"/api/bookings/{booking['id']}", headers=customer_headers)

        response = client.post(
            f"/api/bookings/{booking['id']}/confirm-payment",
            headers=customer_headers,
            json={"payment_reference": "pi_2"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot confirm payment for a cancelled booking"

    def test_cannot_cancel_completed(self, client, customer_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, status=BookingStatus.COMPLETED)

        response = client.delete(f"/api/bookings/{booking.id}", headers=customer_headers)
        assert response.status_code == 400


class TestBookingStatusUpdate:
    """Test PUT /api/bookings/{id}/status."""

    def test_admin_completes_booking(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(
            test_db,
            test_tenant,
            customer_user,
            create_hotel(test_db, test_tenant),
            status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.PAID,
        )

        response = client.put(f"/api/bookings/{booking.id}/status", headers=admin_headers, json={"status": "COMPLETED"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Booking status updated successfully"
        assert body["data"]["status"] == "COMPLETED"
        assert body["data"]["payment_status"] == "PAID"

    def test_payment_status_only(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, status=BookingStatus.CANCELLED)

        response = client.put(
            f"/api/bookings/{booking.id}/status", headers=admin_headers, json={"payment_status": "REFUNDED"}
        )

        data = response.json()["data"]
        assert data["status"] == "CANCELLED"
        assert data["payment_status"] == "REFUNDED"

    def test_final_statuses_are_kept(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user, status=BookingStatus.COMPLETED)

        response = client.put(f"/api/bookings/{booking.id}/status", headers=admin_headers, json={"status": "PENDING"})

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot change status of a completed booking"

    def test_empty_body(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user)

        response = client.put(f"/api/bookings/{booking.id}/status", headers=admin_headers, json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Status or payment_status is required"

    def test_invalid_status(self, client, admin_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user)
        response = client.put(f"/api/bookings/{booking.id}/status", headers=admin_headers, json={"status": "LOST"})
        assert response.status_code == 422

    def test_requires_admin(self, client, customer_headers, customer_user, test_tenant, test_db):
        booking = create_booking(test_db, test_tenant, customer_user)
        response = client.put(
            f"/api/bookings/{booking.id}/status", headers=customer_headers, json={"status": "COMPLETED"}
        )
        assert response.status_code == 403
