"""
Integration tests for the departure routers.

Tests /api/cruise-departures and /api/ship-departures: listing per
voyage, creation with date validation, bulk creation and seat booking.
"""

from datetime import datetime, timedelta

from tripgo.models import CruiseDeparture, DepartureStatus, ShipDeparture

from tests.fixtures.factories import create_cruise, create_departure, create_ship


def _dates(days_ahead=30, length=7):
    start = datetime.utcnow() + timedelta(days=days_ahead)
    return start.isoformat(), (start + timedelta(days=length)).isoformat()


class TestListDepartures:
    """Test GET /api/cruise-departures/cruise/{voyage_id}."""

    def test_upcoming_only_by_default(self, client, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        later = create_departure(test_db, cruise, days_ahead=60)
        sooner = create_departure(test_db, cruise, days_ahead=10)
        create_departure(test_db, cruise, days_ahead=-10)

        response = client.get(f"/api/cruise-departures/cruise/{cruise.id}")

        assert response.status_code == 200
        assert [d["id"] for d in response.json()["data"]] == [sooner.id, later.id]

    def test_include_past_and_filter_status(self, client, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        create_departure(test_db, cruise, days_ahead=-10)
        sold_out = create_departure(test_db, cruise, days_ahead=20, status=DepartureStatus.SOLD_OUT)

        response = client.get(f"/api/cruise-departures/cruise/{cruise.id}?upcoming=false")
        assert len(response.json()["data"]) == 2

        response = client.get(f"/api/cruise-departures/cruise/{cruise.id}?status=SOLD_OUT")
        assert [d["id"] for d in response.json()["data"]] == [sold_out.id]

    def test_unknown_voyage(self, client, test_tenant):
        response = client.get("/api/cruise-departures/cruise/999")
        assert response.status_code == 404
        assert response.json()["error"] == "Cruise not found"

    def test_ship_departures(self, client, test_tenant, test_db):
        ship = create_ship(test_db, test_tenant)
        departure = create_departure(test_db, ship, model=ShipDeparture, price_modifier=1.2)

        response = client.get(f"/api/ship-departures/ship/{ship.id}")

        data = response.json()["data"]
        assert [d["id"] for d in data] == [departure.id]
        assert data[0]["final_price"] == 1200


class TestCreateDeparture:
    """Test POST /api/cruise-departures."""

    def test_seats_default_to_capacity(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant, capacity=240)
        departure_date, return_date = _dates()

        response = client.post(
            "/api/cruise-departures",
            headers=admin_headers,
            json={"voyage_id": cruise.id, "departure_date": departure_date, "return_date": return_date},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["available_seats"] == 240
        assert data["status"] == "AVAILABLE"
        assert data["price_modifier"] == 1.0

    def test_return_before_departure(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure_date, return_date = _dates()

        response = client.post(
            "/api/cruise-departures",
            headers=admin_headers,
            json={"voyage_id": cruise.id, "departure_date": return_date, "return_date": departure_date},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Return date must be after departure date"

    def test_voyage_of_other_tenant(self, client, admin_headers, other_tenant, test_db):
        cruise = create_cruise(test_db, other_tenant)
        departure_date, return_date = _dates()

        response = client.post(
            "/api/cruise-departures",
            headers=admin_headers,
            json={"voyage_id": cruise.id, "departure_date": departure_date, "return_date": return_date},
        )
        assert response.status_code == 404


class TestBulkCreate:
    """Test POST /api/cruise-departures/bulk."""

    def test_creates_all(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        rows = []
        for days in (10, 20, 30):
            departure_date, return_date = _dates(days)
            rows.append({"voyage_id": cruise.id, "departure_date": departure_date, "return_date": return_date})

        response = client.post("/api/cruise-departures/bulk", headers=admin_headers, json={"departures": rows})

        assert response.status_code == 201
        assert response.json()["message"] == "3 departures created successfully"
        assert len(response.json()["data"]) == 3

    def test_empty_list(self, client, admin_headers):
        response = client.post("/api/cruise-departures/bulk", headers=admin_headers, json={"departures": []})

        assert response.status_code == 400
        assert response.json()["error"] == "Departures array is required"

    def test_one_bad_row_creates_nothing(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        good_start, good_end = _dates(10)
        bad_start, bad_end = _dates(20)
        rows = [
            {"voyage_id": cruise.id, "departure_date": good_start, "return_date": good_end},
            {"voyage_id": cruise.id, "departure_date": bad_end, "return_date": bad_start},
        ]

        response = client.post("/api/cruise-departures/bulk", headers=admin_headers, json={"departures": rows})

        assert response.status_code == 400
        assert test_db.query(CruiseDeparture).count() == 0


class TestSeatsAndUpdates:
    """Test seat booking, update and delete."""

    def test_book_seats_sets_filling_fast(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise, available_seats=15)

        response = client.patch(
            f"/api/cruise-departures/{departure.id}/update-seats",
            headers=admin_headers,
            json={"seats_to_book": 5},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["available_seats"] == 10
        assert data["status"] == "FILLING_FAST"

    def test_book_last_seats_sells_out(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise, available_seats=4)

        response = client.patch(
            f"/api/cruise-departures/{departure.id}/update-seats",
            headers=admin_headers,
            json={"seats_to_book": 4},
        )
        assert response.json()["data"]["status"] == "SOLD_OUT"

    def test_not_enough_seats(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise, available_seats=2)

        response = client.patch(
            f"/api/cruise-departures/{departure.id}/update-seats",
            headers=admin_headers,
            json={"seats_to_book": 3},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Not enough seats available"

    def test_plenty_of_seats_keeps_status(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise, available_seats=100)

        response = client.patch(
            f"/api/cruise-departures/{departure.id}/update-seats",
            headers=admin_headers,
            json={"seats_to_book": 10},
        )
        assert response.json()["data"]["status"] == "AVAILABLE"

    def test_update_validates_dates(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise, days_ahead=30)
        too_early = (datetime.utcnow() + timedelta(days=5)).isoformat()

        response = client.put(
            f"/api/cruise-departures/{departure.id}",
            headers=admin_headers,
            json={"return_date": too_early},
        )
        assert response.status_code == 400

    def test_update_notes(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise)

        response = client.put(
            f"/api/cruise-departures/{departure.id}",
            headers=admin_headers,
            json={"notes": "Captain's gala night", "price_modifier": 1.5},
        )

        data = response.json()["data"]
        assert data["notes"] == "Captain's gala night"
        assert data["final_price"] == 1500

    def test_delete(self, client, admin_headers, test_tenant, test_db):
        cruise = create_cruise(test_db, test_tenant)
        departure = create_departure(test_db, cruise)

        response = client.delete(f"/api/cruise-departures/{departure.id}", headers=admin_headers)

        assert response.status_code == 200
        assert client.get(f"/api/cruise-departures/{departure.id}").status_code == 404
