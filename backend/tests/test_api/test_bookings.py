"""Tests for booking CRUD and quote endpoints."""

import re

import pytest
from httpx import AsyncClient

from hoteldesk.models.user import User

pytestmark = pytest.mark.asyncio

BOOKING_ID_RE = re.compile(r"^BK\d+-[0-9A-Z]{9}$")


def _booking_payload(room_id: int, **overrides) -> dict:
    payload = {
        "guestName": "Jane",
        "guestEmail": "jane@x.com",
        "guestPhone": "555",
        "checkIn": "2024-01-10",
        "checkOut": "2024-01-12",
        "numberOfGuests": 2,
        "totalAmount": 160,
        "roomId": room_id,
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# POST /api/bookings
# ---------------------------------------------------------------------------


class TestCreateBooking:
    """Tests for creating bookings."""

    async def test_create_generates_booking_id(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.post("/api/bookings", json=_booking_payload(test_room["id"]))
        assert response.status_code == 201
        data = response.json()
        assert BOOKING_ID_RE.match(data["bookingId"])
        assert data["status"] == "PENDING"
        assert data["roomId"] == test_room["id"]
        assert data["userId"] is None
        assert data["checkIn"].startswith("2024-01-10")
        assert data["checkOut"].startswith("2024-01-12")
        assert data["numberOfGuests"] == 2
        assert data["totalAmount"] == 160

    async def test_booking_does_not_change_room_status(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.get("/api/rooms", params={"id": test_booking["roomId"]})
        assert response.json()["status"] == "AVAILABLE"

    async def test_overlapping_bookings_are_accepted(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.post(
            "/api/bookings",
            json=_booking_payload(
                test_booking["roomId"],
                guestName="John",
                guestEmail="john@x.com",
                checkIn="2024-01-11",
                checkOut="2024-01-13",
            ),
        )
        assert response.status_code == 201
        assert response.json()["bookingId"] != test_booking["bookingId"]

        response = await client.get("/api/bookings", params={"roomId": test_booking["roomId"]})
        assert len(response.json()) == 2

    async def test_linked_user(self, client: AsyncClient, test_room: dict, customer_user: User) -> None:
        response = await client.post(
            "/api/bookings",
            json=_booking_payload(test_room["id"], userId=customer_user.id, status="CONFIRMED"),
        )
        assert response.status_code == 201
        assert response.json()["userId"] == customer_user.id
        assert response.json()["status"] == "CONFIRMED"

    async def test_check_out_must_follow_check_in(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.post(
            "/api/bookings",
            json=_booking_payload(test_room["id"], checkIn="2024-01-12", checkOut="2024-01-12"),
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Check-out date must be after check-in date",
            "code": "INVALID_DATE_RANGE",
        }

    @pytest.mark.parametrize(
        ("overrides", "code"),
        [
            ({"guestName": ""}, "MISSING_GUEST_INFO"),
            ({"guestPhone": None}, "MISSING_GUEST_INFO"),
            ({"checkOut": None}, "MISSING_DATES"),
            ({"numberOfGuests": None}, "MISSING_REQUIRED_FIELDS"),
            ({"checkIn": "not-a-date"}, "INVALID_DATE"),
            ({"numberOfGuests": 0}, "INVALID_NUMBER_OF_GUESTS"),
            ({"totalAmount": -10}, "INVALID_TOTAL_AMOUNT"),
            ({"status": "ARCHIVED"}, "INVALID_STATUS"),
            ({"status": "confirmed"}, "INVALID_STATUS"),
            ({"userId": "abc"}, "INVALID_USER_ID"),
        ],
    )
    async def test_validation_errors(self, client: AsyncClient, test_room: dict, overrides: dict, code: str) -> None:
        response = await client.post("/api/bookings", json=_booking_payload(test_room["id"], **overrides))
        assert response.status_code == 400
        assert response.json()["code"] == code

    @pytest.mark.parametrize("room_id", ["abc", "²", "-1", 10**20, "99999999999999999999"])
    async def test_invalid_room_id(self, client: AsyncClient, room_id) -> None:
        response = await client.post("/api/bookings", json=_booking_payload(room_id))
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROOM_ID"

    async def test_sub_cent_total_amount_is_kept(self, client: AsyncClient, test_room: dict) -> None:
        created = await client.post("/api/bookings", json=_booking_payload(test_room["id"], totalAmount=0.001))
        assert created.status_code == 201, created.text

        response = await client.get("/api/bookings", params={"id": created.json()["id"]})
        assert response.json()["totalAmount"] == 0.001

    async def test_long_guest_details_are_stored(self, client: AsyncClient, test_room: dict) -> None:
        phone = "5" * 300
        name = "J" * 400
        response = await client.post(
            "/api/bookings", json=_booking_payload(test_room["id"], guestPhone=phone, guestName=name)
        )
        assert response.status_code == 201, response.text
        assert response.json()["guestPhone"] == phone
        assert response.json()["guestName"] == name

    async def test_unknown_room(self, client: AsyncClient) -> None:
        response = await client.post("/api/bookings", json=_booking_payload(9999))
        assert response.status_code == 404
        assert response.json()["code"] == "ROOM_NOT_FOUND"

    async def test_unknown_user(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.post("/api/bookings", json=_booking_payload(test_room["id"], userId=9999))
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


# ---------------------------------------------------------------------------
# GET /api/bookings
# ---------------------------------------------------------------------------


class TestListBookings:
    """Tests for fetching and filtering bookings."""

    async def test_get_by_id(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.get("/api/bookings", params={"id": test_booking["id"]})
        assert response.status_code == 200
        assert response.json()["bookingId"] == test_booking["bookingId"]

    async def test_get_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/bookings", params={"id": 31337})
        assert response.status_code == 404
        assert response.json()["code"] == "BOOKING_NOT_FOUND"

    async def test_search_by_guest(self, client: AsyncClient, test_booking: dict) -> None:
        await client.post(
            "/api/bookings",
            json=_booking_payload(test_booking["roomId"], guestName="Bob", guestEmail="bob@y.com"),
        )
        response = await client.get("/api/bookings", params={"search": "JANE"})
        assert [b["id"] for b in response.json()] == [test_booking["id"]]

        response = await client.get("/api/bookings", params={"search": test_booking["bookingId"]})
        assert [b["id"] for b in response.json()] == [test_booking["id"]]

    async def test_filter_by_status(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.get("/api/bookings", params={"status": "PENDING"})
        assert len(response.json()) == 1

        response = await client.get("/api/bookings", params={"status": "CONFIRMED"})
        assert response.json() == []

    async def test_invalid_status_filter(self, client: AsyncClient) -> None:
        response = await client.get("/api/bookings", params={"status": "LOST"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"

    @pytest.mark.parametrize(
        ("param", "code"),
        [("userId", "INVALID_USER_ID"), ("roomId", "INVALID_ROOM_ID")],
    )
    async def test_invalid_id_filters(self, client: AsyncClient, param: str, code: str) -> None:
        response = await client.get("/api/bookings", params={param: "x1"})
        assert response.status_code == 400
        assert response.json()["code"] == code

    async def test_check_in_date_range(self, client: AsyncClient, test_booking: dict) -> None:
        await client.post(
            "/api/bookings",
            json=_booking_payload(test_booking["roomId"], checkIn="2024-03-01", checkOut="2024-03-05"),
        )
        response = await client.get("/api/bookings", params={"fromDate": "2024-02-01"})
        assert [b["checkIn"][:10] for b in response.json()] == ["2024-03-01"]

        response = await client.get("/api/bookings", params={"toDate": "2024-02-01"})
        assert [b["id"] for b in response.json()] == [test_booking["id"]]

    async def test_invalid_date_filter(self, client: AsyncClient) -> None:
        response = await client.get("/api/bookings", params={"fromDate": "yesterday"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DATE"


# ---------------------------------------------------------------------------
# GET /api/bookings/quote
# ---------------------------------------------------------------------------


class TestQuote:
    """Tests for pricing a stay."""

    async def test_quote(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.get(
            "/api/bookings/quote",
            params={"roomId": test_room["id"], "checkIn": "2024-01-10", "checkOut": "2024-01-13"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["nights"] == 3
        assert data["pricePerNight"] == 80
        assert data["totalAmount"] == 240

    async def test_partial_day_counts_as_night(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.get(
            "/api/bookings/quote",
            params={"roomId": test_room["id"], "checkIn": "2024-01-10T14:00:00", "checkOut": "2024-01-12T11:00:00"},
        )
        assert response.json()["nights"] == 2
        assert response.json()["totalAmount"] == 160

    async def test_reversed_dates_quote_zero(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.get(
            "/api/bookings/quote",
            params={"roomId": test_room["id"], "checkIn": "2024-01-12", "checkOut": "2024-01-10"},
        )
        assert response.status_code == 200
        assert response.json()["nights"] == 0
        assert response.json()["totalAmount"] == 0

    async def test_missing_dates(self, client: AsyncClient, test_room: dict) -> None:
        response = await client.get("/api/bookings/quote", params={"roomId": test_room["id"]})
        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_DATES"

    @pytest.mark.parametrize(
        "dates",
        [
            {"checkIn": " ", "checkOut": "2024-01-12"},
            {"checkIn": "2024-01-10", "checkOut": "   "},
        ],
    )
    async def test_blank_dates_are_missing(self, client: AsyncClient, test_room: dict, dates: dict) -> None:
        response = await client.get("/api/bookings/quote", params={"roomId": test_room["id"], **dates})
        assert response.status_code == 400
        assert response.json() == {"error": "Check-in and check-out dates are required", "code": "MISSING_DATES"}

    async def test_unknown_room(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/bookings/quote",
            params={"roomId": 777, "checkIn": "2024-01-10", "checkOut": "2024-01-12"},
        )
        assert response.status_code == 404
        assert response.json()["code"] == "ROOM_NOT_FOUND"


# ---------------------------------------------------------------------------
# PUT / DELETE /api/bookings
# ---------------------------------------------------------------------------


class TestUpdateBooking:
    """Tests for updating bookings."""

    async def test_any_status_transition(self, client: AsyncClient, test_booking: dict) -> None:
        for status_value in ("CHECKED_OUT", "CANCELLED", "PENDING"):
            response = await client.put(
                "/api/bookings",
                params={"id": test_booking["id"]},
                json={"status": status_value},
            )
            assert response.status_code == 200
            assert response.json()["status"] == status_value

    async def test_both_dates_checked(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.put(
            "/api/bookings",
            params={"id": test_booking["id"]},
            json={"checkIn": "2024-02-10", "checkOut": "2024-02-01"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DATE_RANGE"

    async def test_single_date_not_compared_with_stored(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.put(
            "/api/bookings",
            params={"id": test_booking["id"]},
            json={"checkOut": "2024-01-05"},
        )
        assert response.status_code == 200
        assert response.json()["checkOut"].startswith("2024-01-05")

    async def test_null_user_unlinks(self, client: AsyncClient, test_room: dict, customer_user: User) -> None:
        created = await client.post("/api/bookings", json=_booking_payload(test_room["id"], userId=customer_user.id))
        response = await client.put("/api/bookings", params={"id": created.json()["id"]}, json={"userId": None})
        assert response.status_code == 200
        assert response.json()["userId"] is None

    async def test_unknown_room(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.put("/api/bookings", params={"id": test_booking["id"]}, json={"roomId": 5555})
        assert response.status_code == 404
        assert response.json()["code"] == "ROOM_NOT_FOUND"

    async def test_null_guest_name_rejected(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.put("/api/bookings", params={"id": test_booking["id"]}, json={"guestName": None})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_GUEST_INFO"

    async def test_delete(self, client: AsyncClient, test_booking: dict) -> None:
        response = await client.delete("/api/bookings", params={"id": test_booking["id"]})
        assert response.status_code == 200
        assert response.json()["message"] == "Booking deleted successfully"
        assert response.json()["booking"]["bookingId"] == test_booking["bookingId"]

        response = await client.delete("/api/bookings", params={"id": test_booking["id"]})
        assert response.status_code == 404

    async def test_delete_with_payment_is_rejected(self, client: AsyncClient, test_booking: dict) -> None:
        payment = await client.post(
            "/api/payments", json={"amount": 160, "method": "CASH", "bookingId": test_booking["id"]}
        )
        assert payment.status_code == 201, payment.text

        response = await client.delete("/api/bookings", params={"id": test_booking["id"]})
        assert response.status_code == 400
        assert response.json() == {
            "error": "Operation violates a data integrity constraint",
            "code": "CONSTRAINT_VIOLATION",
        }
