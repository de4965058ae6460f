import json

import pytest

from bus_booking.booking.applications.cancel_booking import CancelBookingService
from bus_booking.booking.applications.confirm_booking import ConfirmBookingService
from bus_booking.booking.applications.update_booking import UpdateBookingService
from bus_booking.booking.domain.factory import BookingFactory
from bus_booking.booking.handlers import cancel, confirm
from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)


@pytest.fixture
def booking_repository(store):
    return StoreBookingRepository(store)


class TestConfirmHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, store, booking_repository, create_schedule):
        schedule_repository = StoreScheduleRepository(store)
        schedule_repository.save(create_schedule())
        monkeypatch.setattr(
            confirm,
            "service",
            ConfirmBookingService(
                repository=booking_repository,
                schedule_repository=schedule_repository,
                update_service=UpdateBookingService(
                    repository=booking_repository, factory=BookingFactory()
                ),
            ),
        )

    @pytest.fixture
    def body(self):
        return {
            "schedule_id": "SCD3001",
            "customer_id": "CUST5002",
            "customer_name": "Meena Raj",
            "travel_origin": "Chennai",
            "travel_destination": "Madurai",
            "seats_booked": ["4A"],
            "total_fare": 1000,
            "passenger_details": [
                {"name": "Meena Raj", "age": 29, "gender": "Female", "seat_number": "4A"}
            ],
        }

    def test_confirm_returns_201(self, api_event, lambda_context, body):
        response = confirm.lambda_handler(api_event(body=body), lambda_context)

        data = json.loads(response["body"])["data"]
        assert response["statusCode"] == 201
        assert data["status"] == "Confirmed"
        assert data["payment_status"] == "Paid"
        assert data["passenger_details"][0]["seat_number"] == "4A"

    def test_taken_seat_returns_409(
        self, api_event, lambda_context, body, booking_repository, create_booking
    ):
        booking_repository.save(create_booking(seats=("4A",)))

        response = confirm.lambda_handler(api_event(body=body), lambda_context)

        assert response["statusCode"] == 409
        assert json.loads(response["body"])["seats"] == ["4A"]

    def test_failed_payment_returns_402(
        self, api_event, lambda_context, body, booking_repository
    ):
        body["payment_succeeded"] = False

        response = confirm.lambda_handler(api_event(body=body), lambda_context)

        assert response["statusCode"] == 402
        assert booking_repository.find_all() == []

    def test_too_many_seats_returns_400(self, api_event, lambda_context, body):
        body["seats_booked"] = ["1A", "1B", "1C", "2A", "2B", "2C", "3A"]

        response = confirm.lambda_handler(api_event(body=body), lambda_context)

        assert response["statusCode"] == 400

    def test_unknown_schedule_returns_404(
        self, api_event, lambda_context, body, booking_repository
    ):
        body["schedule_id"] = "SCD404"

        response = confirm.lambda_handler(api_event(body=body), lambda_context)

        assert response["statusCode"] == 404
        assert booking_repository.find_all() == []


class TestCancelHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, booking_repository):
        monkeypatch.setattr(
            cancel, "service", CancelBookingService(repository=booking_repository)
        )

    def test_cancel_returns_200(
        self, api_event, lambda_context, booking_repository, create_booking
    ):
        booking_repository.save(create_booking())

        response = cancel.lambda_handler(
            api_event(path_parameters={"booking_id": "BK4001"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["status"] == "Cancelled"

    def test_unknown_booking_returns_404(self, api_event, lambda_context):
        response = cancel.lambda_handler(
            api_event(path_parameters={"booking_id": "BK404"}), lambda_context
        )
        assert response["statusCode"] == 404

    def test_blank_booking_id_returns_400(self, api_event, lambda_context):
        response = cancel.lambda_handler(
            api_event(path_parameters={"booking_id": "   "}), lambda_context
        )
        assert response["statusCode"] == 400
