import json
import os
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "bus-booking-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "bus-booking-test")

from bus_booking.booking.domain.entity.booking import Booking  # noqa: E402
from bus_booking.booking.domain.enum.booking_status import BookingStatus  # noqa: E402
from bus_booking.booking.domain.value_object import BookingId, Passenger  # noqa: E402
from bus_booking.bus.domain.entity.bus import Bus  # noqa: E402
from bus_booking.bus.domain.value_object import BusId  # noqa: E402
from bus_booking.customer.domain.entity.customer import Customer  # noqa: E402
from bus_booking.customer.domain.value_object import CustomerId  # noqa: E402
from bus_booking.route.domain.entity.route import Route  # noqa: E402
from bus_booking.route.domain.value_object import RouteId  # noqa: E402
from bus_booking.schedule.domain.entity.schedule import Schedule  # noqa: E402
from bus_booking.schedule.domain.value_object import ScheduleId  # noqa: E402
from bus_booking.shared.domain import TimeOfDay, TravelDuration  # noqa: E402
from bus_booking.shared.infrastructure import (  # noqa: E402
    CollectionStore,
    InMemoryKeyValueStorage,
)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def storage():
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage):
    """シードデータなしの CollectionStore"""
    return CollectionStore(storage, seed={})


@pytest.fixture
def create_route():
    """Route を生成する Factory fixture"""

    def _factory(
        route_id: str = "R1001",
        source: str = "Chennai",
        destination: str = "Madurai",
        duration: str = "8h",
        base_fare: int = 800,
        distance: int | None = 460,
    ) -> Route:
        return Route(
            id=RouteId(value=route_id),
            source=source,
            destination=destination,
            duration=TravelDuration(duration),
            base_fare=base_fare,
            distance=distance,
        )

    return _factory


@pytest.fixture
def create_bus():
    """Bus を生成する Factory fixture"""

    def _factory(
        bus_id: str = "B2001",
        name: str = "Parveen Travels",
        seat_type: str = "AC Seater",
        total_seats: int = 24,
        amenities: tuple[str, ...] = ("AC", "Water Bottle"),
    ) -> Bus:
        return Bus(
            id=BusId(value=bus_id),
            name=name,
            seat_type=seat_type,
            total_seats=total_seats,
            amenities=amenities,
        )

    return _factory


@pytest.fixture
def create_schedule():
    """Schedule を生成する Factory fixture"""

    def _factory(
        schedule_id: str = "SCD3001",
        route_id: str = "R1001",
        bus_id: str = "B2001",
        departure_date: str = "2025-01-10",
        departure_time: str = "21:30",
        arrival_time: str | None = "05:30",
        fare_multiplier: float = 1.0,
    ) -> Schedule:
        return Schedule(
            id=ScheduleId(value=schedule_id),
            route_id=RouteId(value=route_id),
            bus_id=BusId(value=bus_id),
            departure_date=departure_date,
            departure_time=TimeOfDay(departure_time),
            arrival_time=TimeOfDay(arrival_time) if arrival_time else None,
            fare_multiplier=fare_multiplier,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "BK4001",
        schedule_id: str = "SCD3001",
        customer_id: str = "CUST5001",
        seats: tuple[str, ...] = ("1A",),
        total_fare: int = 1000,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            schedule_id=ScheduleId(value=schedule_id),
            customer_id=CustomerId(value=customer_id),
            seats_booked=seats,
            total_fare=total_fare,
            customer_name="Arun Kumar",
            travel_origin="Chennai",
            travel_destination="Madurai",
            passengers=tuple(
                Passenger(name=f"Passenger {seat}", seat_number=seat, age=30)
                for seat in seats
            ),
            status=status,
        )

    return _factory


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture"""

    def _factory(
        customer_id: str = "CUST5001",
        name: str = "Arun Kumar",
        phone: str = "9840012345",
    ) -> Customer:
        return Customer(id=CustomerId(value=customer_id), name=name, phone=phone)

    return _factory


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
        )
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API イベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "http": {"method": "POST", "path": "/"},
                "requestId": "test-request",
            },
            "body": json.dumps(body) if body is not None else None,
            "pathParameters": path_parameters,
            "queryStringParameters": query_string_parameters,
            "isBase64Encoded": False,
        }

    return _factory
