from unittest.mock import MagicMock

import pytest

from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.customer.infrastructure.store_customer_repository import (
    StoreCustomerRepository,
)
from bus_booking.reporting.applications.customer_trips import CustomerTripsService
from bus_booking.reporting.applications.dashboard import DashboardService
from bus_booking.reporting.applications.generate_insight import GenerateInsightService
from bus_booking.reporting.applications.search_trips import SearchTripsService
from bus_booking.reporting.applications.seat_map import SeatMapService
from bus_booking.reporting.domain import InsightGenerator
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, InMemoryKeyValueStorage


@pytest.fixture
def seeded_store():
    """シードデータで初期化される CollectionStore"""
    return CollectionStore(InMemoryKeyValueStorage())


@pytest.fixture
def dashboard_service(seeded_store):
    return DashboardService(
        route_repository=StoreRouteRepository(seeded_store),
        bus_repository=StoreBusRepository(seeded_store),
        schedule_repository=StoreScheduleRepository(seeded_store),
        booking_repository=StoreBookingRepository(seeded_store),
        customer_repository=StoreCustomerRepository(seeded_store),
    )


class TestDashboardService:
    def test_overview_over_seed_data(self, dashboard_service):
        overview = dashboard_service.overview()

        assert overview.stats.revenue == 2000
        assert overview.stats.routes == 4
        assert overview.stats.buses == 3
        assert overview.stats.schedules == 3
        assert overview.stats.customers == 2
        assert overview.top_routes[0].label == "Chennai ➝ Madurai"
        assert [t.occupancy for t in overview.trip_summaries] == ["2/24"]


class TestSearchTripsService:
    def test_search_seed_schedule(self, seeded_store):
        service = SearchTripsService(
            route_repository=StoreRouteRepository(seeded_store),
            bus_repository=StoreBusRepository(seeded_store),
            schedule_repository=StoreScheduleRepository(seeded_store),
            booking_repository=StoreBookingRepository(seeded_store),
        )

        options = service.search("Chennai", "Madurai", "2025-01-10")

        assert [str(o.schedule.id) for o in options] == ["SCD3001"]
        assert options[0].ticket_fare == 1000
        assert options[0].seats_available == 22
        assert "Hyderabad" in service.cities()


class TestSeatMapService:
    @pytest.fixture
    def service(self, seeded_store):
        return SeatMapService(
            schedule_repository=StoreScheduleRepository(seeded_store),
            route_repository=StoreRouteRepository(seeded_store),
            bus_repository=StoreBusRepository(seeded_store),
            booking_repository=StoreBookingRepository(seeded_store),
        )

    def test_seat_map(self, service):
        seat_map = service.seat_map(ScheduleId(value="SCD3001"))

        assert seat_map.booked == ["1A", "1B"]
        assert seat_map.seats_available == 22
        assert seat_map.ticket_fare == 1000
        assert len(seat_map.seats) == 24

    def test_unknown_schedule(self, service):
        assert service.seat_map(ScheduleId(value="SCD404")) is None


class TestCustomerTripsService:
    def test_trips(self, seeded_store):
        service = CustomerTripsService(
            booking_repository=StoreBookingRepository(seeded_store),
            schedule_repository=StoreScheduleRepository(seeded_store),
            route_repository=StoreRouteRepository(seeded_store),
        )

        trips = service.trips(CustomerId(value="CUST5001"))

        assert [(t.source, t.destination, t.time) for t in trips] == [
            ("Chennai", "Madurai", "21:30")
        ]
        assert service.trips(CustomerId(value="CUST5002")) == []


class TestGenerateInsightService:
    def test_returns_generated_text(self, dashboard_service):
        generator = MagicMock(spec=InsightGenerator)
        generator.generate.return_value = "**Financial Assessment:** healthy"
        service = GenerateInsightService(
            dashboard_service=dashboard_service, generator=generator
        )

        assert service.generate() == "**Financial Assessment:** healthy"
        prompt = generator.generate.call_args.args[0]
        assert "Total Revenue: ₹2000" in prompt
        assert "Top Performing Route: Chennai ➝ Madurai" in prompt

    def test_generator_failure_returns_error_text(self, dashboard_service):
        generator = MagicMock(spec=InsightGenerator)
        generator.generate.side_effect = RuntimeError("quota exceeded")
        service = GenerateInsightService(
            dashboard_service=dashboard_service, generator=generator
        )

        assert service.generate() == "Error: quota exceeded"
