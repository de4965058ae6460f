import pytest

from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.applications.add_schedule import AddScheduleService
from bus_booking.schedule.applications.delete_schedule import DeleteScheduleService
from bus_booking.schedule.domain.factory import ScheduleFactory
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.domain import ResourceNotFoundException


@pytest.fixture
def schedule_repository(store):
    return StoreScheduleRepository(store)


@pytest.fixture
def add_service(store, schedule_repository, create_route, create_bus):
    route_repository = StoreRouteRepository(store)
    bus_repository = StoreBusRepository(store)
    route_repository.save(create_route(duration="3h 45m"))
    bus_repository.save(create_bus())
    return AddScheduleService(
        repository=schedule_repository,
        route_repository=route_repository,
        bus_repository=bus_repository,
        factory=ScheduleFactory(),
    )


class TestAddScheduleService:
    def test_add_computes_arrival_from_route_duration(
        self, add_service, schedule_repository
    ):
        schedule = add_service.add(
            {
                "route_id": "R1001",
                "bus_id": "B2001",
                "departure_date": "2025-01-10",
                "departure_time": "22:30",
                "fare_multiplier": 1.25,
            }
        )

        assert str(schedule.arrival_time) == "02:15"
        assert str(schedule.id).startswith("SCD")
        assert schedule_repository.find_by_id(schedule.id) == schedule

    def test_add_unknown_route_raises_error(self, add_service, schedule_repository):
        with pytest.raises(ResourceNotFoundException, match="Route not found"):
            add_service.add(
                {
                    "route_id": "R404",
                    "bus_id": "B2001",
                    "departure_date": "2025-01-10",
                    "departure_time": "22:30",
                }
            )
        assert schedule_repository.find_all() == []

    def test_add_unknown_bus_raises_error(self, add_service):
        with pytest.raises(ResourceNotFoundException, match="Bus not found"):
            add_service.add(
                {
                    "route_id": "R1001",
                    "bus_id": "B404",
                    "departure_date": "2025-01-10",
                    "departure_time": "22:30",
                }
            )

    def test_add_series_creates_consecutive_dates(self, add_service, schedule_repository):
        schedules = add_service.add_series(
            {
                "route_id": "R1001",
                "bus_id": "B2001",
                "departure_date": "2025-01-30",
                "departure_time": "07:00",
            },
            repeat_days=3,
        )

        assert [s.departure_date for s in schedules] == [
            "2025-01-30",
            "2025-01-31",
            "2025-02-01",
        ]
        assert len({s.id for s in schedules}) == 3
        assert len(schedule_repository.find_all()) == 3

    def test_add_series_rejects_zero_days(self, add_service):
        with pytest.raises(ValueError):
            add_service.add_series(
                {
                    "route_id": "R1001",
                    "bus_id": "B2001",
                    "departure_date": "2025-01-30",
                    "departure_time": "07:00",
                },
                repeat_days=0,
            )


class TestDeleteScheduleService:
    @pytest.fixture
    def booking_repository(self, store):
        return StoreBookingRepository(store)

    def test_delete_with_confirmed_booking_is_refused(
        self, schedule_repository, booking_repository, create_schedule, create_booking
    ):
        schedule_repository.save(create_schedule())
        booking_repository.save(create_booking())
        service = DeleteScheduleService(
            repository=schedule_repository, booking_repository=booking_repository
        )

        result = service.delete(ScheduleId(value="SCD3001"))

        assert result.refused_by_conflict
        assert result.conflict.dependent_ids == ("BK4001",)
        assert "Cancel their bookings first" in result.conflict.message
        assert len(schedule_repository.find_all()) == 1

    def test_cancelled_bookings_do_not_block_deletion(
        self, schedule_repository, booking_repository, create_schedule, create_booking
    ):
        schedule_repository.save(create_schedule())
        booking_repository.save(create_booking(status=BookingStatus.CANCELLED))
        service = DeleteScheduleService(
            repository=schedule_repository, booking_repository=booking_repository
        )

        result = service.delete(ScheduleId(value="SCD3001"))

        assert result.deleted is True
        assert schedule_repository.find_all() == []
        assert len(booking_repository.find_all()) == 1

    def test_delete_unknown_schedule(self, schedule_repository, booking_repository):
        service = DeleteScheduleService(
            repository=schedule_repository, booking_repository=booking_repository
        )

        result = service.delete(ScheduleId(value="SCD404"))

        assert result.deleted is False
        assert result.conflict is None
